"""Forward-mode dual numbers.

A :class:`Dual` pairs a value with N partial derivatives. Running ordinary
Python arithmetic on duals pushes all N seeded directions through the chain
rule in a single pass. The type nests: when ``value`` and every entry of
``partials`` are themselves duals over the same N directions, the outer
partials hold first derivatives and their own partials hold second
derivatives.

Operands nested less deeply than ``self`` (plain floats, numpy scalars, or a
lower-order dual) are constants with respect to the outer directions.

Example
-------
>>> import numpy as np
>>> x = Dual(np.float64(3.0), (1.0, 0.0))
>>> y = Dual(np.float64(2.0), (0.0, 1.0))
>>> z = x * y + 1.0
>>> float(z.value), [float(d) for d in z.partials]
(7.0, [2.0, 3.0])
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _real(x: Any) -> Any:
    while isinstance(x, Dual):
        x = x.value
    return x


class Dual:
    """Value plus a fixed number of partial derivatives."""

    __slots__ = ("value", "partials", "depth")

    # Makes numpy scalars and arrays defer binary operators to Dual.
    __array_priority__ = 1000

    def __init__(self, value: Any, partials: Iterable[Any] = ()) -> None:
        self.value = value
        self.partials = tuple(partials)
        self.depth = value.depth + 1 if isinstance(value, Dual) else 1

    @classmethod
    def constant(cls, value: Any, size: int) -> "Dual":
        """Dual with all ``size`` partials equal to zero."""
        return cls(value, np.zeros(size))

    @classmethod
    def variable(cls, value: Any, index: int, size: int) -> "Dual":
        """Order-one dual seeded along direction ``index``."""
        if not 0 <= index < size:
            raise IndexError(f"seed index {index} outside 0..{size - 1}")
        return cls(np.float64(value), np.eye(size)[index])

    @property
    def size(self) -> int:
        return len(self.partials)

    @property
    def real(self) -> Any:
        """Innermost plain value."""
        return _real(self)

    def __repr__(self) -> str:
        return f"Dual({self.value!r}, {list(self.partials)!r})"

    def _operand(self, other: Any) -> bool | None:
        """Classify ``other`` as a same-level dual (True) or a constant (False).

        Returns None for unsupported types and for duals nested deeper than
        ``self``; those handle the operation through their reflected method.
        """
        if isinstance(other, Dual):
            if other.depth == self.depth:
                if len(other.partials) != len(self.partials):
                    raise ValueError(
                        "Cannot combine duals with "
                        f"{len(self.partials)} and {len(other.partials)} partials."
                    )
                return True
            if other.depth < self.depth:
                return False
            return None
        if isinstance(other, _SCALAR_TYPES):
            return False
        return None

    def chain_rule(self, value: Any, slope: Any) -> "Dual":
        """Return ``f(self)`` given ``f(self.value)`` and ``f'(self.value)``."""
        return Dual(value, [slope * a for a in self.partials])

    # Arithmetic

    def __neg__(self) -> "Dual":
        return Dual(-self.value, [-a for a in self.partials])

    def __pos__(self) -> "Dual":
        return self

    def __abs__(self) -> "Dual":
        return -self if self.real < 0 else self

    def __add__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return Dual(
                self.value + other.value,
                [a + b for a, b in zip(self.partials, other.partials)],
            )
        return Dual(self.value + other, self.partials)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return Dual(
                self.value - other.value,
                [a - b for a, b in zip(self.partials, other.partials)],
            )
        return Dual(self.value - other, self.partials)

    def __rsub__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return other.__sub__(self)
        return Dual(other - self.value, [-a for a in self.partials])

    def __mul__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return Dual(
                self.value * other.value,
                [
                    self.value * b + other.value * a
                    for a, b in zip(self.partials, other.partials)
                ],
            )
        return Dual(self.value * other, [a * other for a in self.partials])

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            value = self.value / other.value
            return Dual(
                value,
                [
                    (a - value * b) / other.value
                    for a, b in zip(self.partials, other.partials)
                ],
            )
        return Dual(self.value / other, [a / other for a in self.partials])

    def __rtruediv__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return other.__truediv__(self)
        value = other / self.value
        return self.chain_rule(value, -value / self.value)

    def __pow__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            value = self.value ** other.value
            d_base = other.value * self.value ** (other.value - 1)
            d_exponent = value * _fn.log(self.value)
            return Dual(
                value,
                [
                    d_base * a + d_exponent * b
                    for a, b in zip(self.partials, other.partials)
                ],
            )
        if other == 0:
            return Dual(self.value**other, [a * 0.0 for a in self.partials])
        return self.chain_rule(self.value**other, other * self.value ** (other - 1))

    def __rpow__(self, other: Any) -> "Dual":
        kind = self._operand(other)
        if kind is None:
            return NotImplemented
        if kind:
            return other.__pow__(self)
        value = other**self.value
        return self.chain_rule(value, value * _fn.log(other))

    # Comparisons look at the real value only, so a functor takes the same
    # branch whether it is evaluated on floats or on duals.

    def __lt__(self, other: Any) -> bool:
        return self.real < _real(other)

    def __le__(self, other: Any) -> bool:
        return self.real <= _real(other)

    def __gt__(self, other: Any) -> bool:
        return self.real > _real(other)

    def __ge__(self, other: Any) -> bool:
        return self.real >= _real(other)

    def __eq__(self, other: Any) -> bool:  # type: ignore[override]
        return self.real == _real(other)

    def __ne__(self, other: Any) -> bool:  # type: ignore[override]
        return self.real != _real(other)

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return bool(self.real != 0)

    # Methods looked up by numpy ufuncs (np.sin, np.exp, ...) on object data.

    def sin(self) -> "Dual":
        return _fn.sin(self)

    def cos(self) -> "Dual":
        return _fn.cos(self)

    def tan(self) -> "Dual":
        return _fn.tan(self)

    def exp(self) -> "Dual":
        return _fn.exp(self)

    def log(self) -> "Dual":
        return _fn.log(self)

    def log10(self) -> "Dual":
        return _fn.log10(self)

    def sqrt(self) -> "Dual":
        return _fn.sqrt(self)

    def arcsin(self) -> "Dual":
        return _fn.arcsin(self)

    def arccos(self) -> "Dual":
        return _fn.arccos(self)

    def arctan(self) -> "Dual":
        return _fn.arctan(self)

    def sinh(self) -> "Dual":
        return _fn.sinh(self)

    def cosh(self) -> "Dual":
        return _fn.cosh(self)

    def tanh(self) -> "Dual":
        return _fn.tanh(self)


from . import functions as _fn  # noqa: E402

__all__ = ["Dual"]

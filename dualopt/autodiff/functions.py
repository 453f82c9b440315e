"""Elementary functions over plain scalars and dual numbers.

Each function accepts either a plain scalar, which is handed to the numpy
function of the same name, or a :class:`~dualopt.autodiff.dual.Dual`, in which
case the derivative is applied through the chain rule. The derivative itself
is computed with these same functions, so nested duals of any depth work.

Domain errors follow numpy: ``sqrt(-1.0)`` is NaN and ``log(0.0)`` is -inf,
in values and partials alike.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .dual import Dual

_LN10 = np.log(10.0)


def sin(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(sin(x.value), cos(x.value))
    return np.sin(x)


def cos(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(cos(x.value), -sin(x.value))
    return np.cos(x)


def tan(x: Any) -> Any:
    if isinstance(x, Dual):
        t = tan(x.value)
        return x.chain_rule(t, 1.0 + t * t)
    return np.tan(x)


def exp(x: Any) -> Any:
    if isinstance(x, Dual):
        e = exp(x.value)
        return x.chain_rule(e, e)
    return np.exp(x)


def log(x: Any) -> Any:
    """Natural logarithm."""
    if isinstance(x, Dual):
        return x.chain_rule(log(x.value), 1.0 / x.value)
    return np.log(x)


def log10(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(log10(x.value), 1.0 / (x.value * _LN10))
    return np.log10(x)


def sqrt(x: Any) -> Any:
    if isinstance(x, Dual):
        s = sqrt(x.value)
        return x.chain_rule(s, 0.5 / s)
    return np.sqrt(x)


def arcsin(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(arcsin(x.value), 1.0 / sqrt(1.0 - x.value * x.value))
    return np.arcsin(x)


def arccos(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(arccos(x.value), -1.0 / sqrt(1.0 - x.value * x.value))
    return np.arccos(x)


def arctan(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(arctan(x.value), 1.0 / (1.0 + x.value * x.value))
    return np.arctan(x)


def sinh(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(sinh(x.value), cosh(x.value))
    return np.sinh(x)


def cosh(x: Any) -> Any:
    if isinstance(x, Dual):
        return x.chain_rule(cosh(x.value), sinh(x.value))
    return np.cosh(x)


def tanh(x: Any) -> Any:
    if isinstance(x, Dual):
        t = tanh(x.value)
        return x.chain_rule(t, 1.0 - t * t)
    return np.tanh(x)


def absolute(x: Any) -> Any:
    """Absolute value; the derivative at zero is taken from the positive side."""
    if isinstance(x, Dual):
        return abs(x)
    return np.abs(x)


def power(x: Any, p: Any) -> Any:
    """``x ** p`` for any mix of plain and dual operands."""
    return x**p


__all__ = [
    "absolute",
    "arccos",
    "arcsin",
    "arctan",
    "cos",
    "cosh",
    "exp",
    "log",
    "log10",
    "power",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
]

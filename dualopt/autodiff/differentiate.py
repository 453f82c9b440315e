"""Seeding and reading helpers for forward-mode differentiation.

First derivatives use order-one duals: variable ``k`` is seeded with the unit
vector ``e_k``. Second derivatives use order-two duals: both the inner value
and the outer partials of variable ``k`` are seeded along ``e_k``. A single
evaluation then yields

* ``result.value.value``: the function value,
* ``result.partials[k].value``: the k-th gradient entry,
* ``result.partials[k].partials[l]``: the Hessian entry ``(k, l)``.

Entries ``(k, l)`` and ``(l, k)`` are propagated independently, so the
Hessian's symmetry doubles as a consistency check on the arithmetic.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from .dual import Dual


def _value_of(x: Any) -> float:
    return float(x.value) if isinstance(x, Dual) else float(x)


def _partial_of(x: Any, index: int) -> float:
    return float(x.partials[index]) if isinstance(x, Dual) else 0.0


def seed_values(values: ArrayLike) -> np.ndarray:
    """Return an object array of duals that carry no directions.

    Evaluating a function on these performs the same scalar operations, in
    the same order, as the innermost value of a seeded evaluation, so the
    results agree bit for bit even through numpy reductions on object data.
    """
    values = np.asarray(values, dtype=float).reshape(-1)
    out = np.empty(values.size, dtype=object)
    for k in range(values.size):
        out[k] = Dual(values[k], ())
    return out


def read_value(result: Any) -> float:
    """Extract the innermost value of an evaluation of any order."""
    return float(result.real) if isinstance(result, Dual) else float(result)


def seed_first_order(values: ArrayLike) -> np.ndarray:
    """Return an object array of order-one duals, one direction per entry."""
    values = np.asarray(values, dtype=float).reshape(-1)
    n = values.size
    eye = np.eye(n)
    out = np.empty(n, dtype=object)
    for k in range(n):
        out[k] = Dual(values[k], eye[k])
    return out


def seed_second_order(values: ArrayLike) -> np.ndarray:
    """Return an object array of order-two duals, one direction per entry."""
    values = np.asarray(values, dtype=float).reshape(-1)
    n = values.size
    eye = np.eye(n)
    zeros = np.zeros(n)
    out = np.empty(n, dtype=object)
    for k in range(n):
        inner = Dual(values[k], eye[k])
        out[k] = Dual(inner, [Dual(eye[k, j], zeros) for j in range(n)])
    return out


def read_first_order(result: Any, n: int) -> tuple[float, np.ndarray]:
    """Extract value and gradient from an order-one evaluation.

    A plain (non-dual) result is a constant function of the inputs.
    """
    if not isinstance(result, Dual):
        return float(result), np.zeros(n)
    if result.depth != 1 or result.size != n:
        raise ValueError(
            f"Expected an order-1 dual with {n} partials, "
            f"got order {result.depth} with {result.size}."
        )
    grad = np.array([float(p) for p in result.partials], dtype=float)
    return float(result.value), grad


def read_second_order(result: Any, n: int) -> tuple[float, np.ndarray, np.ndarray]:
    """Extract value, gradient and Hessian from an order-two evaluation."""
    if not isinstance(result, Dual):
        return float(result), np.zeros(n), np.zeros((n, n))
    if result.depth != 2 or result.size != n:
        raise ValueError(
            f"Expected an order-2 dual with {n} partials, "
            f"got order {result.depth} with {result.size}."
        )
    value = _value_of(result.value)
    grad = np.empty(n, dtype=float)
    hess = np.empty((n, n), dtype=float)
    for k, partial in enumerate(result.partials):
        grad[k] = _value_of(partial)
        for l in range(n):
            hess[k, l] = _partial_of(partial, l)
    return value, grad, hess


def gradient(func: Callable[[np.ndarray], Any], x: ArrayLike) -> tuple[float, np.ndarray]:
    """Value and gradient of ``func`` at ``x`` from one dual evaluation.

    ``func`` takes a single flat array and must be written with operations
    :class:`Dual` supports.
    """
    duals = seed_first_order(x)
    return read_first_order(func(duals), duals.size)


def hessian(
    func: Callable[[np.ndarray], Any], x: ArrayLike
) -> tuple[float, np.ndarray, np.ndarray]:
    """Value, gradient and Hessian of ``func`` at ``x`` from one evaluation.

    Example
    -------
    >>> from dualopt.autodiff import functions as fn
    >>> value, grad, hess = hessian(lambda v: fn.sin(v[0]) * v[1], [0.0, 2.0])
    >>> float(grad[0]), float(hess[0, 1])
    (2.0, 1.0)
    """
    duals = seed_second_order(x)
    return read_second_order(func(duals), duals.size)


__all__ = [
    "gradient",
    "hessian",
    "read_first_order",
    "read_second_order",
    "read_value",
    "seed_first_order",
    "seed_second_order",
    "seed_values",
]

"""Finite-difference approximations and derivative checking.

These are independent of the dual-number engine and serve as a reference
for it: a term's analytic derivatives can be compared against central
differences of its value-only evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from ..terms import Term, TermObjective
from .core import Array, Objective


def approx_grad(
    fun: Objective, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).reshape(-1)
    grad = np.zeros(x.size, dtype=float)
    for i in range(x.size):
        step = np.zeros_like(x)
        step[i] = eps
        grad[i] = (fun(x + step) - fun(x - step)) / (2.0 * eps)
    if return_evals:
        return grad, 2 * x.size
    return grad


def approx_hessian(
    fun: Objective, x: Array, eps: float = 1e-4, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Approximate the Hessian using second-order central differences."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).reshape(-1)
    n = x.size
    hess = np.zeros((n, n), dtype=float)
    fx = fun(x)
    evals = 1
    for i in range(n):
        ei = np.zeros_like(x)
        ei[i] = eps
        hess[i, i] = (fun(x + ei) - 2 * fx + fun(x - ei)) / (eps**2)
        evals += 2
        for j in range(i + 1, n):
            ej = np.zeros_like(x)
            ej[j] = eps
            value = (
                fun(x + ei + ej) - fun(x + ei - ej) - fun(x - ei + ej) + fun(x - ei - ej)
            ) / (4 * eps**2)
            evals += 4
            hess[i, j] = value
            hess[j, i] = value
    if return_evals:
        return hess, evals
    return hess


def _relative_error(actual: Array, reference: Array) -> float:
    scale = max(1.0, float(np.max(np.abs(reference), initial=0.0)))
    return float(np.max(np.abs(actual - reference), initial=0.0)) / scale


@dataclass(frozen=True)
class DerivativeCheck:
    """Outcome of comparing a term's derivatives with finite differences."""

    value: float
    gradient: Array
    hessian: Array
    gradient_error: float
    hessian_error: float
    ok: bool


def check_term_derivatives(
    term: Term,
    variables: Sequence[ArrayLike],
    grad_eps: float = 1e-6,
    hess_eps: float = 1e-4,
    grad_rtol: float = 1e-6,
    hess_rtol: float = 1e-4,
) -> DerivativeCheck:
    """Compare ``term.evaluate_derivatives`` with central differences.

    Errors are the maximum absolute deviation divided by
    ``max(1, max |finite difference|)``.
    """
    objective = TermObjective(term)
    x = np.concatenate(term.check_variables(variables))
    value, grad, hess = objective.evaluate_derivatives(x)
    grad_error = _relative_error(grad, approx_grad(objective, x, eps=grad_eps))
    hess_error = _relative_error(hess, approx_hessian(objective, x, eps=hess_eps))
    return DerivativeCheck(
        value=value,
        gradient=grad,
        hessian=hess,
        gradient_error=grad_error,
        hessian_error=hess_error,
        ok=grad_error <= grad_rtol and hess_error <= hess_rtol,
    )


__all__ = [
    "DerivativeCheck",
    "approx_grad",
    "approx_hessian",
    "check_term_derivatives",
]

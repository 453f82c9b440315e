"""Backtracking line search following Nocedal & Wright, Algorithm 3.1."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import ARMIJO_C, MAX_BACKTRACKS, RHO, Array, LogFunction, Objective

logger = get_logger(__name__)

FAILURE_MESSAGE = "Backtracking failed, returning zero step."


def backtracking_line_search(
    objective: Objective,
    x: Array,
    fval: float,
    g: Array,
    p: Array,
    scratch: Optional[Array] = None,
    start_alpha: float = 1.0,
    log_function: Optional[LogFunction] = None,
    return_evals: bool = False,
) -> float | tuple[float, int]:
    """Armijo backtracking along ``p`` starting from ``start_alpha``.

    Trial ``t`` uses ``alpha_t = start_alpha * 0.5**t`` and accepts the first
    step with ``objective(x + alpha_t * p) <= fval + 1e-4 * alpha_t * g.p``.
    Newton and quasi-Newton directions should start from ``1.0``.

    Parameters
    ----------
    objective:
        Value-only objective of a flat point.
    x, fval, g:
        Current point, ``objective(x)`` and the gradient at ``x``.
    p:
        Search direction.
    scratch:
        Optional buffer shaped like ``x``; trial points are written into it.
    start_alpha:
        First trial step, must be positive.
    log_function:
        Called once with a diagnostic message when the search gives up.
    return_evals:
        Also return the number of objective evaluations.

    Returns
    -------
    float or (float, int)
        The accepted step, or ``0.0`` when no trial out of
        ``MAX_BACKTRACKS`` satisfies the condition. A zero step means no
        progress is possible along ``p``; the caller decides what to do.
        Non-finite trial values never satisfy the condition.
    """
    if not start_alpha > 0:
        raise ValueError(f"start_alpha must be positive, got {start_alpha}")
    x = np.asarray(x, dtype=float)
    g = np.asarray(g, dtype=float)
    p = np.asarray(p, dtype=float)
    if g.shape != x.shape or p.shape != x.shape:
        raise ValueError(
            f"x, g and p must share a shape, got {x.shape}, {g.shape}, {p.shape}"
        )
    if scratch is None:
        scratch = np.empty_like(x)
    elif scratch.shape != x.shape:
        raise ValueError(f"scratch must have shape {x.shape}, got {scratch.shape}")

    g_dot_p = float(np.dot(g.ravel(), p.ravel()))
    alpha = float(start_alpha)
    nfev = 0
    for _ in range(MAX_BACKTRACKS):
        np.add(x, alpha * p, out=scratch)
        lhs = objective(scratch)
        nfev += 1
        if lhs <= fval + ARMIJO_C * alpha * g_dot_p:
            logger.debug("Accepted step %.6g after %d evaluation(s)", alpha, nfev)
            return (alpha, nfev) if return_evals else alpha
        alpha *= RHO

    logger.warning(
        "%s (%d trials, f=%.6g, g.p=%.6g)", FAILURE_MESSAGE, nfev, fval, g_dot_p
    )
    if log_function is not None:
        log_function(FAILURE_MESSAGE)
    return (0.0, nfev) if return_evals else 0.0


__all__ = ["FAILURE_MESSAGE", "backtracking_line_search"]

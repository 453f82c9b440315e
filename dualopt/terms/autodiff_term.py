"""Terms differentiated automatically from a single functor body."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike

from ..autodiff import (
    read_first_order,
    read_second_order,
    read_value,
    seed_second_order,
    seed_values,
)
from ..autodiff.dual import Dual
from ..diagnostics import all_finite, is_debug_enabled, is_debug_strict, is_symmetric
from ..logging import get_logger
from .core import BlockGradient, BlockHessian, SizedTerm

logger = get_logger(__name__)

Functor = Callable[..., Any]


class AutoDiffTerm(SizedTerm):
    """Term whose gradient and Hessian come from forward-mode dual numbers.

    The functor is called as ``functor(*blocks)`` with one object array per
    variable block. On the derivative path the entries are order-two
    :class:`~dualopt.autodiff.dual.Dual` numbers and the functor runs exactly
    once. On the value path they are duals carrying no directions, so both
    paths perform identical scalar operations in identical order and return
    the same value bit for bit, reductions such as ``np.sum`` and ``@``
    included. The functor must therefore stick to operations duals support:
    arithmetic, comparisons, the functions in
    :mod:`dualopt.autodiff.functions` (or the matching numpy ufuncs) and
    numpy reductions over object arrays.

    The term takes ownership of the functor: it is released together with
    the term.

    Example
    -------
    >>> from dualopt.autodiff import functions as fn
    >>> class Rosenbrock:
    ...     def __call__(self, x):
    ...         return (1.0 - x[0]) ** 2 + 100.0 * (x[1] - x[0] ** 2) ** 2
    >>> term = AutoDiffTerm(Rosenbrock(), 2)
    >>> value, gradient, hessian = term.evaluate_derivatives([[1.0, 1.0]])
    >>> value
    0.0
    """

    def __init__(self, functor: Functor, *dimensions: int) -> None:
        if not callable(functor):
            raise TypeError(f"functor must be callable, got {type(functor).__name__}")
        super().__init__(*dimensions)
        self._functor = functor
        self._starts = tuple(int(s) for s in np.cumsum((0,) + self.dimensions[:-1]))

    @property
    def functor(self) -> Functor:
        return self._functor

    def __repr__(self) -> str:
        dims = ", ".join(str(d) for d in self.dimensions)
        return f"AutoDiffTerm({type(self._functor).__name__}, {dims})"

    def _slices(self) -> list[slice]:
        return [slice(s, s + d) for s, d in zip(self._starts, self.dimensions)]

    def evaluate(self, variables: Sequence[ArrayLike]) -> float:
        blocks = self.check_variables(variables)
        values = seed_values(np.concatenate(blocks))
        return read_value(self._functor(*(values[s] for s in self._slices())))

    def evaluate_derivatives(
        self,
        variables: Sequence[ArrayLike],
        gradient: Optional[BlockGradient] = None,
        hessian: Optional[BlockHessian] = None,
    ) -> tuple[float, BlockGradient, BlockHessian]:
        blocks = self.check_variables(variables)
        gradient, hessian = self._prepare_outputs(gradient, hessian)
        n = self.total_dimension

        duals = seed_second_order(np.concatenate(blocks))
        slices = self._slices()
        result = self._functor(*(duals[s] for s in slices))
        value, full_grad, full_hess = read_second_order(result, n)

        if is_debug_enabled():
            self._check_consistency(result, full_grad, full_hess)

        for i, si in enumerate(slices):
            gradient[i][...] = full_grad[si]
            for j, sj in enumerate(slices):
                hessian[i][j][...] = full_hess[si, sj]
        return value, gradient, hessian

    def _check_consistency(
        self, result: Any, full_grad: np.ndarray, full_hess: np.ndarray
    ) -> None:
        if not isinstance(result, Dual):
            return
        _, inner_grad = read_first_order(result.value, full_grad.size)
        if not all_finite(full_grad, full_hess, inner_grad):
            logger.debug("%r produced non-finite derivatives", self)
            return
        problems = []
        if not is_symmetric(full_hess, atol=1e-10, rtol=1e-8):
            deviation = float(np.max(np.abs(full_hess - full_hess.T)))
            problems.append(f"Hessian is not symmetric (max deviation {deviation:.3e})")
        if not np.allclose(inner_grad, full_grad, atol=1e-12, rtol=1e-10):
            problems.append("inner and outer gradients disagree")
        for problem in problems:
            logger.warning("%r: %s", self, problem)
        if problems and is_debug_strict():
            raise ValueError(f"{self!r}: " + "; ".join(problems))


__all__ = ["AutoDiffTerm", "Functor"]

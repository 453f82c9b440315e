"""Flat-vector view of a single term."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .core import Term


class TermObjective:
    """Callable objective over the concatenation of a term's variable blocks.

    This is the narrow value contract the line search consumes; gradient and
    Hessian are assembled densely from the term's block derivatives.
    """

    def __init__(self, term: Term) -> None:
        self.term = term
        self._split_points = np.cumsum(term.dimensions)[:-1]

    @property
    def dim(self) -> int:
        return self.term.total_dimension

    def split(self, x: ArrayLike) -> list[np.ndarray]:
        """Split a flat point into the term's blocks."""
        x = np.asarray(x, dtype=float).reshape(-1)
        if x.size != self.dim:
            raise ValueError(f"Expected a point with {self.dim} entries, got {x.size}.")
        return np.split(x, self._split_points)

    def __call__(self, x: ArrayLike) -> float:
        return self.term.evaluate(self.split(x))

    def evaluate_derivatives(self, x: ArrayLike) -> tuple[float, np.ndarray, np.ndarray]:
        value, gradient, hessian = self.term.evaluate_derivatives(self.split(x))
        return value, np.concatenate(gradient), np.block(hessian)

    def gradient(self, x: ArrayLike) -> np.ndarray:
        return self.evaluate_derivatives(x)[1]

    def hessian(self, x: ArrayLike) -> np.ndarray:
        return self.evaluate_derivatives(x)[2]


__all__ = ["TermObjective"]

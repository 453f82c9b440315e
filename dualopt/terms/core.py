"""Term interfaces shared by every differentiable objective contribution.

A term is a scalar function of ``K`` variable blocks, block ``i`` holding
``d_i`` scalars. Derivatives are reported per block: ``gradient[i]`` has shape
``(d_i,)`` and ``hessian[i][j]`` has shape ``(d_i, d_j)`` for every pair of
blocks, including the diagonal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike

BlockGradient = List[np.ndarray]
BlockHessian = List[List[np.ndarray]]


class Term(ABC):
    """Abstract differentiable function of one or more variable blocks.

    Evaluation is pure: no method mutates the term, and the term never keeps
    references to the arrays it is given, so one instance may be evaluated
    from several threads as long as each call gets its own output containers.
    """

    @abstractmethod
    def number_of_variables(self) -> int:
        """Number of variable blocks (at least one)."""

    @abstractmethod
    def variable_dimension(self, i: int) -> int:
        """Scalar dimension of block ``i``.

        Raises
        ------
        IndexError
            If ``i`` is not in ``range(number_of_variables())``.
        """

    @abstractmethod
    def evaluate(self, variables: Sequence[ArrayLike]) -> float:
        """Return the function value only."""

    @abstractmethod
    def evaluate_derivatives(
        self,
        variables: Sequence[ArrayLike],
        gradient: Optional[BlockGradient] = None,
        hessian: Optional[BlockHessian] = None,
    ) -> tuple[float, BlockGradient, BlockHessian]:
        """Return the value together with the block gradient and Hessian.

        When ``gradient`` and ``hessian`` are given they are filled in place
        and returned; otherwise new containers are allocated. The value is
        exactly the one :meth:`evaluate` returns for the same inputs.
        """

    @property
    def dimensions(self) -> tuple[int, ...]:
        return tuple(
            self.variable_dimension(i) for i in range(self.number_of_variables())
        )

    @property
    def total_dimension(self) -> int:
        return int(sum(self.dimensions))

    def allocate_gradient(self) -> BlockGradient:
        return [np.zeros(d) for d in self.dimensions]

    def allocate_hessian(self) -> BlockHessian:
        dims = self.dimensions
        return [[np.zeros((di, dj)) for dj in dims] for di in dims]

    def check_variables(self, variables: Sequence[ArrayLike]) -> list[np.ndarray]:
        """Validate block count and sizes; return float64 copies of the blocks.

        Raises
        ------
        ValueError
            On a wrong number of blocks or a block of the wrong size.
        """
        dims = self.dimensions
        if len(variables) != len(dims):
            raise ValueError(
                f"Expected {len(dims)} variable blocks, got {len(variables)}."
            )
        blocks = []
        for i, (block, dim) in enumerate(zip(variables, dims)):
            arr = np.array(block, dtype=float).reshape(-1)
            if arr.size != dim:
                raise ValueError(
                    f"Variable block {i} must have {dim} entries, got {arr.size}."
                )
            blocks.append(arr)
        return blocks

    def _prepare_outputs(
        self,
        gradient: Optional[BlockGradient],
        hessian: Optional[BlockHessian],
    ) -> tuple[BlockGradient, BlockHessian]:
        dims = self.dimensions
        if gradient is None:
            gradient = self.allocate_gradient()
        elif len(gradient) != len(dims) or any(
            not isinstance(g, np.ndarray) or g.shape != (d,)
            for g, d in zip(gradient, dims)
        ):
            raise ValueError(
                f"gradient must hold ndarray blocks of shapes {[(d,) for d in dims]}."
            )
        if hessian is None:
            hessian = self.allocate_hessian()
        elif len(hessian) != len(dims) or any(
            len(row) != len(dims)
            or any(
                not isinstance(h, np.ndarray) or h.shape != (di, dj)
                for h, dj in zip(row, dims)
            )
            for row, di in zip(hessian, dims)
        ):
            raise ValueError(
                f"hessian must be a {len(dims)}x{len(dims)} grid of ndarray blocks "
                f"sized by dimensions {dims}."
            )
        return gradient, hessian


class SizedTerm(Term):
    """Term whose block dimensions are fixed for the lifetime of the instance.

    Subclasses either declare them as a class attribute::

        class MyTerm(SizedTerm):
            dimensions = (2, 3)

    or pass them to ``__init__``.
    """

    dimensions: tuple[int, ...] = ()

    def __init__(self, *dimensions: int) -> None:
        dims = dimensions or type(self).dimensions
        dims = tuple(int(d) for d in dims)
        if not dims:
            raise ValueError("A term needs at least one variable block.")
        if any(d <= 0 for d in dims):
            raise ValueError(f"Block dimensions must be positive, got {dims}.")
        self.dimensions = dims

    def number_of_variables(self) -> int:
        return len(self.dimensions)

    def variable_dimension(self, i: int) -> int:
        if not 0 <= i < len(self.dimensions):
            raise IndexError(
                f"Variable index {i} out of range for a term with "
                f"{len(self.dimensions)} blocks."
            )
        return self.dimensions[i]


__all__ = ["BlockGradient", "BlockHessian", "SizedTerm", "Term"]

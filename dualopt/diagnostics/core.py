"""Consistency checks for derivative matrices."""

from __future__ import annotations

import numpy as np


def all_finite(*arrays: np.ndarray) -> bool:
    """Return True if every entry of every array is finite."""
    return all(bool(np.all(np.isfinite(a))) for a in arrays)


def is_symmetric(mat: np.ndarray, atol: float = 1e-8, rtol: float = 1e-8) -> bool:
    """
    Check whether a square matrix is symmetric.

    Parameters
    ----------
    mat:
        Real array with shape (n, n).
    atol, rtol:
        Tolerances in the sense of ``np.allclose``.

    Returns
    -------
    bool
        False for non-square input or non-finite entries.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    if not all_finite(mat):
        return False
    return bool(np.allclose(mat, mat.T, atol=atol, rtol=rtol))


def assert_symmetric(mat: np.ndarray, atol: float = 1e-8, rtol: float = 1e-8) -> None:
    """
    Assert that a square matrix is symmetric.

    Raises
    ------
    ValueError
        If the matrix is not square, has non-finite entries, or is not
        symmetric within the tolerance.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}.")
    if not all_finite(mat):
        raise ValueError("Matrix contains non-finite values.")
    if not is_symmetric(mat, atol=atol, rtol=rtol):
        max_dev = float(np.max(np.abs(mat - mat.T)))
        raise ValueError(
            f"Matrix is not symmetric within tolerance (max deviation {max_dev:.3e})."
        )


__all__ = ["all_finite", "assert_symmetric", "is_symmetric"]

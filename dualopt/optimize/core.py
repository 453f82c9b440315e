"""Shared aliases and constants for the optimization helpers."""

from __future__ import annotations

from typing import Callable

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
LogFunction = Callable[[str], None]

# Backtracking shrink factor and Armijo sufficient-decrease constant.
RHO = 0.5
ARMIJO_C = 1e-4
MAX_BACKTRACKS = 100


__all__ = [
    "ARMIJO_C",
    "Array",
    "LogFunction",
    "MAX_BACKTRACKS",
    "Objective",
    "RHO",
]

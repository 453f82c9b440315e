"""Line search and derivative-checking helpers.

Example
-------
>>> import numpy as np
>>> from dualopt.optimize import backtracking_line_search
>>> def bowl(x):
...     return float(x @ x)
>>> x = np.array([1.0, -2.0])
>>> g = 2 * x
>>> backtracking_line_search(bowl, x, bowl(x), g, -0.5 * g)
1.0
"""

from .core import ARMIJO_C, MAX_BACKTRACKS, RHO, Array, LogFunction, Objective
from .line_search import FAILURE_MESSAGE, backtracking_line_search
from .utils import DerivativeCheck, approx_grad, approx_hessian, check_term_derivatives

__all__ = [
    "ARMIJO_C",
    "Array",
    "DerivativeCheck",
    "FAILURE_MESSAGE",
    "LogFunction",
    "MAX_BACKTRACKS",
    "Objective",
    "RHO",
    "approx_grad",
    "approx_hessian",
    "backtracking_line_search",
    "check_term_derivatives",
]

"""Forward-mode automatic differentiation with nested dual numbers.

Example
-------
>>> from dualopt.autodiff import functions as fn, hessian
>>> value, grad, hess = hessian(lambda x: fn.exp(x[0]) * x[1], [0.0, 3.0])
>>> float(value), float(hess[0, 0])
(3.0, 3.0)
"""

from . import functions
from .differentiate import (
    gradient,
    hessian,
    read_first_order,
    read_second_order,
    read_value,
    seed_first_order,
    seed_second_order,
    seed_values,
)
from .dual import Dual

__all__ = [
    "Dual",
    "functions",
    "gradient",
    "hessian",
    "read_first_order",
    "read_second_order",
    "read_value",
    "seed_first_order",
    "seed_second_order",
    "seed_values",
]

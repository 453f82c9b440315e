"""Differentiable terms: the polymorphic Term family and its flat-vector view.

Example
-------
>>> from dualopt.autodiff import functions as fn
>>> from dualopt.terms import AutoDiffTerm
>>> class Product:
...     def __call__(self, x, y):
...         return fn.sin(x[0]) * y[0]
>>> term = AutoDiffTerm(Product(), 1, 1)
>>> value, gradient, hessian = term.evaluate_derivatives([[0.0], [2.0]])
>>> float(hessian[0][1][0, 0])
1.0
"""

from .autodiff_term import AutoDiffTerm, Functor
from .core import BlockGradient, BlockHessian, SizedTerm, Term
from .objective import TermObjective

__all__ = [
    "AutoDiffTerm",
    "BlockGradient",
    "BlockHessian",
    "Functor",
    "SizedTerm",
    "Term",
    "TermObjective",
]

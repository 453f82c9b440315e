import numpy as np
import pytest

from dualopt.autodiff import functions as fn
from dualopt.optimize import approx_grad, approx_hessian, check_term_derivatives
from dualopt.terms import SizedTerm


def test_approx_grad_matches_linear_function():
    def fun(x: np.ndarray) -> float:
        return float(3 * x[0] - 2 * x[1])

    grad = approx_grad(fun, np.array([0.2, -0.1]))
    assert np.allclose(grad, np.array([3.0, -2.0]), atol=1e-6)


def test_approx_hessian_matches_quadratic():
    def fun(x: np.ndarray) -> float:
        return float(x[0] ** 2 + 3 * x[1] ** 2 + x[0] * x[1])

    hess, evals = approx_hessian(fun, np.array([0.5, -1.5]), return_evals=True)
    assert np.allclose(hess, np.array([[2.0, 1.0], [1.0, 6.0]]), atol=1e-3)
    assert evals == 1 + 2 * 2 + 4


def test_invalid_eps():
    with pytest.raises(ValueError):
        approx_grad(lambda x: float(x[0]), np.array([0.0]), eps=0.0)
    with pytest.raises(ValueError):
        approx_hessian(lambda x: float(x[0]), np.array([0.0]), eps=-1.0)


class WrongGradientTerm(SizedTerm):
    """x0**2 + sin(x1) with a deliberately wrong gradient."""

    dimensions = (2,)

    def evaluate(self, variables):
        (x,) = self.check_variables(variables)
        return float(x[0] ** 2 + fn.sin(x[1]))

    def evaluate_derivatives(self, variables, gradient=None, hessian=None):
        (x,) = self.check_variables(variables)
        gradient, hessian = self._prepare_outputs(gradient, hessian)
        gradient[0][...] = [2 * x[0], 2 * np.cos(x[1])]
        hessian[0][0][...] = [[2.0, 0.0], [0.0, -np.sin(x[1])]]
        return self.evaluate(variables), gradient, hessian


def test_check_term_derivatives_flags_wrong_gradient():
    check = check_term_derivatives(WrongGradientTerm(), [[0.5, 0.3]])
    assert not check.ok
    assert check.gradient_error > 0.1
    assert check.hessian_error < 1e-4
    assert check.value == pytest.approx(0.25 + np.sin(0.3))

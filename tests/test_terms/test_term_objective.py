import numpy as np
import pytest

from dualopt.autodiff import functions as fn
from dualopt.terms import AutoDiffTerm, TermObjective


class Coupled:
    def __call__(self, x, y):
        return x[0] * x[0] * y[0] + fn.exp(x[1]) * y[1] + y[0] * y[1]


@pytest.fixture
def objective() -> TermObjective:
    return TermObjective(AutoDiffTerm(Coupled(), 2, 2))


def test_split_follows_block_dimensions(objective: TermObjective):
    blocks = objective.split([1.0, 2.0, 3.0, 4.0])
    assert [b.tolist() for b in blocks] == [[1.0, 2.0], [3.0, 4.0]]
    assert objective.dim == 4


def test_split_rejects_wrong_size(objective: TermObjective):
    with pytest.raises(ValueError):
        objective.split([1.0, 2.0, 3.0])


def test_value_gradient_hessian_are_flat(objective: TermObjective):
    x = np.array([1.0, 0.0, 2.0, 3.0])
    assert objective(x) == pytest.approx(1.0 * 2.0 + 1.0 * 3.0 + 6.0)

    grad = objective.gradient(x)
    assert grad == pytest.approx(np.array([4.0, 3.0, 1.0 + 3.0, 1.0 + 2.0]))

    hess = objective.hessian(x)
    expected = np.array(
        [
            [4.0, 0.0, 2.0, 0.0],
            [0.0, 3.0, 0.0, 1.0],
            [2.0, 0.0, 0.0, 1.0],
            [0.0, 1.0, 1.0, 0.0],
        ]
    )
    assert hess.shape == (4, 4)
    assert hess == pytest.approx(expected)


def test_value_matches_term(objective: TermObjective):
    x = np.array([0.3, -0.2, 0.5, 1.5])
    value, _, _ = objective.evaluate_derivatives(x)
    assert value == objective(x)
    assert value == objective.term.evaluate([x[:2], x[2:]])

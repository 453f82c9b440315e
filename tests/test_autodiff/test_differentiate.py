import math

import numpy as np
import pytest

from dualopt.autodiff import (
    Dual,
    functions as fn,
    gradient,
    hessian,
    read_first_order,
    read_second_order,
    seed_first_order,
    seed_second_order,
)


def sqrt_mix(x):
    z = fn.sqrt(x[0])
    return x[1] * z + fn.sin(z)


def test_hessian_of_sqrt_mix_matches_closed_form():
    x, y = 1.3, 2.0
    value, grad, hess = hessian(sqrt_mix, [x, y])
    s = math.sqrt(x)

    assert value == pytest.approx(y * s + math.sin(s), rel=1e-15)
    assert grad[0] == pytest.approx((y + math.cos(s)) / (2.0 * s), rel=1e-14)
    assert grad[1] == pytest.approx(s, rel=1e-15)
    assert hess[0, 0] == pytest.approx(
        -(y + math.cos(s) + s * math.sin(s)) / (4 * x**1.5), rel=1e-13
    )
    assert hess[0, 1] == pytest.approx(1.0 / (2.0 * s), rel=1e-14)
    assert hess[1, 0] == pytest.approx(1.0 / (2.0 * s), rel=1e-14)
    assert hess[1, 1] == 0.0


def test_gradient_matches_hessian_gradient():
    value1, grad1 = gradient(sqrt_mix, [1.3, 2.0])
    value2, grad2, _ = hessian(sqrt_mix, [1.3, 2.0])
    assert value1 == value2
    assert np.allclose(grad1, grad2, rtol=1e-15, atol=0)


def test_seed_first_order_unit_vectors():
    duals = seed_first_order([1.0, 2.0, 3.0])
    assert duals.dtype == object
    for k, d in enumerate(duals):
        assert d.depth == 1
        assert [float(p) for p in d.partials] == [float(k == j) for j in range(3)]


def test_seed_second_order_structure():
    duals = seed_second_order([1.0, 2.0])
    d = duals[1]
    assert d.depth == 2
    assert float(d.value.value) == 2.0
    assert [float(p) for p in d.value.partials] == [0.0, 1.0]
    assert [float(p.value) for p in d.partials] == [0.0, 1.0]
    assert all(float(q) == 0.0 for p in d.partials for q in p.partials)


def test_constant_result_has_zero_derivatives():
    value, grad, hess = hessian(lambda v: 3.5, [1.0, 2.0])
    assert value == 3.5
    assert np.all(grad == 0.0)
    assert np.all(hess == 0.0)
    value, grad = gradient(lambda v: 3.5, [1.0])
    assert value == 3.5
    assert np.all(grad == 0.0)


def test_read_rejects_wrong_order():
    first = Dual.variable(1.0, 0, 2)
    with pytest.raises(ValueError):
        read_second_order(first, 2)
    with pytest.raises(ValueError):
        read_first_order(first, 3)


def test_one_evaluation_per_hessian():
    calls = {"count": 0}

    def counted(v):
        calls["count"] += 1
        return v[0] * v[1] * v[2]

    _, _, hess = hessian(counted, [1.0, 2.0, 3.0])
    assert calls["count"] == 1
    assert hess == pytest.approx(np.array([[0.0, 3.0, 2.0], [3.0, 0.0, 1.0], [2.0, 1.0, 0.0]]))

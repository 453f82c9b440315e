import numpy as np
import pytest

from dualopt.diagnostics import (
    all_finite,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_debug_strict,
    is_symmetric,
    set_debug_enabled,
)
from dualopt.diagnostics import debug_mode


def test_is_symmetric():
    assert is_symmetric(np.array([[1.0, 2.0], [2.0, 3.0]]))
    assert not is_symmetric(np.array([[1.0, 2.0], [2.5, 3.0]]))
    assert not is_symmetric(np.ones((2, 3)))
    assert not is_symmetric(np.array([[np.nan, 0.0], [0.0, 1.0]]))


def test_assert_symmetric_raises():
    assert_symmetric(np.eye(3))
    with pytest.raises(ValueError, match="not symmetric"):
        assert_symmetric(np.array([[0.0, 1.0], [0.0, 0.0]]))
    with pytest.raises(ValueError, match="square"):
        assert_symmetric(np.zeros((2, 1)))
    with pytest.raises(ValueError, match="non-finite"):
        assert_symmetric(np.array([[np.inf]]))


def test_all_finite():
    assert all_finite(np.zeros(2), np.eye(2))
    assert not all_finite(np.zeros(2), np.array([np.nan]))


def test_debug_context_restores_previous_state():
    set_debug_enabled(False)
    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    assert not is_debug_enabled()


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, (False, False)),
        ("0", (False, False)),
        ("On", (True, False)),
        ("1", (True, False)),
        ("strict", (True, True)),
        (" RAISE ", (True, True)),
    ],
)
def test_debug_env_values(raw, expected):
    assert debug_mode._parse_debug_env(raw) == expected


def test_strict_mode_requires_debug_enabled():
    with debug_context(True, strict=True):
        assert is_debug_strict()
        with debug_context(False, strict=True):
            assert not is_debug_strict()
        assert is_debug_strict()
    set_debug_enabled(True)
    assert not is_debug_strict()

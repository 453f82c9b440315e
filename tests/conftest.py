"""Pytest configuration and shared fixtures for dualopt tests.

This module provides:
- A deterministic numpy RNG fixture
- Global numpy/torch seeding for reproducible random test points
- A fixture restoring debug mode after each test
"""

import os

import numpy as np
import pytest
import torch

from dualopt.diagnostics import is_debug_enabled, is_debug_strict, set_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy and torch globally before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Leave the global debug mode as each test found it."""
    prev = is_debug_enabled(), is_debug_strict()
    yield
    set_debug_enabled(prev[0], strict=prev[1])

# tests/conftest.py

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def numerical_grad(f, xs, i, h=1e-6):
    """Central finite difference of f (plain floats in, float out) w.r.t. xs[i]."""
    up = list(xs)
    down = list(xs)
    up[i] += h
    down[i] -= h
    return (f(*up) - f(*down)) / (2 * h)

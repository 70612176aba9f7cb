"""Shared fixtures: seeded generators and a small noisy two-class series."""

import numpy as np
import pytest

from rollband.data.synthetic import generate_series


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def noisy_series():
    # Coarse grid keeps the brute-force reference fast
    return generate_series(np.random.default_rng(2024), sigma=0.2, step=0.1)

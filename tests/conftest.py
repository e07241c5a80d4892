"""Pytest helpers for the compfin library."""

from __future__ import annotations

import numpy as np
import pytest

from compfin.numerics import TimeGrid


@pytest.fixture
def base_params() -> dict:
    """Canonical GBM / call parameters used across tests."""
    return {
        "S": 100.0,
        "K": 100.0,
        "r": 0.05,
        "sigma": 0.25,
        "T": 1.0,
    }


@pytest.fixture
def unit_grid():
    """Factory for uniform grids on ``[0, T]``."""

    def _make(n_steps: int = 100, T: float = 1.0) -> TimeGrid:
        return TimeGrid.from_horizon(T, n_steps)

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng

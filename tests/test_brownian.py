import numpy as np
import pytest

from compfin.diagnostics import brownian_moments_table, serial_correlation
from compfin.exceptions import ConfigurationError, IndexOutOfRangeError, OutOfRangeError
from compfin.numerics import TimeGrid
from compfin.processes import BrownianMotion


def test_shapes_and_initial_value(unit_grid):
    bm = BrownianMotion(unit_grid(20), n_factors=3, n_paths=50, seed=1)

    assert bm.increments().shape == (20, 3, 50)
    assert bm.paths().shape == (21, 3, 50)
    assert bm.paths_for_factor(2).shape == (21, 50)
    assert bm.path(1, 7).shape == (21,)
    np.testing.assert_array_equal(bm.at_time_index(0, 2), 0.0)


def test_paths_are_cumulative_increments(unit_grid):
    bm = BrownianMotion(unit_grid(10), n_factors=1, n_paths=5, seed=3)

    np.testing.assert_allclose(
        bm.at_time_index(4) - bm.at_time_index(3), bm.increment(3), atol=1e-14
    )


def test_same_seed_same_paths_different_seed_different_paths(unit_grid):
    g = unit_grid(10)

    a = BrownianMotion(g, 2, 100, seed=42).paths()
    b = BrownianMotion(g, 2, 100, seed=42).paths()
    c = BrownianMotion(g, 2, 100, seed=43).paths()

    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, c)


def test_reads_return_copies(unit_grid):
    bm = BrownianMotion(unit_grid(5), 1, 10, seed=0)

    x = bm.at_time_index(3)
    x[:] = 123.0

    assert not np.any(bm.at_time_index(3) == 123.0)


def test_increment_moments_on_non_uniform_grid():
    """dW_j ~ N(0, t_{j+1} - t_j)."""
    g = TimeGrid([0.0, 0.1, 0.5, 2.0])
    bm = BrownianMotion(g, n_factors=1, n_paths=200_000, seed=5)

    dW = bm.increments()[:, 0, :]

    np.testing.assert_allclose(dW.mean(axis=1), 0.0, atol=0.01)
    np.testing.assert_allclose(dW.var(axis=1), g.steps, rtol=0.02)


def test_factors_uncorrelated_and_variance_is_time(unit_grid):
    bm = BrownianMotion(unit_grid(100), n_factors=2, n_paths=100_000, seed=11)

    df = brownian_moments_table(bm, every=10)

    assert list(df["time_index"]) == list(range(0, 101, 10))
    assert df["mean"].abs().max() < 0.02
    np.testing.assert_allclose(df["var"][1:], df["var_exact"][1:], rtol=0.03)
    assert df["cross_moment"].abs().max() < 0.02


def test_serial_correlation_is_min_of_times(unit_grid):
    bm = BrownianMotion(unit_grid(100), n_factors=1, n_paths=100_000, seed=12)

    assert serial_correlation(bm, 0.1, 0.2) == pytest.approx(0.1, abs=0.01)
    assert serial_correlation(bm, 0.7, 0.3) == pytest.approx(0.3, abs=0.015)


def test_out_of_range_access(unit_grid):
    bm = BrownianMotion(unit_grid(10), n_factors=2, n_paths=5, seed=0)

    with pytest.raises(IndexOutOfRangeError):
        bm.paths_for_factor(2)
    with pytest.raises(IndexOutOfRangeError):
        bm.path(0, 5)
    with pytest.raises(OutOfRangeError):
        bm.at_time_index(11)
    with pytest.raises(OutOfRangeError):
        bm.at_time(0.55)
    with pytest.raises(OutOfRangeError):
        bm.increment(10)


def test_invalid_configuration(unit_grid):
    with pytest.raises(ConfigurationError):
        BrownianMotion(unit_grid(10), n_factors=0, n_paths=5)
    with pytest.raises(ConfigurationError):
        BrownianMotion(unit_grid(10), n_factors=1, n_paths=0)
    with pytest.raises(ConfigurationError):
        BrownianMotion(unit_grid(10), n_factors=1, n_paths=5, rng_type="xorshift")


def test_uniform_constructor_matches_explicit_grid():
    a = BrownianMotion.uniform(dt=0.1, n_steps=10, n_paths=20, seed=9)
    b = BrownianMotion(TimeGrid.uniform(0.0, 10, 0.1), 1, 20, seed=9)

    np.testing.assert_array_equal(a.paths(), b.paths())

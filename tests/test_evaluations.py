import math

import numpy as np
import pytest

from compfin.config import RandomConfig, make_rng
from compfin.exceptions import ConfigurationError
from compfin.montecarlo import (
    HaltonPiFromHypersphere,
    MonteCarloIntegrationPowerFunction,
    MonteCarloPi,
    MonteCarloPiFromHypersphere,
)
from compfin.montecarlo.hypersphere import pi_from_ball_fraction


def test_pi_estimates_are_reproducible_and_cached():
    a = MonteCarloPi(n_computations=20, n_draws=5_000, seed=4)
    b = MonteCarloPi(n_computations=20, n_draws=5_000, seed=4)

    first = a.computations()
    first[:] = 0.0

    np.testing.assert_array_equal(a.computations(), b.computations())
    assert a.computations().shape == (20,)


def test_computations_draw_from_the_configured_generator():
    mc = MonteCarloIntegrationPowerFunction(2.0, n_computations=3, n_draws=100, seed=9)

    u = 1.0 - make_rng(RandomConfig(seed=9)).random((3, 100))

    np.testing.assert_allclose(mc.computations(), np.mean(u**2.0, axis=1))


def test_pi_summary_statistics():
    mc = MonteCarloPi(n_computations=100, n_draws=10_000, seed=1)

    values = mc.computations()
    lo, hi = mc.min_and_max()

    # each estimate has standard deviation 4 sqrt(p(1-p)/n) ~ 0.016
    assert mc.average() == pytest.approx(math.pi, abs=0.01)
    assert 0.008 < mc.standard_deviation() < 0.025
    assert lo == values.min() and hi == values.max()
    assert mc.average_absolute_error() == pytest.approx(
        np.mean(np.abs(values - math.pi))
    )
    assert mc.exact_result == math.pi


def test_histogram_counts_below_bins_and_above():
    mc = MonteCarloPi(n_computations=200, n_draws=2_000, seed=2)

    hist = mc.histogram(3.10, 3.18, 4)

    assert hist.shape == (6,)
    assert hist.sum() == 200
    values = mc.computations()
    assert hist[0] == np.count_nonzero(values < 3.10)
    assert hist[-1] == np.count_nonzero(values > 3.18)


def test_histogram_rejects_bad_ranges():
    mc = MonteCarloPi(n_computations=2, n_draws=10)

    with pytest.raises(ConfigurationError):
        mc.histogram(1.0, 1.0, 3)
    with pytest.raises(ConfigurationError):
        mc.histogram(0.0, 1.0, 0)


@pytest.mark.parametrize("exponent", [-0.5, 0.0, 1.0, 3.0])
def test_power_function_integral(exponent):
    mc = MonteCarloIntegrationPowerFunction(exponent, n_computations=50, n_draws=20_000, seed=9)

    assert mc.exact_result == pytest.approx(1.0 / (1.0 + exponent))
    assert mc.average() == pytest.approx(mc.exact_result, rel=0.01)


def test_power_function_rejects_non_integrable_exponent():
    with pytest.raises(ConfigurationError):
        MonteCarloIntegrationPowerFunction(-1.0, 10, 10)


def test_pi_from_ball_fraction_inverts_the_volume_formula():
    for d in (1, 2, 3, 5):
        fraction = math.pi ** (d / 2) / math.gamma(d / 2 + 1) / 2**d
        assert pi_from_ball_fraction(fraction, d) == pytest.approx(math.pi)


@pytest.mark.parametrize("dimension", [2, 3, 4])
def test_pi_from_hypersphere(dimension):
    mc = MonteCarloPiFromHypersphere(20, 50_000, dimension, seed=5)

    assert mc.average() == pytest.approx(math.pi, abs=0.02)
    assert mc.average_absolute_error() < 0.05


def test_halton_pi_is_deterministic_and_beats_monte_carlo():
    halton = HaltonPiFromHypersphere(n_points=100_000, base=[2, 3, 5])
    mc = MonteCarloPiFromHypersphere(50, 100_000, 3, seed=0)

    assert halton.dimension == 3
    assert halton.estimate() == HaltonPiFromHypersphere(100_000, [2, 3, 5]).estimate()
    assert halton.error() == pytest.approx(abs(halton.estimate() - math.pi))
    assert halton.error() < mc.average_absolute_error()


def test_invalid_configurations():
    with pytest.raises(ConfigurationError):
        MonteCarloPi(0, 10)
    with pytest.raises(ConfigurationError):
        MonteCarloPi(10, 0)
    with pytest.raises(ConfigurationError):
        MonteCarloPiFromHypersphere(10, 10, 0)
    with pytest.raises(ConfigurationError):
        HaltonPiFromHypersphere(0, [2, 3])

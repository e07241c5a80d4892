import math
from functools import partial

import numpy as np
import pytest
from scipy.stats import binom

from compfin.config import RandomConfig, make_rng
from compfin.exceptions import ConfigurationError, IndexOutOfRangeError, OutOfRangeError
from compfin.models.bs import call_price, put_price
from compfin.numerics import TimeGrid
from compfin.pricers import CallOption, DigitalOption, mc_price
from compfin.processes import BinomialModel, log_euler_gbm
from compfin.types import OptionType
from compfin.vanilla import make_vanilla_payoff, put_payoff


def test_call_matches_bs_within_a_few_standard_errors(base_params):
    p = base_params
    g = TimeGrid.from_horizon(p["T"], 4)
    sim = log_euler_gbm(80_000, p["sigma"], p["r"], p["S"], 7, g)

    price, se = CallOption(strike=p["K"], maturity=p["T"], rate=p["r"]).price_with_error(sim)
    bs = call_price(spot=p["S"], strike=p["K"], r=p["r"], sigma=p["sigma"], tau=p["T"])

    assert se > 0.0
    assert abs(price - bs) <= 3.0 * se + 2e-3


def test_price_is_discounted_mean_payoff(base_params):
    p = base_params
    g = TimeGrid.from_horizon(p["T"], 2)
    sim = log_euler_gbm(1_000, p["sigma"], p["r"], p["S"], 1, g)

    ST = sim.at_time(p["T"])
    expected = math.exp(-p["r"] * p["T"]) * np.maximum(ST - p["K"], 0.0).mean()

    assert CallOption(p["K"], p["T"], p["r"]).price(sim) == pytest.approx(expected, rel=1e-12)


def test_mc_price_with_put_payoff(base_params):
    p = base_params
    g = TimeGrid.from_horizon(p["T"], 1)
    sim = log_euler_gbm(80_000, p["sigma"], p["r"], p["S"], 21, g)

    price, se = mc_price(sim, partial(put_payoff, K=p["K"]), maturity=p["T"], rate=p["r"])
    bs = put_price(spot=p["S"], strike=p["K"], r=p["r"], sigma=p["sigma"], tau=p["T"])

    assert abs(price - bs) <= 3.0 * se + 2e-3


def test_mc_standard_error_scales_like_inverse_sqrt_n(base_params):
    p = base_params
    g = TimeGrid.from_horizon(p["T"], 1)
    option = CallOption(p["K"], p["T"], p["r"])

    _, se1 = option.price_with_error(log_euler_gbm(5_000, p["sigma"], p["r"], p["S"], 11, g))
    _, se2 = option.price_with_error(log_euler_gbm(20_000, p["sigma"], p["r"], p["S"], 12, g))

    assert 1.4 <= se1 / se2 <= 2.8


def test_maturity_off_the_grid_raises(base_params):
    p = base_params
    sim = log_euler_gbm(10, p["sigma"], p["r"], p["S"], 0, TimeGrid.from_horizon(1.0, 4))

    with pytest.raises(OutOfRangeError):
        CallOption(p["K"], 0.6, p["r"]).price(sim)
    with pytest.raises(ConfigurationError):
        CallOption(p["K"], 0.0)


def test_make_vanilla_payoff_dispatch():
    ST = np.array([80.0, 100.0, 120.0])

    np.testing.assert_array_equal(make_vanilla_payoff(OptionType.CALL, K=100.0)(ST), [0, 0, 20])
    np.testing.assert_array_equal(make_vanilla_payoff(OptionType.PUT, K=100.0)(ST), [20, 0, 0])
    np.testing.assert_array_equal(
        make_vanilla_payoff(OptionType.DIGITAL_CALL, K=100.0)(ST), [0, 0, 1]
    )
    with pytest.raises(ValueError):
        make_vanilla_payoff("straddle", K=100.0)


def test_binomial_paths_move_on_the_lattice():
    model = BinomialModel(100.0, up=1.1, down=0.9, n_times=6, n_simulations=200, seed=3)

    paths = model.paths()
    ratios = paths[1:] / paths[:-1]

    assert paths.shape == (6, 200)
    np.testing.assert_array_equal(model.at_time(0), 100.0)
    assert np.all(np.isclose(ratios, 1.1) | np.isclose(ratios, 0.9))
    np.testing.assert_array_equal(model.paths(), model.paths())


def test_binomial_draws_from_the_configured_generator():
    model = BinomialModel(100.0, up=1.1, down=0.9, n_times=4, n_simulations=50, p_up=0.3, seed=5)

    ups = make_rng(RandomConfig(seed=5)).random((3, 50)) < 0.3
    expected = 100.0 * np.cumprod(np.where(ups, 1.1, 0.9), axis=0)

    np.testing.assert_allclose(model.paths()[1:], expected)


def test_binomial_risk_neutral_probability():
    model = BinomialModel(1.0, up=1.5, down=0.5, n_times=2, n_simulations=1)

    assert model.risk_neutral_probability == pytest.approx(0.5)


def test_digital_option_on_binomial_matches_exact_probability():
    """S_10 > 100 iff at least 6 up moves out of 10."""
    model = BinomialModel(100.0, up=1.1, down=0.9, n_times=11, n_simulations=200_000, seed=8)
    digital = DigitalOption(strike=100.0, maturity=10)

    exact = binom.sf(5, 10, 0.5)
    se = math.sqrt(exact * (1.0 - exact) / 200_000)

    assert digital.price(model) == pytest.approx(exact, abs=4.0 * se)


def test_digital_price_distribution_is_centred_on_exact_value():
    digital = DigitalOption(strike=100.0, maturity=10)

    def make(seed: int) -> BinomialModel:
        return BinomialModel(100.0, 1.1, 0.9, n_times=11, n_simulations=2_000, seed=seed)

    prices = digital.price_distribution(make, 200, seed=1)

    assert prices.shape == (200,)
    assert len(np.unique(prices)) > 1
    assert prices.mean() == pytest.approx(binom.sf(5, 10, 0.5), abs=0.01)


def test_binomial_errors():
    with pytest.raises(ConfigurationError):
        BinomialModel(100.0, up=0.9, down=1.1, n_times=5, n_simulations=10)
    with pytest.raises(ConfigurationError):
        BinomialModel(100.0, up=1.1, down=0.9, n_times=1, n_simulations=10)

    model = BinomialModel(100.0, up=1.1, down=0.9, n_times=5, n_simulations=10)
    with pytest.raises(OutOfRangeError):
        model.at_time(5)
    with pytest.raises(IndexOutOfRangeError):
        model.path(10)

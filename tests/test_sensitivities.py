import numpy as np
import pytest

from compfin.config import MCConfig, RandomConfig
from compfin.exceptions import ConfigurationError, ModelMismatchError
from compfin.models import BlackScholesModel, MonteCarloAssetModel
from compfin.models.bs import call_delta
from compfin.numerics import TimeGrid
from compfin.pricers import (
    delta_central_differences,
    delta_likelihood_ratio,
    delta_pathwise,
)
from compfin.pricers.sensitivities import (
    delta_likelihood_ratio_samples,
    delta_pathwise_samples,
)
from compfin.processes import euler_gbm

S0, K, R, SIGMA, T = 100.0, 100.0, 0.05, 0.25, 1.0
N_PATHS = 100_000


@pytest.fixture
def bs_model():
    return BlackScholesModel(TimeGrid.from_horizon(T, 1), N_PATHS, S0, R, SIGMA, seed=31)


@pytest.fixture
def analytic_delta():
    return call_delta(spot=S0, strike=K, r=R, sigma=SIGMA, tau=T)


def _stderr(samples: np.ndarray) -> float:
    return float(np.exp(-R * T) * samples.std(ddof=1) / np.sqrt(samples.size))


def test_pathwise_delta_matches_analytic(bs_model, analytic_delta):
    delta = delta_pathwise(bs_model, maturity=T, strike=K)
    se = _stderr(delta_pathwise_samples(bs_model, maturity=T, strike=K))

    assert abs(delta - analytic_delta) <= 4.0 * se


def test_likelihood_ratio_delta_matches_analytic(bs_model, analytic_delta):
    delta = delta_likelihood_ratio(bs_model, maturity=T, strike=K)
    se = _stderr(delta_likelihood_ratio_samples(bs_model, maturity=T, strike=K))

    assert abs(delta - analytic_delta) <= 4.0 * se


def test_likelihood_ratio_has_larger_variance_than_pathwise(bs_model):
    pw = delta_pathwise_samples(bs_model, maturity=T, strike=K)
    lr = delta_likelihood_ratio_samples(bs_model, maturity=T, strike=K)

    assert lr.var() > pw.var()


def test_central_differences_with_common_random_numbers(bs_model, analytic_delta):
    delta = delta_central_differences(bs_model, maturity=T, strike=K, h=0.5)

    # common random numbers make the bump close to the pathwise estimator
    assert delta == pytest.approx(delta_pathwise(bs_model, maturity=T, strike=K), abs=5e-3)
    assert delta == pytest.approx(analytic_delta, abs=0.01)


@pytest.mark.parametrize(
    "estimator", [delta_pathwise, delta_likelihood_ratio, delta_central_differences]
)
def test_evaluation_time_rescales_by_the_numeraire(bs_model, estimator):
    t = 0.5

    at_zero = estimator(bs_model, maturity=T, strike=K)
    at_t = estimator(bs_model, maturity=T, strike=K, evaluation_time=t)

    assert at_t == pytest.approx(at_zero * np.exp(R * t), rel=1e-12)
    assert at_t == pytest.approx(
        call_delta(spot=S0, strike=K, r=R, sigma=SIGMA, tau=T) * np.exp(R * t), abs=0.02
    )


def test_with_initial_value_reuses_the_seed(bs_model):
    bumped = bs_model.with_initial_value(2.0 * S0)

    np.testing.assert_allclose(
        bumped.asset_value(T), 2.0 * bs_model.asset_value(T), rtol=1e-12
    )


def test_from_config_uses_paths_and_seed():
    cfg = MCConfig(n_paths=500, random=RandomConfig(seed=31))
    grid = TimeGrid.from_horizon(T, 1)

    a = BlackScholesModel.from_config(grid, cfg, initial_value=S0, rate=R, volatility=SIGMA)
    b = BlackScholesModel(grid, 500, S0, R, SIGMA, seed=31)

    assert a.n_paths == 500
    np.testing.assert_array_equal(a.asset_value(T), b.asset_value(T))


def test_model_numeraire_and_weights(bs_model):
    assert bs_model.numeraire(0.0) == 1.0
    assert bs_model.numeraire(T) == pytest.approx(np.exp(R * T))
    weights = bs_model.monte_carlo_weights(T)
    assert weights.shape == (N_PATHS,)
    assert weights.sum() == pytest.approx(1.0)


def test_non_black_scholes_model_is_rejected():
    grid = TimeGrid.from_horizon(T, 10)
    generic = MonteCarloAssetModel(euler_gbm(100, SIGMA, R, S0, 0, grid), R)

    with pytest.raises(ModelMismatchError):
        delta_pathwise(generic, maturity=T, strike=K)
    with pytest.raises(ModelMismatchError):
        delta_likelihood_ratio(generic, maturity=T, strike=K)
    with pytest.raises(ModelMismatchError):
        delta_central_differences(generic, maturity=T, strike=K)
    # still a TypeError for callers that do not know the library hierarchy
    with pytest.raises(TypeError):
        delta_pathwise(generic, maturity=T, strike=K)


def test_invalid_parameters():
    grid = TimeGrid.from_horizon(T, 1)

    with pytest.raises(ConfigurationError):
        BlackScholesModel(grid, 10, -1.0, R, SIGMA)
    with pytest.raises(ConfigurationError):
        BlackScholesModel(grid, 10, S0, R, 0.0)
    with pytest.raises(ConfigurationError):
        MCConfig(n_paths=0)
    with pytest.raises(ConfigurationError):
        delta_central_differences(
            BlackScholesModel(grid, 10, S0, R, SIGMA), maturity=T, strike=K, h=0.0
        )

r"""
Monte Carlo estimators of the Delta of a European call.

Three estimators are provided:

* central finite differences, re-simulating the model at ``S_0 \pm h`` with
  the same seed (common random numbers); valid for any model exposing
  ``with_initial_value``;
* pathwise differentiation,

  .. math::

      \Delta \approx e^{-rT}\,\mathbb{E}\Big[\mathbf 1_{\{S_T \ge K\}}\,\frac{S_T}{S_0}\Big];

* likelihood ratio,

  .. math::

      \Delta \approx e^{-rT}\,\mathbb{E}\Big[(S_T-K)^+\,
      \frac{\log(S_T/S_0) - (r - \sigma^2/2)T}{S_0\,\sigma^2\,T}\Big].

The pathwise and likelihood ratio formulas use ``dS_T/dS_0 = S_T/S_0`` and
the log-normal density of ``S_T``; they only hold for a
:class:`~compfin.models.BlackScholesModel` and raise
:class:`~compfin.exceptions.ModelMismatchError` otherwise.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import ConfigurationError, ModelMismatchError
from ..models.asset_model import BlackScholesModel, MonteCarloAssetModel
from ..typing import FloatArray
from ..vanilla import call_payoff


def _require_black_scholes(model: MonteCarloAssetModel) -> BlackScholesModel:
    if not isinstance(model, BlackScholesModel):
        raise ModelMismatchError(
            "This estimator requires a Black-Scholes model, got "
            f"{type(model).__name__}."
        )
    return model


def _discount_to_evaluation(
    model: MonteCarloAssetModel,
    values: FloatArray,
    *,
    maturity: float,
    evaluation_time: float,
) -> float:
    # N(t) * sum_k w_k(T) * values_k / N(T)
    expectation = float(np.sum(values * model.monte_carlo_weights(maturity)))
    return expectation * model.numeraire(evaluation_time) / model.numeraire(maturity)


def delta_pathwise_samples(
    model: MonteCarloAssetModel, *, maturity: float, strike: float
) -> FloatArray:
    """Undiscounted per-path pathwise Delta samples."""
    bs = _require_black_scholes(model)
    S0 = bs.initial_value
    ST = bs.asset_value(maturity)
    return np.where(ST >= strike, ST, 0.0) / S0


def delta_likelihood_ratio_samples(
    model: MonteCarloAssetModel, *, maturity: float, strike: float
) -> FloatArray:
    """Undiscounted per-path likelihood ratio Delta samples."""
    bs = _require_black_scholes(model)
    S0 = bs.initial_value
    r = bs.rate
    sigma = bs.volatility
    ST = bs.asset_value(maturity)

    weight = (np.log(ST / S0) - (r - 0.5 * sigma * sigma) * maturity) / (
        S0 * sigma * sigma * maturity
    )
    return call_payoff(ST, K=strike) * weight


def delta_pathwise(
    model: MonteCarloAssetModel,
    *,
    maturity: float,
    strike: float,
    evaluation_time: float = 0.0,
) -> float:
    samples = delta_pathwise_samples(model, maturity=maturity, strike=strike)
    return _discount_to_evaluation(
        model, samples, maturity=maturity, evaluation_time=evaluation_time
    )


def delta_likelihood_ratio(
    model: MonteCarloAssetModel,
    *,
    maturity: float,
    strike: float,
    evaluation_time: float = 0.0,
) -> float:
    samples = delta_likelihood_ratio_samples(model, maturity=maturity, strike=strike)
    return _discount_to_evaluation(
        model, samples, maturity=maturity, evaluation_time=evaluation_time
    )


def delta_central_differences(
    model: MonteCarloAssetModel,
    *,
    maturity: float,
    strike: float,
    h: float = 1e-3,
    evaluation_time: float = 0.0,
) -> float:
    """Central finite difference Delta with common random numbers.

    The model must expose ``with_initial_value(S0)`` rebuilding it with the
    same seed. Both bumped prices are discounted like the other estimators.
    """
    if h <= 0.0:
        raise ConfigurationError("h must be positive")
    bump = getattr(model, "with_initial_value", None)
    if bump is None:
        raise ModelMismatchError(
            f"{type(model).__name__} cannot be re-simulated at a bumped initial value."
        )
    S0 = model.initial_value

    def value(bumped: MonteCarloAssetModel) -> float:
        payoff = call_payoff(bumped.asset_value(maturity), K=strike)
        return _discount_to_evaluation(
            bumped, payoff, maturity=maturity, evaluation_time=evaluation_time
        )

    return (value(bump(S0 + h)) - value(bump(S0 - h))) / (2.0 * h)

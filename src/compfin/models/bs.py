r"""
Closed-form Black-Scholes references for the Monte Carlo estimators.

Everything is read off the terminal law of the asset. Under the risk-neutral
measure

.. math::

    \log S_T \sim \mathcal N\big(\log S_0 + (r - \sigma^2/2)\tau,\ \sigma^2\tau\big),

so a call is the exercise probability under the share measure minus the
discounted strike times the exercise probability under the money market
measure: ``C = S_0 N(d_1) - K e^{-r tau} N(d_2)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy.stats import norm

from ..exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class TerminalLaw:
    """Log-normal law of ``S_T`` seen from ``S_0`` over ``tau`` years."""

    spot: float
    r: float
    sigma: float
    tau: float

    def __post_init__(self) -> None:
        if self.spot <= 0.0:
            raise ConfigurationError("spot must be positive")
        if self.sigma <= 0.0:
            raise ConfigurationError("sigma must be positive")
        if self.tau <= 0.0:
            raise ConfigurationError("tau must be positive")

    @property
    def discount(self) -> float:
        return math.exp(-self.r * self.tau)

    @property
    def total_vol(self) -> float:
        return self.sigma * math.sqrt(self.tau)

    def d2(self, strike: float) -> float:
        if strike <= 0.0:
            raise ConfigurationError("strike must be positive")
        drift = (self.r - 0.5 * self.sigma * self.sigma) * self.tau
        return (math.log(self.spot / strike) + drift) / self.total_vol

    def d1(self, strike: float) -> float:
        return self.d2(strike) + self.total_vol

    def exercise_probability(self, strike: float) -> float:
        """``Q(S_T > K)`` under the money market measure."""
        return float(norm.cdf(self.d2(strike)))

    def share_exercise_probability(self, strike: float) -> float:
        """``Q^S(S_T > K)`` with the asset as numeraire; the call Delta."""
        return float(norm.cdf(self.d1(strike)))


def call_price(*, spot: float, strike: float, r: float, sigma: float, tau: float) -> float:
    law = TerminalLaw(spot, r, sigma, tau)
    return spot * law.share_exercise_probability(strike) - (
        strike * law.discount * law.exercise_probability(strike)
    )


def put_price(*, spot: float, strike: float, r: float, sigma: float, tau: float) -> float:
    # parity: C - P = S - K e^{-r tau}
    law = TerminalLaw(spot, r, sigma, tau)
    call = call_price(spot=spot, strike=strike, r=r, sigma=sigma, tau=tau)
    return call - spot + strike * law.discount


def call_delta(*, spot: float, strike: float, r: float, sigma: float, tau: float) -> float:
    return TerminalLaw(spot, r, sigma, tau).share_exercise_probability(strike)


def digital_call_price(
    *, spot: float, strike: float, r: float, sigma: float, tau: float
) -> float:
    """Cash-or-nothing call paying 1 if ``S_T > K``."""
    law = TerminalLaw(spot, r, sigma, tau)
    return law.discount * law.exercise_probability(strike)


def call_greeks(
    *, spot: float, strike: float, r: float, sigma: float, tau: float
) -> dict[str, float]:
    """
    Price and first-order sensitivities of the call.

    ``theta`` is the derivative in calendar time with expiry held fixed,
    per year.
    """
    law = TerminalLaw(spot, r, sigma, tau)
    density = float(norm.pdf(law.d1(strike)))
    cash_leg = strike * law.discount * law.exercise_probability(strike)

    return {
        "price": call_price(spot=spot, strike=strike, r=r, sigma=sigma, tau=tau),
        "delta": law.share_exercise_probability(strike),
        "gamma": density / (spot * law.total_vol),
        "vega": spot * density * math.sqrt(tau),
        "theta": -spot * density * sigma / (2.0 * math.sqrt(tau)) - r * cash_leg,
    }

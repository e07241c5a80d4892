from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Protocol

import numpy as np

from ..exceptions import ConfigurationError
from ..processes.binomial import BinomialModel
from ..typing import FloatArray, Payoff
from ..vanilla import call_payoff, digital_call_payoff


class SimulatedUnderlying(Protocol):
    """Anything that can hand out realizations at a given (grid) time."""

    def at_time(self, time: float) -> FloatArray: ...


def _discounted_mean(values: FloatArray, disc: float) -> tuple[float, float]:
    n = values.size
    mean = float(values.mean())
    std = float(values.std(ddof=1)) if n > 1 else 0.0
    return disc * mean, disc * std / math.sqrt(n)


def mc_price(
    underlying: SimulatedUnderlying,
    payoff: Payoff,
    *,
    maturity: float,
    rate: float = 0.0,
) -> tuple[float, float]:
    """
    Discounted Monte Carlo price of a European payoff on a simulated underlying.

    Parameters
    ----------
    underlying : SimulatedUnderlying
        Path ensemble, e.g. a :class:`~compfin.processes.ProcessSimulation`.
        ``maturity`` must be a point of its time grid.
    payoff : callable
        Vectorized payoff ``payoff(S_T)``.
    maturity : float
        Payoff time ``T``.
    rate : float, default 0.0
        Continuously-compounded discount rate.

    Returns
    -------
    (price, stderr) : tuple[float, float]
        ``exp(-r T) * mean(payoff(S_T))`` and its sample standard error.

    Raises
    ------
    OutOfRangeError
        If ``maturity`` is not on the underlying's time grid.
    """
    ST = underlying.at_time(maturity)
    values = np.asarray(payoff(ST), dtype=np.float64)
    return _discounted_mean(values, math.exp(-rate * maturity))


@dataclass(frozen=True, slots=True)
class CallOption:
    """European call ``max(S_T - K, 0)`` discounted at a flat rate."""

    strike: float
    maturity: float
    rate: float = 0.0

    def __post_init__(self) -> None:
        if self.maturity <= 0.0:
            raise ConfigurationError("maturity must be positive")

    def price_with_error(self, underlying: SimulatedUnderlying) -> tuple[float, float]:
        return mc_price(
            underlying,
            partial(call_payoff, K=self.strike),
            maturity=self.maturity,
            rate=self.rate,
        )

    def price(self, underlying: SimulatedUnderlying) -> float:
        # e^{-rT} (S_T - K)^+ averaged over the simulations
        price, _ = self.price_with_error(underlying)
        return price


@dataclass(frozen=True, slots=True)
class DigitalOption:
    """Digital option on a discrete-time process: pays 1 if ``S_T > K``.

    The underlying is observed at an integer time, which coincides with its
    time index (see :class:`~compfin.processes.BinomialModel`). No
    discounting is applied.
    """

    strike: float
    maturity: int

    def payoff(self, underlying: BinomialModel) -> FloatArray:
        return digital_call_payoff(underlying.at_time(self.maturity), K=self.strike)

    def price(self, underlying: BinomialModel) -> float:
        return float(self.payoff(underlying).mean())

    def price_distribution(
        self,
        make_underlying: Callable[[int], BinomialModel],
        n_prices: int,
        *,
        seed: int = 0,
    ) -> FloatArray:
        """Prices obtained from ``n_prices`` independently seeded underlyings."""
        if n_prices <= 0:
            raise ConfigurationError("n_prices must be positive")
        seeds = np.random.SeedSequence(seed).generate_state(n_prices)
        return np.array([self.price(make_underlying(int(s))) for s in seeds])

"""Monte Carlo asset models consumed by the option pricers and Greeks.

An asset model couples a simulated underlying with a deterministic bank
account numeraire ``N(t) = exp(r t)``. Values are expressed per path; the
Monte Carlo weights are uniform (``1 / n_paths``).
"""

from __future__ import annotations

import math

import numpy as np

from ..config import MCConfig
from ..exceptions import ConfigurationError
from ..numerics.time_grid import TimeGrid
from ..processes.schemes import LogEulerScheme
from ..processes.simulation import ProcessSimulation
from ..typing import FloatArray


class MonteCarloAssetModel:
    """Generic asset model around any :class:`ProcessSimulation`.

    Parameters
    ----------
    process : ProcessSimulation
        Simulated underlying.
    rate : float
        Continuously-compounded risk-free rate of the numeraire.
    """

    def __init__(self, process: ProcessSimulation, rate: float) -> None:
        if not math.isfinite(rate):
            raise ConfigurationError("rate must be finite")
        self._process = process
        self._rate = float(rate)

    @property
    def process(self) -> ProcessSimulation:
        return self._process

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def times(self) -> TimeGrid:
        return self._process.times

    @property
    def n_paths(self) -> int:
        return self._process.n_simulations

    @property
    def initial_value(self) -> float:
        return self._process.initial_value

    def asset_value(self, time: float) -> FloatArray:
        return self._process.at_time(time)

    def numeraire(self, time: float) -> float:
        return math.exp(self._rate * float(time))

    def monte_carlo_weights(self, time: float) -> FloatArray:
        n = self.n_paths
        return np.full(n, 1.0 / n)


class BlackScholesModel(MonteCarloAssetModel):
    """Log-normal (Black-Scholes) model simulated under the risk-neutral measure.

    ``dS = r S dt + sigma S dW``, discretized with the log-Euler scheme, which
    is exact in distribution on any grid.
    """

    def __init__(
        self,
        times: TimeGrid,
        n_paths: int,
        initial_value: float,
        rate: float,
        volatility: float,
        seed: int = 0,
    ) -> None:
        if initial_value <= 0.0:
            raise ConfigurationError("initial_value must be positive")
        if volatility <= 0.0:
            raise ConfigurationError("volatility must be positive")
        process = ProcessSimulation(
            LogEulerScheme(mu=rate, sigma=volatility),
            n_paths,
            initial_value,
            seed,
            times,
        )
        super().__init__(process, rate)
        self._volatility = float(volatility)

    @classmethod
    def from_config(
        cls,
        times: TimeGrid,
        cfg: MCConfig,
        *,
        initial_value: float,
        rate: float,
        volatility: float,
    ) -> BlackScholesModel:
        return cls(
            times,
            cfg.n_paths,
            initial_value,
            rate,
            volatility,
            seed=cfg.random.seed,
        )

    @property
    def volatility(self) -> float:
        return self._volatility

    @property
    def seed(self) -> int:
        return self._process.seed

    def with_initial_value(self, initial_value: float) -> BlackScholesModel:
        """Same model and seed with a different spot (common random numbers)."""
        return BlackScholesModel(
            self.times,
            self.n_paths,
            initial_value,
            self._rate,
            self._volatility,
            seed=self.seed,
        )

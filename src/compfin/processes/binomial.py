from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..config import RandomConfig, make_rng
from ..exceptions import ConfigurationError, IndexOutOfRangeError, OutOfRangeError
from ..typing import FloatArray


@dataclass(frozen=True, slots=True)
class BinomialModel:
    """Monte Carlo simulation of a discrete multiplicative binomial process.

    ``S_{k+1} = S_k * up`` with probability ``p_up``, else ``S_k * down``, for
    integer times ``k = 0, ..., n_times - 1``. Time and time index coincide.

    The ensemble of shape ``(n_times, n_simulations)`` is generated on first
    access and cached.
    """

    initial_value: float
    up: float
    down: float
    n_times: int
    n_simulations: int
    p_up: float = 0.5
    seed: int = 0
    _cache: dict[str, FloatArray] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.initial_value <= 0.0:
            raise ConfigurationError("initial_value must be positive")
        if not (0.0 < self.down < self.up):
            raise ConfigurationError("Need 0 < down < up")
        if self.n_times < 2:
            raise ConfigurationError("n_times must be >= 2")
        if self.n_simulations <= 0:
            raise ConfigurationError("n_simulations must be positive")
        if not (0.0 <= self.p_up <= 1.0):
            raise ConfigurationError("p_up must lie in [0, 1]")

    @property
    def risk_neutral_probability(self) -> float:
        """Probability of an up move making ``S`` a martingale (zero rate)."""
        return (1.0 - self.down) / (self.up - self.down)

    def _cached_paths(self) -> FloatArray:
        paths = self._cache.get("paths")
        if paths is None:
            rng = make_rng(RandomConfig(seed=int(self.seed)))
            ups = rng.random((self.n_times - 1, self.n_simulations)) < self.p_up
            factors = np.where(ups, self.up, self.down)
            paths = np.empty((self.n_times, self.n_simulations), dtype=np.float64)
            paths[0] = self.initial_value
            paths[1:] = self.initial_value * np.cumprod(factors, axis=0)
            paths.setflags(write=False)
            self._cache["paths"] = paths
        return paths

    def paths(self) -> FloatArray:
        return self._cached_paths().copy()

    def at_time(self, time_index: int) -> FloatArray:
        if not 0 <= time_index < self.n_times:
            raise OutOfRangeError(f"time {time_index} outside [0, {self.n_times - 1}]")
        return self._cached_paths()[time_index].copy()

    def path(self, simulation_index: int) -> FloatArray:
        if not 0 <= simulation_index < self.n_simulations:
            raise IndexOutOfRangeError(
                f"simulation index {simulation_index} outside [0, {self.n_simulations - 1}]"
            )
        return self._cached_paths()[:, simulation_index].copy()

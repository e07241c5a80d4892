"""
Confidence intervals for the sample mean of ``n`` i.i.d. draws.

Both intervals are centred at the analytic mean of the random variable and
have half-width ``c(level) * std / sqrt(n)``:

* CLT: ``c = z_{(1 + level) / 2}`` (asymptotically exact),
* Chebyshev: ``c = 1 / sqrt(1 - level)`` (valid for every ``n``, conservative).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np
from scipy.stats import norm

from ..exceptions import ConfigurationError
from ..sampling.random_variables import RandomVariable


def _check_level(level: float) -> float:
    level = float(level)
    if not (0.0 < level < 1.0):
        raise ConfigurationError(f"level must lie in (0, 1), got {level}")
    return level


class MeanConfidenceInterval(ABC):
    def __init__(self, random_variable: RandomVariable, sample_size: int) -> None:
        if int(sample_size) <= 0:
            raise ConfigurationError("sample_size must be positive")
        self.random_variable = random_variable
        self.sample_size = int(sample_size)

    @abstractmethod
    def _half_width_factor(self, level: float) -> float: ...

    def _half_width(self, level: float) -> float:
        level = _check_level(level)
        std = self.random_variable.analytic_std
        return self._half_width_factor(level) * std / math.sqrt(self.sample_size)

    def lower(self, level: float) -> float:
        return self.random_variable.analytic_mean - self._half_width(level)

    def upper(self, level: float) -> float:
        return self.random_variable.analytic_mean + self._half_width(level)

    def bounds(self, level: float) -> tuple[float, float]:
        return self.lower(level), self.upper(level)

    def coverage_frequency(
        self,
        n_mean_computations: int,
        level: float,
        rng: np.random.Generator,
    ) -> float:
        """Frequency with which a fresh sample mean falls strictly inside the interval."""
        if int(n_mean_computations) <= 0:
            raise ConfigurationError("n_mean_computations must be positive")
        lo, hi = self.bounds(level)
        m = int(n_mean_computations)
        draws = self.random_variable.generate(m * self.sample_size, rng)
        means = draws.reshape(m, self.sample_size).mean(axis=1)
        return float(np.mean((means > lo) & (means < hi)))


class CLTMeanConfidenceInterval(MeanConfidenceInterval):
    def _half_width_factor(self, level: float) -> float:
        return float(norm.ppf(0.5 * (1.0 + level)))


class ChebyshevMeanConfidenceInterval(MeanConfidenceInterval):
    def _half_width_factor(self, level: float) -> float:
        return 1.0 / math.sqrt(1.0 - level)

"""
Repeated Monte Carlo computations and their summary statistics.

A :class:`MonteCarloEvaluations` subclass implements :meth:`_compute` (the
``n_computations`` independent Monte Carlo results, each from ``n_draws``
draws); the base class caches them and derives average, standard deviation,
range and histogram. Subclasses of :class:`MonteCarloEvaluationsWithExactResult`
also know the exact value and expose absolute errors.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

import numpy as np

from ..config import RandomConfig, make_rng
from ..exceptions import ConfigurationError
from ..typing import FloatArray

logger = logging.getLogger(__name__)


class MonteCarloEvaluations(ABC):
    def __init__(self, n_computations: int, n_draws: int, seed: int = 0) -> None:
        if int(n_computations) <= 0:
            raise ConfigurationError("n_computations must be positive")
        if int(n_draws) <= 0:
            raise ConfigurationError("n_draws must be positive")
        self.n_computations = int(n_computations)
        self.n_draws = int(n_draws)
        self.seed = int(seed)
        self._computations: FloatArray | None = None

    @abstractmethod
    def _compute(self, rng: np.random.Generator) -> FloatArray:
        """Return ``n_computations`` independent Monte Carlo results."""

    def computations(self) -> FloatArray:
        if self._computations is None:
            rng = make_rng(RandomConfig(seed=self.seed))
            values = np.asarray(self._compute(rng), dtype=np.float64)
            values.setflags(write=False)
            self._computations = values
            logger.debug(
                "%s: %d computations of %d draws (seed=%d)",
                type(self).__name__,
                self.n_computations,
                self.n_draws,
                self.seed,
            )
        return self._computations.copy()

    def average(self) -> float:
        return float(np.mean(self.computations()))

    def standard_deviation(self) -> float:
        # spread of the results themselves (population convention)
        return float(np.std(self.computations()))

    def min_and_max(self) -> tuple[float, float]:
        values = self.computations()
        return float(values.min()), float(values.max())

    def histogram(self, left: float, right: float, n_bins: int) -> np.ndarray:
        """Counts of the results in ``n_bins`` equal bins of ``[left, right]``.

        The returned array has ``n_bins + 2`` entries: the count below
        ``left``, the bin counts, and the count above ``right``.
        """
        if int(n_bins) <= 0:
            raise ConfigurationError("n_bins must be positive")
        if not right > left:
            raise ConfigurationError("need left < right")
        values = self.computations()
        inside = values[(values >= left) & (values <= right)]
        counts, _ = np.histogram(inside, bins=int(n_bins), range=(left, right))
        below = int(np.count_nonzero(values < left))
        above = int(np.count_nonzero(values > right))
        return np.concatenate(([below], counts, [above])).astype(np.int64)


class MonteCarloEvaluationsWithExactResult(MonteCarloEvaluations):
    def __init__(
        self, n_computations: int, n_draws: int, exact_result: float, seed: int = 0
    ) -> None:
        super().__init__(n_computations, n_draws, seed)
        self.exact_result = float(exact_result)

    def absolute_errors(self) -> FloatArray:
        return np.abs(self.computations() - self.exact_result)

    def average_absolute_error(self) -> float:
        return float(np.mean(self.absolute_errors()))


class MonteCarloPi(MonteCarloEvaluationsWithExactResult):
    """pi as four times the fraction of uniform points of the unit square
    falling inside the quarter disc."""

    def __init__(self, n_computations: int, n_draws: int, seed: int = 0) -> None:
        super().__init__(n_computations, n_draws, math.pi, seed)

    def _compute(self, rng: np.random.Generator) -> FloatArray:
        out = np.empty(self.n_computations)
        for k in range(self.n_computations):
            xy = rng.random((self.n_draws, 2))
            inside = np.count_nonzero(np.sum(xy * xy, axis=1) < 1.0)
            out[k] = 4.0 * inside / self.n_draws
        return out


class MonteCarloIntegrationPowerFunction(MonteCarloEvaluationsWithExactResult):
    """Integral of ``x**exponent`` over ``[0, 1]``, exactly ``1 / (1 + exponent)``."""

    def __init__(
        self, exponent: float, n_computations: int, n_draws: int, seed: int = 0
    ) -> None:
        if not (math.isfinite(exponent) and exponent > -1.0):
            raise ConfigurationError("exponent must be > -1 for a finite integral")
        self.exponent = float(exponent)
        super().__init__(n_computations, n_draws, 1.0 / (1.0 + exponent), seed)

    def _compute(self, rng: np.random.Generator) -> FloatArray:
        out = np.empty(self.n_computations)
        for k in range(self.n_computations):
            # 1 - U lies in (0, 1], so negative exponents stay finite
            u = 1.0 - rng.random(self.n_draws)
            out[k] = float(np.mean(u**self.exponent))
        return out

r"""
pi recovered from the volume of the unit ball in ``d`` dimensions.

The fraction ``f`` of uniform points of ``[0, 1]^d`` with ``|x| < 1`` estimates
``V_d / 2^d`` where ``V_d = pi^{d/2} / Gamma(d/2 + 1)``, hence

.. math::

    \pi \approx \big(2^d\, \Gamma(d/2 + 1)\, f\big)^{2/d}.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from ..exceptions import ConfigurationError
from ..lowdiscrepancy.halton import HaltonSequence
from ..typing import FloatArray
from .evaluations import MonteCarloEvaluationsWithExactResult


def pi_from_ball_fraction(fraction: float, dimension: int) -> float:
    d = int(dimension)
    return float((2.0**d * math.gamma(0.5 * d + 1.0) * fraction) ** (2.0 / d))


def _inside_fraction(points: FloatArray) -> float:
    return float(np.mean(np.sum(points * points, axis=1) < 1.0))


def _check_dimension(dimension: int) -> int:
    d = int(dimension)
    if d < 1:
        raise ConfigurationError("dimension must be >= 1")
    return d


class MonteCarloPiFromHypersphere(MonteCarloEvaluationsWithExactResult):
    def __init__(
        self, n_computations: int, n_draws: int, dimension: int, seed: int = 0
    ) -> None:
        self.dimension = _check_dimension(dimension)
        super().__init__(n_computations, n_draws, math.pi, seed)

    def _compute(self, rng: np.random.Generator) -> FloatArray:
        out = np.empty(self.n_computations)
        for k in range(self.n_computations):
            pts = rng.random((self.n_draws, self.dimension))
            out[k] = pi_from_ball_fraction(_inside_fraction(pts), self.dimension)
        return out


class HaltonPiFromHypersphere:
    """Deterministic (quasi Monte Carlo) version using a Halton sequence.

    The dimension is the number of bases.
    """

    def __init__(self, n_points: int, base: Sequence[int]) -> None:
        if int(n_points) <= 0:
            raise ConfigurationError("n_points must be positive")
        self.n_points = int(n_points)
        self.sequence = HaltonSequence(base)
        self._estimate: float | None = None

    @property
    def dimension(self) -> int:
        return self.sequence.dimension

    def estimate(self) -> float:
        if self._estimate is None:
            pts = self.sequence.sample_points(self.n_points)
            self._estimate = pi_from_ball_fraction(_inside_fraction(pts), self.dimension)
        return self._estimate

    def error(self) -> float:
        return abs(self.estimate() - math.pi)

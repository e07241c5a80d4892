from __future__ import annotations

import logging

import numpy as np

from ..config import RandomConfig, RngType, make_rng
from ..exceptions import ConfigurationError, IndexOutOfRangeError, OutOfRangeError
from ..numerics.time_grid import TimeGrid
from ..typing import FloatArray

logger = logging.getLogger(__name__)


class BrownianMotion:
    """Discretely sampled, possibly multi-dimensional Brownian motion.

    All factors are independent. On a time grid ``t_0 < ... < t_n`` the
    increments ``dW_j ~ N(0, t_{j+1} - t_j)`` are drawn once from a seeded
    generator and the paths follow by cumulative summation from ``W_0 = 0``.

    The increments and paths are generated lazily on first access and then
    cached; every read returns a copy.

    Parameters
    ----------
    times : TimeGrid
        Time discretization (steps need not be equal).
    n_factors : int
        Number of independent Brownian factors.
    n_paths : int
        Number of simulated paths.
    seed : int, default 0
        Seed of the generator.
    rng_type : {"pcg64", "mt19937"}, default "mt19937"
        Bit generator; Mersenne Twister by default.

    Notes
    -----
    Array layouts are ``increments: (n_steps, n_factors, n_paths)`` and
    ``paths: (n_times, n_factors, n_paths)``.
    """

    def __init__(
        self,
        times: TimeGrid,
        n_factors: int,
        n_paths: int,
        seed: int = 0,
        rng_type: RngType = "mt19937",
    ) -> None:
        if n_factors <= 0:
            raise ConfigurationError("n_factors must be positive")
        if n_paths <= 0:
            raise ConfigurationError("n_paths must be positive")
        self._times = times
        self._n_factors = int(n_factors)
        self._n_paths = int(n_paths)
        self._random = RandomConfig(seed=int(seed), rng_type=rng_type)

        self._increments: FloatArray | None = None
        self._paths: FloatArray | None = None

    @classmethod
    def uniform(
        cls,
        *,
        dt: float,
        n_steps: int,
        n_factors: int = 1,
        n_paths: int,
        t0: float = 0.0,
        seed: int = 0,
    ) -> BrownianMotion:
        return cls(TimeGrid.uniform(t0, n_steps, dt), n_factors, n_paths, seed=seed)

    def _generate(self) -> None:
        rng = make_rng(self._random)
        n_steps = self._times.n_steps

        # one standard deviation per step: the mesh may be non-uniform
        vol = np.sqrt(self._times.steps)
        Z = rng.standard_normal((n_steps, self._n_factors, self._n_paths))
        dW = Z * vol[:, None, None]

        W = np.zeros((n_steps + 1, self._n_factors, self._n_paths), dtype=np.float64)
        np.cumsum(dW, axis=0, out=W[1:])

        dW.setflags(write=False)
        W.setflags(write=False)
        self._increments = dW
        self._paths = W
        logger.debug(
            "Generated Brownian motion: steps=%d factors=%d paths=%d seed=%d",
            n_steps,
            self._n_factors,
            self._n_paths,
            self._random.seed,
        )

    def _cached_increments(self) -> FloatArray:
        if self._increments is None:
            self._generate()
        assert self._increments is not None
        return self._increments

    def _cached_paths(self) -> FloatArray:
        if self._paths is None:
            self._generate()
        assert self._paths is not None
        return self._paths

    def _check_factor(self, factor: int) -> None:
        if not 0 <= factor < self._n_factors:
            raise IndexOutOfRangeError(
                f"factor {factor} outside [0, {self._n_factors - 1}]"
            )

    # ---------------------------
    # Properties
    # ---------------------------

    @property
    def times(self) -> TimeGrid:
        return self._times

    @property
    def n_factors(self) -> int:
        return self._n_factors

    @property
    def n_paths(self) -> int:
        return self._n_paths

    @property
    def seed(self) -> int:
        return self._random.seed

    # ---------------------------
    # Reads
    # ---------------------------

    def increments(self) -> FloatArray:
        return self._cached_increments().copy()

    def paths(self) -> FloatArray:
        return self._cached_paths().copy()

    def increment(self, time_index: int, factor: int = 0) -> FloatArray:
        """Increments ``W_{t_{i+1}} - W_{t_i}`` of one factor across all paths."""
        self._check_factor(factor)
        if not 0 <= time_index < self._times.n_steps:
            raise OutOfRangeError(
                f"increment index {time_index} outside [0, {self._times.n_steps - 1}]"
            )
        return self._cached_increments()[time_index, factor].copy()

    def at_time_index(self, time_index: int, factor: int = 0) -> FloatArray:
        self._check_factor(factor)
        if not 0 <= time_index < self._times.n_times:
            raise OutOfRangeError(
                f"time index {time_index} outside [0, {self._times.n_times - 1}]"
            )
        return self._cached_paths()[time_index, factor].copy()

    def at_time(self, time: float, factor: int = 0) -> FloatArray:
        return self.at_time_index(self._times.time_index(time), factor)

    def paths_for_factor(self, factor: int = 0) -> FloatArray:
        """All paths of one factor, shape ``(n_times, n_paths)``."""
        self._check_factor(factor)
        return self._cached_paths()[:, factor, :].copy()

    def path(self, factor: int, path_index: int) -> FloatArray:
        """One simulated trajectory of one factor, shape ``(n_times,)``."""
        self._check_factor(factor)
        if not 0 <= path_index < self._n_paths:
            raise IndexOutOfRangeError(
                f"path index {path_index} outside [0, {self._n_paths - 1}]"
            )
        return self._cached_paths()[:, factor, path_index].copy()

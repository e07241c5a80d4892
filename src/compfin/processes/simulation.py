from __future__ import annotations

import logging

import numpy as np

from ..exceptions import ConfigurationError, IndexOutOfRangeError, OutOfRangeError
from ..numerics.time_grid import TimeGrid
from ..typing import FloatArray
from .brownian import BrownianMotion
from .schemes import (
    DiscretizationScheme,
    EulerScheme,
    LogEulerScheme,
    MilsteinScheme,
    Step,
)

logger = logging.getLogger(__name__)


class ProcessSimulation:
    r"""
    Simulation of a one-dimensional Itô process on a fixed time grid.

    The process

    .. math::

        dX_t = \mu(t, X_t)\,dt + \sigma(t, X_t)\,dW_t

    is advanced step by step. With ``f`` the scheme's ``transform`` and
    ``F = f^{-1}`` its ``inverse_transform``, each step computes

    .. math::

        F(X_{t_i}) = F(X_{t_{i-1}})
                     + \mathrm{drift}(F(X_{t_{i-1}}), i)
                     + \mathrm{diffusion}(F(X_{t_{i-1}}), i),
        \qquad X_{t_i} = f(F(X_{t_i})).

    Parameters
    ----------
    scheme : DiscretizationScheme
        Supplies drift, diffusion and the transform pair.
    n_simulations : int
        Number of simulated paths. Must be positive.
    initial_value : float
        Deterministic value of the process at ``t_0``.
    seed : int
        Seed of the driving Brownian motion. Equal seeds give bit-identical
        ensembles.
    times : TimeGrid
        Time discretization (at least two points).

    Notes
    -----
    The path ensemble is generated on first access and cached; all reads
    return copies of the cached arrays.
    """

    def __init__(
        self,
        scheme: DiscretizationScheme,
        n_simulations: int,
        initial_value: float,
        seed: int,
        times: TimeGrid,
    ) -> None:
        if not isinstance(scheme, DiscretizationScheme):
            raise ConfigurationError(
                f"scheme must provide drift/diffusion/transform, got {type(scheme).__name__}"
            )
        if int(n_simulations) != n_simulations or n_simulations <= 0:
            raise ConfigurationError("n_simulations must be a positive integer")
        if not isinstance(times, TimeGrid):
            raise ConfigurationError("times must be a TimeGrid")
        if not np.isfinite(initial_value):
            raise ConfigurationError("initial_value must be finite")

        self._scheme = scheme
        self._n_simulations = int(n_simulations)
        self._initial_value = float(initial_value)
        self._seed = int(seed)
        self._times = times
        self._brownian_motion = BrownianMotion(
            times, n_factors=1, n_paths=self._n_simulations, seed=self._seed
        )

        self._paths: FloatArray | None = None

    def _generate(self) -> FloatArray:
        scheme = self._scheme
        times = self._times
        n_times = times.n_times

        paths = np.empty((n_times, self._n_simulations), dtype=np.float64)
        paths[0] = self._initial_value

        dW_all = self._brownian_motion.increments()[:, 0, :]

        for i in range(1, n_times):
            step = Step(
                time_index=i,
                time=float(times.t[i - 1]),
                dt=float(times.t[i] - times.t[i - 1]),
                dW=dW_all[i - 1],
            )
            # simulate F(X) then map back with f
            y = scheme.inverse_transform(paths[i - 1])
            y_next = y + scheme.drift(y, step) + scheme.diffusion(y, step)
            paths[i] = scheme.transform(y_next)

        paths.setflags(write=False)
        logger.debug(
            "Simulated %s: n_simulations=%d n_times=%d seed=%d",
            type(scheme).__name__,
            self._n_simulations,
            n_times,
            self._seed,
        )
        return paths

    def _cached_paths(self) -> FloatArray:
        if self._paths is None:
            self._paths = self._generate()
        return self._paths

    # ---------------------------
    # Properties
    # ---------------------------

    @property
    def scheme(self) -> DiscretizationScheme:
        return self._scheme

    @property
    def initial_value(self) -> float:
        return self._initial_value

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def times(self) -> TimeGrid:
        # TimeGrid is immutable, sharing it is safe
        return self._times

    @property
    def stochastic_driver(self) -> BrownianMotion:
        return self._brownian_motion

    @property
    def n_simulations(self) -> int:
        return self._n_simulations

    @property
    def n_times(self) -> int:
        return self._times.n_times

    @property
    def horizon(self) -> float:
        return self._times.horizon

    # ---------------------------
    # Reads
    # ---------------------------

    def paths(self) -> FloatArray:
        """Full ensemble, shape ``(n_times, n_simulations)``."""
        return self._cached_paths().copy()

    def at_time_index(self, time_index: int) -> FloatArray:
        if not 0 <= time_index < self.n_times:
            raise OutOfRangeError(
                f"time index {time_index} outside [0, {self.n_times - 1}]"
            )
        return self._cached_paths()[time_index].copy()

    def at_time(self, time: float) -> FloatArray:
        """Realizations at a grid time. Off-grid times raise :class:`OutOfRangeError`."""
        return self.at_time_index(self._times.time_index(time))

    def path(self, simulation_index: int) -> FloatArray:
        """Scalar trajectory of one simulation, shape ``(n_times,)``."""
        if not 0 <= simulation_index < self._n_simulations:
            raise IndexOutOfRangeError(
                f"simulation index {simulation_index} outside [0, {self._n_simulations - 1}]"
            )
        return self._cached_paths()[:, simulation_index].copy()

    def final_value(self) -> FloatArray:
        return self.at_time_index(self.n_times - 1)


# -------------------------
# GBM factories
# -------------------------
def euler_gbm(
    n_simulations: int,
    sigma: float,
    mu: float,
    initial_value: float,
    seed: int,
    times: TimeGrid,
) -> ProcessSimulation:
    return ProcessSimulation(EulerScheme(mu=mu, sigma=sigma), n_simulations, initial_value, seed, times)


def log_euler_gbm(
    n_simulations: int,
    sigma: float,
    mu: float,
    initial_value: float,
    seed: int,
    times: TimeGrid,
) -> ProcessSimulation:
    if initial_value <= 0.0:
        raise ConfigurationError("log-Euler requires a positive initial_value")
    return ProcessSimulation(LogEulerScheme(mu=mu, sigma=sigma), n_simulations, initial_value, seed, times)


def milstein_gbm(
    n_simulations: int,
    sigma: float,
    mu: float,
    initial_value: float,
    seed: int,
    times: TimeGrid,
) -> ProcessSimulation:
    return ProcessSimulation(MilsteinScheme(mu=mu, sigma=sigma), n_simulations, initial_value, seed, times)

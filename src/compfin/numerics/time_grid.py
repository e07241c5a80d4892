# src/compfin/numerics/time_grid.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ConfigurationError, OutOfRangeError

__all__ = [
    "TimeGrid",
]

# Relative tolerance used when matching a time value against the grid.
_TIME_MATCH_RTOL = 1e-12


@dataclass(frozen=True, slots=True, init=False, eq=False)
class TimeGrid:
    """Strictly increasing time discretization ``t_0 < t_1 < ... < t_n``.

    The grid is immutable: the underlying array is stored read-only and
    :attr:`t` hands out that read-only array.

    Parameters
    ----------
    times : sequence of float
        Grid points. Must contain at least two points and be strictly
        increasing.

    Raises
    ------
    ConfigurationError
        If the grid is too short, not one-dimensional, not finite or not
        strictly increasing.
    """

    t: NDArray[np.floating]

    def __init__(self, times: Sequence[float] | NDArray[np.floating]) -> None:
        arr = np.array(times, dtype=np.float64)
        if arr.ndim != 1:
            raise ConfigurationError("time grid must be one-dimensional")
        if arr.size < 2:
            raise ConfigurationError("time grid needs at least two points")
        if not np.all(np.isfinite(arr)):
            raise ConfigurationError("time grid must be finite")
        if not np.all(np.diff(arr) > 0.0):
            raise ConfigurationError("time grid must be strictly increasing")
        arr.setflags(write=False)
        object.__setattr__(self, "t", arr)

    @classmethod
    def uniform(cls, t0: float, n_steps: int, dt: float) -> TimeGrid:
        """Equally spaced grid ``t0, t0 + dt, ..., t0 + n_steps*dt``."""
        if n_steps <= 0:
            raise ConfigurationError("n_steps must be positive")
        if dt <= 0.0:
            raise ConfigurationError("dt must be positive")
        return cls(float(t0) + np.arange(n_steps + 1, dtype=np.float64) * float(dt))

    @classmethod
    def from_horizon(cls, horizon: float, n_steps: int, t0: float = 0.0) -> TimeGrid:
        if horizon <= t0:
            raise ConfigurationError("horizon must be > t0")
        if n_steps <= 0:
            raise ConfigurationError("n_steps must be positive")
        return cls(np.linspace(float(t0), float(horizon), int(n_steps) + 1))

    def __len__(self) -> int:
        return int(self.t.size)

    @property
    def n_times(self) -> int:
        return int(self.t.size)

    @property
    def n_steps(self) -> int:
        return int(self.t.size) - 1

    @property
    def horizon(self) -> float:
        return float(self.t[-1])

    @property
    def steps(self) -> NDArray[np.floating]:
        """Array of the ``n_steps`` step lengths ``t_{i+1} - t_i``."""
        return np.diff(self.t)

    def time(self, index: int) -> float:
        if not 0 <= index < self.n_times:
            raise OutOfRangeError(
                f"time index {index} outside [0, {self.n_times - 1}]"
            )
        return float(self.t[index])

    def time_step(self, index: int) -> float:
        """Length of the step starting at ``t_index``."""
        if not 0 <= index < self.n_steps:
            raise OutOfRangeError(
                f"time step index {index} outside [0, {self.n_steps - 1}]"
            )
        return float(self.t[index + 1] - self.t[index])

    def time_index(self, time: float) -> int:
        """Index of ``time`` in the grid.

        Only grid points are accepted (up to floating point round-off); a
        time between two grid points raises :class:`OutOfRangeError`.
        """
        time = float(time)
        i = int(np.searchsorted(self.t, time))
        tol = _TIME_MATCH_RTOL * max(1.0, abs(time))
        for j in (i - 1, i):
            if 0 <= j < self.n_times and abs(self.t[j] - time) <= tol:
                return j
        raise OutOfRangeError(f"time {time!r} is not a point of the time grid")

"""Discretization schemes for geometric Brownian motion.

A scheme is a small strategy object handed to
:class:`~compfin.processes.simulation.ProcessSimulation`. It supplies

- ``drift(last_value, step)``: the deterministic increment over one step,
- ``diffusion(last_value, step)``: the stochastic increment over one step,
- ``transform`` / ``inverse_transform``: the map from the simulated
  variable back to the process (identity unless the scheme simulates a
  function of the process, e.g. ``log S`` for log-Euler).

For GBM ``dS = mu S dt + sigma S dW``:

=========  ==============================  ==========================================
scheme     drift                           diffusion
=========  ==============================  ==========================================
Euler      ``mu S dt``                     ``sigma S dW``
log-Euler  ``(mu - sigma^2/2) dt``         ``sigma dW``  (on ``X = log S``)
Milstein   ``mu S dt``                     ``sigma S dW + sigma^2/2 S (dW^2 - dt)``
=========  ==============================  ==========================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from ..exceptions import ConfigurationError
from ..typing import FloatArray


@dataclass(frozen=True, slots=True)
class Step:
    """One step of the time grid, ending at ``time_index``.

    Attributes
    ----------
    time_index : int
        Index ``i`` of the grid point the step ends at (``i >= 1``).
    time : float
        Start of the step, ``t_{i-1}``.
    dt : float
        Step length ``t_i - t_{i-1}``.
    dW : ndarray
        Brownian increments ``W_{t_i} - W_{t_{i-1}}`` for all simulations.
    """

    time_index: int
    time: float
    dt: float
    dW: FloatArray


@runtime_checkable
class DiscretizationScheme(Protocol):
    def transform(self, x: FloatArray) -> FloatArray: ...

    def inverse_transform(self, x: FloatArray) -> FloatArray: ...

    def drift(self, last_value: FloatArray, step: Step) -> FloatArray: ...

    def diffusion(self, last_value: FloatArray, step: Step) -> FloatArray: ...


def _validate_gbm(mu: float, sigma: float) -> None:
    if not np.isfinite(mu):
        raise ConfigurationError("mu must be finite")
    if not np.isfinite(sigma) or sigma < 0.0:
        raise ConfigurationError("sigma must be finite and non-negative")


class _IdentityTransform:
    __slots__ = ()

    def transform(self, x: FloatArray) -> FloatArray:
        return x

    def inverse_transform(self, x: FloatArray) -> FloatArray:
        return x


@dataclass(frozen=True, slots=True)
class EulerScheme(_IdentityTransform):
    mu: float
    sigma: float

    def __post_init__(self) -> None:
        _validate_gbm(self.mu, self.sigma)

    def drift(self, last_value: FloatArray, step: Step) -> FloatArray:
        return self.mu * last_value * step.dt

    def diffusion(self, last_value: FloatArray, step: Step) -> FloatArray:
        return self.sigma * last_value * step.dW


@dataclass(frozen=True, slots=True)
class LogEulerScheme:
    """Euler scheme applied to ``log S``; exact in distribution for GBM."""

    mu: float
    sigma: float

    def __post_init__(self) -> None:
        _validate_gbm(self.mu, self.sigma)

    def transform(self, x: FloatArray) -> FloatArray:
        return np.exp(x)

    def inverse_transform(self, x: FloatArray) -> FloatArray:
        return np.log(x)

    def drift(self, last_value: FloatArray, step: Step) -> FloatArray:
        # Ito correction of d(log S)
        incr = (self.mu - 0.5 * self.sigma * self.sigma) * step.dt
        return np.full_like(last_value, incr, dtype=np.float64)

    def diffusion(self, last_value: FloatArray, step: Step) -> FloatArray:
        return self.sigma * step.dW


@dataclass(frozen=True, slots=True)
class MilsteinScheme(_IdentityTransform):
    mu: float
    sigma: float

    def __post_init__(self) -> None:
        _validate_gbm(self.mu, self.sigma)

    def drift(self, last_value: FloatArray, step: Step) -> FloatArray:
        return self.mu * last_value * step.dt

    def diffusion(self, last_value: FloatArray, step: Step) -> FloatArray:
        dW = step.dW
        linear = self.sigma * last_value * dW
        correction = 0.5 * self.sigma * self.sigma * last_value * (dW * dW - step.dt)
        return linear + correction

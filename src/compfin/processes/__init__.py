"""Stochastic process simulation: Brownian motion, GBM schemes, binomial model."""

from .binomial import BinomialModel
from .brownian import BrownianMotion
from .schemes import (
    DiscretizationScheme,
    EulerScheme,
    LogEulerScheme,
    MilsteinScheme,
    Step,
)
from .simulation import ProcessSimulation, euler_gbm, log_euler_gbm, milstein_gbm

__all__ = [
    "BrownianMotion",
    "BinomialModel",
    "Step",
    "DiscretizationScheme",
    "EulerScheme",
    "LogEulerScheme",
    "MilsteinScheme",
    "ProcessSimulation",
    "euler_gbm",
    "log_euler_gbm",
    "milstein_gbm",
]

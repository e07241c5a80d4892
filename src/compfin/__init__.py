"""
compfin

Monte Carlo methods for computational finance: Brownian motion and GBM
scheme simulation, option pricing and Delta estimators, random variable
sampling, low-discrepancy sequences and confidence intervals.

The main entry points are re-exported at the top level:

    from compfin import TimeGrid, log_euler_gbm, CallOption
"""

from .config import MCConfig, RandomConfig, make_rng
from .exceptions import (
    CompfinError,
    ConfigurationError,
    IndexOutOfRangeError,
    ModelMismatchError,
    OutOfRangeError,
)
from .models import BlackScholesModel, MonteCarloAssetModel
from .numerics import TimeGrid
from .pricers import (
    CallOption,
    DigitalOption,
    delta_central_differences,
    delta_likelihood_ratio,
    delta_pathwise,
    mc_price,
)
from .processes import (
    BinomialModel,
    BrownianMotion,
    ProcessSimulation,
    euler_gbm,
    log_euler_gbm,
    milstein_gbm,
)
from .types import OptionType

__all__ = [
    # Config / errors
    "RandomConfig",
    "MCConfig",
    "make_rng",
    "CompfinError",
    "ConfigurationError",
    "OutOfRangeError",
    "IndexOutOfRangeError",
    "ModelMismatchError",
    # Simulation
    "TimeGrid",
    "BrownianMotion",
    "ProcessSimulation",
    "euler_gbm",
    "log_euler_gbm",
    "milstein_gbm",
    "BinomialModel",
    # Pricing
    "OptionType",
    "mc_price",
    "CallOption",
    "DigitalOption",
    "MonteCarloAssetModel",
    "BlackScholesModel",
    "delta_pathwise",
    "delta_likelihood_ratio",
    "delta_central_differences",
]

from .mc import CallOption, DigitalOption, mc_price
from .sensitivities import (
    delta_central_differences,
    delta_likelihood_ratio,
    delta_pathwise,
)

__all__ = [
    "mc_price",
    "CallOption",
    "DigitalOption",
    "delta_pathwise",
    "delta_likelihood_ratio",
    "delta_central_differences",
]

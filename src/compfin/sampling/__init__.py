from .normal_pairs import compare_pair_methods
from .random_variables import (
    ExponentialRandomVariable,
    NormalPairMethod,
    NormalRandomVariable,
    RandomVariable,
    UniformRandomVariable,
)

__all__ = [
    "RandomVariable",
    "ExponentialRandomVariable",
    "UniformRandomVariable",
    "NormalRandomVariable",
    "NormalPairMethod",
    "compare_pair_methods",
]

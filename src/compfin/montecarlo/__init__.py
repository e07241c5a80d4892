from .evaluations import (
    MonteCarloEvaluations,
    MonteCarloEvaluationsWithExactResult,
    MonteCarloIntegrationPowerFunction,
    MonteCarloPi,
)
from .hypersphere import HaltonPiFromHypersphere, MonteCarloPiFromHypersphere

__all__ = [
    "MonteCarloEvaluations",
    "MonteCarloEvaluationsWithExactResult",
    "MonteCarloPi",
    "MonteCarloIntegrationPowerFunction",
    "MonteCarloPiFromHypersphere",
    "HaltonPiFromHypersphere",
]

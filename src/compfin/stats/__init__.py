from .confidence import (
    ChebyshevMeanConfidenceInterval,
    CLTMeanConfidenceInterval,
    MeanConfidenceInterval,
)

__all__ = [
    "MeanConfidenceInterval",
    "CLTMeanConfidenceInterval",
    "ChebyshevMeanConfidenceInterval",
]

from .discrepancy import discrepancy, star_discrepancy
from .halton import HaltonSequence, van_der_corput

__all__ = [
    "van_der_corput",
    "HaltonSequence",
    "star_discrepancy",
    "discrepancy",
]

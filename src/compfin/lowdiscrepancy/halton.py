"""Van der Corput and Halton low-discrepancy sequences."""

from __future__ import annotations

import math
import warnings
from collections.abc import Sequence
from itertools import combinations

import numpy as np

from ..exceptions import ConfigurationError
from ..typing import FloatArray


def _check_base(base: int) -> int:
    b = int(base)
    if b < 2 or b != base:
        raise ConfigurationError(f"base must be an integer >= 2, got {base!r}")
    return b


def van_der_corput(index: int, base: int) -> float:
    """Radical inverse of ``index`` in ``base``.

    The digits of ``index`` in base ``b`` are mirrored around the radix
    point: ``index = sum_k a_k b^k`` maps to ``sum_k a_k b^{-(k+1)}``.
    Index 0 maps to 0.
    """
    b = _check_base(base)
    n = int(index)
    if n < 0:
        raise ConfigurationError("index must be non-negative")

    x = 0.0
    denom = 1
    while n > 0:
        denom *= b
        n, digit = divmod(n, b)
        x += digit / denom
    return x


def _radical_inverse(indices: np.ndarray, base: int) -> FloatArray:
    n = indices.astype(np.int64)
    x = np.zeros(n.shape, dtype=np.float64)
    scale = 1.0 / base
    while np.any(n > 0):
        n, digit = np.divmod(n, base)
        x += digit * scale
        scale /= base
    return x


class HaltonSequence:
    """Halton sequence: one Van der Corput coordinate per base.

    Bases should be pairwise coprime, otherwise coordinates are correlated
    (e.g. bases 2 and 4 put points on a few lines); such bases are accepted
    with a ``UserWarning``.
    """

    def __init__(self, base: Sequence[int] | int) -> None:
        bases = (base,) if isinstance(base, (int, np.integer)) else tuple(base)
        if not bases:
            raise ConfigurationError("at least one base is required")
        self._bases = tuple(_check_base(b) for b in bases)

        for b1, b2 in combinations(self._bases, 2):
            if math.gcd(b1, b2) != 1:
                warnings.warn(
                    f"Halton bases {b1} and {b2} are not coprime; "
                    "coordinates will be correlated.",
                    UserWarning,
                    stacklevel=2,
                )
                break

    @property
    def bases(self) -> tuple[int, ...]:
        return self._bases

    @property
    def dimension(self) -> int:
        return len(self._bases)

    def sample_point(self, index: int) -> FloatArray:
        """Point number ``index`` of the sequence, shape ``(dimension,)``."""
        return np.array([van_der_corput(index, b) for b in self._bases])

    def sample_points(self, n: int, start: int = 1) -> FloatArray:
        """Points ``start, ..., start + n - 1``, shape ``(n, dimension)``."""
        if int(n) <= 0:
            raise ConfigurationError("n must be positive")
        if int(start) < 0:
            raise ConfigurationError("start must be non-negative")
        idx = np.arange(int(start), int(start) + int(n), dtype=np.int64)
        return np.column_stack([_radical_inverse(idx, b) for b in self._bases])

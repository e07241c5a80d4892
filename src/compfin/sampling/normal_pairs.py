from __future__ import annotations

import logging
from collections.abc import Iterable
from time import perf_counter

import numpy as np
import pandas as pd

from ..config import RandomConfig, make_rng
from ..exceptions import ConfigurationError
from .random_variables import NormalPairMethod, NormalRandomVariable

logger = logging.getLogger(__name__)

# X1, X2 independent and symmetric around mu
EXACT_BOTH_BELOW_MEAN = 0.25


def both_below_mean_frequency(pairs: np.ndarray, mu: float) -> float:
    """Fraction of pairs with both coordinates strictly below ``mu``."""
    return float(np.mean((pairs[:, 0] < mu) & (pairs[:, 1] < mu)))


def compare_pair_methods(
    rv: NormalRandomVariable,
    n_draws: int,
    n_computations: int,
    seed: int = 0,
    *,
    methods: Iterable[NormalPairMethod] | None = None,
) -> pd.DataFrame:
    """Compare the normal pair generators on ``P(X1 < mu, X2 < mu) = 1/4``.

    For every method, ``n_computations`` independent frequencies are computed
    from ``n_draws`` pairs each. Every method starts from a generator seeded
    with ``seed``.

    Returns a DataFrame with columns:
        method, avg_pct_error, avg_elapsed_ms, n_draws, n_computations
    """
    if n_draws <= 0 or n_computations <= 0:
        raise ConfigurationError("n_draws and n_computations must be positive")
    methods = list(NormalPairMethod) if methods is None else list(methods)

    rows: list[dict[str, object]] = []
    for method in methods:
        rng = make_rng(RandomConfig(seed=int(seed)))
        sum_error = 0.0
        sum_elapsed_ms = 0.0
        for _ in range(int(n_computations)):
            t0 = perf_counter()
            pairs = rv.generate_pairs(n_draws, rng, method)
            freq = both_below_mean_frequency(pairs, rv.mu)
            sum_elapsed_ms += (perf_counter() - t0) * 1e3
            sum_error += abs(freq - EXACT_BOTH_BELOW_MEAN) / EXACT_BOTH_BELOW_MEAN * 100.0

        row = {
            "method": NormalPairMethod(method).value,
            "avg_pct_error": sum_error / n_computations,
            "avg_elapsed_ms": sum_elapsed_ms / n_computations,
            "n_draws": int(n_draws),
            "n_computations": int(n_computations),
        }
        logger.info(
            "%s: avg error %.4f%%, avg time %.3f ms",
            row["method"],
            row["avg_pct_error"],
            row["avg_elapsed_ms"],
        )
        rows.append(row)

    return pd.DataFrame(rows)

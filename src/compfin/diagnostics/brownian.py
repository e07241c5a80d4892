from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from ..exceptions import ConfigurationError
from ..processes.brownian import BrownianMotion

logger = logging.getLogger(__name__)


def brownian_moments_table(
    bm: BrownianMotion, *, every: int = 10, factors: tuple[int, int] = (0, 1)
) -> pd.DataFrame:
    """Sample moments of a two-factor Brownian motion on every ``every``-th time.

    ``mean`` and ``var`` refer to the first factor (exact values 0 and ``t``);
    ``cross_moment`` is ``E[W^a_t W^b_t]`` for the two factors (exact value 0).

    Returns a DataFrame with columns:
        time_index, time, mean, var, var_exact, cross_moment
    """
    if every <= 0:
        raise ConfigurationError("every must be positive")
    a, b = factors

    rows: list[dict[str, object]] = []
    for i in range(0, bm.times.n_times, int(every)):
        wa = bm.at_time_index(i, a)
        wb = bm.at_time_index(i, b)
        t = bm.times.time(i)
        rows.append(
            {
                "time_index": i,
                "time": t,
                "mean": float(wa.mean()),
                "var": float(wa.var()),
                "var_exact": t - bm.times.time(0),
                "cross_moment": float(np.mean(wa * wb)),
            }
        )

    df = pd.DataFrame(rows)
    logger.info(
        "Brownian moments: max |cross moment| %.5f over %d times",
        float(df["cross_moment"].abs().max()),
        len(df),
    )
    return df


def serial_correlation(bm: BrownianMotion, s: float, t: float, factor: int = 0) -> float:
    """Sample ``E[W_s W_t]``; for a grid starting at 0 the exact value is ``min(s, t)``."""
    value = float(np.mean(bm.at_time(s, factor) * bm.at_time(t, factor)))
    logger.info("Serial correlation at times %g and %g: %.5f", s, t, value)
    return value

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

import numpy as np
import pandas as pd

from ..exceptions import ConfigurationError
from ..models.bs import call_price
from ..numerics.time_grid import TimeGrid
from ..pricers.mc import CallOption
from ..processes.simulation import (
    ProcessSimulation,
    euler_gbm,
    log_euler_gbm,
    milstein_gbm,
)

logger = logging.getLogger(__name__)

type SchemeFactory = Callable[..., ProcessSimulation]

DEFAULT_FACTORIES: Mapping[str, SchemeFactory] = {
    "euler": euler_gbm,
    "log_euler": log_euler_gbm,
    "milstein": milstein_gbm,
}


def scheme_call_error_table(
    *,
    spot: float = 100.0,
    strike: float = 100.0,
    rate: float = 0.4,
    sigma: float = 0.25,
    horizon: float = 1.0,
    n_steps: int = 100,
    n_paths: int = 10_000,
    n_tests: int = 100,
    seed: int = 0,
    factories: Mapping[str, SchemeFactory] | None = None,
) -> pd.DataFrame:
    """Average relative call pricing error of each GBM scheme vs Black-Scholes.

    Each test draws one seed shared by all schemes, simulates under the
    risk-neutral drift ``rate`` and prices an at-maturity call.

    Returns a DataFrame with columns:
        scheme, bs, avg_rel_error, max_rel_error, n_paths, n_steps, n_tests
    """
    if n_tests <= 0:
        raise ConfigurationError("n_tests must be positive")
    factories = dict(DEFAULT_FACTORIES if factories is None else factories)

    times = TimeGrid.from_horizon(horizon, n_steps)
    bs = call_price(spot=spot, strike=strike, r=rate, sigma=sigma, tau=horizon)
    option = CallOption(strike=strike, maturity=horizon, rate=rate)
    seeds = np.random.SeedSequence(seed).generate_state(n_tests)

    errors: dict[str, list[float]] = {name: [] for name in factories}
    for s in seeds:
        for name, factory in factories.items():
            sim = factory(n_paths, sigma, rate, spot, int(s), times)
            errors[name].append(abs(option.price(sim) - bs) / bs)

    rows: list[dict[str, object]] = []
    for name, errs in errors.items():
        arr = np.asarray(errs)
        rows.append(
            {
                "scheme": name,
                "bs": bs,
                "avg_rel_error": float(arr.mean()),
                "max_rel_error": float(arr.max()),
                "n_paths": int(n_paths),
                "n_steps": int(n_steps),
                "n_tests": int(n_tests),
            }
        )
        logger.info("%s: average relative error %.4f%%", name, 100.0 * arr.mean())

    return pd.DataFrame(rows)

"""Discretization checks for the GBM schemes and the Brownian driver.

Run from the repository root:

    PYTHONPATH=src python scripts/scheme_checks.py --tests 100
    PYTHONPATH=src python scripts/scheme_checks.py --brownian-only
"""

from __future__ import annotations

import argparse
import logging

from compfin.diagnostics import (
    brownian_moments_table,
    scheme_call_error_table,
    serial_correlation,
)
from compfin.numerics import TimeGrid
from compfin.processes import BrownianMotion


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--paths", type=int, default=10_000)
    ap.add_argument("--steps", type=int, default=100)
    ap.add_argument("--tests", type=int, default=100)
    ap.add_argument("--rate", type=float, default=0.4)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--brownian-only", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if not args.brownian_only:
        table = scheme_call_error_table(
            rate=args.rate,
            n_steps=args.steps,
            n_paths=args.paths,
            n_tests=args.tests,
            seed=args.seed,
        )
        print("\nAverage relative call error vs Black-Scholes")
        print(table.to_string(index=False, float_format=lambda v: f"{v:.6f}"))

    bm = BrownianMotion(TimeGrid.from_horizon(1.0, args.steps), 2, 100_000, seed=args.seed)
    print("\nTwo-factor Brownian motion moments")
    print(brownian_moments_table(bm, every=max(1, args.steps // 10)).to_string(index=False))
    s, t = bm.times.time(args.steps // 10), bm.times.time(args.steps // 5)
    print(f"\nE[W_s W_t] at s={s:g}, t={t:g}: {serial_correlation(bm, s, t):.5f} (exact {min(s, t):g})")


if __name__ == "__main__":
    main()

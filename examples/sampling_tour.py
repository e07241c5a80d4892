from __future__ import annotations

import logging


def main() -> None:
    import numpy as np

    from compfin.lowdiscrepancy import HaltonSequence, discrepancy, star_discrepancy
    from compfin.montecarlo import (
        HaltonPiFromHypersphere,
        MonteCarloIntegrationPowerFunction,
        MonteCarloPi,
        MonteCarloPiFromHypersphere,
    )
    from compfin.sampling import ExponentialRandomVariable, NormalRandomVariable, compare_pair_methods
    from compfin.stats import ChebyshevMeanConfidenceInterval, CLTMeanConfidenceInterval

    pi = MonteCarloPi(n_computations=1_000, n_draws=10_000, seed=0)
    lo, hi = pi.min_and_max()
    print(f"pi: average {pi.average():.5f}, std {pi.standard_deviation():.5f}, range [{lo:.4f}, {hi:.4f}]")
    print("pi histogram:", pi.histogram(3.10, 3.18, 8))

    power = MonteCarloIntegrationPowerFunction(0.5, n_computations=100, n_draws=10_000, seed=0)
    print(f"int x^0.5: {power.average():.5f} (exact {power.exact_result:.5f})")

    mc_ball = MonteCarloPiFromHypersphere(100, 100_000, dimension=3, seed=0)
    halton_ball = HaltonPiFromHypersphere(100_000, base=[2, 3, 5])
    print(f"pi from the 3-ball: MC avg error {mc_ball.average_absolute_error():.6f}, Halton error {halton_ball.error():.6f}")

    rng = np.random.default_rng(0)
    x_random = rng.random(1_000)
    x_vdc = HaltonSequence(2).sample_points(1_000).ravel()
    print(f"star discrepancy: random {star_discrepancy(x_random):.5f}, Van der Corput {star_discrepancy(x_vdc):.5f}")
    print(f"discrepancy: random {discrepancy(x_random):.5f}, Van der Corput {discrepancy(x_vdc):.5f}")

    exponential = ExponentialRandomVariable(lam=1.0)
    for ci in (
        CLTMeanConfidenceInterval(exponential, 1_000),
        ChebyshevMeanConfidenceInterval(exponential, 1_000),
    ):
        freq = ci.coverage_frequency(1_000, 0.95, rng)
        print(f"{type(ci).__name__}: bounds {ci.bounds(0.95)}, coverage {freq:.3f}")

    print(compare_pair_methods(NormalRandomVariable(), n_draws=100_000, n_computations=10, seed=0))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()

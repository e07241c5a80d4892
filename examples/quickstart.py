from __future__ import annotations

import logging


def main() -> None:
    from compfin import (
        BlackScholesModel,
        CallOption,
        TimeGrid,
        delta_central_differences,
        delta_likelihood_ratio,
        delta_pathwise,
        euler_gbm,
        log_euler_gbm,
        milstein_gbm,
    )
    from compfin.models.bs import call_delta, call_price

    S0, K, r, sigma, T = 100.0, 100.0, 0.0, 0.25, 1.0
    times = TimeGrid.from_horizon(T, 100)
    option = CallOption(strike=K, maturity=T, rate=r)

    print("BS:", call_price(spot=S0, strike=K, r=r, sigma=sigma, tau=T))
    for name, factory in [
        ("Euler", euler_gbm),
        ("log-Euler", log_euler_gbm),
        ("Milstein", milstein_gbm),
    ]:
        sim = factory(100_000, sigma, r, S0, 0, times)
        price, se = option.price_with_error(sim)
        print(f"{name}: {price:.4f} (SE={se:.4f})")

    model = BlackScholesModel(TimeGrid.from_horizon(T, 1), 200_000, S0, r, sigma, seed=0)
    print("Delta (analytic):", call_delta(spot=S0, strike=K, r=r, sigma=sigma, tau=T))
    print("Delta (pathwise):", delta_pathwise(model, maturity=T, strike=K))
    print("Delta (likelihood ratio):", delta_likelihood_ratio(model, maturity=T, strike=K))
    print(
        "Delta (central differences):",
        delta_central_differences(model, maturity=T, strike=K, h=0.5),
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()

"""Vectorized terminal payoffs ``payoff(S_T)`` of the European contracts."""

from __future__ import annotations

from functools import partial

import numpy as np

from .exceptions import ConfigurationError
from .types import OptionType
from .typing import FloatArray, Payoff


def call_payoff(ST: FloatArray, *, K: float) -> FloatArray:
    return np.maximum(ST - K, 0.0)


def put_payoff(ST: FloatArray, *, K: float) -> FloatArray:
    return np.maximum(K - ST, 0.0)


def digital_call_payoff(ST: FloatArray, *, K: float) -> FloatArray:
    # strict inequality: S_T == K pays nothing
    return np.where(ST > K, 1.0, 0.0)


_PAYOFFS = {
    OptionType.CALL: call_payoff,
    OptionType.PUT: put_payoff,
    OptionType.DIGITAL_CALL: digital_call_payoff,
}


def make_vanilla_payoff(kind: OptionType | str, *, K: float) -> Payoff:
    """Payoff of ``kind`` with strike ``K`` bound, ready for :func:`~compfin.pricers.mc_price`."""
    try:
        fn = _PAYOFFS[OptionType(kind)]
    except ValueError:
        raise ConfigurationError(f"Unsupported option kind: {kind!r}") from None
    return partial(fn, K=K)

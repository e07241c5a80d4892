from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from compfin.exceptions import ConfigurationError

RngType = Literal["pcg64", "mt19937"]


@dataclass(frozen=True, slots=True)
class RandomConfig:
    seed: int = 0
    rng_type: RngType = "pcg64"

    def __post_init__(self) -> None:
        if self.rng_type not in ("pcg64", "mt19937"):
            raise ConfigurationError(f"Unsupported rng_type: {self.rng_type!r}")


@dataclass(frozen=True, slots=True)
class MCConfig:
    n_paths: int
    random: RandomConfig = field(default_factory=RandomConfig)

    def __post_init__(self) -> None:
        if self.n_paths <= 0:
            raise ConfigurationError("n_paths must be > 0")


def make_rng(cfg: RandomConfig | None = None) -> np.random.Generator:
    """Build a NumPy generator from a :class:`RandomConfig`.

    ``"mt19937"`` gives a Mersenne Twister stream; ``"pcg64"`` is NumPy's
    default bit generator.
    """
    cfg = cfg or RandomConfig()
    if cfg.rng_type == "mt19937":
        return np.random.Generator(np.random.MT19937(int(cfg.seed)))
    return np.random.default_rng(int(cfg.seed))

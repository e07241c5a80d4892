"""
One-dimensional random variables sampled by inversion of the distribution function.

Subclasses provide a vectorized :meth:`RandomVariable.quantile`; everything
else (sampling, sample moments) is derived from it. Randomness is always
drawn from an explicit :class:`numpy.random.Generator`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np
from scipy.stats import norm

from ..exceptions import ConfigurationError
from ..typing import ArrayLike, FloatArray


class NormalPairMethod(str, Enum):
    """Algorithm used to draw a pair of independent normals."""

    INVERSION = "inversion"
    ACCEPTANCE_REJECTION = "acceptance_rejection"
    BOX_MULLER = "box_muller"
    POLAR_BOX_MULLER = "polar_box_muller"


def _check_size(n: int) -> int:
    n = int(n)
    if n <= 0:
        raise ConfigurationError("sample size must be positive")
    return n


class RandomVariable(ABC):
    """Base class of a real random variable with a closed-form quantile."""

    @abstractmethod
    def quantile(self, u: ArrayLike) -> FloatArray:
        """Inverse distribution function ``F^{-1}(u)`` for ``u`` in ``(0, 1)``."""

    @abstractmethod
    def cdf(self, x: ArrayLike) -> FloatArray: ...

    @property
    @abstractmethod
    def analytic_mean(self) -> float: ...

    @property
    @abstractmethod
    def analytic_std(self) -> float: ...

    def generate(self, size: int, rng: np.random.Generator) -> FloatArray:
        """``size`` independent realizations ``F^{-1}(U)``, ``U ~ U(0, 1)``."""
        u = rng.random(_check_size(size))
        return self.quantile(u)

    def sample_mean(self, n: int, rng: np.random.Generator) -> float:
        return float(np.mean(self.generate(n, rng)))

    def sample_std(self, n: int, rng: np.random.Generator) -> float:
        # population convention (divide by n), as for the analytic value
        return float(np.std(self.generate(n, rng)))


class ExponentialRandomVariable(RandomVariable):
    """Exponential law with intensity ``lam``: ``F(x) = 1 - exp(-lam x)``."""

    def __init__(self, lam: float) -> None:
        if not (math.isfinite(lam) and lam > 0.0):
            raise ConfigurationError("lam must be positive")
        self.lam = float(lam)

    def quantile(self, u: ArrayLike) -> FloatArray:
        u = np.asarray(u, dtype=np.float64)
        return -np.log1p(-u) / self.lam

    def cdf(self, x: ArrayLike) -> FloatArray:
        x = np.asarray(x, dtype=np.float64)
        return np.where(x < 0.0, 0.0, -np.expm1(-self.lam * x))

    @property
    def analytic_mean(self) -> float:
        return 1.0 / self.lam

    @property
    def analytic_std(self) -> float:
        return 1.0 / self.lam


class UniformRandomVariable(RandomVariable):
    """Uniform law on ``[a, b]``."""

    def __init__(self, a: float = 0.0, b: float = 1.0) -> None:
        if not (math.isfinite(a) and math.isfinite(b)) or b <= a:
            raise ConfigurationError("need finite a < b")
        self.a = float(a)
        self.b = float(b)

    def quantile(self, u: ArrayLike) -> FloatArray:
        u = np.asarray(u, dtype=np.float64)
        return self.a + (self.b - self.a) * u

    def cdf(self, x: ArrayLike) -> FloatArray:
        x = np.asarray(x, dtype=np.float64)
        return np.clip((x - self.a) / (self.b - self.a), 0.0, 1.0)

    @property
    def analytic_mean(self) -> float:
        return 0.5 * (self.a + self.b)

    @property
    def analytic_std(self) -> float:
        return (self.b - self.a) / math.sqrt(12.0)


class NormalRandomVariable(RandomVariable):
    """Normal law ``N(mu, sigma^2)``.

    Besides inversion, pairs of independent realizations can be drawn with
    acceptance-rejection (Laplace proposal), Box-Muller, or Marsaglia's polar
    variant of Box-Muller; see :meth:`generate_pairs`.
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        if not math.isfinite(mu):
            raise ConfigurationError("mu must be finite")
        if not (math.isfinite(sigma) and sigma > 0.0):
            raise ConfigurationError("sigma must be positive")
        self.mu = float(mu)
        self.sigma = float(sigma)

    def quantile(self, u: ArrayLike) -> FloatArray:
        return norm.ppf(u, loc=self.mu, scale=self.sigma)

    def cdf(self, x: ArrayLike) -> FloatArray:
        return norm.cdf(x, loc=self.mu, scale=self.sigma)

    @property
    def analytic_mean(self) -> float:
        return self.mu

    @property
    def analytic_std(self) -> float:
        return self.sigma

    def generate_pairs(
        self,
        n: int,
        rng: np.random.Generator,
        method: NormalPairMethod = NormalPairMethod.BOX_MULLER,
    ) -> FloatArray:
        """``n`` pairs of independent ``N(mu, sigma^2)`` draws, shape ``(n, 2)``."""
        n = _check_size(n)
        method = NormalPairMethod(method)

        if method == NormalPairMethod.INVERSION:
            z = norm.ppf(rng.random((n, 2)))
        elif method == NormalPairMethod.ACCEPTANCE_REJECTION:
            z = _standard_normal_acceptance_rejection(2 * n, rng).reshape(n, 2)
        elif method == NormalPairMethod.BOX_MULLER:
            z = _standard_normal_box_muller(n, rng)
        elif method == NormalPairMethod.POLAR_BOX_MULLER:
            z = _standard_normal_polar(n, rng)
        else:  # pragma: no cover
            raise ConfigurationError(f"Unsupported method: {method}")

        return self.mu + self.sigma * z


# sup of phi(x) / (0.5 exp(-|x|)) for the standard normal vs Laplace(0, 1)
_AR_CONSTANT = math.sqrt(2.0 * math.e / math.pi)


def _standard_normal_acceptance_rejection(
    n: int, rng: np.random.Generator
) -> FloatArray:
    # Proposal: Laplace(0, 1) = Exp(1) with a random sign.
    # Acceptance probability phi(y) / (c g(y)) = exp(-(|y| - 1)^2 / 2).
    out = np.empty(n)
    filled = 0
    while filled < n:
        batch = int(_AR_CONSTANT * (n - filled)) + 16
        y = rng.exponential(1.0, batch)
        u = rng.random(batch)
        accepted = y[u <= np.exp(-0.5 * (y - 1.0) ** 2)]
        signs = np.where(rng.random(accepted.size) < 0.5, -1.0, 1.0)
        take = min(accepted.size, n - filled)
        out[filled : filled + take] = (signs * accepted)[:take]
        filled += take
    return out


def _standard_normal_box_muller(n: int, rng: np.random.Generator) -> FloatArray:
    u1 = 1.0 - rng.random(n)  # (0, 1]
    u2 = rng.random(n)
    radius = np.sqrt(-2.0 * np.log(u1))
    angle = 2.0 * np.pi * u2
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])


def _standard_normal_polar(n: int, rng: np.random.Generator) -> FloatArray:
    out = np.empty((n, 2))
    filled = 0
    while filled < n:
        # points uniform in the unit disc are accepted with probability pi / 4
        batch = int(1.3 * (n - filled)) + 16
        v = 2.0 * rng.random((batch, 2)) - 1.0
        s = np.sum(v * v, axis=1)
        keep = (s > 0.0) & (s < 1.0)
        v, s = v[keep], s[keep]
        factor = np.sqrt(-2.0 * np.log(s) / s)
        take = min(s.size, n - filled)
        out[filled : filled + take] = (v * factor[:, None])[:take]
        filled += take
    return out

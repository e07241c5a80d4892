r"""
Discrepancy of a finite set of points in ``[0, 1]``.

With ``x_(1) <= ... <= x_(N)`` the sorted points, the star discrepancy is
the classical closed form

.. math::

    D^*_N = \frac{1}{2N} + \max_i \Big| x_{(i)} - \frac{2i - 1}{2N} \Big|.

:func:`discrepancy` scores half-open intervals ``[a, b)`` of positive length
whose endpoints are taken from ``E``, the points together with 0 and 1. Writing
``g(e) = #{x_i < e} / N - e`` for ``e`` in ``E``, every such interval scores
``|g(b) - g(a)|``, so

.. math::

    D_N = \max_{e \in E} g(e) - \min_{e \in E} g(e).

A single point at ``0.5`` has ``D_N = 0.5`` and the grid
``{0, 1/n, ..., 1}`` has ``D_N = 1/(n+1)``. Zero-length intervals are never
scored, so ``D_N`` can fall below ``D^*_N``; it never exceeds ``2 D^*_N``.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import ConfigurationError
from ..typing import ArrayLike, FloatArray


def _sorted_points(points: ArrayLike) -> FloatArray:
    # np.sort returns a copy; the caller's array is left untouched
    x = np.sort(np.asarray(points, dtype=np.float64).ravel())
    if x.size == 0:
        raise ConfigurationError("point set is empty")
    if not np.all(np.isfinite(x)) or x[0] < 0.0 or x[-1] > 1.0:
        raise ConfigurationError("points must lie in [0, 1]")
    return x


def star_discrepancy(points: ArrayLike) -> float:
    x = _sorted_points(points)
    n = x.size
    i = np.arange(1, n + 1)
    return float(0.5 / n + np.max(np.abs(x - (2 * i - 1) / (2.0 * n))))


def discrepancy(points: ArrayLike) -> float:
    x = _sorted_points(points)
    endpoints = np.unique(np.concatenate(([0.0], x, [1.0])))
    below = np.searchsorted(x, endpoints, side="left")
    g = below / x.size - endpoints
    return float(g.max() - g.min())

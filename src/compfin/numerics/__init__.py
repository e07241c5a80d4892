# src/compfin/numerics/__init__.py
"""
Numerical building blocks.

Top-level package `compfin` exposes the everyday simulation API.
This subpackage exposes the time discretization used by every process.
"""

from .time_grid import TimeGrid

__all__ = [
    "TimeGrid",
]

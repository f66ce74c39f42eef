# MIT License (see LICENSE)
"""
Small numeric helpers used across the engine.

Covers float64 coercion, defensive ordering of control points and
division that degrades to zero instead of producing inf/NaN when two
control points share a time.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from .types import ControlPoint


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def sort_points(points: Iterable["ControlPoint"]) -> tuple["ControlPoint", ...]:
    """
    Return the points ordered by time.

    The sort is stable, so points sharing a time keep their input order.
    Callers may hand in sequences in any order (e.g. straight from a drag
    gesture); every engine entry point goes through here first.
    """
    return tuple(sorted(points, key=lambda p: p.t))


def safe_div(num: float, den: float, eps: float = 1e-12) -> float:
    """num / den, or 0.0 when |den| < eps (zero-length segments)."""
    if abs(den) < eps:
        return 0.0
    return num / den


def distinct_times(points: Iterable["ControlPoint"]) -> int:
    """Number of distinct control-point times."""
    return len({p.t for p in points})

# MIT License (see LICENSE)
"""
Boundary constraints applied to the acceleration sketch.

Currently a single constraint: zero terminal velocity. Velocity at the end
of the window equals the area under the acceleration curve, so removing
that area by a constant vertical shift brings the object to rest at
max_time while leaving the shape of the sketch untouched.
"""
from __future__ import annotations
from typing import Sequence

from ..types import ControlPoint
from ..util import sort_points


def trapezoid_area(points: Sequence[ControlPoint]) -> float:
    """
    Area under the piecewise-linear curve through the points.

    Sorted by time first; zero-length segments add nothing.
    """
    pts = sort_points(points)
    area = 0.0
    for p0, p1 in zip(pts[:-1], pts[1:]):
        area += 0.5 * (p0.value + p1.value) * (p1.t - p0.t)
    return area


def enforce_zero_end_velocity(
    points: Sequence[ControlPoint],
    max_time: float,
) -> tuple[ControlPoint, ...]:
    """
    Shift acceleration uniformly so that it integrates to zero.

    bias = -area / max_time is added to every point. When the points span
    exactly [0, max_time] the new area is zero, i.e. the final velocity
    equals the initial velocity (0).

    Args:
        points: Acceleration control points (not modified; order is kept).
        max_time: Window length in seconds. A non-positive window leaves the
                  points unchanged.

    Returns:
        New tuple of shifted control points.
    """
    if max_time <= 0:
        return tuple(points)
    bias = -trapezoid_area(points) / max_time
    return tuple(p.with_value(p.value + bias) for p in points)

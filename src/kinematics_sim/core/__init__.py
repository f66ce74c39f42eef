# MIT License (see LICENSE)
"""
Core curve engine.

This subpackage provides:
    - Segment synthesis: linear, quadratic Bezier and cubic Hermite pieces.
    - Engine: forward pass from acceleration and the two back-derivations.
    - Constraints: zero terminal velocity by uniform acceleration bias.
    - Invariants: integral consistency diagnostics.

Typical usage:
    from kinematics_sim.core import compute_from_acceleration
    from kinematics_sim.types import make_points

    result = compute_from_acceleration(make_points([(0, 0), (2, 4), (5, 0)]), 5.0, 0.01)
    result.series.position[-1]
"""
from .segments import (
    interpolate_linear,
    compute_quadratic_segment,
    compute_cubic_segment,
)
from .engine import (
    time_grid,
    integrate_points,
    compute_from_acceleration,
    compute_from_velocity,
    compute_from_position,
)
from .constraints import trapezoid_area, enforce_zero_end_velocity
from .invariants import cumulative_trapezoid, integrate, consistency_report

__all__ = [
    # Segments
    "interpolate_linear",
    "compute_quadratic_segment",
    "compute_cubic_segment",
    # Engine
    "time_grid",
    "integrate_points",
    "compute_from_acceleration",
    "compute_from_velocity",
    "compute_from_position",
    # Constraints
    "trapezoid_area",
    "enforce_zero_end_velocity",
    # Diagnostics
    "cumulative_trapezoid",
    "integrate",
    "consistency_report",
]

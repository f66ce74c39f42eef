# MIT License (see LICENSE)
"""
Per-segment curve synthesis between two control points.

Each function evaluates one curve at a single time t given the data at
the two control points bracketing it:

- interpolate_linear: acceleration, straight lines between points.
- compute_quadratic_segment: velocity, a quadratic Bezier whose middle
  control value is corrected with the endpoint accelerations.
- compute_cubic_segment: position, a cubic Hermite through the endpoint
  positions with the endpoint velocities as tangents.

All three work on plain floats. A zero-length segment evaluates to its
left endpoint instead of dividing by zero.

Reference:
    Bezier curves: https://en.wikipedia.org/wiki/B%C3%A9zier_curve#Quadratic_B%C3%A9zier_curves
    Cubic Hermite: https://en.wikipedia.org/wiki/Cubic_Hermite_spline
"""
from __future__ import annotations
from typing import Sequence

from ..types import ControlPoint
from ..util import sort_points


def interpolate_linear(points: Sequence[ControlPoint], t: float) -> float:
    """
    Sample a piecewise-linear curve through the control points.

    Points are sorted by time first. Outside [t_first, t_last] the value
    is clamped to the nearest endpoint value.

    Args:
        points: Control points in any order. An empty sequence yields 0.
        t: Query time in seconds.

    Returns:
        The interpolated value at t.
    """
    return _interpolate_sorted(sort_points(points), t)


def _interpolate_sorted(pts: Sequence[ControlPoint], t: float) -> float:
    """interpolate_linear() for points already sorted by time."""
    if not pts:
        return 0.0

    if t <= pts[0].t:
        return pts[0].value
    if t >= pts[-1].t:
        return pts[-1].value

    for p0, p1 in zip(pts[:-1], pts[1:]):
        if p0.t <= t <= p1.t:
            span = p1.t - p0.t
            if span <= 0.0:
                return p0.value
            ratio = (t - p0.t) / span
            return p0.value + ratio * (p1.value - p0.value)

    return 0.0


def compute_quadratic_segment(
    t0: float, v0: float, a0: float,
    t1: float, v1: float, a1: float,
    t: float,
) -> float:
    """
    Smooth velocity inside one acceleration segment.

    The middle Bezier control value is
        v_mid = (v0 + v1)/2 + (a0 - a1)·Δt/8
    and the curve is
        v(τ) = (1-τ)²·v0 + 2(1-τ)τ·v_mid + τ²·v1,   τ = (t - t0)/Δt

    so v passes through v0 and v1 without a kink at the control points.

    Args:
        t0, v0, a0: Time, velocity and acceleration at the left point.
        t1, v1, a1: Time, velocity and acceleration at the right point.
        t: Query time, expected in [t0, t1].

    Returns:
        Velocity at t.
    """
    dt = t1 - t0
    if dt <= 0.0:
        return v0
    tau = (t - t0) / dt
    v_mid = (v0 + v1) / 2 + (a0 - a1) * dt / 8
    u = 1.0 - tau
    return u * u * v0 + 2 * u * tau * v_mid + tau * tau * v1


def compute_cubic_segment(
    t0: float, x0: float, v0: float,
    t1: float, x1: float, v1: float,
    t: float,
) -> float:
    """
    Position inside one segment by cubic Hermite interpolation.

    Uses the standard basis on τ = (t - t0)/Δt:
        h00 = 2τ³ - 3τ² + 1      h10 = τ³ - 2τ² + τ
        h01 = -2τ³ + 3τ²         h11 = τ³ - τ²
        x(τ) = h00·x0 + h10·Δt·v0 + h01·x1 + h11·Δt·v1

    The result hits x0 and x1 exactly with slopes v0 and v1, so the
    stitched position curve is continuously differentiable.

    Args:
        t0, x0, v0: Time, position and velocity at the left point.
        t1, x1, v1: Time, position and velocity at the right point.
        t: Query time, expected in [t0, t1].

    Returns:
        Position at t.
    """
    dt = t1 - t0
    if dt <= 0.0:
        return x0
    tau = (t - t0) / dt
    tau2 = tau * tau
    tau3 = tau2 * tau
    h00 = 2 * tau3 - 3 * tau2 + 1
    h10 = tau3 - 2 * tau2 + tau
    h01 = -2 * tau3 + 3 * tau2
    h11 = tau3 - tau2
    return h00 * x0 + h10 * dt * v0 + h01 * x1 + h11 * dt * v1

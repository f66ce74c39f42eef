# MIT License (see LICENSE)
"""
Curve engine: rebuild all three kinematic curves from one edited curve.

Acceleration is the root quantity. Whatever the user edited, the result is
always produced by the same forward pass:

    acceleration points --trapezoid--> velocity points
                        --cubic-corrected trapezoid--> position points
                        --segment synthesis--> dense series

Edits to velocity or position are first turned back into an adjusted
acceleration sequence (back-derivation) and then run through the forward
pass, so the three curves stay consistent no matter which one changed.

All functions are pure: inputs are never modified, new tuples and arrays
are returned.
"""
from __future__ import annotations
import logging
from typing import Sequence

import numpy as np

from ..constants import GRID_EPS, MATCH_TOLERANCE
from ..types import ControlPoint, DenseSeries, KinematicsResult
from ..util import distinct_times, safe_div, sort_points
from .segments import (
    _interpolate_sorted,
    compute_cubic_segment,
    compute_quadratic_segment,
)

logger = logging.getLogger(__name__)


def time_grid(max_time: float, dt: float) -> np.ndarray:
    """
    Sample times 0, dt, 2·dt, ... up to max_time inclusive.

    The last sample is snapped onto max_time when it lands within
    rounding distance of it, so the window end is always sampled exactly
    when max_time is a multiple of dt.

    Raises:
        ValueError: If dt <= 0 or max_time < 0.
    """
    if dt <= 0:
        raise ValueError(f"Time step must be positive, got {dt}")
    if max_time < 0:
        raise ValueError(f"Window length must be non-negative, got {max_time}")

    n = int(np.floor(max_time / dt + GRID_EPS))
    time = np.arange(n + 1, dtype=np.float64) * dt
    if abs(time[-1] - max_time) <= GRID_EPS * max(1.0, max_time):
        time[-1] = max_time
    return time


def integrate_points(points: Sequence[ControlPoint]) -> tuple[list[float], list[float]]:
    """
    Running velocity and position at each acceleration control point.

    Per segment of length Δt between accelerations a_i and a_{i+1}:
        Δv = (a_i + a_{i+1})/2 · Δt
        Δx = (v_i + v_{i+1})/2 · Δt + (a_i - a_{i+1}) · Δt²/12

    The Δx correction is the exact integral of the cubic velocity profile
    implied by linear acceleration. Both sums start from 0.

    Args:
        points: Acceleration control points, already sorted by time.

    Returns:
        (velocity_at_points, position_at_points), one entry per point.
    """
    v_at = [0.0]
    x_at = [0.0]
    for p0, p1 in zip(points[:-1], points[1:]):
        span = p1.t - p0.t
        v_next = v_at[-1] + 0.5 * (p0.value + p1.value) * span
        dx = (v_at[-1] + v_next) * span / 2 + (p0.value - p1.value) * span * span / 12
        v_at.append(v_next)
        x_at.append(x_at[-1] + dx)
    return v_at, x_at


def _derived_points(
    points: Sequence[ControlPoint],
    values: Sequence[float],
) -> tuple[ControlPoint, ...]:
    """Control points at the acceleration times carrying derived values."""
    n = len(points)
    return tuple(
        ControlPoint(p.t, v, 0 < i < n - 1)
        for i, (p, v) in enumerate(zip(points, values))
    )


def _sample_segment(
    points: Sequence[ControlPoint],
    times: np.ndarray,
    v_at: Sequence[float],
    x_at: Sequence[float],
    t: float,
) -> tuple[float, float]:
    """
    Velocity and position at t from the segment that brackets it.

    Past the last control point both hold their final values; before the
    first one both are zero.
    """
    if t > times[-1]:
        return v_at[-1], x_at[-1]
    if t < times[0]:
        return 0.0, 0.0

    i = int(np.searchsorted(times, t, side="right")) - 1
    i = min(max(i, 0), len(points) - 2)
    p0, p1 = points[i], points[i + 1]

    v = compute_quadratic_segment(
        p0.t, v_at[i], p0.value,
        p1.t, v_at[i + 1], p1.value,
        t,
    )
    x = compute_cubic_segment(
        p0.t, x_at[i], v_at[i],
        p1.t, x_at[i + 1], v_at[i + 1],
        t,
    )
    return v, x


def compute_from_acceleration(
    accel_points: Sequence[ControlPoint],
    max_time: float,
    dt: float,
) -> KinematicsResult:
    """
    Forward pass: dense curves and derived control points from acceleration.

    1. Sort the acceleration points by time and re-flag them, so only the
       first and last by time are non-draggable.
    2. Accumulate velocity and position at every point (integrate_points).
    3. Wrap those values as velocity/position control points; interior
       points are draggable, the two ends are not.
    4. Walk the time grid: acceleration is linearly interpolated, velocity
       uses the quadratic Bezier of the bracketing segment, position the
       cubic Hermite of the same segment.

    Fewer than two distinct control-point times cannot define a segment;
    the dense series is then all zeros and derived points carry zero.

    Args:
        accel_points: Acceleration control points in any order.
        max_time: Window length in seconds.
        dt: Dense sample spacing in seconds.

    Returns:
        KinematicsResult holding the dense series and the sorted
        acceleration, velocity and position control points.
    """
    ordered = sort_points(accel_points)
    pts = _derived_points(ordered, [p.value for p in ordered])
    time = time_grid(max_time, dt)

    if distinct_times(pts) < 2:
        logger.debug("Degenerate acceleration sequence (%d points); zero curves", len(pts))
        zeros = [0.0] * len(pts)
        return KinematicsResult(
            series=DenseSeries.zeros(time),
            accel_points=pts,
            velocity_points=_derived_points(pts, zeros),
            position_points=_derived_points(pts, zeros),
        )

    v_at, x_at = integrate_points(pts)
    times = np.array([p.t for p in pts], dtype=np.float64)

    n = len(time)
    accel = np.empty(n, dtype=np.float64)
    velocity = np.empty(n, dtype=np.float64)
    position = np.empty(n, dtype=np.float64)

    for k, t in enumerate(time):
        t = float(t)
        accel[k] = _interpolate_sorted(pts, t)
        velocity[k], position[k] = _sample_segment(pts, times, v_at, x_at, t)

    logger.debug(
        "Recomputed %d samples from %d acceleration points (v_end=%.6g, x_end=%.6g)",
        n, len(pts), velocity[-1], position[-1],
    )
    return KinematicsResult(
        series=DenseSeries(time, accel, velocity, position),
        accel_points=pts,
        velocity_points=_derived_points(pts, v_at),
        position_points=_derived_points(pts, x_at),
    )


def _match_index(points: Sequence[ControlPoint], t: float, tol: float) -> int | None:
    """Index of the first point within tol of t, or None."""
    for j, p in enumerate(points):
        if abs(p.t - t) < tol:
            return j
    return None


def compute_from_velocity(
    velocity_points: Sequence[ControlPoint],
    accel_points: Sequence[ControlPoint],
    max_time: float,
    dt: float,
    tolerance: float = MATCH_TOLERANCE,
) -> KinematicsResult:
    """
    Back-derive acceleration from edited velocity points, then recompute.

    Walking left to right over the interior velocity points, the secant
    slope of each segment is taken as the average acceleration over it:
        a_avg = (v_i - v_{i-1}) / (t_i - t_{i-1})
    The acceleration point matching t_i (first one within tolerance) is
    set so that the trapezoid average of it and the preceding acceleration
    point equals a_avg:
        a_i = 2·a_avg - a_{i-1}
    Each step reads the already-adjusted a_{i-1}, so the recurrence is
    order dependent. The last acceleration point is never changed.

    No time match leaves that acceleration point as it was; zero-length
    velocity segments are skipped.

    Args:
        velocity_points: Edited velocity control points.
        accel_points: Current acceleration control points (not modified).
        max_time: Window length in seconds.
        dt: Dense sample spacing in seconds.
        tolerance: Maximum time distance for matching points.

    Returns:
        KinematicsResult of the forward pass over the adjusted acceleration.
    """
    vel = sort_points(velocity_points)
    accel = list(sort_points(accel_points))

    for i in range(1, len(vel) - 1):
        if i >= len(accel):
            break
        span = vel[i].t - vel[i - 1].t
        if span <= 0:
            continue

        a_avg = (vel[i].value - vel[i - 1].value) / span
        j = _match_index(accel, vel[i].t, tolerance)
        if j is None:
            logger.debug("No acceleration point near t=%.4f; left unchanged", vel[i].t)
            continue
        accel[j] = accel[j].with_value(2 * a_avg - accel[i - 1].value)

    return compute_from_acceleration(accel, max_time, dt)


def compute_from_position(
    position_points: Sequence[ControlPoint],
    velocity_points: Sequence[ControlPoint],
    accel_points: Sequence[ControlPoint],
    max_time: float,
    dt: float,
    tolerance: float = MATCH_TOLERANCE,
) -> KinematicsResult:
    """
    Back-derive velocity from edited position points, then acceleration.

    Each interior position point gets a velocity estimate equal to the
    mean of its left and right secant slopes, written into the velocity
    point with the same index. The updated velocity sequence is handed to
    compute_from_velocity(). Zero-length neighbours contribute a zero slope.

    Args:
        position_points: Edited position control points.
        velocity_points: Current velocity control points (not modified).
        accel_points: Current acceleration control points (not modified).
        max_time: Window length in seconds.
        dt: Dense sample spacing in seconds.
        tolerance: Passed through to compute_from_velocity().

    Returns:
        KinematicsResult of the full recompute.
    """
    pos = sort_points(position_points)
    vel = list(sort_points(velocity_points))

    for i in range(1, len(pos) - 1):
        if i >= len(vel):
            break
        p_prev, p_curr, p_next = pos[i - 1], pos[i], pos[i + 1]
        left = safe_div(p_curr.value - p_prev.value, p_curr.t - p_prev.t)
        right = safe_div(p_next.value - p_curr.value, p_next.t - p_curr.t)
        vel[i] = vel[i].with_value((left + right) / 2)

    return compute_from_velocity(vel, accel_points, max_time, dt, tolerance)

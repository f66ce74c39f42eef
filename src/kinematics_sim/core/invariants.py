# MIT License (see LICENSE)
"""
Diagnostics for checking that the three curves agree with each other.

Integrating the dense acceleration should reproduce the velocity at the
last control point, and integrating the dense velocity should reproduce
the position there. Exact agreement is not expected: the velocity blend
and the position step use different correction terms, and the grid may
not hit every control-point time.
"""
from __future__ import annotations

import numpy as np

from ..types import KinematicsResult


def cumulative_trapezoid(values: np.ndarray, time: np.ndarray) -> np.ndarray:
    """
    Running trapezoidal integral of values over time, starting at 0.

    Returns an array the same length as values.
    """
    values = np.asarray(values, dtype=np.float64)
    time = np.asarray(time, dtype=np.float64)
    out = np.zeros_like(values)
    if len(values) > 1:
        out[1:] = np.cumsum(0.5 * (values[1:] + values[:-1]) * np.diff(time))
    return out


def integrate(values: np.ndarray, time: np.ndarray) -> float:
    """Total trapezoidal integral of values over time."""
    if len(values) < 2:
        return 0.0
    return float(cumulative_trapezoid(values, time)[-1])


def consistency_report(result: KinematicsResult) -> dict[str, float]:
    """
    Compare integrated dense curves against the derived control values.

    Returns:
        Dict with keys:
        - 'velocity_error': |∫accel dt - v_last|
        - 'position_error': |∫velocity dt - x_last|
        - 'end_velocity': last dense velocity sample
    """
    s = result.series
    v_last = result.velocity_points[-1].value if result.velocity_points else 0.0
    x_last = result.position_points[-1].value if result.position_points else 0.0
    return {
        "velocity_error": abs(integrate(s.accel, s.time) - v_last),
        "position_error": abs(integrate(s.velocity, s.time) - x_last),
        "end_velocity": float(s.velocity[-1]) if len(s) else 0.0,
    }

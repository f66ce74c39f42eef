# MIT License (see LICENSE)
"""
Core type definitions for the kinematics curves.

Defines the fundamental data structures:
- ControlPoint: one user-editable (time, value) sample of a curve.
- DenseSeries: the fixed-step time series used for plotting and playback.
- KinematicsResult: a dense series plus the control points it came from.

The three curves are linked by the first-order relations
  dv/dt = a        dx/dt = v
with acceleration as the root: velocity and position control values are
always re-derived from it by integration.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .constants import ACCELERATION, POSITION, VELOCITY
from .util import f64


# =============================================================================
# Control Points
# =============================================================================

@dataclass(frozen=True)
class ControlPoint:
    """
    A single draggable sample of one curve.

    Attributes:
        t: Time in seconds (>= 0).
        value: Curve value at t (m/s², m/s or m depending on the curve).
        is_draggable: False for the first and last point of a sequence,
                      which anchor the window.
    """
    t: float
    value: float
    is_draggable: bool = True

    def __post_init__(self) -> None:
        """Store plain floats so numpy scalars never leak into sequences."""
        object.__setattr__(self, "t", float(self.t))
        object.__setattr__(self, "value", float(self.value))

    def with_value(self, value: float) -> "ControlPoint":
        """Copy of this point with a new value."""
        return ControlPoint(self.t, value, self.is_draggable)


ControlPointSequence = tuple[ControlPoint, ...]


def make_points(pairs: Iterable[tuple[float, float] | ControlPoint]) -> ControlPointSequence:
    """
    Build a control-point sequence from (t, value) pairs.

    The first and last points (by position in the input) are marked
    non-draggable, every other point draggable. ControlPoint instances are
    accepted too; their draggable flag is recomputed the same way.

    Raises:
        TypeError: If an item is neither a ControlPoint nor a (t, value) pair.
    """
    items = list(pairs)
    n = len(items)
    out = []
    for i, item in enumerate(items):
        if isinstance(item, ControlPoint):
            t, value = item.t, item.value
        else:
            try:
                t, value = item
            except (TypeError, ValueError):
                raise TypeError(f"Expected ControlPoint or (t, value) pair, got {item!r}") from None
        out.append(ControlPoint(t, value, 0 < i < n - 1))
    return tuple(out)


def as_points(points: Iterable[tuple[float, float] | ControlPoint]) -> ControlPointSequence:
    """
    Coerce user input to a tuple of ControlPoints.

    Unlike make_points(), existing ControlPoint flags are kept as given.
    """
    items = list(points)
    if all(isinstance(p, ControlPoint) for p in items):
        return tuple(items)
    return make_points(items)


# =============================================================================
# Dense Series
# =============================================================================

@dataclass
class DenseSeries:
    """
    Fixed-step samples of all three curves.

    All four arrays share one length; time runs from 0 to max_time
    inclusive in steps of dt. A new instance is built on every recompute;
    the session replaces it wholesale and never edits it in place.

    Attributes:
        time: Sample times in seconds.
        accel: Acceleration (piecewise linear through its control points).
        velocity: Velocity (quadratic Bezier blend per segment).
        position: Position (cubic Hermite per segment).
    """
    time: np.ndarray
    accel: np.ndarray
    velocity: np.ndarray
    position: np.ndarray

    def __post_init__(self) -> None:
        """Convert all columns to float64 and check they line up."""
        self.time = f64(self.time)
        self.accel = f64(self.accel)
        self.velocity = f64(self.velocity)
        self.position = f64(self.position)
        n = len(self.time)
        if not (len(self.accel) == len(self.velocity) == len(self.position) == n):
            raise ValueError("Dense series columns must have equal length")

    def __len__(self) -> int:
        return len(self.time)

    @classmethod
    def zeros(cls, time: np.ndarray) -> "DenseSeries":
        """All-zero curves on the given time grid."""
        n = len(time)
        return cls(time, np.zeros(n), np.zeros(n), np.zeros(n))

    def column(self, kind: str) -> np.ndarray:
        """Values for a curve kind name."""
        if kind == ACCELERATION:
            return self.accel
        if kind == VELOCITY:
            return self.velocity
        if kind == POSITION:
            return self.position
        raise ValueError(f"Unknown curve kind: {kind}")


@dataclass
class KinematicsResult:
    """
    Output of one engine recompute.

    Attributes:
        series: The dense time series of all three curves.
        accel_points: Acceleration control points actually used (sorted;
                      adjusted when the result comes from a back-derivation).
        velocity_points: Integrated velocity at each acceleration point time.
        position_points: Integrated position at each acceleration point time.
    """
    series: DenseSeries
    accel_points: ControlPointSequence = field(default_factory=tuple)
    velocity_points: ControlPointSequence = field(default_factory=tuple)
    position_points: ControlPointSequence = field(default_factory=tuple)

    def points(self, kind: str) -> ControlPointSequence:
        """Control points for a curve kind name."""
        if kind == ACCELERATION:
            return self.accel_points
        if kind == VELOCITY:
            return self.velocity_points
        if kind == POSITION:
            return self.position_points
        raise ValueError(f"Unknown curve kind: {kind}")


def values_of(points: Sequence[ControlPoint]) -> np.ndarray:
    """Control-point values as a float64 array."""
    return f64([p.value for p in points])


def times_of(points: Sequence[ControlPoint]) -> np.ndarray:
    """Control-point times as a float64 array."""
    return f64([p.t for p in points])


@dataclass(frozen=True)
class MotionSample:
    """
    State of the animated point at one instant.

    Attributes:
        t: Simulated time in seconds.
        accel: Acceleration at t.
        velocity: Velocity at t.
        position: Position at t.
    """
    t: float
    accel: float
    velocity: float
    position: float

# MIT License (see LICENSE)
"""
kinematics_sim - Linked acceleration / velocity / position curves.

A user sketches control points for one of the three curves; the package
derives the other two by integration (or back-derivation) and keeps all
three consistent, then plays back the resulting motion over a fixed
time window.

Main entry points:
    - SimulationSession: Editable curves plus a playback clock.
    - SimulationConfig: Window, time step and display hints.
    - ControlPoint, make_points: Curve control points.

Submodules:
    - core: Segment synthesis, forward pass, back-derivation, constraints.
    - clock: Tick sources driving playback.
    - renderer: Optional display adapters.

Example:
    from kinematics_sim import SimulationSession, make_points

    session = SimulationSession()
    session.update_acceleration(make_points([(0, 0), (2, 10), (5, 0)]))
    session.velocity[-1]    # 0.0 with the end-velocity lock on
"""
from .session import SimulationSession
from .config import SimulationConfig, CurveStyle
from .types import ControlPoint, DenseSeries, KinematicsResult, MotionSample, make_points
from .clock import TickSource, ManualTickSource, RealtimeTickSource
from .logging_config import setup_logging

__all__ = [
    # Session
    "SimulationSession",
    "SimulationConfig",
    "CurveStyle",
    # Data
    "ControlPoint",
    "DenseSeries",
    "KinematicsResult",
    "MotionSample",
    "make_points",
    # Playback
    "TickSource",
    "ManualTickSource",
    "RealtimeTickSource",
    # Logging
    "setup_logging",
]

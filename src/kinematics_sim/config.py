# MIT License (see LICENSE)
"""
Session configuration and display hints.

SimulationConfig holds the window, time step and playback parameters a
SimulationSession is built with. CurveStyle carries presentation hints
(title, unit, color, rounding) that the core never interprets; they are
passed through to renderer adapters.

Environment overrides:
    KINEMATICS_SIM_MAX_TIME        window length in seconds
    KINEMATICS_SIM_DT              dense sample spacing in seconds
    KINEMATICS_SIM_PLAYBACK_SPEED  simulated seconds per real second
"""
from __future__ import annotations
import os
from dataclasses import dataclass, field

from .constants import (
    ACCELERATION,
    DEFAULT_ACCEL_PAIRS,
    DEFAULT_DT,
    DEFAULT_MAX_TIME,
    MATCH_TOLERANCE,
    POSITION,
    STEP_INCREMENT,
    VELOCITY,
)
from .types import ControlPointSequence, make_points


@dataclass(frozen=True)
class CurveStyle:
    """
    Display hints for one curve.

    Attributes:
        title: Axis title, e.g. "Velocity (m/s)".
        unit: Unit label.
        color: Color identifier (hex string).
        round_to: Axis limits are rounded to multiples of this.
        min_range: Smallest axis span to show, 0 for no minimum.
    """
    title: str
    unit: str
    color: str
    round_to: float = 5.0
    min_range: float = 0.0


def _default_styles() -> dict[str, CurveStyle]:
    return {
        ACCELERATION: CurveStyle("Acceleration (m/s²)", "m/s²", "#FF6B6B", round_to=5.0),
        VELOCITY: CurveStyle("Velocity (m/s)", "m/s", "#4ECDC4", round_to=5.0, min_range=10.0),
        POSITION: CurveStyle("Position (m)", "m", "#45B7D1", round_to=10.0, min_range=20.0),
    }


@dataclass(frozen=True)
class SimulationConfig:
    """
    Constants a session is constructed with.

    Attributes:
        max_time: Window length in seconds.
        dt: Dense series spacing in seconds.
        step_increment: Time advanced by one manual step().
        match_tolerance: Time tolerance when mapping velocity edits back
                         onto acceleration points.
        playback_speed: Simulated seconds advanced per real second.
        lock_end_velocity: Initial state of the zero end-velocity lock.
        default_accel: Acceleration (t, value) pairs used at startup and
                       on reset().
        styles: Per-curve display hints keyed by curve kind name.

    Raises:
        ValueError: On a non-positive window, step or speed, a step larger
                    than the window, or fewer than two default points.
    """
    max_time: float = DEFAULT_MAX_TIME
    dt: float = DEFAULT_DT
    step_increment: float = STEP_INCREMENT
    match_tolerance: float = MATCH_TOLERANCE
    playback_speed: float = 1.0
    lock_end_velocity: bool = True
    default_accel: tuple[tuple[float, float], ...] = DEFAULT_ACCEL_PAIRS
    styles: dict[str, CurveStyle] = field(default_factory=_default_styles)

    def __post_init__(self) -> None:
        if self.max_time <= 0:
            raise ValueError(f"max_time must be positive, got {self.max_time}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.dt > self.max_time:
            raise ValueError(f"dt ({self.dt}) must not exceed max_time ({self.max_time})")
        if self.playback_speed <= 0:
            raise ValueError(f"playback_speed must be positive, got {self.playback_speed}")
        if len(self.default_accel) < 2:
            raise ValueError("default_accel needs at least 2 points")

    @property
    def sample_count(self) -> int:
        """Number of samples in each dense series."""
        return int(self.max_time / self.dt + 1e-9) + 1

    def default_points(self) -> ControlPointSequence:
        """Default acceleration sketch as control points."""
        return make_points(self.default_accel)

    def style(self, kind: str) -> CurveStyle:
        """Display hints for a curve kind name."""
        try:
            return self.styles[kind]
        except KeyError:
            raise ValueError(f"Unknown curve kind: {kind}") from None

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """
        Build a config from KINEMATICS_SIM_* environment variables.

        Keyword overrides win over the environment.
        """
        env: dict = {}
        for key, name in (
            ("max_time", "KINEMATICS_SIM_MAX_TIME"),
            ("dt", "KINEMATICS_SIM_DT"),
            ("playback_speed", "KINEMATICS_SIM_PLAYBACK_SPEED"),
        ):
            raw = os.environ.get(name)
            if raw is not None:
                try:
                    env[key] = float(raw)
                except ValueError:
                    raise ValueError(f"{name} must be a number, got {raw!r}") from None
        env.update(overrides)
        return cls(**env)

# MIT License (see LICENSE)
"""
The simulation session: editable curves plus a playback clock.

SimulationSession owns all mutable state of one running visualization:
- The control points of the acceleration, velocity and position curves.
- The dense series derived from them.
- The playback cursor (current_time), the real-time stopwatch and the
  playing flag.
- The zero end-velocity lock.

Every edit goes through one of the update_* methods, which rebuild the
whole derived state synchronously through the curve engine and then
notify listeners. Playback is driven by a TickSource the session
subscribes to while playing.

Structure:
    - Host creates a SimulationSession (default acceleration is computed).
    - Input adapter calls update_acceleration/velocity/position on drags.
    - Renderer reads series / *_points, or listens via add_listener().
    - play()/pause()/step()/reset() control the cursor.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

import numpy as np

from .clock import ManualTickSource, TickSource
from .config import SimulationConfig
from .constants import ACCELERATION, EASE_PEAK, POSITION, VELOCITY
from .core.constraints import enforce_zero_end_velocity
from .core.engine import (
    compute_from_acceleration,
    compute_from_position,
    compute_from_velocity,
)
from .profiler import Profiler
from .types import (
    ControlPoint,
    ControlPointSequence,
    DenseSeries,
    KinematicsResult,
    MotionSample,
    as_points,
    make_points,
)

logger = logging.getLogger(__name__)

Listener = Callable[[str], None]
PointsLike = Iterable[ControlPoint | tuple[float, float]]


@dataclass
class SimulationSession:
    """
    One interactive kinematics session.

    Attributes:
        config: Window, time step and playback constants.
        tick_source: Where playback ticks come from (default: a
                     ManualTickSource the host fires itself).
        profiler: Optional Profiler timing each recompute.
        lock_end_velocity: Shift acceleration edits so the object ends at
                           rest. Defaults to config.lock_end_velocity.
        accel_points: Current acceleration control points (authoritative).
        velocity_points: Velocity control points derived from acceleration.
        position_points: Position control points derived from velocity.
        series: Dense series of all three curves.
        current_time: Playback cursor in simulated seconds.
        real_elapsed_time: Real seconds played since the last restart.
        is_playing: True while the session is subscribed to ticks.

    Note:
        Points and series are replaced on every update, never modified in
        place, so references held by a renderer stay internally consistent.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    tick_source: TickSource | None = None
    profiler: Profiler | None = None
    lock_end_velocity: bool | None = None

    # Internal state
    accel_points: ControlPointSequence = field(default=(), init=False)
    velocity_points: ControlPointSequence = field(default=(), init=False)
    position_points: ControlPointSequence = field(default=(), init=False)
    series: DenseSeries | None = field(default=None, init=False, repr=False)
    current_time: float = field(default=0.0, init=False)
    real_elapsed_time: float = field(default=0.0, init=False)
    is_playing: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Compute the default curves."""
        if self.lock_end_velocity is None:
            self.lock_end_velocity = self.config.lock_end_velocity
        if self.tick_source is None:
            self.tick_source = ManualTickSource()

        self._listeners: list[Listener] = []
        self._last_tick: float | None = None

        self._apply(self._forward(self.config.default_points()), notify=False)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def max_time(self) -> float:
        return self.config.max_time

    @property
    def dt(self) -> float:
        return self.config.dt

    @property
    def time(self) -> np.ndarray:
        return self.series.time

    @property
    def accel(self) -> np.ndarray:
        return self.series.accel

    @property
    def velocity(self) -> np.ndarray:
        return self.series.velocity

    @property
    def position(self) -> np.ndarray:
        return self.series.position

    @property
    def progress(self) -> float:
        """Playback cursor as a fraction of the window, in [0, 1]."""
        return self.current_time / self.max_time

    def points(self, kind: str) -> ControlPointSequence:
        """Control points for a curve kind name."""
        if kind == ACCELERATION:
            return self.accel_points
        if kind == VELOCITY:
            return self.velocity_points
        if kind == POSITION:
            return self.position_points
        raise ValueError(f"Unknown curve kind: {kind}")

    def sample_at(self, t: float) -> MotionSample:
        """
        Curve values at simulated time t, linearly interpolated from the
        dense series and clamped to the window.
        """
        s = self.series
        t = min(max(float(t), 0.0), self.max_time)
        return MotionSample(
            t=t,
            accel=float(np.interp(t, s.time, s.accel)),
            velocity=float(np.interp(t, s.time, s.velocity)),
            position=float(np.interp(t, s.time, s.position)),
        )

    def current_sample(self) -> MotionSample:
        """State of the animated point at the playback cursor."""
        return self.sample_at(self.current_time)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """
        Register a state-changed callback.

        The callback receives "curves" after every recompute and
        "playback" after every cursor or play-state change.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -------------------------------------------------------------------------
    # Curve edits
    # -------------------------------------------------------------------------

    def _timed(self, fn, *args) -> KinematicsResult:
        """Run an engine call, under the profiler when one is attached."""
        if self.profiler:
            with self.profiler.section("recompute"):
                return fn(*args)
        return fn(*args)

    def _forward(self, points: ControlPointSequence) -> KinematicsResult:
        """Apply the end-velocity lock (if enabled) and run the forward pass."""
        if self.lock_end_velocity:
            points = enforce_zero_end_velocity(points, self.max_time)
        return self._timed(compute_from_acceleration, points, self.max_time, self.dt)

    def _apply(self, result: KinematicsResult, notify: bool = True) -> None:
        """Replace all derived state with a fresh engine result."""
        self.accel_points = result.accel_points
        self.velocity_points = result.velocity_points
        self.position_points = result.position_points
        self.series = result.series
        logger.debug(
            "Curves updated: v_end=%.6g x_end=%.6g",
            self.series.velocity[-1], self.series.position[-1],
        )
        if notify:
            self._notify("curves")

    def update_acceleration(self, points: PointsLike) -> None:
        """
        Replace the acceleration control points and recompute everything.

        With lock_end_velocity set, the new points are first shifted so the
        velocity at max_time is zero.
        """
        self._apply(self._forward(as_points(points)))

    def update_velocity(self, points: PointsLike) -> None:
        """
        Replace the velocity control points and recompute everything.

        The acceleration points are back-derived from the edit; the velocity
        points are then re-derived from them, so they may differ slightly
        from what was passed in.
        """
        self.velocity_points = as_points(points)
        result = self._timed(
            compute_from_velocity,
            self.velocity_points, self.accel_points,
            self.max_time, self.dt, self.config.match_tolerance,
        )
        self._apply(result)

    def update_position(self, points: PointsLike) -> None:
        """
        Replace the position control points and recompute everything.

        Position edits are turned into velocity estimates, then into
        acceleration, then the forward pass runs.
        """
        self.position_points = as_points(points)
        result = self._timed(
            compute_from_position,
            self.position_points, self.velocity_points, self.accel_points,
            self.max_time, self.dt, self.config.match_tolerance,
        )
        self._apply(result)

    def update(self, kind: str, points: PointsLike) -> None:
        """Dispatch an edit by curve kind name."""
        if kind == ACCELERATION:
            self.update_acceleration(points)
        elif kind == VELOCITY:
            self.update_velocity(points)
        elif kind == POSITION:
            self.update_position(points)
        else:
            raise ValueError(f"Unknown curve kind: {kind}")

    def preset_ease_in_out(self, peak: float = EASE_PEAK) -> None:
        """Load a symmetric speed-up / slow-down acceleration sketch."""
        T = self.max_time
        self.update_acceleration(make_points([
            (0.0, 0.0),
            (0.30 * T, +peak),
            (0.70 * T, -peak),
            (T, 0.0),
        ]))

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    def play(self) -> None:
        """
        Start advancing the cursor on incoming ticks.

        Playing from the end of the window restarts from 0.
        """
        if self.current_time >= self.max_time:
            self.current_time = 0.0
            self.real_elapsed_time = 0.0
        self.is_playing = True
        self._last_tick = None
        self.tick_source.subscribe(self.tick)
        logger.info("Playback started at t=%.3f", self.current_time)
        self._notify("playback")

    def pause(self) -> None:
        """Stop advancing the cursor and drop the tick subscription."""
        was_playing = self.is_playing
        self.is_playing = False
        self._last_tick = None
        self.tick_source.unsubscribe(self.tick)
        if was_playing:
            logger.info("Playback paused at t=%.3f", self.current_time)
        self._notify("playback")

    def step(self) -> None:
        """Pause, then move the cursor forward by config.step_increment."""
        self.pause()
        self.current_time = min(self.current_time + self.config.step_increment, self.max_time)
        self._notify("playback")

    def reset(self) -> None:
        """Pause, rewind both clocks and restore the default acceleration."""
        self.pause()
        self.current_time = 0.0
        self.real_elapsed_time = 0.0
        self._apply(self._forward(self.config.default_points()))
        logger.info("Session reset to default acceleration")

    def tick(self, timestamp: float) -> None:
        """
        Advance playback to a wall-clock timestamp (seconds).

        The first tick after play() only records the baseline. Later ticks
        add the real time since the previous tick to real_elapsed_time, and
        that time scaled by config.playback_speed to current_time. Reaching
        max_time clamps the cursor and pauses. Ticks arriving while paused
        are ignored.
        """
        if not self.is_playing:
            return

        if self._last_tick is None:
            self._last_tick = timestamp
        real_delta = max(0.0, timestamp - self._last_tick)
        self._last_tick = timestamp

        self.real_elapsed_time += real_delta
        self.current_time += real_delta * self.config.playback_speed

        if self.current_time >= self.max_time:
            self.current_time = self.max_time
            logger.info("Reached end of window after %.3f s", self.real_elapsed_time)
            self.pause()
            return

        self._notify("playback")

# MIT License (see LICENSE)
"""
Renderer adapters for displaying a session.

This module provides an abstract base class for rendering and concrete
text/recording implementations. The core engine has no plotting
dependency; a real UI implements RendererAdapter on top of its own
drawing surface.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys

import numpy as np

from ..config import CurveStyle
from ..constants import CURVE_KINDS
from ..types import ControlPoint, MotionSample, times_of, values_of

if TYPE_CHECKING:
    from ..session import SimulationSession


def axis_limits(values: np.ndarray, style: CurveStyle) -> tuple[float, float]:
    """
    Axis range for a curve from its display hints.

    The data range is widened to include 0, padded out to multiples of
    style.round_to and grown symmetrically to at least style.min_range.
    """
    if len(values) == 0:
        lo, hi = 0.0, 0.0
    else:
        lo = min(0.0, float(np.min(values)))
        hi = max(0.0, float(np.max(values)))
    step = style.round_to if style.round_to > 0 else 1.0
    lo = float(np.floor(lo / step) * step)
    hi = float(np.ceil(hi / step) * step)
    if hi - lo < style.min_range:
        grow = (style.min_range - (hi - lo)) / 2
        lo -= grow
        hi += grow
    if hi == lo:
        hi = lo + step
    return lo, hi


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(session.current_time)
        renderer.draw_curve("velocity", session.time, session.velocity,
                            session.velocity_points, style)
        renderer.draw_marker(session.current_sample())
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_session(session)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Playback cursor in simulated seconds.
        """
        ...

    @abstractmethod
    def draw_curve(
        self,
        kind: str,
        time: np.ndarray,
        values: np.ndarray,
        points: Sequence[ControlPoint],
        style: CurveStyle,
    ) -> None:
        """
        Draw one curve with its control points.

        Args:
            kind: "acceleration", "velocity" or "position".
            time: Dense sample times.
            values: Dense sample values.
            points: Control points (draggable ones accept input).
            style: Display hints for this curve.
        """
        ...

    @abstractmethod
    def draw_marker(self, sample: MotionSample) -> None:
        """Draw the animated point at the playback cursor."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_session(self, session: "SimulationSession") -> None:
        """
        Convenience method to draw all three curves and the marker.

        Args:
            session: The session to render.
        """
        self.begin_frame(session.current_time)
        for kind in CURVE_KINDS:
            self.draw_curve(
                kind,
                session.time,
                session.series.column(kind),
                session.points(kind),
                session.config.style(kind),
            )
        self.draw_marker(session.current_sample())
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Example output:
        === Frame t=1.2500 ===
        acceleration [-20, 20] m/s²  4 pts  end=2.50
        velocity [0, 20] m/s  4 pts  end=0.00
        position [0, 50] m  4 pts  end=45.83
        @ x=11.61 v=14.68 a=15.83
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also list every control point.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_curve(self, kind, time, values, points, style) -> None:
        lo, hi = axis_limits(values, style)
        end = float(values[-1]) if len(values) else 0.0
        self.output.write(
            f"{kind} [{lo:g}, {hi:g}] {style.unit}  {len(points)} pts  end={end:.2f}\n"
        )
        if self.verbose:
            for p in points:
                mark = "*" if p.is_draggable else " "
                self.output.write(f"  {mark} t={p.t:.3f} {p.value:.3f}\n")

    def draw_marker(self, sample: MotionSample) -> None:
        self.output.write(
            f"@ x={sample.position:.2f} v={sample.velocity:.2f} a={sample.accel:.2f}\n"
        )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_curve(self, kind, time, values, points, style) -> None:
        pass

    def draw_marker(self, sample: MotionSample) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames as plain dicts.

    Example:
        renderer = BufferedRenderer()
        session.add_listener(lambda event: renderer.render_session(session))
        ...
        for frame in renderer.frames:
            print(frame["time"], frame["marker"]["position"])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "curves": {}, "marker": None}

    def draw_curve(self, kind, time, values, points, style) -> None:
        if self._current_frame is None:
            return
        self._current_frame["curves"][kind] = {
            "values": np.asarray(values, dtype=np.float64).tolist(),
            "point_times": times_of(points).tolist(),
            "point_values": values_of(points).tolist(),
            "limits": axis_limits(values, style),
        }

    def draw_marker(self, sample: MotionSample) -> None:
        if self._current_frame is None:
            return
        self._current_frame["marker"] = {
            "t": sample.t,
            "accel": sample.accel,
            "velocity": sample.velocity,
            "position": sample.position,
        }

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()

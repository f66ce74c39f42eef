# MIT License (see LICENSE)
import io
import numpy as np
import pytest
from kinematics_sim import SimulationSession
from kinematics_sim.config import CurveStyle
from kinematics_sim.renderer import (
    BufferedRenderer,
    DebugRenderer,
    NullRenderer,
    axis_limits,
)


def test_axis_limits():
    style = CurveStyle("v", "m/s", "#000", round_to=5.0)
    assert axis_limits(np.array([-3.0, 12.0]), style) == (-5.0, 15.0)

    wide = CurveStyle("x", "m", "#000", round_to=5.0, min_range=20.0)
    assert axis_limits(np.array([0.0, 5.0]), wide) == (-7.5, 12.5)

    # Flat zero curve still gets a non-empty range
    lo, hi = axis_limits(np.zeros(3), style)
    assert hi > lo


def test_debug_renderer_output():
    out = io.StringIO()
    s = SimulationSession()
    DebugRenderer(output=out, verbose=True).render_session(s)

    text = out.getvalue()
    print(text)
    assert text.startswith("=== Frame t=0.0000 ===")
    for kind in ("acceleration", "velocity", "position"):
        assert kind in text
    assert "@ x=0.00" in text
    # Two draggable interior points per curve
    assert text.count("  * t=") == 6


def test_buffered_renderer_follows_listener():
    s = SimulationSession()
    renderer = BufferedRenderer()
    s.add_listener(lambda event: renderer.render_session(s))

    s.update_acceleration(s.accel_points)
    s.step()

    # update -> curves; step -> pause + step playback events
    assert len(renderer.frames) == 3
    last = renderer.frames[-1]
    assert last["time"] == pytest.approx(0.1)
    assert set(last["curves"]) == {"acceleration", "velocity", "position"}
    vel = last["curves"]["velocity"]
    assert len(vel["values"]) == len(s.time)
    assert vel["point_times"] == [0.0, 1.5, 3.0, 5.0]
    assert last["marker"]["t"] == pytest.approx(0.1)

    renderer.clear()
    assert renderer.frames == []


def test_null_renderer():
    NullRenderer().render_session(SimulationSession())

# MIT License (see LICENSE)
import numpy as np
import pytest
from kinematics_sim import SimulationSession, SimulationConfig, make_points
from kinematics_sim.profiler import Profiler


def test_default_session_scenario():
    """
    Default sketch with the end-velocity lock:
      accel is biased by +2.5 → [2.5, 17.5, -17.5, 2.5]
      accel changes sign at t = 2.25
      velocity ends at rest, the point travels ~45.8 m
    """
    s = SimulationSession()

    assert len(s.time) == 501
    assert [p.value for p in s.accel_points] == pytest.approx([2.5, 17.5, -17.5, 2.5])
    assert s.velocity[-1] == pytest.approx(0.0, abs=1e-6)
    assert s.position[-1] == pytest.approx(8.4375 + 29.0625 + 25.0 / 3.0)

    first_negative = s.time[np.argmax(s.accel < 0)]
    assert 2.1 <= first_negative <= 2.4

    # Velocity never reverses; Hermite position may dip a few cm
    # just before the end where velocity approaches zero.
    assert np.all(s.velocity >= -1e-9)
    steps = np.diff(s.position)
    assert np.all(steps > -0.01)
    assert np.max(np.maximum.accumulate(s.position) - s.position) < 0.2


def test_lock_end_velocity_on_update():
    s = SimulationSession()
    s.update_acceleration(make_points([(0, 3), (1, 7), (2.5, -1), (4, 6), (5, 0)]))

    assert s.velocity[-1] == pytest.approx(0.0, abs=1e-6)


def test_unlocked_keeps_raw_acceleration():
    s = SimulationSession(lock_end_velocity=False)
    assert [p.value for p in s.accel_points] == [0.0, 15.0, -20.0, 0.0]

    s.update_acceleration([(0, 1), (5, 1)])
    assert s.velocity[-1] == pytest.approx(5.0)
    assert s.position[-1] == pytest.approx(12.5)


def test_unsorted_edit_anchors_window_ends():
    s = SimulationSession(lock_end_velocity=False)
    s.update_acceleration([(5, 0), (0, 0), (1.5, 15), (3, -20)])

    assert [(p.t, p.is_draggable) for p in s.accel_points] == [
        (0.0, False), (1.5, True), (3.0, True), (5.0, False),
    ]
    assert [p.is_draggable for p in s.velocity_points] == [False, True, True, False]


def test_lock_toggle_takes_effect_on_next_edit():
    s = SimulationSession()
    s.lock_end_velocity = False
    s.update_acceleration(s.accel_points)
    assert s.velocity[-1] == pytest.approx(0.0, abs=1e-6)

    s.update_acceleration([(0, 1), (5, 1)])
    assert s.velocity[-1] == pytest.approx(5.0)


def test_update_velocity_round_trip():
    s = SimulationSession()
    before = s.series

    s.update_velocity(s.velocity_points)

    assert s.series is not before
    assert np.allclose(s.velocity, before.velocity, atol=1e-9)
    assert np.allclose(s.position, before.position, atol=1e-9)


def test_update_velocity_changes_acceleration():
    s = SimulationSession(lock_end_velocity=False)
    edited = list(s.velocity_points)
    edited[1] = edited[1].with_value(15.0)

    s.update_velocity(edited)

    assert [p.value for p in s.accel_points] == pytest.approx([0.0, 20.0, -30.0, 0.0])
    assert s.velocity_points[1].value == pytest.approx(15.0)


def test_update_position_recomputes_everything():
    s = SimulationSession()
    edited = list(s.position_points)
    edited[1] = edited[1].with_value(edited[1].value + 5.0)

    s.update_position(edited)

    assert len(s.accel_points) == 4
    assert np.all(np.isfinite(s.position))
    assert s.position_points[0].value == 0.0
    assert s.velocity_points[0].value == 0.0


def test_update_dispatch():
    s = SimulationSession(lock_end_velocity=False)
    s.update("acceleration", [(0, 2), (5, 2)])
    assert s.velocity[-1] == pytest.approx(10.0)

    with pytest.raises(ValueError):
        s.update("jerk", [(0, 0), (5, 0)])
    with pytest.raises(ValueError):
        s.points("jerk")


def test_preset_ease_in_out():
    s = SimulationSession()
    s.preset_ease_in_out()

    assert [p.t for p in s.accel_points] == pytest.approx([0.0, 1.5, 3.5, 5.0])
    # Symmetric sketch: area is already zero, no bias applied
    assert [p.value for p in s.accel_points] == pytest.approx([0.0, 18.0, -18.0, 0.0])
    assert s.velocity[-1] == pytest.approx(0.0, abs=1e-6)


def test_reset_restores_defaults():
    s = SimulationSession()
    s.update_acceleration([(0, 1), (2, 4), (5, 0)])
    s.step()
    s.reset()

    assert s.current_time == 0.0
    assert s.real_elapsed_time == 0.0
    assert not s.is_playing
    assert [p.value for p in s.accel_points] == pytest.approx([2.5, 17.5, -17.5, 2.5])


def test_listeners():
    s = SimulationSession()
    events = []
    s.add_listener(events.append)

    s.update_acceleration(s.accel_points)
    s.play()
    s.pause()
    assert events == ["curves", "playback", "playback"]

    s.remove_listener(events.append)
    s.reset()
    assert len(events) == 3


def test_profiler_times_recomputes():
    prof = Profiler()
    s = SimulationSession(profiler=prof)
    assert prof.stats.count("recompute") == 1

    s.update_acceleration(s.accel_points)
    s.update_velocity(s.velocity_points)
    summary = prof.stats.summary()
    print("recompute", summary["recompute"])
    assert summary["recompute"]["n"] == 3


def test_sample_at():
    s = SimulationSession()

    start = s.sample_at(0.0)
    assert start.position == 0.0
    assert start.accel == pytest.approx(2.5)

    end = s.sample_at(99.0)
    assert end.t == s.max_time
    assert end.position == pytest.approx(s.position[-1])

    s.current_time = 1.5
    here = s.current_sample()
    assert here.velocity == pytest.approx(15.0, abs=1e-6)
    assert s.progress == pytest.approx(0.3)


def test_custom_config_window():
    cfg = SimulationConfig(max_time=2.0, dt=0.05, default_accel=((0, 1), (2, 1)))
    s = SimulationSession(config=cfg, lock_end_velocity=False)

    assert len(s.time) == cfg.sample_count == 41
    assert s.velocity[-1] == pytest.approx(2.0)

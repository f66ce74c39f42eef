# MIT License (see LICENSE)
import numpy as np
import pytest
from kinematics_sim.constants import ACCELERATION, POSITION, VELOCITY
from kinematics_sim.types import ControlPoint, DenseSeries, KinematicsResult, as_points, make_points
from kinematics_sim.core.invariants import cumulative_trapezoid, integrate


def test_make_points_flags_and_floats():
    pts = make_points([(0, 1), (np.float32(2.5), 3), ControlPoint(5, 0, True)])

    assert [p.is_draggable for p in pts] == [False, True, False]
    assert all(type(p.t) is float and type(p.value) is float for p in pts)

    with pytest.raises(TypeError):
        make_points([(0, 1, 2)])
    with pytest.raises(TypeError):
        make_points([3.0])


def test_as_points_keeps_given_flags():
    given = (ControlPoint(0, 0, True), ControlPoint(1, 1, False))
    assert as_points(given) == given
    assert as_points([(0, 0), (1, 1)])[0].is_draggable is False


def test_dense_series_columns():
    s = DenseSeries.zeros(np.linspace(0, 1, 5))
    assert len(s) == 5
    assert s.column(ACCELERATION) is s.accel
    assert s.column(VELOCITY) is s.velocity
    assert s.column(POSITION) is s.position
    with pytest.raises(ValueError):
        s.column("jerk")
    with pytest.raises(ValueError):
        DenseSeries([0, 1], [0], [0, 1], [0, 1])


def test_result_points_by_kind():
    a = make_points([(0, 1), (1, 1)])
    v = make_points([(0, 0), (1, 1)])
    x = make_points([(0, 0), (1, 0.5)])
    result = KinematicsResult(DenseSeries.zeros(np.zeros(2)), a, v, x)

    assert result.points(ACCELERATION) is a
    assert result.points(VELOCITY) is v
    assert result.points(POSITION) is x
    with pytest.raises(ValueError):
        result.points("jerk")


def test_cumulative_trapezoid():
    t = np.linspace(0.0, 2.0, 201)
    running = cumulative_trapezoid(2.0 * t, t)

    assert running[0] == 0.0
    assert np.allclose(running, t ** 2, atol=1e-12)
    assert integrate(np.ones(3), np.array([0.0, 0.5, 1.5])) == pytest.approx(1.5)
    assert integrate(np.ones(1), np.zeros(1)) == 0.0

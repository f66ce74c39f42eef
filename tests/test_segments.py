# MIT License (see LICENSE)
import pytest
from kinematics_sim.types import ControlPoint, make_points
from kinematics_sim.core.segments import (
    _interpolate_sorted,
    interpolate_linear,
    compute_quadratic_segment,
    compute_cubic_segment,
)


def test_linear_unsorted_and_clamped():
    """Points arrive out of order; outside the range the ends are held."""
    pts = (ControlPoint(2.0, 4.0), ControlPoint(0.0, 0.0), ControlPoint(1.0, 2.0))

    assert interpolate_linear(pts, 0.5) == pytest.approx(1.0)
    assert interpolate_linear(pts, 1.5) == pytest.approx(3.0)
    assert interpolate_linear(pts, -1.0) == 0.0
    assert interpolate_linear(pts, 5.0) == 4.0


def test_presorted_sampling_matches_public_helper():
    pts = make_points([(0, 0), (1.5, 15), (3, -20), (5, 0)])
    for t in (-1.0, 0.0, 0.75, 1.5, 2.2, 4.9, 5.0, 6.0):
        assert _interpolate_sorted(pts, t) == interpolate_linear(pts, t)
    assert _interpolate_sorted((), 1.0) == 0.0


def test_linear_hits_control_points_exactly():
    pts = make_points([(0, 0), (1.5, 15), (3, -20), (5, 0)])
    for p in pts:
        assert interpolate_linear(pts, p.t) == p.value


def test_linear_duplicate_times_and_empty():
    """A vertical step must not divide by zero."""
    pts = make_points([(0, 0), (1, 1), (1, 5), (2, 5)])
    assert interpolate_linear(pts, 1.0) == pytest.approx(1.0)
    assert interpolate_linear(pts, 1.5) == pytest.approx(5.0)
    assert interpolate_linear((), 1.0) == 0.0


def test_quadratic_endpoints():
    args = (1.0, 3.0, 2.0, 2.5, -4.0, 7.0)
    assert compute_quadratic_segment(*args, 1.0) == 3.0
    assert compute_quadratic_segment(*args, 2.5) == -4.0


def test_quadratic_constant_acceleration_is_linear():
    """
    With a0 == a1 the midpoint correction vanishes and the Bezier
    degenerates to the straight line v = a·t.
    """
    for t in (0.0, 0.7, 2.5, 4.1, 5.0):
        v = compute_quadratic_segment(0.0, 0.0, 2.0, 5.0, 10.0, 2.0, t)
        assert v == pytest.approx(2.0 * t, abs=1e-12)


def test_quadratic_midpoint_correction():
    """At τ = 1/2 the blend equals (v0 + 2·v_mid + v1)/4."""
    t0, v0, a0, t1, v1, a1 = 0.0, 0.0, 2.5, 1.5, 15.0, 17.5
    v_mid = (v0 + v1) / 2 + (a0 - a1) * (t1 - t0) / 8
    expected = 0.25 * v0 + 0.5 * v_mid + 0.25 * v1
    assert compute_quadratic_segment(t0, v0, a0, t1, v1, a1, 0.75) == pytest.approx(expected)


def test_zero_length_segments_return_left_value():
    assert compute_quadratic_segment(1.0, 3.0, 0.0, 1.0, 9.0, 0.0, 1.0) == 3.0
    assert compute_cubic_segment(1.0, 2.0, 0.0, 1.0, 8.0, 0.0, 1.0) == 2.0


def test_cubic_reproduces_quadratic_motion():
    """
    Constant acceleration a = 2 from rest:
      x(t) = t²,  v(t) = 2t
    Hermite interpolation is exact for polynomials up to degree 3.
    """
    for t in (0.0, 1.0, 2.5, 4.2, 5.0):
        x = compute_cubic_segment(0.0, 0.0, 0.0, 5.0, 25.0, 10.0, t)
        assert x == pytest.approx(t * t, abs=1e-12)


def test_cubic_endpoint_slopes():
    """Finite-difference slope at each end matches the given velocity."""
    t0, x0, v0, t1, x1, v1 = 0.0, 1.0, 3.0, 2.0, 2.0, -1.0
    h = 1e-6

    def x(t):
        return compute_cubic_segment(t0, x0, v0, t1, x1, v1, t)

    assert x(t0) == x0
    assert x(t1) == pytest.approx(x1, abs=1e-12)
    assert (x(t0 + h) - x(t0)) / h == pytest.approx(v0, abs=1e-4)
    assert (x(t1) - x(t1 - h)) / h == pytest.approx(v1, abs=1e-4)

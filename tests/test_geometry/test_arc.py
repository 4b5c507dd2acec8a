"""Tests for endpoint-to-center arc parameterization."""

import math

import pytest

from penpath.geometry.arc import center_parameterize
from penpath.geometry.point import Point


def _assert_close(a: Point, b: Point, tol: float = 1e-9) -> None:
    assert a.x == pytest.approx(b.x, abs=tol)
    assert a.y == pytest.approx(b.y, abs=tol)


def test_semicircle_positive_sweep():
    params = center_parameterize(Point(0, 0), Point(2, 0), 1, 1, 0, False, True)
    _assert_close(params.center, Point(1, 0))
    assert params.start_angle == pytest.approx(math.pi)
    assert params.sweep_angle == pytest.approx(math.pi)
    _assert_close(params.to_curve().at(0.5), Point(1, -1))


def test_semicircle_negative_sweep_keeps_its_sign():
    params = center_parameterize(Point(0, 0), Point(2, 0), 1, 1, 0, False, False)
    assert params.sweep_angle == pytest.approx(-math.pi)
    _assert_close(params.to_curve().at(0.5), Point(1, 1))


def test_small_and_large_arc_choose_opposite_centers():
    small = center_parameterize(Point(0, 0), Point(2, 0), 2, 2, 0, False, True)
    large = center_parameterize(Point(0, 0), Point(2, 0), 2, 2, 0, True, True)

    _assert_close(small.center, Point(1, math.sqrt(3)))
    _assert_close(large.center, Point(1, -math.sqrt(3)))
    assert small.sweep_angle == pytest.approx(math.pi / 3)
    assert large.sweep_angle == pytest.approx(5 * math.pi / 3)


def test_radii_too_small_are_scaled_up():
    params = center_parameterize(Point(0, 0), Point(4, 0), 1, 1, 0, False, True)
    assert params.rx == pytest.approx(2.0)
    assert params.ry == pytest.approx(2.0)
    _assert_close(params.center, Point(2, 0))
    _assert_close(params.to_curve().at(0.5), Point(2, -2))


def test_negative_radii_use_magnitude():
    params = center_parameterize(Point(0, 0), Point(2, 0), -1, -1, 0, False, True)
    assert params.rx == pytest.approx(1.0)
    assert params.ry == pytest.approx(1.0)


def test_rotation_is_reduced_and_converted():
    assert center_parameterize(Point(0, 0), Point(2, 0), 3, 1, 390, False, True).rotation == pytest.approx(
        math.radians(30)
    )
    assert center_parameterize(Point(0, 0), Point(2, 0), 3, 1, -30, False, True).rotation == pytest.approx(
        math.radians(-30)
    )


@pytest.mark.parametrize("large_arc", [False, True])
@pytest.mark.parametrize("sweep", [False, True])
def test_rotated_ellipse_passes_through_both_endpoints(large_arc, sweep):
    start, end = Point(0, 0), Point(10, 5)
    curve = center_parameterize(start, end, 8, 4, 30, large_arc, sweep).to_curve()
    _assert_close(curve.at(0.0), start)
    _assert_close(curve.at(1.0), end)

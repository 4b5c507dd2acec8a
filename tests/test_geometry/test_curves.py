"""Tests for the parametric curve evaluators."""

import math

import pytest

from penpath.geometry.curves import CubicCurve, EllipseCurve, SquareCurve
from penpath.geometry.point import Point


def _close(a: Point, b: Point, tol: float = 1e-9) -> bool:
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


class TestSquareCurve:
    def test_endpoints_are_exact(self):
        curve = SquareCurve(Point(0, 0), Point(5, 10), Point(10, 0))
        assert curve.at(0.0) == Point(0, 0)
        assert curve.at(1.0) == Point(10, 0)

    def test_midpoint(self):
        curve = SquareCurve(Point(0, 0), Point(5, 10), Point(10, 0))
        assert curve.at(0.5) == Point(5.0, 5.0)


class TestCubicCurve:
    def test_endpoints_are_exact(self):
        curve = CubicCurve(Point(1, 2), Point(3, 7), Point(8, -4), Point(9, 0))
        assert curve.at(0.0) == Point(1, 2)
        assert curve.at(1.0) == Point(9, 0)

    def test_midpoint(self):
        curve = CubicCurve(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
        mid = curve.at(0.5)
        assert mid.x == pytest.approx(5.0)
        assert mid.y == pytest.approx(7.5)


class TestEllipseCurve:
    def test_quarter_arc(self):
        curve = EllipseCurve(
            start_angle=0.0,
            sweep_angle=math.pi / 2,
            rx=2.0,
            ry=1.0,
            rotation=0.0,
            center=Point(1, 1),
        )
        assert _close(curve.at(0.0), Point(3, 1))
        assert _close(curve.at(1.0), Point(1, 2))

    def test_rotation_turns_the_axes(self):
        curve = EllipseCurve(
            start_angle=0.0,
            sweep_angle=math.pi,
            rx=2.0,
            ry=1.0,
            rotation=math.pi / 2,
            center=Point(1, 1),
        )
        assert _close(curve.at(0.0), Point(1, 3))
        assert _close(curve.at(1.0), Point(1, -1))

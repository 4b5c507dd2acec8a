"""Closed-form parametric curves. Each maps t in [0, 1] to a Point."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from penpath.geometry.point import Point


class Curve(Protocol):
    def at(self, time: float) -> Point: ...


@dataclass(frozen=True)
class SquareCurve:
    """Quadratic Bézier."""

    start: Point
    p1: Point
    end: Point

    def at(self, time: float) -> Point:
        diff = 1.0 - time
        return self.start * (diff * diff) + self.p1 * (2.0 * time * diff) + self.end * (time * time)


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bézier."""

    start: Point
    p1: Point
    p2: Point
    end: Point

    def at(self, time: float) -> Point:
        diff = 1.0 - time
        square_t = time * time
        square_diff = diff * diff
        return (
            self.start * (square_diff * diff)
            + self.p1 * (3.0 * time * square_diff)
            + self.p2 * (3.0 * square_t * diff)
            + self.end * (square_t * time)
        )


@dataclass(frozen=True)
class EllipseCurve:
    """Center-parameterized elliptical arc.

    ``rotation`` is the x-axis rotation in radians; angles are measured in the
    ellipse's own (unrotated) frame.
    """

    start_angle: float
    sweep_angle: float
    rx: float
    ry: float
    rotation: float
    center: Point

    def at(self, time: float) -> Point:
        angle = self.start_angle + self.sweep_angle * time
        ex = self.rx * math.cos(angle)
        ey = self.ry * math.sin(angle)

        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        return Point(
            cos_r * ex - sin_r * ey + self.center.x,
            sin_r * ex + cos_r * ey + self.center.y,
        )

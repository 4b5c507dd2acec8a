"""PointProducer: the per-segment point source.

The variant set is closed by the path grammar: a segment either emits
nothing, a single point, or a sampled curve. All variants share one class
so the interpreter reads ``end``, ``support_point`` and ``move_type`` the
same way regardless of what the segment turned into.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from penpath.engine.output import MoveType
from penpath.engine.state import SupportPoint
from penpath.geometry.curves import CubicCurve, Curve, EllipseCurve, SquareCurve
from penpath.geometry.point import Point


class ProducerKind(enum.Enum):
    EMPTY = "empty"
    LINE = "line"
    SQUARE_CURVE = "square_curve"
    CUBIC_CURVE = "cubic_curve"
    ELLIPSE_CURVE = "ellipse_curve"


_CURVE_KINDS = frozenset({ProducerKind.SQUARE_CURVE, ProducerKind.CUBIC_CURVE, ProducerKind.ELLIPSE_CURVE})


class PointProducer:
    """Single-pass iterator over the absolute points of one segment."""

    def __init__(
        self,
        kind: ProducerKind,
        end: Point,
        move_type: MoveType = MoveType.DRAW,
        support_point: SupportPoint | None = None,
        curve: Curve | None = None,
        ticks: Iterator[float] | None = None,
    ) -> None:
        if kind in _CURVE_KINDS and (curve is None or ticks is None):
            raise ValueError(f"{kind.name} producer needs a curve and ticks")
        self.kind = kind
        self.end = end
        self.move_type = move_type
        self.support_point = support_point
        self.curve = curve
        self._ticks = ticks
        self._emitted_line = False

    @classmethod
    def empty(cls, end: Point) -> PointProducer:
        return cls(ProducerKind.EMPTY, end, move_type=MoveType.FLY)

    @classmethod
    def line(
        cls,
        end: Point,
        move_type: MoveType = MoveType.DRAW,
        support_point: SupportPoint | None = None,
    ) -> PointProducer:
        return cls(ProducerKind.LINE, end, move_type=move_type, support_point=support_point)

    @classmethod
    def square(cls, curve: SquareCurve, ticks: Iterator[float], support_point: SupportPoint) -> PointProducer:
        return cls(ProducerKind.SQUARE_CURVE, curve.end, support_point=support_point, curve=curve, ticks=ticks)

    @classmethod
    def cubic(cls, curve: CubicCurve, ticks: Iterator[float], support_point: SupportPoint) -> PointProducer:
        return cls(ProducerKind.CUBIC_CURVE, curve.end, support_point=support_point, curve=curve, ticks=ticks)

    @classmethod
    def ellipse(cls, curve: EllipseCurve, ticks: Iterator[float], end: Point) -> PointProducer:
        return cls(ProducerKind.ELLIPSE_CURVE, end, curve=curve, ticks=ticks)

    def __iter__(self) -> PointProducer:
        return self

    def __next__(self) -> Point:
        if self.kind is ProducerKind.EMPTY:
            raise StopIteration
        if self.kind is ProducerKind.LINE:
            if self._emitted_line:
                raise StopIteration
            self._emitted_line = True
            return self.end

        time = next(self._ticks)
        # Pin the arc's final sample to the exact endpoint the next segment resolves against
        if self.kind is ProducerKind.ELLIPSE_CURVE and time == 1.0:
            return self.end
        return self.curve.at(time)

    def __repr__(self) -> str:
        return f"PointProducer({self.kind.name}, end={self.end}, move_type={self.move_type.name})"

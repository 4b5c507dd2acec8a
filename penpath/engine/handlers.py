"""Per-command segment handlers.

Each handler resolves the segment's coordinates against the current state
and returns the PointProducer for it. Handlers never touch the state; the
interpreter derives the next state from the producer.
"""

from __future__ import annotations

import logging

from penpath.engine.output import MoveType
from penpath.engine.producers import PointProducer
from penpath.engine.registry import handler
from penpath.engine.sampling import SamplingPolicy
from penpath.engine.segments import (
    CUBIC_FAMILY,
    QUADRATIC_FAMILY,
    ClosePath,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
)
from penpath.engine.state import PathState, SupportPoint
from penpath.geometry.arc import center_parameterize
from penpath.geometry.curves import CubicCurve, SquareCurve
from penpath.geometry.lane import is_point_on_lane
from penpath.geometry.point import Point

logger = logging.getLogger(__name__)


def resolve(current: Point, absolute: bool, x: float, y: float) -> Point:
    """Absolute coordinates pass through; relative ones are offsets from ``current``."""
    if absolute:
        return Point(x, y)
    return Point(x, y) + current


def mirrored_point(
    current: Point,
    absolute: bool,
    support_point: SupportPoint | None,
    family: frozenset[PathCommand],
) -> Point:
    """Reflect the previous control point about ``current``.

    Returns coordinates in the segment's own frame (an offset for relative
    commands), so the caller resolves them like any other control point.
    Without a support point of the same family the tangent collapses to zero.
    """
    if support_point is not None and support_point.command in family:
        mirrored = current - support_point.point
    else:
        mirrored = Point.ZERO

    if absolute:
        mirrored = mirrored + current
    return mirrored


@handler(PathCommand.MOVE_TO, description="Reposition the pen without drawing")
def move_to(state: PathState, segment: MoveTo, sampling: SamplingPolicy) -> PointProducer:
    end = resolve(state.current, segment.absolute, segment.x, segment.y)
    return PointProducer.line(end, MoveType.FLY)


@handler(PathCommand.LINE_TO, description="Straight stroke")
def line_to(state: PathState, segment: LineTo, sampling: SamplingPolicy) -> PointProducer:
    end = resolve(state.current, segment.absolute, segment.x, segment.y)
    return PointProducer.line(end)


@handler(PathCommand.HORIZONTAL_LINE_TO, description="Horizontal stroke")
def horizontal_line_to(state: PathState, segment: HorizontalLineTo, sampling: SamplingPolicy) -> PointProducer:
    missing = state.current.y if segment.absolute else 0.0
    end = resolve(state.current, segment.absolute, segment.x, missing)
    return PointProducer.line(end)


@handler(PathCommand.VERTICAL_LINE_TO, description="Vertical stroke")
def vertical_line_to(state: PathState, segment: VerticalLineTo, sampling: SamplingPolicy) -> PointProducer:
    missing = state.current.x if segment.absolute else 0.0
    end = resolve(state.current, segment.absolute, missing, segment.y)
    return PointProducer.line(end)


@handler(PathCommand.CLOSE_PATH, description="Stroke back to the subpath start")
def close_path(state: PathState, segment: ClosePath, sampling: SamplingPolicy) -> PointProducer:
    return PointProducer.line(state.subpath_start)


def _cubic(
    state: PathState,
    command: PathCommand,
    absolute: bool,
    c1: tuple[float, float],
    c2: tuple[float, float],
    target: tuple[float, float],
    sampling: SamplingPolicy,
) -> PointProducer:
    current = state.current
    p1 = resolve(current, absolute, *c1)
    p2 = resolve(current, absolute, *c2)
    end = resolve(current, absolute, *target)
    support = SupportPoint(command, p2)

    tolerance = sampling.lane_tolerance
    if is_point_on_lane(current, end, p1, tolerance) and is_point_on_lane(current, end, p2, tolerance):
        logger.debug("Cubic to %s has control points on its chord, drawing a line", end)
        return PointProducer.line(end, support_point=support)

    curve = CubicCurve(current, p1, p2, end)
    return PointProducer.cubic(curve, sampling.ticks((current, p1, p2, end)), support)


@handler(PathCommand.CURVE_TO, description="Cubic Bézier")
def curve_to(state: PathState, segment: CurveTo, sampling: SamplingPolicy) -> PointProducer:
    return _cubic(
        state,
        segment.command,
        segment.absolute,
        (segment.x1, segment.y1),
        (segment.x2, segment.y2),
        (segment.x, segment.y),
        sampling,
    )


@handler(PathCommand.SMOOTH_CURVE_TO, description="Cubic Bézier with mirrored first control point")
def smooth_curve_to(state: PathState, segment: SmoothCurveTo, sampling: SamplingPolicy) -> PointProducer:
    p1 = mirrored_point(state.current, segment.absolute, state.support_point, CUBIC_FAMILY)
    return _cubic(
        state,
        segment.command,
        segment.absolute,
        (p1.x, p1.y),
        (segment.x2, segment.y2),
        (segment.x, segment.y),
        sampling,
    )


def _quadratic(
    state: PathState,
    command: PathCommand,
    absolute: bool,
    c1: tuple[float, float],
    target: tuple[float, float],
    sampling: SamplingPolicy,
) -> PointProducer:
    current = state.current
    p1 = resolve(current, absolute, *c1)
    end = resolve(current, absolute, *target)
    support = SupportPoint(command, p1)

    if is_point_on_lane(current, end, p1, sampling.lane_tolerance):
        logger.debug("Quadratic to %s has its control point on the chord, drawing a line", end)
        return PointProducer.line(end, support_point=support)

    curve = SquareCurve(current, p1, end)
    return PointProducer.square(curve, sampling.ticks((current, p1, end)), support)


@handler(PathCommand.QUADRATIC, description="Quadratic Bézier")
def quadratic(state: PathState, segment: Quadratic, sampling: SamplingPolicy) -> PointProducer:
    return _quadratic(
        state,
        segment.command,
        segment.absolute,
        (segment.x1, segment.y1),
        (segment.x, segment.y),
        sampling,
    )


@handler(PathCommand.SMOOTH_QUADRATIC, description="Quadratic Bézier with mirrored control point")
def smooth_quadratic(state: PathState, segment: SmoothQuadratic, sampling: SamplingPolicy) -> PointProducer:
    p1 = mirrored_point(state.current, segment.absolute, state.support_point, QUADRATIC_FAMILY)
    return _quadratic(
        state,
        segment.command,
        segment.absolute,
        (p1.x, p1.y),
        (segment.x, segment.y),
        sampling,
    )


@handler(PathCommand.ELLIPTICAL_ARC, description="Elliptical arc")
def elliptical_arc(state: PathState, segment: EllipticalArc, sampling: SamplingPolicy) -> PointProducer:
    current = state.current
    end = resolve(current, segment.absolute, segment.x, segment.y)

    # Identical endpoints: the arc is omitted entirely (SVG F.6.2)
    if end == current:
        return PointProducer.empty(end)

    # A zero radius makes the arc a straight line (SVG F.6.2)
    if segment.rx == 0 or segment.ry == 0:
        logger.debug("Arc to %s has a zero radius, drawing a line", end)
        return PointProducer.line(end)

    params = center_parameterize(
        current,
        end,
        segment.rx,
        segment.ry,
        segment.x_axis_rotation,
        segment.large_arc,
        segment.sweep,
    )
    curve = params.to_curve()
    # Coarse polyline along the arc, only used to size length-based sampling
    outline = [curve.at(t) for t in (0.0, 0.25, 0.5, 0.75, 1.0)]
    return PointProducer.ellipse(curve, sampling.ticks(outline), end)

"""Collinearity ("lane") test used to flatten degenerate curves."""

from __future__ import annotations

from penpath.geometry.point import Point

# Ratio difference below which a control point counts as lying on the chord.
LANE_TOLERANCE = 0.05


def is_point_on_lane(
    lane_start: Point,
    lane_end: Point,
    point: Point,
    tolerance: float = LANE_TOLERANCE,
) -> bool:
    """Compare how far ``point`` sits along the chord on each axis.

    x_ratio = (p.x - start.x) / (end.x - start.x), likewise for y; an axis with
    no extent contributes a ratio of 0. The point is on the lane when the two
    ratios differ by less than ``tolerance``.

    On an axis-aligned chord the flat axis carries no ratio, so the point's
    offset on that axis is measured against the chord's length instead.
    """
    vector = lane_end - lane_start
    offset = point - lane_start

    x_ratio = 0.0 if vector.x == 0 else offset.x / vector.x
    y_ratio = 0.0 if vector.y == 0 else offset.y / vector.y

    if vector.x == 0 and vector.y != 0:
        x_ratio = y_ratio + offset.x / vector.y
    elif vector.y == 0 and vector.x != 0:
        y_ratio = x_ratio + offset.y / vector.x

    return abs(x_ratio - y_ratio) < tolerance

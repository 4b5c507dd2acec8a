"""Leaf geometry: points, tick sampling, lane test, curves, arc conversion."""

from penpath.geometry.arc import ArcParameters, center_parameterize
from penpath.geometry.curves import CubicCurve, Curve, EllipseCurve, SquareCurve
from penpath.geometry.lane import LANE_TOLERANCE, is_point_on_lane
from penpath.geometry.point import Point
from penpath.geometry.sampling import TICK_PERIOD, TickSampler, curve_tick_step

__all__ = [
    "ArcParameters",
    "center_parameterize",
    "CubicCurve",
    "Curve",
    "EllipseCurve",
    "SquareCurve",
    "LANE_TOLERANCE",
    "is_point_on_lane",
    "Point",
    "TICK_PERIOD",
    "TickSampler",
    "curve_tick_step",
]

"""Typed path segments: the interpreter's input vocabulary.

Each segment carries an ``absolute`` flag (SVG upper-case commands) and
its numeric parameters. Producing these from path syntax is the job of
an external parser; see ``penpath.svg.parser`` for the svgpathtools adapter.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class PathCommand(enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUADRATIC = "Q"
    SMOOTH_QUADRATIC = "T"
    ELLIPTICAL_ARC = "A"
    CLOSE_PATH = "Z"


# Families whose trailing control point a smooth variant may mirror.
CUBIC_FAMILY = frozenset({PathCommand.CURVE_TO, PathCommand.SMOOTH_CURVE_TO})
QUADRATIC_FAMILY = frozenset({PathCommand.QUADRATIC, PathCommand.SMOOTH_QUADRATIC})


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.MOVE_TO


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.LINE_TO


@dataclass(frozen=True)
class HorizontalLineTo:
    x: float
    absolute: bool = True

    command = PathCommand.HORIZONTAL_LINE_TO


@dataclass(frozen=True)
class VerticalLineTo:
    y: float
    absolute: bool = True

    command = PathCommand.VERTICAL_LINE_TO


@dataclass(frozen=True)
class CurveTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.CURVE_TO


@dataclass(frozen=True)
class SmoothCurveTo:
    x2: float
    y2: float
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.SMOOTH_CURVE_TO


@dataclass(frozen=True)
class Quadratic:
    x1: float
    y1: float
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.QUADRATIC


@dataclass(frozen=True)
class SmoothQuadratic:
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.SMOOTH_QUADRATIC


@dataclass(frozen=True)
class EllipticalArc:
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    absolute: bool = True

    command = PathCommand.ELLIPTICAL_ARC


@dataclass(frozen=True)
class ClosePath:
    absolute: bool = True

    command = PathCommand.CLOSE_PATH


PathSegment = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CurveTo,
    SmoothCurveTo,
    Quadratic,
    SmoothQuadratic,
    EllipticalArc,
    ClosePath,
]

SEGMENT_TYPES: tuple[type, ...] = (
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CurveTo,
    SmoothCurveTo,
    Quadratic,
    SmoothQuadratic,
    EllipticalArc,
    ClosePath,
)

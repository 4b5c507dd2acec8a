"""penpath: flatten vector path segments into a lazy stream of pen moves."""

from penpath.engine import (
    ClosePath,
    CurveTo,
    EllipticalArc,
    FlattenConfig,
    Flattener,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    MoveType,
    PenMove,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
    points_from_path_segments,
)
from penpath.geometry.point import Point

__version__ = "0.1.0"

__all__ = [
    "ClosePath",
    "CurveTo",
    "EllipticalArc",
    "FlattenConfig",
    "Flattener",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "MoveType",
    "PenMove",
    "Point",
    "Quadratic",
    "SmoothCurveTo",
    "SmoothQuadratic",
    "VerticalLineTo",
    "points_from_path_segments",
]

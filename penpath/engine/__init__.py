"""penpath segment interpreter."""

from penpath.engine.config import FlattenConfig
from penpath.engine.interpreter import points_from_path_segments, step
from penpath.engine.output import MoveType, PenMove, as_polylines
from penpath.engine.pipeline import Flattener, create_flattener
from penpath.engine.producers import PointProducer, ProducerKind
from penpath.engine.registry import HandlerRegistry, HandlerSpec, get_registry, handler
from penpath.engine.sampling import SamplingPolicy
from penpath.engine.segments import (
    ClosePath,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    PathSegment,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
)
from penpath.engine.state import PathState, SupportPoint

__all__ = [
    "FlattenConfig",
    "points_from_path_segments",
    "step",
    "MoveType",
    "PenMove",
    "as_polylines",
    "Flattener",
    "create_flattener",
    "PointProducer",
    "ProducerKind",
    "HandlerRegistry",
    "HandlerSpec",
    "get_registry",
    "handler",
    "SamplingPolicy",
    "ClosePath",
    "CurveTo",
    "EllipticalArc",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathSegment",
    "Quadratic",
    "SmoothCurveTo",
    "SmoothQuadratic",
    "VerticalLineTo",
    "PathState",
    "SupportPoint",
]

"""Segment interpreter: folds path segments into a lazy stream of pen moves.

    state_0 = PathState()
    state_n+1, producer_n = step(state_n, segment_n)

Every point of ``producer_n`` is emitted before ``segment_n+1`` is looked at,
so a consumer that stops early never pays for the rest of the path.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import penpath.engine.handlers  # noqa: F401  (registers the command handlers)
from penpath.engine.output import PenMove
from penpath.engine.producers import PointProducer
from penpath.engine.registry import HandlerRegistry, get_registry
from penpath.engine.sampling import SamplingPolicy, default_policy
from penpath.engine.segments import SEGMENT_TYPES, PathSegment
from penpath.engine.state import PathState


def step(
    state: PathState,
    segment: PathSegment,
    sampling: SamplingPolicy | None = None,
    registry: HandlerRegistry | None = None,
) -> tuple[PathState, PointProducer]:
    """Interpret one segment: old state in, new state and its point producer out."""
    if not isinstance(segment, SEGMENT_TYPES):
        raise TypeError(f"Expected a path segment, got {type(segment).__name__}")

    entry = (registry or get_registry()).get(segment.command)
    producer = entry.fn(state, segment, sampling or default_policy())
    next_state = state.advance(segment.command, producer.end, producer.support_point)
    return next_state, producer


def points_from_path_segments(
    segments: Iterable[PathSegment],
    sampling: SamplingPolicy | None = None,
    registry: HandlerRegistry | None = None,
) -> Iterator[PenMove]:
    """Lazily flatten ``segments`` into tagged absolute points."""
    state = PathState()
    for segment in segments:
        state, producer = step(state, segment, sampling, registry)
        move_type = producer.move_type
        for point in producer:
            yield PenMove(move_type, point)

"""Flattener: configured entry point over the segment interpreter."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from penpath.engine.config import FlattenConfig
from penpath.engine.interpreter import points_from_path_segments
from penpath.engine.output import PenMove, as_polylines
from penpath.engine.registry import HandlerRegistry, get_registry
from penpath.engine.sampling import SamplingPolicy
from penpath.engine.segments import PathSegment

logger = logging.getLogger(__name__)


class Flattener:
    """Turns path segments into pen moves under one configuration."""

    def __init__(
        self,
        config: FlattenConfig | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self.config = config or FlattenConfig()
        self.sampling = SamplingPolicy(self.config)
        self.registry = registry or get_registry()

        missing = self.registry.missing()
        if missing:
            logger.warning(
                "Registry has no handler for: %s",
                ", ".join(sorted(c.name for c in missing)),
            )
        if self.config.adaptive_sampling:
            logger.info(
                "Length-based sampling enabled: curve density no longer follows the fixed %.4g step",
                self.config.tick_step,
            )

    def flatten(self, segments: Iterable[PathSegment]) -> Iterator[PenMove]:
        """Lazily flatten ``segments``; logs a summary once the stream is exhausted."""
        start = time.perf_counter()
        segment_count = 0

        def _tap(items: Iterable[PathSegment]) -> Iterator[PathSegment]:
            nonlocal segment_count
            for item in items:
                segment_count += 1
                yield item

        points = 0
        for move in points_from_path_segments(_tap(segments), self.sampling, self.registry):
            points += 1
            yield move

        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Flattened %d segments into %d points in %.1fms", segment_count, points, elapsed)

    def polylines(self, segments: Iterable[PathSegment]) -> list[NDArray[np.float64]]:
        """Flatten eagerly and group the strokes into Nx2 arrays."""
        return as_polylines(self.flatten(segments))


def create_flattener(config: FlattenConfig | None = None) -> Flattener:
    """Factory function for creating a flattener instance."""
    return Flattener(config=config)

"""TickSampler: lazy, fixed-step time values over [0, 1].

The default step of 0.001 gives 1001 ticks per curve regardless of the
curve's length. ``curve_tick_step`` offers the opt-in length-based policy.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from penpath.geometry.point import Point
from penpath.utils.geometry import points_to_array, polyline_length

logger = logging.getLogger(__name__)

TICK_PERIOD = 0.001

# Rounding slack when the last tick of a 1/n step lands a hair off 1.0.
_END_SNAP = 1e-12


class TickSampler:
    """Single-pass iterator of ``0.0, step, 2*step, ...`` up to and including 1.0.

    Values are ``index * step`` rather than an accumulated sum, so the last
    tick of the default sampler lands exactly on 1.0.
    """

    def __init__(self, step: float = TICK_PERIOD) -> None:
        if step <= 0:
            raise ValueError(f"Tick step must be positive, got {step}")
        self.step = step
        self._index = 0
        self._done = False

    def __iter__(self) -> TickSampler:
        return self

    def __next__(self) -> float:
        if self._done:
            raise StopIteration
        time = self._index * self.step
        if abs(time - 1.0) <= _END_SNAP:
            time = 1.0
        elif time > 1.0:
            self._done = True
            raise StopIteration
        self._index += 1
        return time

    @property
    def tick_count(self) -> int:
        """Number of ticks a fresh sampler with this step yields."""
        return math.floor(1.0 / self.step + 1e-9) + 1


def curve_tick_step(
    control_points: Sequence[Point],
    samples_per_unit: float,
    min_samples: int,
    max_samples: int,
) -> float:
    """Length-based step: ceil(control polygon length * density), clamped."""
    length = polyline_length(points_to_array(control_points))
    count = math.ceil(length * samples_per_unit)
    count = max(min_samples, min(max_samples, count))
    logger.debug("Control polygon length %.3f -> %d samples", length, count)
    return 1.0 / count

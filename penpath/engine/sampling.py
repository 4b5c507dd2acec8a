"""Sampling policy: hands each curve a fresh TickSampler."""

from __future__ import annotations

from collections.abc import Sequence

from penpath.engine.config import FlattenConfig
from penpath.geometry.point import Point
from penpath.geometry.sampling import TickSampler, curve_tick_step


class SamplingPolicy:
    """Fixed density by default; length-based when ``adaptive_sampling`` is on."""

    def __init__(self, config: FlattenConfig | None = None) -> None:
        self.config = config or FlattenConfig()
        self.config.validate()

    @property
    def lane_tolerance(self) -> float:
        return self.config.lane_tolerance

    def ticks(self, control_points: Sequence[Point]) -> TickSampler:
        cfg = self.config
        if not cfg.adaptive_sampling:
            return TickSampler(cfg.tick_step)
        step = curve_tick_step(
            control_points,
            cfg.samples_per_unit,
            cfg.min_curve_samples,
            cfg.max_curve_samples,
        )
        return TickSampler(step)


_default_policy: SamplingPolicy | None = None


def default_policy() -> SamplingPolicy:
    global _default_policy
    if _default_policy is None:
        _default_policy = SamplingPolicy()
    return _default_policy

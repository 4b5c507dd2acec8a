"""Flattening configuration: sampling density and degeneracy tolerance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from penpath.geometry.lane import LANE_TOLERANCE
from penpath.geometry.sampling import TICK_PERIOD

if TYPE_CHECKING:
    from penpath.config import Settings


@dataclass
class FlattenConfig:
    """Controls how curves are sampled and when they degrade to lines."""

    # Fixed-density sampling: 1/tick_step + 1 ticks per curve
    tick_step: float = TICK_PERIOD

    # Lane test: max ratio difference for a control point to sit on the chord
    lane_tolerance: float = LANE_TOLERANCE

    # Length-based sampling (opt-in; changes output density)
    adaptive_sampling: bool = False
    samples_per_unit: float = 10.0
    min_curve_samples: int = 16
    max_curve_samples: int = 1000

    def validate(self) -> None:
        if not 0 < self.tick_step <= 1:
            raise ValueError(f"tick_step must be in (0, 1], got {self.tick_step}")
        # Ticks must land on t=1.0 so each curve ends on its resolved end point
        ticks = 1 / self.tick_step
        if abs(ticks - round(ticks)) > 1e-9:
            raise ValueError(f"tick_step must divide 1 evenly, got {self.tick_step}")
        if self.lane_tolerance <= 0:
            raise ValueError("lane_tolerance must be positive")
        if self.samples_per_unit <= 0:
            raise ValueError("samples_per_unit must be positive")
        if self.min_curve_samples < 1:
            raise ValueError("min_curve_samples must be at least 1")
        if self.max_curve_samples < self.min_curve_samples:
            raise ValueError("max_curve_samples must not be below min_curve_samples")

    @classmethod
    def from_settings(cls, settings: Settings) -> FlattenConfig:
        return cls(
            tick_step=settings.penpath_tick_step,
            lane_tolerance=settings.penpath_lane_tolerance,
            adaptive_sampling=settings.penpath_adaptive_sampling,
        )

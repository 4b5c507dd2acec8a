"""PathState: the cursor threaded from one segment to the next.

State is immutable: each interpreter step takes the old state and returns a
new one alongside the segment's point producer.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from penpath.engine.segments import PathCommand
from penpath.geometry.point import Point


@dataclass(frozen=True)
class SupportPoint:
    """Trailing control point of the most recent cubic or quadratic curve."""

    # Command that produced it; smooth variants only mirror their own family
    command: PathCommand
    # Always absolute
    point: Point


@dataclass(frozen=True)
class PathState:
    # Absolute pen position
    current: Point = Point.ZERO
    # Where the active subpath began; ClosePath returns here
    subpath_start: Point = Point.ZERO
    # False at sequence start and after ClosePath
    subpath_started: bool = False
    # Set only when the previous segment was a cubic/quadratic curve
    support_point: SupportPoint | None = None

    def advance(
        self,
        command: PathCommand,
        end: Point,
        support_point: SupportPoint | None,
    ) -> PathState:
        """Return the state after a segment of ``command`` ending at ``end``."""
        if command is PathCommand.CLOSE_PATH:
            return replace(self, current=end, subpath_started=False, support_point=support_point)
        if not self.subpath_started:
            return PathState(
                current=end,
                subpath_start=end,
                subpath_started=True,
                support_point=support_point,
            )
        return replace(self, current=end, support_point=support_point)

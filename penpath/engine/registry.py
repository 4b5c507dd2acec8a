"""Segment handler registry: one handler per path command, registered via decorator.

Usage:
    @handler(PathCommand.LINE_TO)
    def line_to(state: PathState, segment: LineTo, sampling: SamplingPolicy) -> PointProducer:
        return PointProducer.line(resolve(state.current, segment.absolute, segment.x, segment.y))

Every command in ``PathCommand`` must have exactly one handler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from penpath.engine.segments import PathCommand

if TYPE_CHECKING:
    from penpath.engine.producers import PointProducer
    from penpath.engine.sampling import SamplingPolicy
    from penpath.engine.state import PathState

logger = logging.getLogger(__name__)

HandlerFn = Callable[["PathState", Any, "SamplingPolicy"], "PointProducer"]


@dataclass
class HandlerSpec:
    command: PathCommand
    fn: HandlerFn
    description: str = ""


class HandlerRegistry:
    """Maps each path command to the handler that turns it into points."""

    def __init__(self) -> None:
        self._handlers: dict[PathCommand, HandlerSpec] = {}

    def register(self, spec: HandlerSpec) -> None:
        if spec.command in self._handlers:
            raise ValueError(f"Duplicate handler for command: {spec.command.name}")
        self._handlers[spec.command] = spec
        logger.debug("Registered handler for %s", spec.command.name)

    def get(self, command: PathCommand) -> HandlerSpec:
        try:
            return self._handlers[command]
        except KeyError:
            raise KeyError(f"No handler registered for command: {command.name}") from None

    def missing(self) -> set[PathCommand]:
        return set(PathCommand) - set(self._handlers)

    @property
    def count(self) -> int:
        return len(self._handlers)


# Module-level singleton
_registry = HandlerRegistry()


def get_registry() -> HandlerRegistry:
    return _registry


def handler(command: PathCommand, *, description: str = ""):
    """Decorator to register a segment handler."""

    def decorator(fn: HandlerFn) -> HandlerFn:
        _registry.register(HandlerSpec(command=command, fn=fn, description=description))
        return fn

    return decorator

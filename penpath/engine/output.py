"""Emitted points and helpers for consumers of the point stream."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from penpath.geometry.point import Point
from penpath.utils.geometry import points_to_array


class MoveType(enum.Enum):
    FLY = "fly"  # reposition without drawing
    DRAW = "draw"  # visible stroke
    ERASE = "erase"  # remove previously drawn


@dataclass(frozen=True)
class PenMove:
    """A point tagged with how the pen reaches it."""

    move_type: MoveType
    point: Point

    @classmethod
    def fly(cls, point: Point) -> PenMove:
        return cls(MoveType.FLY, point)

    @classmethod
    def draw(cls, point: Point) -> PenMove:
        return cls(MoveType.DRAW, point)

    @classmethod
    def erase(cls, point: Point) -> PenMove:
        return cls(MoveType.ERASE, point)


def as_polylines(moves: Iterable[PenMove]) -> list[NDArray[np.float64]]:
    """Group a move stream into Nx2 stroke arrays.

    A Fly starts a new polyline anchored at its point; Draw points extend
    the current one. Erase points are not part of any stroke and are skipped.
    Polylines with fewer than two points draw nothing and are dropped.
    """
    polylines: list[list[Point]] = []
    current: list[Point] = []

    for move in moves:
        if move.move_type is MoveType.FLY:
            if len(current) >= 2:
                polylines.append(current)
            current = [move.point]
        elif move.move_type is MoveType.DRAW:
            current.append(move.point)

    if len(current) >= 2:
        polylines.append(current)

    return [points_to_array(line) for line in polylines]

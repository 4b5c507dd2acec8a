"""2D point value type with vector arithmetic. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """Immutable (x, y) pair. Scalars broadcast to both axes."""

    x: float
    y: float

    ZERO: ClassVar["Point"]

    def __add__(self, other: Point | Number) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return Point(self.x + other, self.y + other)

    def __sub__(self, other: Point | Number) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return Point(self.x - other, self.y - other)

    def __mul__(self, scalar: Number) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


Point.ZERO = Point(0.0, 0.0)

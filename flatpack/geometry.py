"""Small 2D vector and rectangle types used throughout the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def center(self) -> Vec2:
        return Vec2(self.left + self.width / 2.0, self.top + self.height / 2.0)

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or None when the rectangles do not overlap."""
        min_x1, max_x1 = self._span_x()
        min_y1, max_y1 = self._span_y()
        min_x2, max_x2 = other._span_x()
        min_y2, max_y2 = other._span_y()

        left = max(min_x1, min_x2)
        top = max(min_y1, min_y2)
        right = min(max_x1, max_x2)
        bottom = min(max_y1, max_y2)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles share some area; touching edges do not count."""
        return self.intersection(other) is not None

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; left/top edges are inclusive, right/bottom exclusive."""
        min_x, max_x = self._span_x()
        min_y, max_y = self._span_y()
        return min_x <= x < max_x and min_y <= y < max_y


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def normalize(v: Vec2) -> Vec2:
    """Unit vector in the direction of v; a zero vector is returned unchanged."""
    length = v.length()
    if length != 0:
        return Vec2(v.x / length, v.y / length)
    return v
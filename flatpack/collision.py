"""Collision side detection and separating-axis tests."""

from __future__ import annotations

import enum
import math
from typing import Sequence

from flatpack.geometry import Rect, Vec2, dot, normalize


class CollisionSide(enum.Enum):
    """Side of the first rectangle that touched the second."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def collision_side(bounds1: Rect, bounds2: Rect) -> CollisionSide:
    """Return which side of bounds1 hit bounds2, judged by the smallest overlap."""
    if not bounds1.intersects(bounds2):
        return CollisionSide.NONE

    left_overlap = bounds1.right - bounds2.left
    right_overlap = bounds2.right - bounds1.left
    top_overlap = bounds1.bottom - bounds2.top
    bottom_overlap = bounds2.bottom - bounds1.top

    smallest = min(left_overlap, right_overlap, top_overlap, bottom_overlap)
    if smallest == left_overlap:
        return CollisionSide.RIGHT
    if smallest == right_overlap:
        return CollisionSide.LEFT
    if smallest == top_overlap:
        return CollisionSide.BOTTOM
    return CollisionSide.TOP


def _project(vertices: Sequence[Vec2], axis: Vec2) -> tuple[float, float]:
    projections = [dot(vertex, axis) for vertex in vertices]
    return min(projections), max(projections)


def sat_overlap(vertices1: Sequence[Vec2], vertices2: Sequence[Vec2]) -> bool:
    """Test the edge normals of the first polygon only; False means a separating axis was found."""
    count = len(vertices1)
    for index, vertex in enumerate(vertices1):
        edge = vertices1[(index + 1) % count] - vertex
        axis = normalize(Vec2(-edge.y, edge.x))
        min1, max1 = _project(vertices1, axis)
        min2, max2 = _project(vertices2, axis)
        if max1 < min2 or max2 < min1:
            return False
    return True


def polygons_collide(vertices1: Sequence[Vec2], vertices2: Sequence[Vec2]) -> bool:
    """Full separating-axis test between two convex polygons."""
    return sat_overlap(vertices1, vertices2) and sat_overlap(vertices2, vertices1)


def transformed_corners(
    position, origin, scale, rotation: float, width: float, height: float
) -> list[Vec2]:
    """Corners of a width x height box after origin, scale, rotation (degrees) and translation."""
    position = Vec2(*position)
    origin = Vec2(*origin)
    scale_x, scale_y = scale
    radians = math.radians(rotation)
    cos_a, sin_a = math.cos(radians), math.sin(radians)

    def transform(x: float, y: float) -> Vec2:
        local_x = (x - origin.x) * scale_x
        local_y = (y - origin.y) * scale_y
        return Vec2(
            local_x * cos_a - local_y * sin_a + position.x,
            local_x * sin_a + local_y * cos_a + position.y,
        )

    return [
        transform(0.0, 0.0),
        transform(width, 0.0),
        transform(width, height),
        transform(0.0, height),
    ]
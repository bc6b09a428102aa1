"""Base game entity and the static background."""

from __future__ import annotations

from typing import Any

from flatpack.collision import collision_side, transformed_corners
from flatpack.geometry import Rect, Vec2


class Entity:
    """A positioned, sized game object living in a world."""

    def __init__(self, position) -> None:
        self.position = Vec2(*position)
        self.velocity = Vec2(0.0, 0.0)
        self.should_be_dead = False
        self.priority_layer = 0
        self.name = ""
        self.id = -1
        self.world: Any = None
        self.width = 0.0
        self.height = 0.0
        self.origin = Vec2(0.0, 0.0)
        self.scale = Vec2(1.0, 1.0)
        self.rotation = 0.0
        self.invisible = False
        self.solid = True
        self.is_grounded = False

    def is_on_screen(self) -> bool:
        """True when the position lies within the world's current screen part."""
        if self.world is None:
            return False
        return self.world.part_bounds().contains(self.position.x, self.position.y)

    def corners(self) -> list[Vec2]:
        """The four transformed corners of the entity's box."""
        return transformed_corners(
            self.position, self.origin, self.scale, self.rotation, self.width, self.height
        )

    def bounds(self) -> Rect:
        """Axis-aligned bounding box of the transformed entity."""
        points = self.corners()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def update(self, delta_time: float) -> None:
        """Advance behaviour by delta_time; plain entities have none."""

    def on_collision(self, other: Entity) -> None:
        """React to a confirmed collision with other."""

    def collide(self, other: Entity):
        """Record contact with other and return the side of self that was hit.

        Landing on top of a solid entity marks this entity as grounded.
        """
        side = collision_side(self.bounds(), other.bounds())
        if other.solid and side.name.lower() == "bottom":
            self.is_grounded = True
        return side


class Background(Entity):
    """A scenery image stretched to a given size, drawn behind everything."""

    def __init__(self, x: float, y: float, width: float, height: float, texture_path: str) -> None:
        super().__init__(Vec2(x, y))
        self.texture_path = texture_path
        self.original_width = width
        self.original_height = height
        self.width = width
        self.height = height
        self.priority_layer = -1000

    def is_on_screen(self) -> bool:
        """Backgrounds are always treated as visible."""
        return True
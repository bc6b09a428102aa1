"""Solid ground blocks, some of which fall or bob up and down."""

from __future__ import annotations

import math

from flatpack.entity import Entity
from flatpack.geometry import Vec2

_BOB_AMPLITUDE = 150.0
_BOB_FREQUENCY = 0.2


def _set_what(terrain: Terrain, value: str) -> None:
    terrain.what = float(value)


def _get_what(terrain: Terrain) -> str:
    return f"{terrain.what:f}"


class Terrain(Entity):
    """A tiled block of ground.

    Its behaviour is chosen by ``what``: 0 is static, 1 falls once a player
    touches it, 2 moves up and down on a sine wave.
    """

    gravity = 980.0

    def __init__(self, x: int, y: int, width: int, height: int, texture_path: str) -> None:
        super().__init__(Vec2(x, y))
        self.width = float(width)
        self.height = float(height)
        self.texture_path = texture_path
        self.priority_layer = -1
        self.what = 0.0
        self.is_falling = False
        self.max_fall_speed = 800.0
        self.vertical_velocity = 0.0
        self.original_position = self.position
        self.elapsed_time = 0.0

    def on_collision(self, other: Entity) -> None:
        """A falling block starts to drop when a player lands on it."""
        if self.what == 1 and getattr(other, "is_player", False):
            self.is_falling = True

    def update(self, delta_time: float) -> None:
        if self.what == 1 and self.is_falling:
            self.vertical_velocity = min(
                self.vertical_velocity + self.gravity * delta_time, self.max_fall_speed
            )
            self.position = Vec2(
                self.position.x, self.position.y + self.vertical_velocity * delta_time
            )
            if not self.is_on_screen():
                self.should_be_dead = True
        elif self.what == 2:
            self.elapsed_time += delta_time
            offset = _BOB_AMPLITUDE * math.sin(
                2 * math.pi * _BOB_FREQUENCY * self.elapsed_time
            )
            self.position = Vec2(self.position.x, self.original_position.y + offset)

    @staticmethod
    def property_descriptors():
        """Editable properties as (name, default, setter, getter) tuples."""
        return [("what", "0", _set_what, _get_what)]
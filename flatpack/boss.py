"""The final boss: follows the player and attacks harder as it weakens."""

from __future__ import annotations

import math

from flatpack.entity import Entity
from flatpack.geometry import Vec2

_MOVEMENT_SPEED = 70.0
_PI = 3.14159

# (laser interval, table interval or None) for each phase
_PHASE_INTERVALS = {
    1: (10.0, None),
    2: (5.0, 10.0),
    3: (0.05, 5.0),
}


class Boss(Entity):
    """Its colour doubles as its health: every bullet hit darkens it."""

    def __init__(self, position) -> None:
        super().__init__(position)
        self.texture_path = "../imgs/ikeaman.png"
        self.eye_texture_path = "../imgs/redeye.png"
        self.origin = Vec2(103.0, 73.0)
        self.has_appeared_on_screen = False
        self.max_health = 255
        self.current_phase = 1
        self.color = (255, 255, 255)
        self.laser_timer = 0.0
        self.table_timer = 0.0
        self.attack_timer = 0.0
        self.plank_timer = 0.0

    def reset_timers(self) -> None:
        self.laser_timer = 0.0
        self.table_timer = 0.0
        self.attack_timer = 0.0
        self.plank_timer = 0.0

    def _advance_timers(self, delta_time: float) -> None:
        self.laser_timer += delta_time
        self.table_timer += delta_time
        self.attack_timer += delta_time
        self.plank_timer += delta_time

    @property
    def health_fraction(self) -> float:
        return sum(self.color) / (3.0 * 255.0)

    def update(self, delta_time: float) -> None:
        self._advance_timers(delta_time)
        if not self.has_appeared_on_screen:
            if not self.is_on_screen():
                return
            self.has_appeared_on_screen = True

        world = self.world
        if not world.is_player_valid:
            return

        player = world.player_ref
        player_center = player.bounds().center
        direction = player_center - self.position
        distance = direction.length()
        if distance > 0:
            direction = direction / distance

        if getattr(player, "is_moving", False):
            self.position = self.position + direction * (_MOVEMENT_SPEED * delta_time)

        if player_center.x < self.position.x and self.scale.y > 0:
            self.scale = Vec2(self.scale.x, -self.scale.y)
        elif player_center.x > self.position.x and self.scale.y < 0:
            self.scale = Vec2(self.scale.x, -self.scale.y)

        self.rotation = (math.atan2(direction.y, direction.x) * 180 / _PI) % 360.0

        health = self.health_fraction
        if health <= 0.3:
            self.current_phase = 3
        elif health <= 0.6:
            self.current_phase = 2

        laser_interval, table_interval = _PHASE_INTERVALS[self.current_phase]
        if self.laser_timer >= laser_interval:
            world.spawn_named("laser", self.position.x, self.position.y, self.rotation)
            self.laser_timer = 0.0
        if table_interval is not None and self.table_timer >= table_interval:
            world.spawn_named("table", player_center.x, world.part_bounds().top, self.rotation)
            self.table_timer = 0.0

    def on_collision(self, other: Entity) -> None:
        """Each rifle bullet takes 2 off every colour channel; black means dead."""
        if other.name != "akBullet":
            return
        self.color = tuple(max(0, channel - 2) for channel in self.color)
        if self.color == (0, 0, 0):
            self.should_be_dead = True
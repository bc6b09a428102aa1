"""The chomping enemy that flies in a line or homes in on the player."""

from __future__ import annotations

import math

from flatpack.animation import Animation
from flatpack.geometry import Vec2

_START_COLOR = (255, 255, 0)
_END_COLOR = (128, 0, 128)


def _wrap_degrees(angle: float) -> float:
    return angle % 360.0


def _set_speed(pacman: PacMan, value: str) -> None:
    pacman.speed = float(value)


def _get_speed(pacman: PacMan) -> str:
    return f"{pacman.speed:f}"


def _set_degrees(pacman: PacMan, value: str) -> None:
    pacman.degrees = float(value)


def _get_degrees(pacman: PacMan) -> str:
    return f"{pacman.degrees:f}"


def _set_what(pacman: PacMan, value: str) -> None:
    pacman.what = int(float(value))


def _get_what(pacman: PacMan) -> str:
    return str(pacman.what)


class PacMan(Animation):
    """Flies along ``degrees`` (what == 0) or chases the player (what == 1) for a limited time."""

    rotation_speed = 180.0
    min_speed = 50.0
    max_speed = 300.0

    def __init__(self, position) -> None:
        super().__init__(position, 0.1)
        self.solid = False
        self.priority_layer = 3
        self.has_appeared_on_screen = False
        self.life_timer = 0.0
        self.life_duration = 5.0
        self.speed = 100.0
        self.degrees = 0.0
        self.what = 0
        self.sound_playing = False
        self.start_color = _START_COLOR
        self.end_color = _END_COLOR
        self.color = self.start_color
        self.load_spritesheet("../imgs/pacmann.png", 32, 32)
        self.add_animation("default", 0, 3)
        self.set_animation("default")
        self.origin = Vec2(16.0, 16.0)

    def steer_towards(self, target, delta_time: float) -> None:
        """Turn towards target at a limited rate and adjust speed by alignment."""
        target = Vec2(*target)
        direction = target - self.position
        distance = direction.length()
        if distance > 0:
            direction = direction / distance

        angle_to_target = math.degrees(math.atan2(direction.y, direction.x))
        current_angle = self.rotation
        difference = angle_to_target - current_angle
        while difference > 180:
            difference -= 360
        while difference < -180:
            difference += 360

        current_speed = self.velocity.length()
        effective_rate = self.rotation_speed * (2.0 - min(1.0, current_speed / self.max_speed))
        step = effective_rate * delta_time
        if abs(difference) < step:
            current_angle = angle_to_target
        else:
            current_angle += step if difference > 0 else -step
        self.rotation = _wrap_degrees(current_angle)

        radians = math.radians(current_angle)
        self.velocity = Vec2(math.cos(radians) * self.speed, math.sin(radians) * self.speed)

        alignment = direction.x * self.velocity.x + direction.y * self.velocity.y
        multiplier = 1.2 if alignment > 0 else 0.8
        self.speed = max(self.min_speed, min(self.max_speed, self.speed * multiplier))

    def update_direction(self) -> None:
        """Fly in a straight line along ``degrees`` (measured anticlockwise)."""
        if self.what != 0:
            return
        radians = math.radians(360.0 - self.degrees)
        self.velocity = Vec2(math.cos(radians) * self.speed, math.sin(radians) * self.speed)
        self.rotation = _wrap_degrees(math.degrees(math.atan2(self.velocity.y, self.velocity.x)))

    def _stop_sound(self) -> None:
        self.sound_playing = False

    def _update_sound(self) -> None:
        should_play = self.has_appeared_on_screen and self.is_on_screen()
        if should_play and not self.sound_playing:
            self.sound_playing = True
        elif not should_play and self.sound_playing:
            self._stop_sound()

    def _blend_color(self, progress: float) -> tuple[int, int, int]:
        return tuple(
            int(start + (end - start) * progress)
            for start, end in zip(self.start_color, self.end_color)
        )

    def update(self, delta_time: float) -> None:
        if not self.has_appeared_on_screen:
            if not self.is_on_screen():
                return
            if self.what == 1:
                self.life_duration = 10.0
            self.has_appeared_on_screen = True
            self.life_timer = 0.0

        player = getattr(self.world, "player_ref", None) if self.world is not None else None
        if self.what == 1 and player is not None:
            self.steer_towards(player.position, delta_time)
            self.color = self._blend_color(self.life_timer / self.life_duration)
        else:
            self.update_direction()

        self._update_sound()

        self.life_timer += delta_time
        if self.life_timer >= self.life_duration:
            self._stop_sound()
            self.should_be_dead = True

        super().update(delta_time)

    def should_remove(self) -> bool:
        """True once the lifetime is used up."""
        expired = self.life_timer >= self.life_duration
        if expired:
            self._stop_sound()
        return expired

    @staticmethod
    def property_descriptors():
        """Editable properties as (name, default, setter, getter) tuples."""
        return [
            ("speed", "100.0", _set_speed, _get_speed),
            ("degrees", "0.0", _set_degrees, _get_degrees),
            ("what", "0", _set_what, _get_what),
        ]
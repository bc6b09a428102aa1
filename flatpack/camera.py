"""A smoothly following 2D camera."""

from __future__ import annotations

from flatpack.geometry import Rect, Vec2

_MOVING_EPSILON = 0.01


class Camera:
    """Camera that eases towards a target position."""

    def __init__(self, width: float, height: float) -> None:
        self.size = Vec2(float(width), float(height))
        self.position = Vec2(width / 2.0, height / 2.0)
        self.target = self.position
        self.zoom = 1.0
        self.smoothness = 5.0

    def set_position(self, position, teleport: bool = False) -> None:
        """Aim at position; jump there immediately when teleport is set."""
        position = Vec2(*position)
        self.target = position
        if teleport:
            self.position = position

    def set_size(self, size) -> None:
        self.size = Vec2(*size)

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom factor; non-positive values are ignored."""
        if zoom > 0.0:
            self.zoom = zoom

    def set_smoothness(self, smoothness: float) -> None:
        """Set the easing rate; negative values are ignored, zero means instant."""
        if smoothness >= 0.0:
            self.smoothness = smoothness

    @property
    def view_size(self) -> Vec2:
        return self.size / self.zoom

    def update(self, delta_time: float) -> None:
        """Move the camera towards its target."""
        if self.smoothness > 0.0:
            self.position = self.position + (self.target - self.position) * (
                self.smoothness * delta_time
            )
        else:
            self.position = self.target

    def move_to_next_part(self, dx: int, dy: int, teleport: bool = False) -> None:
        """Shift the target by whole screens."""
        new_target = Vec2(self.target.x + dx * self.size.x, self.target.y + dy * self.size.y)
        self.set_position(new_target, teleport)

    def is_moving(self) -> bool:
        return (
            abs(self.position.x - self.target.x) > _MOVING_EPSILON
            or abs(self.position.y - self.target.y) > _MOVING_EPSILON
        )

    def view_bounds(self) -> Rect:
        """The world rectangle currently visible."""
        view = self.view_size
        return Rect(
            self.position.x - view.x / 2.0,
            self.position.y - view.y / 2.0,
            view.x,
            view.y,
        )
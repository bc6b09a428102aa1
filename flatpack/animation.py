"""Sprite-sheet animation and the short 'happy end' effect."""

from __future__ import annotations

from flatpack.entity import Entity
from flatpack.geometry import Rect


class Animation(Entity):
    """An entity whose texture rectangle steps through named rows of a sprite sheet."""

    def __init__(self, position, frame_interval: float) -> None:
        super().__init__(position)
        self.frame_interval = frame_interval
        self.current_frame = 0
        self.frame_time = 0.0
        self.cell_width = 0
        self.cell_height = 0
        self.paused = False
        self.flipped = False
        self.texture_path = ""
        self.animations: dict[str, list[Rect]] = {}
        self.current_animation = ""

    def load_spritesheet(self, filename: str, cell_width: int, cell_height: int) -> None:
        """Use filename as the sheet, cut into cells of the given size."""
        self.texture_path = filename
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.width = float(cell_width)
        self.height = float(cell_height)

    def add_animation(self, name: str, row: int, frame_count: int) -> None:
        """Register frame_count cells of the given sheet row under name."""
        self.animations[name] = [
            Rect(column * self.cell_width, row * self.cell_height, self.cell_width, self.cell_height)
            for column in range(frame_count)
        ]

    @property
    def frames(self) -> list[Rect]:
        """Frames of the current animation, empty when none is selected."""
        return self.animations.get(self.current_animation, [])

    def update(self, delta_time: float) -> None:
        """Advance to the next frame once the frame interval has elapsed."""
        if self.paused or not self.animations or not self.current_animation:
            return
        self.frame_time += delta_time
        if self.frame_time >= self.frame_interval:
            self.frame_time = 0.0
            self.current_frame = (self.current_frame + 1) % len(self.frames)

    def set_animation(self, name: str) -> None:
        """Switch to a known animation, restarting at its first frame."""
        if name != self.current_animation and name in self.animations:
            self.current_animation = name
            self.current_frame = 0

    def set_frame_interval(self, interval: float) -> None:
        self.frame_interval = interval

    def set_current_frame(self, frame: int) -> None:
        """Jump to a frame of the current animation; out-of-range frames are ignored."""
        if 0 <= frame < len(self.frames):
            self.current_frame = frame

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def texture_rect(self) -> Rect | None:
        """The sheet rectangle to draw; mirrored horizontally unless the sprite is flipped."""
        frames = self.frames
        if not frames:
            return None
        rect = frames[self.current_frame]
        if not self.flipped:
            return Rect(rect.left + rect.width, rect.top, -rect.width, rect.height)
        return rect


class HappyEnd(Animation):
    """A one-shot effect that removes itself after playing through once."""

    def __init__(self, position) -> None:
        super().__init__(position, 0.1)
        self.animation_completed = False
        self.priority_layer = 6
        self.load_spritesheet("../imgs/HappyEnd.png", 32, 32)
        self.add_animation("go", 0, 5)
        self.set_animation("go")
        self.origin = type(self.origin)(16.0, 16.0)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.current_frame == 4:
            if self.animation_completed:
                self.should_be_dead = True
            self.animation_completed = True
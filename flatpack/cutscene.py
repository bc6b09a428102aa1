"""A slideshow of images that fade in and out in turn."""

from __future__ import annotations

from flatpack.geometry import Vec2


class CutScene:
    """Fades each frame in, then out, then pauses before the next one."""

    def __init__(
        self,
        frame_sizes,
        window_size,
        frame_duration: float = 0.0,
        pause_duration: float = 0.0,
    ) -> None:
        self.frame_sizes = [(float(width), float(height)) for width, height in frame_sizes]
        self.window_size = Vec2(*window_size)
        self.frame_duration = frame_duration
        self.pause_duration = pause_duration
        self.current_frame = 0
        self.fade_time = 0.0
        self.is_finished = False
        self.is_paused = False
        self.alpha = 0

    @property
    def center(self) -> Vec2:
        """Where every frame is centred."""
        return self.window_size / 2.0

    def frame_scale(self) -> float:
        """Uniform scale that fits the current frame inside the window."""
        if self.current_frame >= len(self.frame_sizes):
            raise IndexError("no current frame")
        width, height = self.frame_sizes[self.current_frame]
        return min(self.window_size.x / width, self.window_size.y / height)

    def update(self, delta_time: float) -> bool:
        """Advance the scene; returns True once every frame has been shown."""
        if self.is_finished:
            return True

        self.fade_time += delta_time

        if self.is_paused:
            if self.fade_time >= self.pause_duration:
                self.is_paused = False
                self.fade_time = 0.0
                self.current_frame += 1
                if self.current_frame >= len(self.frame_sizes):
                    self.is_finished = True
                    return True
                self.alpha = 0
        else:
            half = self.frame_duration / 2.0
            if self.fade_time < half:
                self.alpha = int(self.fade_time / half * 255)
            elif self.fade_time < self.frame_duration:
                self.alpha = int((1.0 - (self.fade_time - half) / half) * 255)
            else:
                self.is_paused = True
                self.fade_time = 0.0

        return False
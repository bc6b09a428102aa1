"""The main menu and the game-over screen."""

from __future__ import annotations

from dataclasses import dataclass

from flatpack.geometry import Rect, Vec2

YELLOW = (255, 255, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@dataclass
class Button:
    """A clickable rectangle with a label."""

    position: Vec2
    size: Vec2
    fill_color: tuple[int, int, int] = WHITE
    label: str = ""

    @property
    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies on the button."""
        return self.rect.contains(x, y)


class MainMenu:
    """A single centred Play button that lights up under the mouse."""

    def __init__(self, window_size) -> None:
        width, height = window_size
        size = Vec2(200.0, 50.0)
        self.play_button = Button(
            Vec2((width - size.x) / 2, (height - size.y) / 2), size, YELLOW, "Play"
        )

    def is_play_button_clicked(self, x: float, y: float) -> bool:
        return self.play_button.contains(x, y)

    def update_button_color(self, x: float, y: float) -> None:
        """Red while hovered, yellow otherwise."""
        self.play_button.fill_color = RED if self.play_button.contains(x, y) else YELLOW


class GameOverScreen:
    """The 'Game Over' title with a button back to the menu, and looping music."""

    def __init__(self, window_size) -> None:
        width, height = (int(value) for value in window_size)
        self.title = "Game Over"
        size = Vec2(270.0, 50.0)
        self.return_button = Button(
            Vec2(width // 2 - size.x / 2, height * 2 // 3 - size.y / 2),
            size,
            WHITE,
            "Return to Menu",
        )
        self.music_file = "../audio/gameOverMusic.wav"
        self.music_playing = False

    def play_music(self) -> None:
        self.music_playing = True

    def stop_music(self) -> None:
        self.music_playing = False

    def is_playing_music(self) -> bool:
        return self.music_playing

    def handle_click(self, x: float, y: float) -> bool:
        """True when the return button was clicked; the music then stops."""
        if self.return_button.contains(x, y):
            self.stop_music()
            return True
        return False
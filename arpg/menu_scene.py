"""The main menu with its start button."""

from dataclasses import dataclass
from typing import Any, Optional

from .config import Config
from .controls import InputSnapshot, Key
from .geometry import Vector2
from .scene_data import GRAY, WHITE, Color

DARK_GRAY = Color(80, 80, 80, 255)
TITLE = "ARPG - 3D Action RPG"
BUTTON_TEXT = "START GAME"
INSTRUCTIONS = "Use WASD to move, mouse to aim, left click to shoot"
EXIT_HINT = "Press ESC to exit game"


class MenuExit(Exception):
    """Raised when the player asks to leave the game from the menu."""

    def __init__(self, message: str = "User requested exit") -> None:
        super().__init__(message)
        self.type = "exit_requested"
        self.message = message


@dataclass(frozen=True)
class Rectangle:
    """A screen rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Vector2) -> bool:
        """True when the point lies inside; the right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


class MenuScene:
    """The title screen; a click on the button or Enter starts the game."""

    def __init__(self, config: Config, controls: Optional[InputSnapshot] = None) -> None:
        self.config = config
        self.controls = controls if controls is not None else InputSnapshot()
        self._should_transition = False
        self._next_scene = ""
        self.start_button = Rectangle()
        self.start_button_hover = False
        self.title = TITLE
        self.background_color = Color(30, 30, 50, 255)
        self.title_color = WHITE
        self.button_color = Color(70, 70, 120, 255)
        self.button_hover_color = Color(100, 100, 160, 255)
        self.button_text_color = WHITE

    def initialize(self) -> None:
        """Centre the start button and clear any pending transition."""
        button_width = 200.0
        button_height = 60.0
        center_x = self.config.window.width / 2
        center_y = self.config.window.height / 2
        self.start_button = Rectangle(
            center_x - button_width / 2,
            center_y - button_height / 2,
            button_width,
            button_height,
        )
        self._should_transition = False
        self._next_scene = ""

    def update(self, delta_time: float) -> None:
        """Track whether the mouse is over the start button."""
        self.start_button_hover = self.start_button.contains(self.controls.mouse_position())

    def render(self, renderer: Any) -> None:
        """Draw the menu with the given renderer."""
        width = self.config.window.width
        height = self.config.window.height
        renderer.begin_frame()
        renderer.clear_background(self.background_color)

        title_size = 48
        title_x = (width - renderer.measure_text(self.title, title_size)) // 2
        renderer.draw_text(self.title, title_x, height // 4, title_size, self.title_color)

        color = self.button_hover_color if self.start_button_hover else self.button_color
        renderer.draw_rectangle(self.start_button, color)
        renderer.draw_rectangle_lines(self.start_button, 2, WHITE)

        button_size = 24
        text_width = renderer.measure_text(BUTTON_TEXT, button_size)
        rect = self.start_button
        text_x = int(rect.x + (rect.width - text_width) / 2)
        text_y = int(rect.y + (rect.height - button_size) / 2)
        renderer.draw_text(BUTTON_TEXT, text_x, text_y, button_size, self.button_text_color)

        instruction_size = 16
        instruction_x = (width - renderer.measure_text(INSTRUCTIONS, instruction_size)) // 2
        renderer.draw_text(INSTRUCTIONS, instruction_x, height - 100, instruction_size, GRAY)

        hint_size = 14
        hint_x = (width - renderer.measure_text(EXIT_HINT, hint_size)) // 2
        renderer.draw_text(EXIT_HINT, hint_x, height - 60, hint_size, DARK_GRAY)

        renderer.end_frame()

    def handle_input(self, delta_time: float) -> None:
        """Start the game on click or Enter; raise :class:`MenuExit` on Escape."""
        controls = self.controls
        if controls.is_mouse_left_pressed() and self.start_button_hover:
            self._should_transition = True
            self._next_scene = "game"
        if Key.ENTER in controls.pressed:
            self._should_transition = True
            self._next_scene = "game"
        if controls.is_escape_pressed():
            raise MenuExit()

    def cleanup(self) -> None:
        """Drop the hover state; the menu holds no other resources."""
        self.start_button_hover = False

    def name(self) -> str:
        return "menu"

    def should_transition(self) -> bool:
        return self._should_transition

    def next_scene(self) -> str:
        return self._next_scene
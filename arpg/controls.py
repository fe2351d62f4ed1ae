"""Keyboard and mouse state as seen by the game for one frame."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

from .geometry import Vector2


class Key(IntEnum):
    """Keys the game reacts to."""

    SPACE = 32
    A = 65
    D = 68
    P = 80
    R = 82
    S = 83
    W = 87
    ESCAPE = 256
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    F3 = 292
    F11 = 300


class Input(Protocol):
    """The queries the game makes about player input."""

    def is_space_pressed(self) -> bool: ...
    def is_space_down(self) -> bool: ...
    def is_pause_pressed(self) -> bool: ...
    def is_restart_pressed(self) -> bool: ...
    def is_fullscreen_pressed(self) -> bool: ...
    def is_debug_pressed(self) -> bool: ...
    def is_escape_pressed(self) -> bool: ...
    def is_up_pressed(self) -> bool: ...
    def is_down_pressed(self) -> bool: ...
    def is_left_pressed(self) -> bool: ...
    def is_right_pressed(self) -> bool: ...
    def is_up_down(self) -> bool: ...
    def is_down_down(self) -> bool: ...
    def is_left_down(self) -> bool: ...
    def is_right_down(self) -> bool: ...
    def is_mouse_left_pressed(self) -> bool: ...
    def is_mouse_left_down(self) -> bool: ...
    def mouse_position(self) -> Vector2: ...


@dataclass(frozen=True)
class InputSnapshot:
    """Input state of one frame.

    ``pressed`` holds keys that went down this frame, ``down`` the keys
    currently held.
    """

    pressed: frozenset = field(default_factory=frozenset)
    down: frozenset = field(default_factory=frozenset)
    mouse_left_pressed: bool = False
    mouse_left_down: bool = False
    mouse: Vector2 = field(default_factory=Vector2)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pressed", frozenset(Key(k) for k in self.pressed))
        object.__setattr__(self, "down", frozenset(Key(k) for k in self.down))

    def _pressed(self, *keys: Key) -> bool:
        return any(key in self.pressed for key in keys)

    def _down(self, *keys: Key) -> bool:
        return any(key in self.down for key in keys)

    def is_space_pressed(self) -> bool:
        return self._pressed(Key.SPACE)

    def is_space_down(self) -> bool:
        return self._down(Key.SPACE)

    def is_pause_pressed(self) -> bool:
        return self._pressed(Key.P)

    def is_restart_pressed(self) -> bool:
        return self._pressed(Key.R)

    def is_fullscreen_pressed(self) -> bool:
        return self._pressed(Key.F11)

    def is_debug_pressed(self) -> bool:
        return self._pressed(Key.F3)

    def is_escape_pressed(self) -> bool:
        return self._pressed(Key.ESCAPE)

    def is_up_pressed(self) -> bool:
        return self._pressed(Key.W, Key.UP)

    def is_down_pressed(self) -> bool:
        return self._pressed(Key.S, Key.DOWN)

    def is_left_pressed(self) -> bool:
        return self._pressed(Key.A, Key.LEFT)

    def is_right_pressed(self) -> bool:
        return self._pressed(Key.D, Key.RIGHT)

    def is_up_down(self) -> bool:
        return self._down(Key.W, Key.UP)

    def is_down_down(self) -> bool:
        return self._down(Key.S, Key.DOWN)

    def is_left_down(self) -> bool:
        return self._down(Key.A, Key.LEFT)

    def is_right_down(self) -> bool:
        return self._down(Key.D, Key.RIGHT)

    def is_mouse_left_pressed(self) -> bool:
        return self.mouse_left_pressed

    def is_mouse_left_down(self) -> bool:
        return self.mouse_left_down

    def mouse_position(self) -> Vector2:
        return self.mouse
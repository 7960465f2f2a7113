"""Key codes reported by the windowing system's keyboard events."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """Keyboard key codes used by the viewer's controls."""

    KEY_A = 0
    KEY_S = 1
    KEY_D = 2
    KEY_Z = 6
    KEY_X = 7
    KEY_C = 8
    KEY_1 = 18
    KEY_PLUS = 24
    KEY_MINUS = 27
    ESC = 53
    NUM_PLUS = 69
    NUM_MINUS = 78
    ARROW_LEFT = 123
    ARROW_RIGHT = 124
    ARROW_DOWN = 125
    ARROW_UP = 126
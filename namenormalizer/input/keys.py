"""Logical key events produced by the byte decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    TOGGLE = "toggle"
    TOGGLE_ALL = "toggle_all"
    QUIT = "quit"
    START_FILTER = "start_filter"
    CHAR = "char"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key. ``char`` is set only for ``KeyKind.CHAR``."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def of_char(cls, ch: str) -> KeyEvent:
        return cls(KeyKind.CHAR, ch)


UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
ENTER = KeyEvent(KeyKind.ENTER)
TOGGLE = KeyEvent(KeyKind.TOGGLE)
TOGGLE_ALL = KeyEvent(KeyKind.TOGGLE_ALL)
QUIT = KeyEvent(KeyKind.QUIT)
START_FILTER = KeyEvent(KeyKind.START_FILTER)
BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
ESCAPE = KeyEvent(KeyKind.ESCAPE)
OTHER = KeyEvent(KeyKind.OTHER)

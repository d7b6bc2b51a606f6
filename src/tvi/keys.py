"""Decode Textual key events into editor key presses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class KeyAction(Enum):
    CHAR = auto()
    BACKSPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class KeyPress:
    action: KeyAction
    char: str = ""


_NAMED_KEYS = {
    "backspace": KeyAction.BACKSPACE,
    "ctrl+h": KeyAction.BACKSPACE,  # what many terminals send for backspace
    "enter": KeyAction.ENTER,
    "escape": KeyAction.ESCAPE,
    "left": KeyAction.LEFT,
    "right": KeyAction.RIGHT,
    "up": KeyAction.UP,
    "down": KeyAction.DOWN,
}


def decode_key(key: str, character: str | None) -> KeyPress | None:
    """Map a key name and its character to a :class:`KeyPress`.

    Returns ``None`` for keys the editor does not recognize (function keys,
    control chords, tab, ...).
    """
    action = _NAMED_KEYS.get(key)
    if action is not None:
        return KeyPress(action)
    if character and len(character) == 1 and character.isprintable():
        return KeyPress(KeyAction.CHAR, character)
    return None


def decode_event(event) -> KeyPress | None:
    """Decode anything shaped like ``textual.events.Key``."""
    return decode_key(event.key, event.character)

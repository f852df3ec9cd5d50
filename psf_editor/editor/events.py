"""
Input events delivered by a backend, and messages sent back to it.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Key(Enum):
    """Non-character keys the editor understands."""
    ESCAPE = "escape"


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


# A key is either a special key or a single lowercase character
KeyButton = Union[Key, str]


@dataclass(frozen=True)
class KeyPress:
    key: KeyButton


@dataclass(frozen=True)
class KeyRelease:
    key: KeyButton


@dataclass(frozen=True)
class MouseMotion:
    x: int
    y: int


@dataclass(frozen=True)
class MousePress:
    button: MouseButton
    x: int
    y: int


@dataclass(frozen=True)
class MouseRelease:
    x: int
    y: int


@dataclass(frozen=True)
class MouseWheel:
    delta: int


@dataclass(frozen=True)
class CloseRequested:
    """The user closed the window."""


Event = Union[KeyPress, KeyRelease, MouseMotion, MousePress, MouseRelease,
              MouseWheel, CloseRequested]


@dataclass(frozen=True)
class Quit:
    """Ask the host to leave its main loop."""


@dataclass(frozen=True)
class ChangeWindowTitle:
    text: str


Message = Union[Quit, ChangeWindowTitle]

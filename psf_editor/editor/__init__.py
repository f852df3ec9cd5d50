"""
Editor module - Editing state machine, input events, palette and framebuffer.
"""

from .events import (
    Key, MouseButton, KeyPress, KeyRelease, MouseMotion, MousePress,
    MouseRelease, MouseWheel, CloseRequested, Quit, ChangeWindowTitle
)
from .framebuffer import Framebuffer
from .state import EditorState

__all__ = [
    "EditorState",
    "Framebuffer",
    "Key",
    "MouseButton",
    "KeyPress",
    "KeyRelease",
    "MouseMotion",
    "MousePress",
    "MouseRelease",
    "MouseWheel",
    "CloseRequested",
    "Quit",
    "ChangeWindowTitle",
]

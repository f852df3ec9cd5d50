"""
Rendering backend interface and the fixed-timestep main loop.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List

from ..config import UPDATES_PER_SECOND
from ..editor.events import ChangeWindowTitle, Event, Quit
from ..editor.state import EditorState

logger = logging.getLogger('PSFE')


class RenderingBackend(ABC):
    """A window that can show an RGBA framebuffer and report input."""

    @abstractmethod
    def initialize(self, width: int, height: int, title: str) -> None:
        ...

    @abstractmethod
    def present(self, pixels: bytes, width: int) -> None:
        """Show RGBA8888 pixels, ``width`` pixels per row."""

    @abstractmethod
    def poll_input(self) -> List[Event]:
        """Events received since the last call, oldest first."""

    @abstractmethod
    def now(self) -> float:
        """Seconds on a monotonic clock."""

    @abstractmethod
    def set_title(self, text: str) -> None:
        ...

    def shutdown(self) -> None:
        pass


def run_main_loop(backend: RenderingBackend, state: EditorState,
                  updates_per_second: int = UPDATES_PER_SECOND) -> None:
    """
    Drive the editor until it asks to quit.

    Input and updates run at a fixed rate, catching up when a frame took
    longer than one tick. Frames are only redrawn after state changed.
    """
    dt = 1.0 / updates_per_second
    start = backend.now()
    curr_time = 0.0
    running = True

    while running:
        real_time = backend.now() - start

        while running and curr_time < real_time:
            curr_time += dt
            for event in backend.poll_input():
                state.handle_event(event)
            state.update(curr_time, dt)
            running = _apply_messages(backend, state)

        if state.needs_redraw:
            state.render()
            backend.present(state.fb.pixels, state.fb.width)

        if running:
            time.sleep(max(0.0, curr_time - (backend.now() - start)))

    logger.info("Main loop finished")
    backend.shutdown()


def _apply_messages(backend: RenderingBackend, state: EditorState) -> bool:
    """Forward queued messages to the backend. Returns False on Quit."""
    running = True
    for message in state.drain_messages():
        if isinstance(message, ChangeWindowTitle):
            backend.set_title(message.text)
        elif isinstance(message, Quit):
            running = False
    return running

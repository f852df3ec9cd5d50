from __future__ import annotations

from typing import List

from psf_editor.editor.events import Key, KeyPress, MouseButton, MousePress
from psf_editor.editor.state import EditorState
from psf_editor.gui.backend import RenderingBackend, run_main_loop


class FakeBackend(RenderingBackend):
    """Feeds a scripted batch of events per poll on a simulated clock."""

    def __init__(self, batches: List[list]):
        self.batches = list(batches)
        self.clock = 0.0
        self.frames: List[bytes] = []
        self.titles: List[str] = []
        self.polls = 0
        self.closed = False

    def initialize(self, width, height, title):
        self.titles.append(title)

    def present(self, pixels, width):
        self.frames.append(bytes(pixels))

    def poll_input(self):
        self.polls += 1
        return self.batches.pop(0) if self.batches else []

    def now(self):
        self.clock += 0.05
        return self.clock

    def set_title(self, text):
        self.titles.append(text)

    def shutdown(self):
        self.closed = True


def test_loop_runs_until_quit(blank_font_bytes: bytes) -> None:
    state = EditorState(256, 600, blank_font_bytes)
    backend = FakeBackend([
        [MousePress(MouseButton.LEFT, 10 + 5 * 16 + 3, 10 + 2 * 32 + 5)],
        [],
        [KeyPress(Key.ESCAPE)],
        [KeyPress(Key.ESCAPE)],
    ])

    run_main_loop(backend, state, updates_per_second=60)

    assert backend.closed
    assert backend.polls == 3
    assert any("37" in t for t in backend.titles)
    assert backend.frames
    assert len(backend.frames[0]) == 256 * 600 * 4
    assert not state.needs_redraw


def test_loop_skips_present_when_nothing_changed(blank_font_bytes: bytes) -> None:
    state = EditorState(256, 600, blank_font_bytes)
    state.render()
    backend = FakeBackend([[], [], [], [KeyPress(Key.ESCAPE)]])

    run_main_loop(backend, state, updates_per_second=60)

    # Only the frame after the final key press
    assert len(backend.frames) == 1

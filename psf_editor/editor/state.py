"""
Editor State - Turns pointer and keyboard events into glyph edits.

The screen has two areas: the glyph grid in the top-left corner, showing
every glyph at 2x scale, and the edit panel centered in the viewport,
showing the selected glyph at CELL_SIZE scale. A press in the edit panel
latches paint (left button) or erase (right button) until the next release,
so dragging applies the same value to every cell it crosses.
"""

import logging
from typing import List, Optional, Tuple

from ..config import LayoutConfig
from ..core.parser import Font
from ..core.writer import save_path_for, save_psf
from ..core.exporter import export_path_for, export_sheet
from ..i18n import tr
from . import palette
from .events import (
    ChangeWindowTitle, CloseRequested, Event, Key, KeyPress, Message,
    MouseButton, MouseMotion, MousePress, MouseRelease, Quit
)
from .framebuffer import Framebuffer

logger = logging.getLogger('PSFE')

SHRINK_KEY = 'd'
SAVE_KEY = 'w'
CLEAR_EXTENDED_KEY = 'c'
EXPORT_KEY = 'e'

# Extended ASCII glyph range cleared by CLEAR_EXTENDED_KEY
EXTENDED_RANGE = (128, 256)

# Glyphs are drawn at 2x in the grid
GRID_SCALE = 2


class EditorState:
    """All state of one editing session."""

    def __init__(self, viewport_width: int, viewport_height: int, font_bytes: bytes,
                 layout: Optional[LayoutConfig] = None, save_dir: str = "."):
        self.font = Font.from_bytes(font_bytes)
        self.layout = layout or LayoutConfig()
        self.viewport = (viewport_width, viewport_height)
        self.save_dir = save_dir

        self.glyph_hover: Tuple[int, int] = (0, 0)
        self.glyph_select: Tuple[int, int] = (0, 0)
        self.inside_glyph_grid = False

        self.editor_hover: Tuple[int, int] = (0, 0)
        self.inside_editor_area = False

        self.drawing = False
        self.draw_sets_bit_to = True

        self.editor_offset = self._compute_editor_offset()
        self.save_counter = 0
        self.export_counter = 0
        self.outbox: List[Message] = []

        self.fb = Framebuffer(viewport_width, viewport_height)
        self.needs_redraw = True

        logger.info(
            f"Loaded font: {self.font.glyph_count} glyphs, "
            f"{self.font.glyph_width}x{self.font.glyph_height}, mode 0x{self.font.mode:02X}"
        )

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _compute_editor_offset(self) -> Tuple[int, int]:
        return self.font.layout_offset(self.viewport[0], self.viewport[1], self.layout.cell_size)

    @property
    def grid_rows(self) -> int:
        return self.font.grid_rows(self.layout.grid_columns)

    def glyph_cell_origin(self, col: int, row: int) -> Tuple[int, int]:
        """Top-left pixel of a glyph in the grid."""
        x = self.layout.grid_offset_x + col * GRID_SCALE * self.font.glyph_width
        y = self.layout.grid_offset_y + row * GRID_SCALE * self.font.glyph_height
        return x, y

    def _hit_test(self, x: int, y: int) -> None:
        """Update hover state for a pointer position. The grid wins over the panel."""
        gx = (x - self.layout.grid_offset_x) // GRID_SCALE // self.font.glyph_width
        gy = (y - self.layout.grid_offset_y) // GRID_SCALE // self.font.glyph_height
        if 0 <= gx < self.layout.grid_columns and 0 <= gy < self.grid_rows:
            self.glyph_hover = (gx, gy)
            self.inside_glyph_grid = True
            self.inside_editor_area = False
            return
        self.inside_glyph_grid = False

        ox, oy = self.editor_offset
        cx = (x - ox) // self.layout.cell_size
        cy = (y - oy) // self.layout.cell_size
        if 0 <= cx < self.font.glyph_width and 0 <= cy < self.font.glyph_height:
            self.editor_hover = (cx, cy)
            self.inside_editor_area = True
        else:
            # Hover values stay where they were
            self.inside_editor_area = False

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def get_selected_index(self) -> int:
        col, row = self.glyph_select
        return row * self.layout.grid_columns + col

    def selected_glyph(self):
        return self.font.glyphs[self.get_selected_index()]

    def _select_hovered(self) -> bool:
        """Select the hovered glyph. Returns False on an empty grid slot."""
        col, row = self.glyph_hover
        if row * self.layout.grid_columns + col >= self.font.glyph_count:
            # Empty slot in a partial last row
            return False
        self.glyph_select = self.glyph_hover
        index = self.get_selected_index()
        self.outbox.append(ChangeWindowTitle(tr("window.glyph_title", index=index)))
        logger.debug(f"Selected glyph #{index}")
        return True

    def _apply_draw(self) -> None:
        cx, cy = self.editor_hover
        self.selected_glyph().set_to(cx, cy, self.draw_sets_bit_to)

    # ------------------------------------------------------------------
    # Host API
    # ------------------------------------------------------------------

    def update(self, t: float, dt: float) -> None:
        pass

    def drain_messages(self) -> List[Message]:
        messages = self.outbox
        self.outbox = []
        return messages

    def handle_event(self, event: Event) -> None:
        self.needs_redraw = True

        if isinstance(event, MouseMotion):
            self._hit_test(event.x, event.y)
            if self.drawing:
                self._apply_draw()

        elif isinstance(event, MousePress):
            self._on_mouse_press(event)

        elif isinstance(event, MouseRelease):
            self.drawing = False

        elif isinstance(event, KeyPress):
            self._on_key_press(event.key)

        elif isinstance(event, CloseRequested):
            self.outbox.append(Quit())

    def _on_mouse_press(self, event: MousePress) -> None:
        self._hit_test(event.x, event.y)

        if self.inside_glyph_grid:
            if self._select_hovered() and event.button == MouseButton.RIGHT:
                self.selected_glyph().clear_all()
                logger.info(f"Erased glyph #{self.get_selected_index()}")
            return

        if self.inside_editor_area and event.button in (MouseButton.LEFT, MouseButton.RIGHT):
            if not self.drawing:
                self.drawing = True
                self.draw_sets_bit_to = event.button == MouseButton.LEFT
            self._apply_draw()

    def _on_key_press(self, key) -> None:
        if key == Key.ESCAPE:
            self.outbox.append(Quit())
        elif key == SHRINK_KEY:
            self.shrink_font()
        elif key == SAVE_KEY:
            self.save()
        elif key == CLEAR_EXTENDED_KEY:
            self.font.clear_range(*EXTENDED_RANGE)
            logger.info(tr("status.cleared_extended"))
        elif key == EXPORT_KEY:
            self.export()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def shrink_font(self) -> None:
        """Drop the top row of every glyph and re-center the edit panel."""
        if self.font.glyph_height <= 1:
            logger.warning(tr("status.shrink_refused"))
            return
        self.font.decrease_height()
        self.editor_offset = self._compute_editor_offset()
        cx, cy = self.editor_hover
        if cy >= self.font.glyph_height:
            self.editor_hover = (cx, self.font.glyph_height - 1)
        logger.info(tr("status.shrunk", height=self.font.glyph_height))

    def save(self) -> Optional[str]:
        """Write the font to the next numbered file. Returns the path on success."""
        path = save_path_for(self.save_dir, self.save_counter)
        self.save_counter += 1
        try:
            save_psf(self.font, path)
        except OSError as e:
            logger.error(tr("status.save_failed", path=path, error=e))
            return None
        logger.info(tr("status.saved", path=path))
        return path

    def export(self) -> Optional[str]:
        """Write a PNG sheet of all glyphs to the next numbered file."""
        path = export_path_for(self.save_dir, self.export_counter)
        self.export_counter += 1
        try:
            export_sheet(self.font, path)
        except OSError as e:
            logger.error(tr("status.export_failed", path=path, error=e))
            return None
        return path

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Redraw the framebuffer from the current state."""
        self.fb.clear()
        self._render_grid()
        self._render_editor()
        self.needs_redraw = False

    def _render_grid(self) -> None:
        columns = self.layout.grid_columns
        gw, gh = self.font.glyph_width, self.font.glyph_height
        hovered = self.glyph_hover if self.inside_glyph_grid else None

        for index, glyph in enumerate(self.font.glyphs):
            row, col = divmod(index, columns)
            highlighted = (col, row) == self.glyph_select or (col, row) == hovered
            x0, y0 = self.glyph_cell_origin(col, row)
            for py in range(gh):
                for px in range(gw):
                    color = palette.grid_pixel_color(glyph.get(px, py), highlighted)
                    self.fb.draw_square(x0 + px * GRID_SCALE, y0 + py * GRID_SCALE,
                                        GRID_SCALE, color)

        # Borders go on top of the pixels, highlighted ones last
        for index in range(self.font.glyph_count):
            row, col = divmod(index, columns)
            if (col, row) in (self.glyph_select, hovered):
                continue
            self._draw_grid_border(col, row, palette.grid_border_color(False, False))
        if hovered is not None:
            self._draw_grid_border(*hovered, palette.grid_border_color(False, True))
        self._draw_grid_border(*self.glyph_select, palette.grid_border_color(True, False))

    def _draw_grid_border(self, col: int, row: int, color: int) -> None:
        x0, y0 = self.glyph_cell_origin(col, row)
        self.fb.draw_rect_hollow(x0, y0, GRID_SCALE * self.font.glyph_width,
                                 GRID_SCALE * self.font.glyph_height, color)

    def _render_editor(self) -> None:
        glyph = self.selected_glyph()
        size = self.layout.cell_size
        ox, oy = self.editor_offset

        for cy in range(self.font.glyph_height):
            for cx in range(self.font.glyph_width):
                color = palette.editor_cell_color(glyph.get(cx, cy))
                self.fb.draw_square(ox + cx * size, oy + cy * size, size, color)

        if self.inside_editor_area:
            cx, cy = self.editor_hover
            self.fb.draw_rect_hollow(ox + cx * size, oy + cy * size, size - 1, size - 1,
                                     palette.EDITOR_HOVER_OUTLINE)

"""
Palette - Colors used to show selection and hover state.

Colors are 0xRRGGBB integers.
"""

BLACK = 0x000000
WHITE = 0xFFFFFF
GREEN = 0x00FF00
DARK_RED = 0x800000
DIM_RED = 0x400000
MID_GRAY = 0x808080
NEAR_BLACK = 0x202020


def grid_border_color(selected: bool, hovered: bool) -> int:
    """Border around a glyph in the overview grid."""
    if selected:
        return GREEN
    if hovered:
        return DARK_RED
    return DIM_RED


def grid_pixel_color(filled: bool, highlighted: bool) -> int:
    """One glyph pixel in the overview grid."""
    if filled:
        return WHITE
    return MID_GRAY if highlighted else BLACK


def editor_cell_color(filled: bool) -> int:
    """One glyph pixel in the edit panel."""
    return WHITE if filled else NEAR_BLACK


EDITOR_HOVER_OUTLINE = GREEN

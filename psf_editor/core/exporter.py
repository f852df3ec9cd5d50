"""
Exporter - Renders PSF glyphs to PNG images.

Sheets lay glyphs out in a fixed number of columns with a one pixel
padding line between cells, the same order as the editor's glyph grid.
"""

import logging
import os

from PIL import Image

from .bitmatrix import BitMatrix
from .parser import Font

logger = logging.getLogger('PSFE')

EXPORT_NAME_TEMPLATE = "exported_font{counter:03d}.png"

INK = 255
PAPER = 0
GRID_LINE = 64


def glyph_to_image(glyph: BitMatrix, scale: int = 1) -> Image.Image:
    """Render one glyph as a grayscale image, white on black."""
    img = Image.new('L', (glyph.width, glyph.height), PAPER)
    img.putdata([INK if cell else PAPER for cell in glyph.cells])
    if scale > 1:
        img = img.resize((glyph.width * scale, glyph.height * scale), Image.Resampling.NEAREST)
    return img


def font_to_sheet(font: Font, columns: int = 16, scale: int = 1, padding: int = 1) -> Image.Image:
    """
    Render every glyph of a font into a single sheet.

    Args:
        font: Font to render
        columns: Glyphs per row
        scale: Integer zoom applied to each glyph
        padding: Width of the grid lines between cells

    Returns:
        Grayscale sheet image
    """
    cell_w = font.glyph_width * scale + padding
    cell_h = font.glyph_height * scale + padding
    rows = font.grid_rows(columns)

    sheet = Image.new('L', (columns * cell_w + padding, rows * cell_h + padding), GRID_LINE)
    for index, glyph in enumerate(font.glyphs):
        row, col = divmod(index, columns)
        sheet.paste(glyph_to_image(glyph, scale), (col * cell_w + padding, row * cell_h + padding))
    return sheet


def export_sheet(font: Font, output_path: str, scale: int = 2) -> str:
    """Export the whole font as one PNG sheet."""
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    sheet = font_to_sheet(font, scale=scale)
    sheet.save(output_path, "PNG")
    logger.info(f"Exported glyph sheet {sheet.size[0]}x{sheet.size[1]} to: {output_path}")
    return output_path


def export_glyph(font: Font, glyph_index: int, output_path: str, scale: int = 8) -> str:
    """Export a single glyph as PNG."""
    glyph_to_image(font.glyphs[glyph_index], scale).save(output_path, "PNG")
    logger.info(f"Exported glyph #{glyph_index} to: {output_path}")
    return output_path


def export_path_for(save_dir: str, counter: int) -> str:
    """Numbered file name used by the editor's export command."""
    return os.path.join(save_dir, EXPORT_NAME_TEMPLATE.format(counter=counter))

"""
Core module - PSF1 parsing, writing, and PNG export functionality.
"""

from .bitmatrix import BitMatrix
from .errors import FormatError, InvariantViolation
from .parser import Font, parse_psf
from .writer import save_psf, save_path_for
from .exporter import export_sheet, export_glyph, font_to_sheet

__all__ = [
    "BitMatrix",
    "FormatError",
    "InvariantViolation",
    "Font",
    "parse_psf",
    "save_psf",
    "save_path_for",
    "export_sheet",
    "export_glyph",
    "font_to_sheet",
]

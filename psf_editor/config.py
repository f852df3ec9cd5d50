"""
Configuration - Layout and application settings for the PSF editor.
"""

from dataclasses import dataclass

# Glyph grid layout
GRID_OFFSET_X = 10
GRID_OFFSET_Y = 10
GRID_COLUMNS = 16

# Size of one glyph pixel in the edit panel
CELL_SIZE = 16

# Window defaults
DEFAULT_VIEWPORT_WIDTH = 1024
DEFAULT_VIEWPORT_HEIGHT = 768
UPDATES_PER_SECOND = 60

DEFAULT_FONT_PATH = "font.psf"
LOG_FILE_NAME = "psfe_debug.log"

# Environment variable naming the UI language, e.g. "pt_BR"
LANGUAGE_ENV_VAR = "PSFE_LANG"


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry of the glyph grid and the edit panel."""
    grid_offset_x: int = GRID_OFFSET_X
    grid_offset_y: int = GRID_OFFSET_Y
    cell_size: int = CELL_SIZE
    grid_columns: int = GRID_COLUMNS


@dataclass
class AppConfig:
    """Settings for one editor session."""
    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    updates_per_second: int = UPDATES_PER_SECOND
    font_path: str = DEFAULT_FONT_PATH
    save_dir: str = "."
    log_file: str = LOG_FILE_NAME
    language: str = "en"

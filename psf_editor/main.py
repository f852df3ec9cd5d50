"""
PSF Font Editor v1.0 - Main entry point.

Usage:
    python -m psf_editor.main [font_file.psf]

Set PSFE_LANG=pt_BR for Portuguese messages.

Keys:
    Esc  quit
    w    save to saved_fontNNN.psf
    e    export a PNG sheet to exported_fontNNN.png
    d    remove the top row of every glyph
    c    erase glyphs 128-255
"""

import os
import sys
import logging
from typing import List, Optional

from .config import AppConfig, LANGUAGE_ENV_VAR
from .core.errors import FormatError
from .editor.state import EditorState
from .i18n import set_language, tr

logger = logging.getLogger('PSFE')


def setup_logging(log_file: str) -> None:
    """Log to a file and to the console."""
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("=" * 60)
    logger.info("PSF Font Editor - Starting")
    logger.info(f"Log file: {log_file}")
    logger.info(f"Working dir: {os.getcwd()}")
    logger.info("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    config = AppConfig()
    if args:
        config.font_path = args[0]
    config.language = os.environ.get(LANGUAGE_ENV_VAR, config.language)
    set_language(config.language)

    if not os.path.exists(config.font_path):
        print(tr("errors.file_not_found", path=config.font_path))
        return 1

    setup_logging(config.log_file)

    try:
        with open(config.font_path, 'rb') as f:
            font_bytes = f.read()
    except OSError as e:
        logger.error(f"Failed to read font: {e}")
        print(tr("errors.unreadable_font", path=config.font_path, error=e))
        return 1

    try:
        state = EditorState(config.viewport_width, config.viewport_height, font_bytes,
                            save_dir=config.save_dir)
    except FormatError as e:
        logger.error(f"Failed to load font: {e}")
        print(tr("errors.invalid_font", path=config.font_path, error=e))
        return 1

    # Qt is only needed once the font loaded
    from .gui.backend import run_main_loop
    from .gui.qt_backend import QtBackend

    backend = QtBackend()
    backend.initialize(config.viewport_width, config.viewport_height, tr("window.title"))
    run_main_loop(backend, state, config.updates_per_second)
    return 0


if __name__ == "__main__":
    sys.exit(main())

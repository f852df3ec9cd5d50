"""
PSF Font Editor - An interactive editor for legacy PSF1 bitmap console fonts.

Modules:
    core: PSF1 parsing, writing, and PNG export
    editor: Editing state machine, palette and framebuffer
    gui: Rendering backend interface and PyQt6 window
    i18n: Internationalization
"""

__version__ = "1.0.0"
__license__ = "MIT"

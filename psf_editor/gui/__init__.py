"""
GUI module - Rendering backend interface and the PyQt6 window.

The Qt backend is imported lazily by the entry point so the rest of the
editor can be used without a display.
"""

from .backend import RenderingBackend, run_main_loop

__all__ = [
    "RenderingBackend",
    "run_main_loop",
]

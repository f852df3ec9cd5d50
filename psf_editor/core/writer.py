"""
PSF1 Writer - Writes edited fonts back to disk.
"""

import os
from io import BytesIO
from typing import BinaryIO

from .parser import Font

SAVE_NAME_TEMPLATE = "saved_font{counter:03d}.psf"


class PSF1Writer:
    """Writer for PSF1 font files."""

    def __init__(self, font: Font):
        self.font = font

    def write(self, output_path: str) -> None:
        """
        Write the PSF1 file to disk.

        Args:
            output_path: Path to save the PSF1 file
        """
        with open(output_path, 'wb') as f:
            self._write_stream(f)

    def write_bytes(self) -> bytes:
        """Write the PSF1 file and return as bytes."""
        buffer = BytesIO()
        self._write_stream(buffer)
        return buffer.getvalue()

    def _write_stream(self, f: BinaryIO) -> None:
        f.write(self.font.to_bytes())


def save_path_for(save_dir: str, counter: int) -> str:
    """Numbered file name used by the editor's save command."""
    return os.path.join(save_dir, SAVE_NAME_TEMPLATE.format(counter=counter))


def save_psf(font: Font, output_path: str) -> None:
    """
    Convenience function to save a PSF1 file.

    Args:
        font: Font to save
        output_path: Path to save the file
    """
    writer = PSF1Writer(font)
    writer.write(output_path)

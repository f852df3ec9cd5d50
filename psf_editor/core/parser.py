"""
PSF1 Parser - Legacy Linux console font parser.

Parses .psf (version 1) files into a Font holding one BitMatrix per glyph,
and serializes fonts back to the same layout.

Layout:
    0x00  magic (0x36, 0x04)
    0x02  mode      bit 0 set -> 512 glyphs, else 256
    0x03  charsize  glyph height in rows, glyph width is always 8
    0x04  glyph data, charsize bytes per glyph
"""

import logging
import struct
from dataclasses import dataclass, field
from enum import IntFlag
from io import BytesIO
from typing import BinaryIO, List, Tuple

from .bitmatrix import BitMatrix
from .errors import FormatError, InvariantViolation

logger = logging.getLogger('PSFE')

PSF1_MAGIC = b'\x36\x04'
PSF1_HEADER_SIZE = 4
PSF1_GLYPH_WIDTH = 8


class PSF1Mode(IntFlag):
    """Flags stored in the PSF1 mode byte."""
    MODE512 = 0x01
    MODEHASTAB = 0x02
    MODEHASSEQ = 0x04


@dataclass
class Font:
    """A decoded PSF1 font."""
    glyph_width: int
    glyph_height: int
    glyphs: List[BitMatrix] = field(default_factory=list)
    mode: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "Font":
        """Parse PSF1 data from bytes."""
        return PSF1Parser().parse_bytes(data)

    def to_bytes(self) -> bytes:
        """
        Encode the font as PSF1.

        The mode byte is always written as 0, so a 512-glyph font is saved
        with the 256-glyph flag even though all of its glyphs are written.
        """
        out = bytearray(PSF1_MAGIC)
        out += struct.pack('BB', 0, self.glyph_height)
        for glyph in self.glyphs:
            out += glyph.serialize()
        return bytes(out)

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    def grid_rows(self, columns: int = 16) -> int:
        """Number of rows needed to show every glyph in a grid."""
        return -(-self.glyph_count // columns)

    def decrease_height(self) -> None:
        """Remove the top row of every glyph."""
        if self.glyph_height <= 1:
            raise InvariantViolation("Glyph height is already at its minimum")
        self.glyph_height -= 1
        for glyph in self.glyphs:
            glyph.decrease_height()
        logger.debug(f"Glyph height decreased to {self.glyph_height}")

    def clear_range(self, start: int, end: int) -> None:
        """Erase glyphs with index in [start, end)."""
        for glyph in self.glyphs[start:end]:
            glyph.clear_all()

    def layout_offset(self, viewport_width: int, viewport_height: int,
                      cell_size: int) -> Tuple[int, int]:
        """Top-left corner of the edit panel centered in the viewport."""
        x = viewport_width // 2 - self.glyph_width * cell_size // 2
        y = viewport_height // 2 - self.glyph_height * cell_size // 2
        return x, y


class PSF1Parser:
    """Parser for PSF1 font files."""

    def _read_u8(self, f: BinaryIO) -> int:
        data = f.read(1)
        if len(data) < 1:
            raise FormatError("Unexpected end of file in PSF1 header")
        return struct.unpack('B', data)[0]

    def parse(self, file_path: str) -> Font:
        """Parse a PSF1 file and return the font."""
        with open(file_path, 'rb') as f:
            return self._parse_stream(f)

    def parse_bytes(self, data: bytes) -> Font:
        """Parse PSF1 data from bytes."""
        return self._parse_stream(BytesIO(data))

    def _parse_stream(self, f: BinaryIO) -> Font:
        """Parse PSF1 from a binary stream."""
        magic = f.read(2)
        if magic != PSF1_MAGIC:
            raise FormatError(f"Invalid magic: {magic.hex()}. Expected 3604 (PSF1)")

        mode = self._read_u8(f)
        charsize = self._read_u8(f)
        if charsize == 0:
            raise FormatError("PSF1 header declares zero-height glyphs")

        num_glyphs = 512 if mode & PSF1Mode.MODE512 else 256
        data_size = num_glyphs * charsize
        glyph_data = f.read(data_size)
        if len(glyph_data) < data_size:
            raise FormatError(
                f"Truncated glyph data: expected {data_size} bytes, got {len(glyph_data)}"
            )

        glyphs = [
            self._decode_glyph(glyph_data, i * charsize, charsize)
            for i in range(num_glyphs)
        ]

        if mode & PSF1Mode.MODEHASTAB:
            logger.debug("Ignoring PSF1 unicode table")

        return Font(
            glyph_width=PSF1_GLYPH_WIDTH,
            glyph_height=charsize,
            glyphs=glyphs,
            mode=mode
        )

    def _decode_glyph(self, data: bytes, offset: int, charsize: int) -> BitMatrix:
        """Unpack one glyph, most significant bit is the leftmost pixel."""
        glyph = BitMatrix(PSF1_GLYPH_WIDTH, charsize)
        for h in range(charsize):
            row = data[offset + h]
            for b in range(8):
                if row & (1 << b):
                    glyph.set(PSF1_GLYPH_WIDTH - b - 1, h)
        return glyph


def parse_psf(file_path: str) -> Font:
    """Convenience function to parse a PSF1 file."""
    parser = PSF1Parser()
    return parser.parse(file_path)

"""Shared fixtures: small PSF1 fonts built in memory."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_root_str = str(_REPO_ROOT)
if _root_str not in sys.path:
    sys.path.insert(0, _root_str)


def make_psf(charsize: int = 16, num_glyphs: int = 256, fill=None) -> bytes:
    """Build PSF1 bytes; ``fill(glyph, row)`` gives each row byte."""
    mode = 0x01 if num_glyphs == 512 else 0x00
    data = bytearray(b"\x36\x04")
    data += bytes((mode, charsize))
    for glyph in range(num_glyphs):
        for row in range(charsize):
            data.append(fill(glyph, row) & 0xFF if fill else 0)
    return bytes(data)


def patterned(glyph: int, row: int) -> int:
    return (glyph * 7 + row * 13) & 0xFF


@pytest.fixture
def blank_font_bytes() -> bytes:
    return make_psf()


@pytest.fixture
def patterned_font_bytes() -> bytes:
    return make_psf(fill=patterned)

from __future__ import annotations

import pytest

from psf_editor.core.errors import FormatError, InvariantViolation
from psf_editor.core.parser import Font, PSF1Parser, parse_psf

from conftest import make_psf, patterned


def test_parse_header_and_glyph_count(blank_font_bytes: bytes) -> None:
    font = Font.from_bytes(blank_font_bytes)
    assert font.glyph_width == 8
    assert font.glyph_height == 16
    assert font.glyph_count == 256
    assert font.mode == 0
    assert all(g.width == 8 and g.height == 16 for g in font.glyphs)


def test_mode_bit_selects_512_glyphs() -> None:
    font = Font.from_bytes(make_psf(charsize=8, num_glyphs=512))
    assert font.glyph_count == 512
    assert font.grid_rows() == 32


def test_row_byte_bit_order() -> None:
    data = make_psf(charsize=4, fill=lambda g, r: 0b10000001 if (g, r) == (65, 2) else 0)
    glyph = Font.from_bytes(data).glyphs[65]

    assert glyph.get(0, 2)
    assert glyph.get(7, 2)
    assert [glyph.get(x, 2) for x in range(1, 7)] == [False] * 6
    assert not any(glyph.get(x, y) for y in (0, 1, 3) for x in range(8))


def test_round_trip_reproduces_glyph_data(patterned_font_bytes: bytes) -> None:
    out = Font.from_bytes(patterned_font_bytes).to_bytes()
    assert out == patterned_font_bytes


def test_round_trip_forces_mode_zero() -> None:
    data = make_psf(charsize=8, num_glyphs=512, fill=patterned)
    out = Font.from_bytes(data).to_bytes()
    assert out[:4] == bytes([0x36, 0x04, 0x00, 8])
    assert out[4:] == data[4:]


def test_trailing_unicode_table_is_ignored() -> None:
    data = bytearray(make_psf(charsize=8, fill=patterned))
    data[2] = 0x02
    data += b"\x41\x00\xff\xff"
    font = Font.from_bytes(bytes(data))
    assert font.glyph_count == 256
    assert font.to_bytes()[4:] == bytes(data[4:4 + 256 * 8])


def test_bad_magic_is_a_format_error() -> None:
    data = b"\x72\xb5\x4a\x86" + bytes(64)
    with pytest.raises(FormatError):
        Font.from_bytes(data)


@pytest.mark.parametrize("data", [b"", b"\x36", b"\x36\x04", b"\x36\x04\x00"])
def test_short_header_is_a_format_error(data: bytes) -> None:
    with pytest.raises(FormatError):
        Font.from_bytes(data)


def test_zero_charsize_is_a_format_error() -> None:
    with pytest.raises(FormatError):
        Font.from_bytes(b"\x36\x04\x00\x00")


def test_truncated_glyph_data_is_a_format_error() -> None:
    data = make_psf(charsize=16)[:-1]
    with pytest.raises(FormatError):
        Font.from_bytes(data)


def test_parse_psf_reads_file(tmp_path, patterned_font_bytes: bytes) -> None:
    path = tmp_path / "font.psf"
    path.write_bytes(patterned_font_bytes)
    font = parse_psf(str(path))
    assert font.to_bytes() == patterned_font_bytes
    assert PSF1Parser().parse(str(path)).glyph_height == 16


def test_decrease_height_shrinks_every_glyph(patterned_font_bytes: bytes) -> None:
    font = Font.from_bytes(patterned_font_bytes)
    original = [list(g.rows()) for g in font.glyphs]

    font.decrease_height()

    assert font.glyph_height == 15
    for glyph, rows in zip(font.glyphs, original):
        assert glyph.height == 15
        assert list(glyph.rows()) == rows[1:]


def test_decrease_height_stops_at_one() -> None:
    font = Font.from_bytes(make_psf(charsize=2))
    font.decrease_height()
    with pytest.raises(InvariantViolation):
        font.decrease_height()
    assert font.glyph_height == 1


def test_clear_range_only_touches_requested_glyphs() -> None:
    font = Font.from_bytes(make_psf(charsize=4, fill=lambda g, r: 0xFF))
    font.clear_range(128, 256)
    assert all(all(g.cells) for g in font.glyphs[:128])
    assert not any(any(g.cells) for g in font.glyphs[128:])


def test_layout_offset_centers_panel(blank_font_bytes: bytes) -> None:
    font = Font.from_bytes(blank_font_bytes)
    assert font.layout_offset(1024, 768, 16) == (512 - 64, 384 - 128)
    assert font.layout_offset(101, 51, 16) == (50 - 64, 25 - 128)

"""
BitMatrix - Fixed-size grid of on/off pixels holding one glyph.
"""

from typing import Iterator, List, Tuple

from .errors import InvariantViolation


class BitMatrix:
    """Row-major boolean grid, ``index = y * width + x``."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvariantViolation(f"Invalid bitmap size {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[bool] = [False] * (width * height)

    def __repr__(self) -> str:
        return f"BitMatrix({self.width}x{self.height})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvariantViolation(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} bitmap"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        return self.cells[self._index(x, y)]

    def set_to(self, x: int, y: int, value: bool) -> None:
        self.cells[self._index(x, y)] = bool(value)

    def set(self, x: int, y: int) -> None:
        self.set_to(x, y, True)

    def clear_all(self) -> None:
        self.cells = [False] * (self.width * self.height)

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        """Yield each row as a tuple, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield tuple(self.cells[start:start + self.width])

    def serialize(self) -> bytes:
        """
        Pack the bitmap into one byte per row.

        Bit 0 of a row byte is the rightmost column, so only 8-pixel wide
        bitmaps have a defined encoding.
        """
        out = bytearray()
        for y in range(self.height):
            byte = 0
            for bit in range(8):
                if self.get(self.width - 1 - bit, y):
                    byte |= 1 << bit
            out.append(byte)
        return bytes(out)

    def decrease_height(self) -> None:
        """Drop the top row."""
        if self.height == 0:
            raise InvariantViolation("Cannot shrink a bitmap with no rows")
        del self.cells[:self.width]
        self.height -= 1

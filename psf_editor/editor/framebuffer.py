"""
Framebuffer - RGBA pixel buffer the editor renders into.
"""

from PIL import Image


class Framebuffer:
    """Pixels stored as RGBA8888 bytes, row-major. Drawing clips at the edges."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * 4)

    def clear(self) -> None:
        self.pixels[:] = bytes(len(self.pixels))

    @staticmethod
    def _rgba(color: int) -> bytes:
        return bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, 0xFF))

    def get_pixel(self, x: int, y: int) -> int:
        """Color at (x, y) as 0xRRGGBB."""
        i = (y * self.width + x) * 4
        r, g, b = self.pixels[i], self.pixels[i + 1], self.pixels[i + 2]
        return (r << 16) | (g << 8) | b

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        i = (y * self.width + x) * 4
        self.pixels[i:i + 4] = self._rgba(color)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        row = self._rgba(color) * (x1 - x0)
        for yy in range(y0, y1):
            start = (yy * self.width + x0) * 4
            self.pixels[start:start + len(row)] = row

    def draw_square(self, x: int, y: int, size: int, color: int) -> None:
        self.fill_rect(x, y, size, size, color)

    def draw_rect_hollow(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Outline covering columns x..x+w and rows y..y+h inclusive."""
        self.fill_rect(x, y, w + 1, 1, color)
        self.fill_rect(x, y + h, w + 1, 1, color)
        self.fill_rect(x, y, 1, h + 1, color)
        self.fill_rect(x + w, y, 1, h + 1, color)

    def to_image(self) -> Image.Image:
        """Copy of the current frame as a PIL image."""
        return Image.frombytes('RGBA', (self.width, self.height), bytes(self.pixels))

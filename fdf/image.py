"""In-memory pixel images and colour conversion."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["Image", "color_value"]

_SCANLINE_PAD = 32


class Image:
    """A rectangular pixel buffer stored row by row, little endian."""

    endian = 0

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8 or bits_per_pixel > 32:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        bits = width * bits_per_pixel
        self.size_line = (bits + _SCANLINE_PAD - 1) // _SCANLINE_PAD * (_SCANLINE_PAD // 8)
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value; bits that do not fit the pixel are dropped."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        mask = (1 << (8 * opp)) - 1
        self.data[start : start + opp] = (color & mask).to_bytes(opp, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored pixel value."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start : start + opp], "little")

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.data[:] = bytes(len(self.data))

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed 8-bit R, G, B triples, row by row.

        Pixel values are read as 0xRRGGBB.
        """
        opp = self.bytes_per_pixel
        row_bytes = self.width * opp
        out = bytearray()
        for y in range(self.height):
            start = y * self.size_line
            row = self.data[start : start + row_bytes]
            rgb = bytearray(self.width * 3)
            if opp >= 3:
                rgb[0::3] = row[2::opp]
                rgb[1::3] = row[1::opp]
                rgb[2::3] = row[0::opp]
            else:
                for x in range(self.width):
                    value = int.from_bytes(row[x * opp : (x + 1) * opp], "little")
                    rgb[3 * x : 3 * x + 3] = bytes(
                        ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
                    )
            out += rgb
        return bytes(out)


def color_value(
    color: int, depth: int = 24, shifts: Sequence[int] | None = None
) -> int:
    """Convert a 0xRRGGBB colour to the pixel value of a display.

    Displays of depth 24 or more take the colour as it is. Shallower ones
    need shifts: (red shift, red bits, green shift, green bits,
    blue shift, blue bits) of their pixel layout.
    """
    if depth >= 24:
        return color
    if shifts is None or len(shifts) != 6:
        raise ValueError("a depth below 24 needs six shift values")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )
"""In-memory pixel images with 32 bits per pixel."""

from __future__ import annotations

from collections.abc import Iterator

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


class Image:
    """A width x height image of 32-bit pixels stored row by row.

    ``endian`` is 0 when pixels are stored least significant byte first and
    1 when they are stored most significant byte first. New images are black.
    """

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian!r}")
        self.width = width
        self.height = height
        self.endian = endian
        self.bits_per_pixel = BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (truncated to 32 bits) at column x, row y."""
        offset = self._offset(x, y)
        value = color & 0xFFFFFFFF
        self.data[offset:offset + _BYTES_PER_PIXEL] = value.to_bytes(
            _BYTES_PER_PIXEL, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at column x, row y."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder)

    def rows(self) -> Iterator[list[int]]:
        """Yield each row, top to bottom, as a list of pixel values."""
        order = self._byteorder
        for y in range(self.height):
            start = y * self.size_line
            row = self.data[start:start + self.size_line]
            yield [
                int.from_bytes(row[i:i + _BYTES_PER_PIXEL], order)
                for i in range(0, self.size_line, _BYTES_PER_PIXEL)
            ]
"""In-memory 32-bit pixel images."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Image", "new_image"]

_BITS_PER_PIXEL = 32


@dataclass
class Image:
    """A ``width`` x ``height`` image stored as 32-bit pixels, row by row.

    ``endian`` is 0 for little-endian pixel bytes and 1 for big-endian.
    ``line_length`` is the number of bytes in one row of ``data``.
    """

    width: int
    height: int
    endian: int = 0
    bits_per_pixel: int = field(default=_BITS_PER_PIXEL, init=False)
    line_length: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian!r}")
        self.line_length = self.width * self.bytes_per_pixel
        self.data = bytearray(self.line_length * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.line_length + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (taken modulo 2**32) at column ``x``, row ``y``."""
        start = self._offset(x, y)
        size = self.bytes_per_pixel
        self.data[start:start + size] = (color & 0xFFFFFFFF).to_bytes(
            size, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at column ``x``, row ``y``."""
        start = self._offset(x, y)
        return int.from_bytes(
            self.data[start:start + self.bytes_per_pixel], self._byteorder
        )


def new_image(width: int, height: int) -> Image:
    """Create a black little-endian image of the given size."""
    return Image(width, height)
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

RGB = Tuple[int, int, int]


class PixelFormat(Enum):
    """Payload encoding selected by the second byte of the PPM marker."""

    ASCII = "3"
    BINARY = "6"

    @property
    def marker(self) -> bytes:
        return b"P" + self.value.encode("ascii")

    @classmethod
    def from_marker_digit(cls, digit: bytes) -> "PixelFormat":
        """Map the byte following ``P`` to a format, raising ValueError if unknown."""
        try:
            return cls(digit.decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            raise ValueError(f"Unsupported PPM marker digit: {digit!r}") from None


def _narrow(pixel: Iterable[int]) -> RGB:
    r, g, b = pixel
    return (r & 0xFF, g & 0xFF, b & 0xFF)


@dataclass(frozen=True)
class Raster:
    """Row-major RGB pixel buffer shared by the decoder, resampler and encoder.

    Channels are stored as unsigned 8-bit values whatever ``max_value`` says:
    anything wider wraps on construction.
    """

    pixel_format: PixelFormat
    width: int
    height: int
    max_value: int
    pixels: Tuple[RGB, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pixels", tuple(_narrow(p) for p in self.pixels))

    @classmethod
    def from_bytes(
        cls, pixel_format: PixelFormat, width: int, height: int, max_value: int, data: bytes
    ) -> "Raster":
        """Build a raster from packed R, G, B bytes."""
        if len(data) % 3 != 0:
            raise ValueError("Packed pixel data must be a multiple of 3 bytes")
        pixels = [tuple(data[i : i + 3]) for i in range(0, len(data), 3)]
        return cls(pixel_format, width, height, max_value, pixels)

    def validate(self) -> None:
        """Validate dimensions against the pixel sequence."""
        if self.width < 0 or self.height < 0:
            raise ValueError("Width and height must not be negative")
        if self.max_value <= 0:
            raise ValueError("Max value must be greater than zero")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Raster holds {len(self.pixels)} pixels, expected "
                f"{self.width}x{self.height}={self.width * self.height}"
            )

    @property
    def pixel_count(self) -> int:
        return len(self.pixels)

    def pixel(self, x: int, y: int) -> RGB:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} raster")
        return self.pixels[y * self.width + x]

    def rows(self) -> Iterator[Tuple[RGB, ...]]:
        for y in range(self.height):
            yield self.pixels[y * self.width : (y + 1) * self.width]

    def to_bytes(self) -> bytes:
        """Return the pixels packed as consecutive R, G, B bytes."""
        out = bytearray()
        for pixel in self.pixels:
            out += bytes(pixel)
        return bytes(out)

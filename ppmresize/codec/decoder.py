from __future__ import annotations

import io
import re
from typing import BinaryIO, List

from ..errors import FormatError
from .header import Header, HeaderReader
from .types import RGB, PixelFormat, Raster

_ASCII_VALUE_RE = re.compile(rb"\s*([+-]?[0-9]+)")
_TRAILING_SPACE_RE = re.compile(rb"\s*\Z")


def decode_ascii_pixels(data: bytes, count: int, base_offset: int = 0) -> List[RGB]:
    """Parse ``count`` whitespace-separated decimal triples from ``data``."""
    pixels: List[RGB] = []
    pos = 0
    for _ in range(count):
        channels = []
        for _ in range(3):
            match = _ASCII_VALUE_RE.match(data, pos)
            if not match:
                if _TRAILING_SPACE_RE.match(data, pos):
                    raise FormatError(
                        f"Unexpected end of stream after {len(pixels)} of {count} pixels",
                        base_offset + len(data),
                    )
                bad = len(data) - len(data[pos:].lstrip())
                raise FormatError("Expected decimal channel value", base_offset + bad)
            channels.append(int(match.group(1)) & 0xFF)
            pos = match.end()
        pixels.append((channels[0], channels[1], channels[2]))
    return pixels


def decode_binary_pixels(data: bytes, count: int, base_offset: int = 0) -> List[RGB]:
    """Split packed R, G, B bytes into ``count`` triples."""
    needed = count * 3
    if len(data) < needed:
        raise FormatError(
            f"Binary pixel data too short: got {len(data)} bytes, expected {needed}",
            base_offset + len(data),
        )
    return [(data[i], data[i + 1], data[i + 2]) for i in range(0, needed, 3)]


def decode_payload(reader: HeaderReader, header: Header) -> List[RGB]:
    count = header.width * header.height
    base_offset = reader.offset
    if header.pixel_format is PixelFormat.BINARY:
        return decode_binary_pixels(reader.read(count * 3), count, base_offset)
    return decode_ascii_pixels(reader.read_rest(), count, base_offset)


def decode(stream: BinaryIO) -> Raster:
    """Decode a P3 or P6 image from a binary stream."""
    reader = HeaderReader(stream)
    header = reader.read_header()
    pixels = decode_payload(reader, header)
    return Raster(header.pixel_format, header.width, header.height, header.max_value, pixels)


def decode_bytes(data: bytes) -> Raster:
    return decode(io.BytesIO(data))

from __future__ import annotations

from typing import BinaryIO

from ..errors import EncodingError
from .types import PixelFormat, Raster


def encode_header(raster: Raster) -> bytes:
    """Build the marker line and the dimensions line."""
    dims = f"{raster.width} {raster.height} {raster.max_value}\n"
    return raster.pixel_format.marker + b"\n" + dims.encode("ascii")


def encode_ascii_pixels(raster: Raster) -> bytes:
    """Emit ``R G B `` per pixel and a newline after every row."""
    out = []
    for index, (r, g, b) in enumerate(raster.pixels, start=1):
        out.append(f"{r} {g} {b} ")
        if index % raster.width == 0:
            out.append("\n")
    return "".join(out).encode("ascii")


def encode_binary_pixels(raster: Raster) -> bytes:
    return raster.to_bytes()


def encode(raster: Raster) -> bytes:
    """Serialize a raster as a P3 or P6 image."""
    try:
        raster.validate()
    except ValueError as exc:
        raise EncodingError(str(exc)) from exc
    if raster.pixel_format is PixelFormat.ASCII:
        payload = encode_ascii_pixels(raster)
    else:
        payload = encode_binary_pixels(raster)
    return encode_header(raster) + payload


def write_raster(raster: Raster, stream: BinaryIO) -> int:
    """Write the encoded raster to ``stream`` and return the byte count."""
    data = encode(raster)
    stream.write(data)
    return len(data)

from .decoder import decode, decode_ascii_pixels, decode_binary_pixels, decode_bytes
from .encoder import encode, encode_ascii_pixels, encode_binary_pixels, encode_header, write_raster
from .header import Header, HeaderReader
from .types import RGB, PixelFormat, Raster

__all__ = [
    "decode",
    "decode_ascii_pixels",
    "decode_binary_pixels",
    "decode_bytes",
    "encode",
    "encode_ascii_pixels",
    "encode_binary_pixels",
    "encode_header",
    "Header",
    "HeaderReader",
    "PixelFormat",
    "Raster",
    "RGB",
    "write_raster",
]

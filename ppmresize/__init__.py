from .codec import PixelFormat, Raster, decode, decode_bytes, encode, write_raster
from .errors import EncodingError, FormatError, PpmError
from .resample import downsample

__all__ = [
    "decode",
    "decode_bytes",
    "downsample",
    "encode",
    "EncodingError",
    "FormatError",
    "PixelFormat",
    "PpmError",
    "Raster",
    "write_raster",
]

from __future__ import annotations

from PIL import Image

from ..codec.types import PixelFormat, Raster


def raster_to_image(raster: Raster) -> Image.Image:
    """Wrap a raster's pixels in an RGB Pillow image."""
    raster.validate()
    if raster.width == 0 or raster.height == 0:
        raise ValueError("Cannot build an image from an empty raster")
    return Image.frombytes("RGB", (raster.width, raster.height), raster.to_bytes())


def image_to_raster(
    img: Image.Image, pixel_format: PixelFormat = PixelFormat.BINARY, max_value: int = 255
) -> Raster:
    """Convert a Pillow image to a raster, normalizing the mode to RGB first."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    return Raster.from_bytes(pixel_format, img.width, img.height, max_value, img.tobytes())


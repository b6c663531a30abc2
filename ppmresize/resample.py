from __future__ import annotations

from typing import List

from .codec.types import RGB, Raster


def average_block(a: RGB, b: RGB, c: RGB, d: RGB) -> RGB:
    """Average four pixels per channel, rounding halves away from zero."""
    # Channels are non-negative, so (sum + 2) // 4 is round(sum / 4) with
    # halves going up, computed without floats.
    return (
        (a[0] + b[0] + c[0] + d[0] + 2) // 4,
        (a[1] + b[1] + c[1] + d[1] + 2) // 4,
        (a[2] + b[2] + c[2] + d[2] + 2) // 4,
    )


def downsample(source: Raster) -> Raster:
    """Halve both dimensions by averaging 2x2 blocks.

    An odd trailing row or column is dropped. Sources narrower or shorter than
    two pixels give an empty raster with the matching dimension set to zero.
    """
    width = source.width // 2
    height = source.height // 2
    pixels = source.pixels
    stride = source.width
    out: List[RGB] = []
    for y in range(height):
        top = 2 * y * stride
        bottom = top + stride
        for x in range(width):
            n = 2 * x
            out.append(
                average_block(
                    pixels[top + n],
                    pixels[top + n + 1],
                    pixels[bottom + n],
                    pixels[bottom + n + 1],
                )
            )
    return Raster(source.pixel_format, width, height, source.max_value, out)

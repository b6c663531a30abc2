import pytest

from ppmresize.codec import PixelFormat, Raster, decode_bytes, encode
from ppmresize.resample import average_block, downsample


def solid(width, height, pixel=(0, 0, 0), pixel_format=PixelFormat.BINARY, max_value=255):
    return Raster(pixel_format, width, height, max_value, [pixel] * (width * height))


@pytest.mark.parametrize(
    "size,expected",
    [((4, 4), (2, 2)), ((5, 7), (2, 3)), ((2, 9), (1, 4)), ((1, 4), (0, 2)), ((4, 1), (2, 0)), ((1, 1), (0, 0))],
)
def test_output_dimensions(size, expected):
    out = downsample(solid(*size))
    assert (out.width, out.height) == expected
    assert out.pixel_count == expected[0] * expected[1]
    out.validate()


@pytest.mark.parametrize(
    "values,expected",
    [
        ((10, 20, 30, 40), 25),
        ((1, 1, 1, 2), 1),
        ((0, 0, 0, 255), 64),
        ((1, 1, 1, 1), 1),
        ((255, 0, 0, 1), 64),
        ((0, 0, 1, 1), 1),
        ((0, 1, 2, 3), 2),
        ((255, 255, 255, 255), 255),
    ],
)
def test_average_rounds_half_away_from_zero(values, expected):
    pixels = [(v, v, v) for v in values]
    assert average_block(*pixels) == (expected, expected, expected)


def test_channels_are_averaged_independently():
    block = [(10, 0, 200), (20, 0, 200), (30, 255, 200), (40, 0, 201)]
    source = Raster(PixelFormat.ASCII, 2, 2, 255, block)
    assert downsample(source).pixels == ((25, 64, 200),)


def test_block_positions():
    # 4x2 source: left block 0..3, right block 100..103
    pixels = [(0, 0, 0), (1, 1, 1), (100, 100, 100), (101, 101, 101),
              (2, 2, 2), (3, 3, 3), (102, 102, 102), (103, 103, 103)]
    out = downsample(Raster(PixelFormat.BINARY, 4, 2, 255, pixels))
    assert out.pixels == ((2, 2, 2), (102, 102, 102))


def test_odd_row_and_column_are_dropped():
    pixels = []
    for y in range(3):
        for x in range(3):
            edge = x == 2 or y == 2
            pixels.append((255, 255, 255) if edge else (8, 8, 8))
    out = downsample(Raster(PixelFormat.BINARY, 3, 3, 255, pixels))
    assert (out.width, out.height) == (1, 1)
    assert out.pixels == ((8, 8, 8),)


def test_source_is_untouched_and_metadata_copied():
    source = solid(2, 2, (9, 9, 9), PixelFormat.ASCII, 4095)
    before = source.pixels
    out = downsample(source)
    assert source.pixels is before
    assert out is not source
    assert out.pixel_format is PixelFormat.ASCII
    assert out.max_value == 4095


def test_degenerate_output_encodes():
    out = downsample(solid(1, 4))
    assert encode(out) == b"P6\n0 2 255\n"


def test_four_by_four_binary_end_to_end():
    source_bytes = b"P6\n4 4\n255\n" + bytes([100, 150, 200]) * 16
    out = downsample(decode_bytes(source_bytes))
    assert out.pixels == ((100, 150, 200),) * 4
    assert encode(out) == b"P6\n2 2 255\n" + bytes.fromhex("6496C8") * 4

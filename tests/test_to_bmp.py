import struct

import pytest

from camconv.pixformat import Frame, PixelFormat
from camconv.to_bmp import (
    BMP_HEADER_LEN,
    PIXELS_PER_METER,
    bmp_header,
    fmt2bmp,
    fmt2rgb888,
    frame2bmp,
)

HEADER = struct.Struct("<2sIIIIiiHHIIIIII")


def test_bmp_header_fields():
    header = bmp_header(4, 3, 24, BMP_HEADER_LEN, 36)
    assert len(header) == BMP_HEADER_LEN
    fields = HEADER.unpack(header)
    assert fields[0] == b"BM"
    assert fields[1] == BMP_HEADER_LEN + 36
    assert fields[2] == 0
    assert fields[3] == BMP_HEADER_LEN
    assert fields[4] == 40
    assert fields[5] == 4
    assert fields[6] == -3
    assert fields[7] == 1
    assert fields[8] == 24
    assert fields[9] == 0
    assert fields[10] == 36
    assert fields[11] == PIXELS_PER_METER == 2835
    assert fields[12] == PIXELS_PER_METER
    assert fields[13:] == (0, 0)


def test_rgb565_to_rgb888_blue_first():
    # High byte 0xF8 holds the red bits only.
    assert fmt2rgb888(bytes([0xF8, 0x00]), PixelFormat.RGB565) == bytes([0, 0, 0xF8])
    # Low byte 0x1F holds the blue bits only.
    assert fmt2rgb888(bytes([0x00, 0x1F]), PixelFormat.RGB565) == bytes([0xF8, 0, 0])


def test_grayscale_to_rgb888_repeats_value():
    out = fmt2rgb888(bytes([7, 200]), PixelFormat.GRAYSCALE)
    assert out == bytes([7, 7, 7, 200, 200, 200])


def test_rgb888_passes_through():
    data = bytes(range(12))
    assert fmt2rgb888(data, PixelFormat.RGB888) == data


def test_yuv422_neutral_gray():
    out = fmt2rgb888(bytes([128] * 4), PixelFormat.YUV422)
    assert len(out) == 6
    assert len(set(out)) == 1


def test_jpeg_source_is_rejected():
    with pytest.raises(ValueError):
        fmt2rgb888(b"\xff\xd8", PixelFormat.JPEG)
    with pytest.raises(ValueError):
        fmt2bmp(b"\xff\xd8", 1, 1, PixelFormat.JPEG)


def test_grayscale_bmp_has_palette():
    data = bytes(range(6))
    bmp = fmt2bmp(data, 3, 2, PixelFormat.GRAYSCALE)
    palette_size = 4 * 256
    assert len(bmp) == BMP_HEADER_LEN + palette_size + 6
    fields = HEADER.unpack(bmp[:BMP_HEADER_LEN])
    assert fields[1] == len(bmp)
    assert fields[3] == BMP_HEADER_LEN + palette_size
    assert fields[8] == 8
    palette = bmp[BMP_HEADER_LEN:BMP_HEADER_LEN + palette_size]
    assert palette[4 * 10:4 * 11] == bytes([10, 10, 10, 0])
    assert bmp[-6:] == data


def test_rgb565_bmp_matches_rgb888_conversion():
    data = bytes([0x12, 0x34, 0xAB, 0xCD, 0xF8, 0x1F, 0x07, 0xE0])
    bmp = fmt2bmp(data, 2, 2, PixelFormat.RGB565)
    fields = HEADER.unpack(bmp[:BMP_HEADER_LEN])
    assert fields[8] == 24
    assert fields[10] == 12
    assert bmp[BMP_HEADER_LEN:] == fmt2rgb888(data, PixelFormat.RGB565)


def test_rgb888_bmp_copies_pixels():
    data = bytes(range(24))
    bmp = fmt2bmp(data, 4, 2, PixelFormat.RGB888)
    assert bmp[BMP_HEADER_LEN:] == data
    assert HEADER.unpack(bmp[:BMP_HEADER_LEN])[1] == len(bmp)


def test_yuv422_bmp_matches_rgb888_conversion():
    data = bytes([16, 100, 200, 150, 90, 128, 60, 128])
    bmp = fmt2bmp(data, 2, 2, PixelFormat.YUV422)
    assert bmp[BMP_HEADER_LEN:] == fmt2rgb888(data, PixelFormat.YUV422)


def test_short_source_is_rejected():
    with pytest.raises(ValueError):
        fmt2bmp(bytes(5), 2, 2, PixelFormat.RGB565)


def test_frame2bmp_matches_fmt2bmp():
    data = bytes(range(8))
    frame = Frame(data=data, width=4, height=2, pixel_format=PixelFormat.GRAYSCALE)
    assert frame2bmp(frame) == fmt2bmp(data, 4, 2, PixelFormat.GRAYSCALE)
"""Convert raw camera frames to RGB888 (BGR order) and to BMP files."""

from __future__ import annotations

import struct

from camconv.pixformat import Frame, PixelFormat
from camconv.yuv import yuv422_to_rgb

BMP_HEADER_LEN = 54
"""Size of the file header plus the 40-byte info header."""

PIXELS_PER_METER = 0x0B13
"""Resolution written to the header: 2835 pixels per metre, 72 DPI."""

_DIB_HEADER_SIZE = 40
_GRAYSCALE_PALETTE = bytes(
    component for level in range(256) for component in (level, level, level, 0)
)
_HEADER = struct.Struct("<2sIIIIiiHHIIIIII")


def bmp_header(
    width: int, height: int, bits_per_pixel: int, pixel_offset: int, image_size: int
) -> bytes:
    """Return the 54-byte BMP header for a top-down, uncompressed image.

    The height is stored negated so rows run from top to bottom. The file
    size recorded is ``pixel_offset + image_size``.
    """
    return _HEADER.pack(
        b"BM",
        pixel_offset + image_size,
        0,
        pixel_offset,
        _DIB_HEADER_SIZE,
        width,
        -height,
        1,
        bits_per_pixel,
        0,
        image_size,
        PIXELS_PER_METER,
        PIXELS_PER_METER,
        0,
        0,
    )


def _rgb565_to_bgr(data: bytes, count: int) -> bytes:
    out = bytearray()
    for high, low in zip(data[0:2 * count:2], data[1:2 * count:2]):
        out.append((low & 0x1F) << 3)
        out.append(((high & 0x07) << 5) | ((low & 0xE0) >> 3))
        out.append(high & 0xF8)
    return bytes(out)


def _swap_rb(rgb: bytes) -> bytes:
    out = bytearray(len(rgb))
    out[0::3] = rgb[2::3]
    out[1::3] = rgb[1::3]
    out[2::3] = rgb[0::3]
    return bytes(out)


def _gray_to_bgr(data: bytes) -> bytes:
    return bytes(value for value in data for _ in range(3))


def _reject_jpeg(pixel_format: PixelFormat) -> None:
    if pixel_format is PixelFormat.JPEG:
        raise ValueError("JPEG sources cannot be decoded")


def fmt2rgb888(src: bytes, pixel_format: PixelFormat) -> bytes:
    """Convert a whole buffer to 24-bit pixels in blue, green, red order.

    RGB888 data is returned unchanged. The pixel count follows from the
    length of ``src``; incomplete trailing pixels are dropped.
    """
    _reject_jpeg(pixel_format)
    data = bytes(src)
    if pixel_format is PixelFormat.RGB888:
        return data
    if pixel_format is PixelFormat.RGB565:
        return _rgb565_to_bgr(data, len(data) // 2)
    if pixel_format is PixelFormat.GRAYSCALE:
        return _gray_to_bgr(data)
    pairs = len(data) // 2 // 2
    return _swap_rb(yuv422_to_rgb(data[:pairs * 4]))


def fmt2bmp(src: bytes, width: int, height: int, pixel_format: PixelFormat) -> bytes:
    """Return a complete BMP file holding the image.

    Grayscale images are stored as 8-bit pixels with a 256-entry gray
    palette; every other format is stored as 24-bit BGR pixels.
    """
    _reject_jpeg(pixel_format)
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative, got {width}x{height}")
    data = bytes(src)
    pix_count = width * height
    needed = pix_count * pixel_format.bytes_per_pixel()
    if len(data) < needed:
        raise ValueError(
            f"{width}x{height} {pixel_format.name} needs {needed} bytes, got {len(data)}"
        )

    if pixel_format is PixelFormat.GRAYSCALE:
        bpp, palette = 1, _GRAYSCALE_PALETTE
        pixels = data[:pix_count]
    else:
        bpp, palette = 3, b""
        if pixel_format is PixelFormat.RGB888:
            pixels = data[:pix_count * 3]
        elif pixel_format is PixelFormat.RGB565:
            pixels = _rgb565_to_bgr(data, pix_count)
        else:
            pairs = pix_count // 2
            pixels = _swap_rb(yuv422_to_rgb(data[:pairs * 4]))
            # An odd trailing pixel has no full YUYV group to come from.
            pixels += bytes(pix_count * 3 - len(pixels))

    image_size = pix_count * bpp
    header = bmp_header(width, height, bpp * 8, BMP_HEADER_LEN + len(palette), image_size)
    return header + palette + pixels


def frame2bmp(frame: Frame) -> bytes:
    """Return a BMP file holding a camera frame."""
    return fmt2bmp(frame.data, frame.width, frame.height, frame.pixel_format)
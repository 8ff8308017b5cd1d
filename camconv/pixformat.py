"""Pixel formats and camera frames understood by the converters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PixelFormat(Enum):
    """Layout of the pixel data in a frame buffer."""

    RGB565 = "rgb565"
    YUV422 = "yuv422"
    GRAYSCALE = "grayscale"
    JPEG = "jpeg"
    RGB888 = "rgb888"

    def bytes_per_pixel(self) -> int:
        """Return the number of bytes one pixel takes in this format.

        JPEG data is compressed and has no fixed size per pixel, so asking
        for it raises ValueError.
        """
        try:
            return _BYTES_PER_PIXEL[self]
        except KeyError:
            raise ValueError(f"{self.name} has no fixed bytes per pixel") from None


_BYTES_PER_PIXEL = {
    PixelFormat.RGB565: 2,
    PixelFormat.YUV422: 2,
    PixelFormat.GRAYSCALE: 1,
    PixelFormat.RGB888: 3,
}


@dataclass(frozen=True)
class Frame:
    """A captured image: raw bytes plus their dimensions and format."""

    data: bytes
    width: int
    height: int
    pixel_format: PixelFormat
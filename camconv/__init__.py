"""Raw camera frame conversion to BMP files and 24-bit pixels, with YUV and DCT helpers."""

__version__ = "0.1.0"
# camconv

camconv converts raw camera frames to BMP files and to packed 24-bit pixels. It uses only the standard library.

- It writes RGB565, RGB888, YUV422 (YUYV) and 8-bit grayscale frames as BMP files. Grayscale frames become 8-bit paletted images. The other formats become 24-bit images.
- It expands any of those formats to 24-bit pixels in blue, green, red order.
- It converts YUV samples to RGB with a fixed-point lookup table.
- It has an integer forward DCT for 8x8 blocks.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Pixel formats and frames

`camconv.pixformat.PixelFormat` lists the source layouts: `RGB565`, `YUV422`, `GRAYSCALE`, `JPEG` and `RGB888`. `PixelFormat.bytes_per_pixel()` returns the size of one pixel in bytes. JPEG data has no fixed size per pixel, so calling it on `JPEG` raises `ValueError`.

`camconv.pixformat.Frame` is a frozen dataclass that holds a frame. Its fields are `data`, `width`, `height` and `pixel_format`.

## Writing BMP

```python
from camconv.pixformat import Frame, PixelFormat
from camconv.to_bmp import fmt2bmp, frame2bmp

width, height = 64, 48
gray = bytes(width * height)

bmp_bytes = fmt2bmp(gray, width, height, PixelFormat.GRAYSCALE)

frame = Frame(data=gray, width=width, height=height, pixel_format=PixelFormat.GRAYSCALE)
same_bytes = frame2bmp(frame)
```

The pixel rows are stored top-down, and the header marks this with a negative height. The header records 2835 pixels per metre (72 DPI). Grayscale images carry a 256-entry gray palette after the 54-byte header.

`fmt2bmp` raises `ValueError` in these cases:

- the source is JPEG;
- the width or height is negative;
- the buffer is shorter than `width * height * bytes_per_pixel()`.

For a YUV422 image with an odd pixel count, the last pixel has no complete YUYV group, so it is written as black.

`bmp_header(width, height, bits_per_pixel, pixel_offset, image_size)` builds the 54-byte header alone. The file size it records is `pixel_offset + image_size`.

## Expanding to 24-bit pixels

```python
from camconv.to_bmp import fmt2rgb888

bgr = fmt2rgb888(gray, PixelFormat.GRAYSCALE)
```

`fmt2rgb888` returns pixels in blue, green, red order, which is the order a 24-bit BMP uses. RGB888 input is returned unchanged. The length of the buffer sets the pixel count, and incomplete trailing pixels are dropped. JPEG input raises `ValueError`.

## Colour conversion

`camconv.yuv.yuv_to_rgb(y, u, v)` converts one sample and returns an `(r, g, b)` tuple clamped to 0–255. It raises `ValueError` if any input is outside 0–255.

`camconv.yuv.yuv422_to_rgb(data)` converts a packed YUYV buffer to packed RGB888 in red, green, blue order. Each four bytes `Y0 U Y1 V` become two pixels. Leftover bytes that do not make a full group are ignored.

## Forward DCT

`camconv.dct.fdct_8x8(block)` takes 64 level-shifted samples in row-major order. It returns their integer forward DCT coefficients in the same order. The result is scaled so that a flat block of value `c` gives a DC coefficient of `8 * c`. A block that does not have exactly 64 samples raises `ValueError`.

## What camconv does not do

camconv has no JPEG support:

- It does not encode frames as JPEG. The DCT is provided, but it has no quantisation or entropy-coding stage.
- It does not decode JPEG data. The converters reject JPEG sources with `ValueError`.

There is no command-line tool. camconv is a library only.
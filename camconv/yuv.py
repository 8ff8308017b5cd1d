"""Fixed-point YUV to RGB conversion."""

from __future__ import annotations

from typing import NamedTuple


class _Row(NamedTuple):
    y: int
    v_r: int
    v_g: int
    u_g: int
    u_b: int


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def _build_table() -> tuple[_Row, ...]:
    # Coefficients in thousandths, truncated toward zero.
    return tuple(
        _Row(
            y=_trunc_div(1164 * (x - 16), 1000),
            v_r=_trunc_div(1596 * (x - 128), 1000),
            v_g=_trunc_div(391 * (128 - x), 1000),
            u_g=_trunc_div(813 * (128 - x), 1000),
            u_b=_trunc_div(2018 * (x - 128), 1000),
        )
        for x in range(256)
    )


_TABLE = _build_table()


def _clamp(value: int) -> int:
    return 0 if value < 0 else 255 if value > 255 else value


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def yuv_to_rgb(y: int, u: int, v: int) -> tuple[int, int, int]:
    """Convert one Y, U, V sample triple to an (r, g, b) tuple."""
    _check_byte("y", y)
    _check_byte("u", u)
    _check_byte("v", v)
    luma = _TABLE[y].y
    red = luma + _TABLE[v].v_r
    green = luma + _TABLE[u].u_g + _TABLE[v].v_g
    blue = luma + _TABLE[u].u_b
    return _clamp(red), _clamp(green), _clamp(blue)


def yuv422_to_rgb(data: bytes) -> bytes:
    """Convert packed YUYV bytes to packed RGB888 bytes.

    Every four input bytes (Y0 U Y1 V) give two pixels. Trailing bytes that
    do not make up a full group are ignored.
    """
    out = bytearray()
    view = memoryview(bytes(data))
    for start in range(0, len(view) - len(view) % 4, 4):
        y0, u, y1, v = view[start:start + 4]
        out.extend(yuv_to_rgb(y0, u, v))
        out.extend(yuv_to_rgb(y1, u, v))
    return bytes(out)
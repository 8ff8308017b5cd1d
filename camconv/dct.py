"""Integer forward DCT on 8x8 blocks."""

from __future__ import annotations

from typing import Sequence

_CONST_BITS = 13
_ROW_BITS = 2


def _to_int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


def _mul(value: int, constant: int) -> int:
    return _to_int16(value) * constant


def _descale(value: int, bits: int) -> int:
    return (value + (1 << (bits - 1))) >> bits


def _dct_1d(s: Sequence[int]) -> tuple[int, ...]:
    s0, s1, s2, s3, s4, s5, s6, s7 = s
    t0, t7 = s0 + s7, s0 - s7
    t1, t6 = s1 + s6, s1 - s6
    t2, t5 = s2 + s5, s2 - s5
    t3, t4 = s3 + s4, s3 - s4
    t10, t13 = t0 + t3, t0 - t3
    t11, t12 = t1 + t2, t1 - t2

    u1 = _mul(t12 + t13, 4433)
    out2 = u1 + _mul(t13, 6270)
    out6 = u1 + _mul(t12, -15137)

    u1 = t4 + t7
    u2 = t5 + t6
    u3 = t4 + t6
    u4 = t5 + t7
    z5 = _mul(u3 + u4, 9633)
    t4 = _mul(t4, 2446)
    t5 = _mul(t5, 16819)
    t6 = _mul(t6, 25172)
    t7 = _mul(t7, 12299)
    u1 = _mul(u1, -7373)
    u2 = _mul(u2, -20995)
    u3 = _mul(u3, -16069) + z5
    u4 = _mul(u4, -3196) + z5

    return (
        t10 + t11,
        t7 + u1 + u4,
        out2,
        t6 + u2 + u3,
        t10 - t11,
        t5 + u2 + u4,
        out6,
        t4 + u1 + u3,
    )


def fdct_8x8(block: Sequence[int]) -> list[int]:
    """Return the forward DCT of 64 level-shifted samples in row-major order.

    The result is scaled so that a flat block of value c has DC 8*c.
    """
    if len(block) != 64:
        raise ValueError(f"a block has 64 samples, got {len(block)}")
    data = list(block)

    row_shift = _CONST_BITS - _ROW_BITS
    for start in range(0, 64, 8):
        out = _dct_1d(data[start:start + 8])
        data[start:start + 8] = [
            value << _ROW_BITS if k in (0, 4) else _descale(value, row_shift)
            for k, value in enumerate(out)
        ]

    even_shift = _ROW_BITS + 3
    odd_shift = _CONST_BITS + _ROW_BITS + 3
    for column in range(8):
        out = _dct_1d(data[column::8])
        data[column::8] = [
            _descale(value, even_shift if k in (0, 4) else odd_shift)
            for k, value in enumerate(out)
        ]
    return data
"""Bit rotations of 8x8 bit blocks used for parallel output."""

from __future__ import annotations

from typing import Iterable

_M32 = 0xFFFFFFFF


def _block(data: Iterable[int], size: int) -> bytes:
    raw = bytes(data)
    if len(raw) < size:
        raise ValueError(f"need at least {size} bytes, got {len(raw)}")
    return raw


def _rotate_words(x: int, y: int) -> tuple[int, int]:
    """Run the shared transform on the two packed words and return (x, y)."""
    t = (x ^ (x >> 7)) & 0x00AA00AA
    x = (x ^ t ^ (t << 7)) & _M32
    t = (x ^ (x >> 14)) & 0x0000CCCC
    x = (x ^ t ^ (t << 14)) & _M32

    t = (y ^ (y >> 7)) & 0x00AA00AA
    y = (y ^ t ^ (t << 7)) & _M32
    t = (y ^ (y >> 14)) & 0x0000CCCC
    y = (y ^ t ^ (t << 14)) & _M32

    t = (x & 0xF0F0F0F0) | ((y >> 4) & 0x0F0F0F0F)
    y = ((x << 4) & 0xF0F0F0F0) | (y & 0x0F0F0F0F)
    return t, y


def _load_words(raw: bytes) -> tuple[int, int]:
    """Load the first eight bytes as two little-endian words (x, y)."""
    y = int.from_bytes(raw[0:4], "little")
    x = int.from_bytes(raw[4:8], "little")
    return x, y


def transpose8x1(data: Iterable[int]) -> bytes:
    """Rotate an 8-byte block, writing the result with least significant words first."""
    x, y = _rotate_words(*_load_words(_block(data, 8)))
    return y.to_bytes(4, "little") + x.to_bytes(4, "little")


def transpose8x1_msb(data: Iterable[int]) -> bytes:
    """Rotate an 8-byte block, writing the result most significant byte first."""
    x, y = _rotate_words(*_load_words(_block(data, 8)))
    return x.to_bytes(4, "big") + y.to_bytes(4, "big")


def transpose8(data: Iterable[int], m: int, n: int) -> bytes:
    """Rotate eight bytes read at stride ``m`` and return them placed at stride ``n``.

    The result has ``7 * n + 1`` bytes; positions between the strided outputs are zero.
    With ``m == 1`` the input is loaded as two little-endian words, as on the device.
    """
    if m < 1 or n < 1:
        raise ValueError("strides must be positive")
    raw = _block(data, 8 if m == 1 else 7 * m + 1)
    if m == 1:
        x, y = _load_words(raw)
    else:
        rows = raw[: 7 * m + 1 : m]
        x = int.from_bytes(rows[0:4], "big")
        y = int.from_bytes(rows[4:8], "big")
    x, y = _rotate_words(x, y)
    result = bytearray(7 * n + 1)
    result[::n] = x.to_bytes(4, "big") + y.to_bytes(4, "big")
    return bytes(result)


def swapbits8(data: Iterable[int]) -> bytes:
    """Rotate an 8-byte by 8-bit block: bit ``j`` of output byte ``i`` is bit ``7 - i`` of input byte ``j``."""
    x, y = _load_words(_block(data, 8))
    low, high = y, x
    out = bytearray()
    for _ in range(8):
        work = 0
        for lane, shift in enumerate((7, 15, 23, 31)):
            work |= ((low >> shift) & 1) << lane
            work |= ((high >> shift) & 1) << (lane + 4)
        low = (low << 1) & _M32
        high = (high << 1) & _M32
        out.append(work)
    return bytes(out)


def slowswap(source: Iterable[int], target: Iterable[int]) -> bytes:
    """Bit-by-bit rotation of the first seven source rows into a copy of ``target``.

    Bit ``row`` of output byte ``k`` becomes bit ``7 - k`` of ``source[row]`` for
    rows 0 to 6; bit 7 of every byte keeps its value from ``target``.
    """
    rows = _block(source, 7)[:7]
    out = bytearray(_block(target, 8)[:8])
    for row, value in enumerate(rows):
        bit = 1 << row
        for k in range(8):
            if value & (0x80 >> k):
                out[k] |= bit
            else:
                out[k] &= ~bit & 0xFF
    return bytes(out)
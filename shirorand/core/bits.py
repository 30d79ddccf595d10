"""64-bit word arithmetic on Python integers."""

from __future__ import annotations

MASK64 = (1 << 64) - 1
TWO_POW_64 = 1 << 64


def rotl(value: int, k: int) -> int:
    """Rotate a 64-bit word left by *k* bits (``0 < k < 64``)."""
    return ((value << k) & MASK64) | (value >> (64 - k))


def mul64(left: int, right: int) -> tuple[int, int]:
    """Return the ``(high, low)`` 64-bit halves of the 128-bit product."""
    product = left * right
    return product >> 64, product & MASK64

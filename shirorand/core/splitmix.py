"""SplitMix64, used to expand a single 64-bit value into state words."""

from __future__ import annotations

from shirorand.core.bits import MASK64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB


class SplitMix64:
    __slots__ = ("_x",)

    def __init__(self, seed: int) -> None:
        self._x = int(seed) & MASK64

    def next(self) -> int:
        self._x = (self._x + GOLDEN_GAMMA) & MASK64
        z = self._x
        z = ((z ^ (z >> 30)) * _MIX_1) & MASK64
        z = ((z ^ (z >> 27)) * _MIX_2) & MASK64
        return z ^ (z >> 31)


def splitmix64_words(seed: int, count: int) -> list[int]:
    """Return *count* consecutive SplitMix64 outputs keyed by *seed*."""
    mixer = SplitMix64(seed)
    return [mixer.next() for _ in range(count)]

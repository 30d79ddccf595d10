"""Generator handle and the sampling layer built on its raw 64-bit draws.

None of the sampling methods validate their arguments. Bounds must be
positive, bit counts must lie in ``[1, 64]``, and ``int_range`` needs
``lower < upper``; anything else gives meaningless output rather than an
error.
"""
from __future__ import annotations

import math

import numpy as np

from shirorand.core.bits import MASK64, TWO_POW_64, mul64
from shirorand.core.engines import ENGINES, Engine, Xoroshiro128pp, Xoshiro256pp, Xoshiro512pp
from shirorand.core.seeding import EntropyProvider

BITS_FOR_FLOAT64 = 53
FLOAT64_DENOM = float(1 << BITS_FOR_FLOAT64)
BITS_FOR_FLOAT32 = 24
FLOAT32_DENOM = np.float32(1 << BITS_FOR_FLOAT32)
_FLOAT32_MASK = (1 << BITS_FOR_FLOAT32) - 1
_NORMAL_BITS = BITS_FOR_FLOAT64 + 1
_NORMAL_SHIFT = 1 << BITS_FOR_FLOAT64


class Generator:
    """Single-owner pseudo-random generator over one bit-stream engine.

    Not thread-safe: give every thread or task its own instance.
    """

    __slots__ = ("_engine", "_next", "_variant")

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._next = engine.next
        self._variant = engine.VARIANT

    def __repr__(self) -> str:
        return f"Generator(variant={self._variant!r})"

    @property
    def variant(self) -> str:
        return self._variant

    # Raw draws

    def uint64(self) -> int:
        """Return an integer in ``[0, 2**64)``."""
        return self._next()

    next = uint64

    def reseed(self, value: int) -> None:
        """Replace the whole state from *value* via SplitMix64.

        Two generators of the same variant reseeded with the same value
        produce identical streams afterwards. Only a new generator restores
        unpredictability.
        """
        self._engine.reseed(value)

    manual_seed = reseed

    def bits(self, bitcount: int) -> int:
        """Return the top *bitcount* bits of one draw, in ``[0, 2**bitcount)``."""
        return self._next() >> (64 - bitcount)

    # Integers

    def uint64n(self, bound: int) -> int:
        """Return an unbiased integer in ``[0, bound)`` (Lemire, arXiv:1805.10941)."""
        high, low = mul64(self._next(), bound)
        if low < bound:
            threshold = (TWO_POW_64 - bound) % bound
            while low < threshold:
                high, low = mul64(self._next(), bound)
        return high

    def intn(self, bound: int) -> int:
        return self.uint64n(bound & MASK64)

    def int_range(self, lower: int, upper: int) -> int:
        """Return an integer in ``[lower, upper)``."""
        return self.intn(upper - lower) + lower

    def bool(self) -> bool:
        return self.bits(1) == 1

    # Floats

    def float64(self) -> float:
        """Uniform float in ``[0.0, 1.0)``; ``value * 2**53`` recovers the draw exactly."""
        return self.bits(BITS_FOR_FLOAT64) / FLOAT64_DENOM

    def float32(self) -> np.float32:
        """Uniform float32 in ``[0.0, 1.0)`` from a 24-bit draw.

        Do not derive float32 values by casting ``float64()``: rounding makes
        some 24-bit mantissas unreachable.
        """
        return np.float32(self.bits(BITS_FOR_FLOAT32)) / FLOAT32_DENOM

    def fast_float32(self) -> tuple[np.float32, np.float32]:
        """Two independent float32 values from a single 48-bit draw."""
        random48 = self.bits(BITS_FOR_FLOAT32 * 2)
        first = np.float32(random48 & _FLOAT32_MASK) / FLOAT32_DENOM
        second = np.float32(random48 >> BITS_FOR_FLOAT32) / FLOAT32_DENOM
        return first, second

    # Distributions

    def _signed_unit(self) -> float:
        # 54-bit draw minus 2**53, zero draws rejected: an integer in
        # (-2**53, 2**53), scaled to (-1.0, 1.0).
        while True:
            raw = self.bits(_NORMAL_BITS)
            if raw != 0:
                return (raw - _NORMAL_SHIFT) / FLOAT64_DENOM

    def normal(self) -> tuple[float, float]:
        """Two independent standard normal variates (Marsaglia polar method)."""
        while True:
            u = self._signed_unit()
            v = self._signed_unit()
            s = u * u + v * v
            if s >= 1.0 or s == 0.0:
                continue
            scale = math.sqrt(-2.0 * math.log(s) / s)
            return u * scale, v * scale

    def normal_dist(self, mean: float, stddev: float) -> tuple[float, float]:
        x, y = self.normal()
        return x * stddev + mean, y * stddev + mean

    def exponential(self) -> float:
        """Exponential variate with rate 1; divide by ``lambda`` to rescale.

        The all-ones draw maps to ``1.0`` and returns ``0.0`` (never ``-0.0``).
        """
        # (0.0, 1.0] so the logarithm is always finite.
        value = (self.bits(BITS_FOR_FLOAT64) + 1) / FLOAT64_DENOM
        return 0.0 - math.log(value)

    # Structural

    def perm(self, n: int) -> np.ndarray:
        """Random permutation of ``range(n)`` (inside-out Fisher-Yates)."""
        slots = np.zeros(n, dtype=np.int64)
        for index in range(n):
            swap_index = self.intn(index + 1)
            slots[index] = slots[swap_index]
            slots[swap_index] = index
        return slots

    # Bulk draws

    def uint64_array(self, size: int) -> np.ndarray:
        draw = self._next
        return np.fromiter((draw() for _ in range(size)), dtype=np.uint64, count=size)

    def float64_array(self, size: int) -> np.ndarray:
        draw = self.float64
        return np.fromiter((draw() for _ in range(size)), dtype=np.float64, count=size)


def new_128pp(entropy: EntropyProvider | None = None) -> Generator:
    """Generator backed by xoroshiro128++ (2-word state)."""
    return Generator(Xoroshiro128pp(entropy=entropy))


def new_256pp(entropy: EntropyProvider | None = None) -> Generator:
    """Generator backed by xoshiro256++ (4-word state)."""
    return Generator(Xoshiro256pp(entropy=entropy))


def new_512pp(entropy: EntropyProvider | None = None) -> Generator:
    """Generator backed by xoshiro512++ (8-word state)."""
    return Generator(Xoshiro512pp(entropy=entropy))


def new(entropy: EntropyProvider | None = None) -> Generator:
    """Default generator; identical to :func:`new_256pp`."""
    return new_256pp(entropy)


def new_variant(variant: str, entropy: EntropyProvider | None = None) -> Generator:
    return Generator(ENGINES[variant](entropy=entropy))

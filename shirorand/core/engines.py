"""Bit-stream engines of the xoroshiro/xoshiro ++ family.

Transitions follow the public-domain reference implementations at
https://prng.di.unimi.it/ (xoroshiro128plusplus.c, xoshiro256plusplus.c,
xoshiro512plusplus.c). Words are Python ints kept in ``[0, 2**64)``.
"""
from __future__ import annotations

from typing import Sequence

from shirorand.core.bits import MASK64, rotl
from shirorand.core.seeding import EntropyProvider, manual_seed_state, seed_state


class Xoroshiro128pp:
    VARIANT = "128pp"
    WORDS = 2
    __slots__ = ("_s0", "_s1")

    def __init__(self, state: Sequence[int] | None = None, entropy: EntropyProvider | None = None) -> None:
        words = seed_state(self.WORDS, entropy) if state is None else list(state)
        self._s0, self._s1 = (int(word) & MASK64 for word in words)

    def next(self) -> int:
        s0 = self._s0
        s1 = self._s1
        result = (rotl((s0 + s1) & MASK64, 17) + s0) & MASK64
        s1 ^= s0
        self._s0 = rotl(s0, 49) ^ s1 ^ ((s1 << 21) & MASK64)
        self._s1 = rotl(s1, 28)
        return result

    def reseed(self, value: int) -> None:
        self._s0, self._s1 = manual_seed_state(self.WORDS, value)


class Xoshiro256pp:
    VARIANT = "256pp"
    WORDS = 4
    __slots__ = ("_s",)

    def __init__(self, state: Sequence[int] | None = None, entropy: EntropyProvider | None = None) -> None:
        words = seed_state(self.WORDS, entropy) if state is None else list(state)
        self._s = [int(word) & MASK64 for word in words]

    def next(self) -> int:
        s = self._s
        result = (rotl((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
        t = (s[1] << 17) & MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl(s[3], 45)
        return result

    def reseed(self, value: int) -> None:
        self._s[:] = manual_seed_state(self.WORDS, value)


class Xoshiro512pp:
    VARIANT = "512pp"
    WORDS = 8
    __slots__ = ("_s",)

    def __init__(self, state: Sequence[int] | None = None, entropy: EntropyProvider | None = None) -> None:
        words = seed_state(self.WORDS, entropy) if state is None else list(state)
        self._s = [int(word) & MASK64 for word in words]

    def next(self) -> int:
        s = self._s
        result = (rotl((s[0] + s[2]) & MASK64, 17) + s[2]) & MASK64
        t = (s[1] << 11) & MASK64
        s[2] ^= s[0]
        s[5] ^= s[1]
        s[1] ^= s[2]
        s[7] ^= s[3]
        s[3] ^= s[4]
        s[4] ^= s[5]
        s[0] ^= s[6]
        s[6] ^= s[7]
        s[6] ^= t
        s[7] = rotl(s[7], 21)
        return result

    def reseed(self, value: int) -> None:
        self._s[:] = manual_seed_state(self.WORDS, value)


Engine = Xoroshiro128pp | Xoshiro256pp | Xoshiro512pp

ENGINES: dict[str, type[Engine]] = {
    "128pp": Xoroshiro128pp,
    "256pp": Xoshiro256pp,
    "512pp": Xoshiro512pp,
}

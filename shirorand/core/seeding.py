"""State seeding from OS entropy with a deterministic SplitMix64 fallback.

A state of ``N`` words is filled from ``8 * N`` bytes of entropy, sliced
into consecutive little-endian 8-byte groups. When the entropy provider
fails the words come from SplitMix64 instead, keyed by a process-local
value derived from the seed buffer's identity and the clock. Failures are
logged and never propagate.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Callable

from shirorand.core.bits import MASK64
from shirorand.core.splitmix import splitmix64_words

logger = logging.getLogger(__name__)

BYTES_PER_WORD = 8

EntropyProvider = Callable[[int], bytes]


class EntropyUnavailableError(OSError):
    """Raised when an entropy provider returns fewer bytes than requested."""


def system_entropy(n_bytes: int) -> bytes:
    return os.urandom(n_bytes)


def _read_entropy(provider: EntropyProvider, buffer: bytearray) -> None:
    payload = provider(len(buffer))
    if payload is None or len(payload) < len(buffer):
        got = 0 if payload is None else len(payload)
        raise EntropyUnavailableError(f"Entropy provider returned {got} of {len(buffer)} bytes")
    buffer[:] = payload[: len(buffer)]


def fallback_seed(buffer: bytearray) -> int:
    """Derive a 64-bit key from the buffer identity and the wall clock."""
    return (time.time_ns() ^ id(buffer)) & MASK64


def seed_state(word_count: int, entropy: EntropyProvider | None = None) -> list[int]:
    provider = system_entropy if entropy is None else entropy
    seed = bytearray(word_count * BYTES_PER_WORD)
    try:
        _read_entropy(provider, seed)
    except (OSError, NotImplementedError) as exc:
        logger.warning("Entropy source unavailable (%s); seeding %d words from SplitMix64", exc, word_count)
        return splitmix64_words(fallback_seed(seed), word_count)
    return [
        int.from_bytes(seed[index * BYTES_PER_WORD : (index + 1) * BYTES_PER_WORD], "little")
        for index in range(word_count)
    ]


def manual_seed_state(word_count: int, value: int) -> list[int]:
    """State words for a manual reseed; identical for identical inputs."""
    return splitmix64_words(int(value) & MASK64, word_count)

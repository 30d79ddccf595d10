from shirorand.core.bits import MASK64, mul64, rotl
from shirorand.core.engines import ENGINES, Xoroshiro128pp, Xoshiro256pp, Xoshiro512pp
from shirorand.core.seeding import EntropyUnavailableError, manual_seed_state, seed_state, system_entropy
from shirorand.core.splitmix import SplitMix64, splitmix64_words

__all__ = [
    "ENGINES",
    "EntropyUnavailableError",
    "MASK64",
    "SplitMix64",
    "Xoroshiro128pp",
    "Xoshiro256pp",
    "Xoshiro512pp",
    "manual_seed_state",
    "mul64",
    "rotl",
    "seed_state",
    "splitmix64_words",
    "system_entropy",
]

"""Fast, non-cryptographic pseudo-random generation on the xoshiro ++ family.

Generators are seeded from the operating system on construction and are
meant to be owned by a single thread. They are not a substitute for a
cryptographically secure generator.
"""

from shirorand.config import GeneratorConfig, build_generator
from shirorand.generator import Generator, new, new_128pp, new_256pp, new_512pp
from shirorand.shuffle import shuffle

__all__ = [
    "Generator",
    "GeneratorConfig",
    "build_generator",
    "new",
    "new_128pp",
    "new_256pp",
    "new_512pp",
    "shuffle",
]

from __future__ import annotations

from dataclasses import dataclass

from shirorand.core.seeding import EntropyProvider
from shirorand.generator import Generator, new_variant

_VARIANT_ALIASES = {
    "128": "128pp",
    "128pp": "128pp",
    "xoroshiro128++": "128pp",
    "xoroshiro128pp": "128pp",
    "256": "256pp",
    "256pp": "256pp",
    "xoshiro256++": "256pp",
    "xoshiro256pp": "256pp",
    "default": "256pp",
    "512": "512pp",
    "512pp": "512pp",
    "xoshiro512++": "512pp",
    "xoshiro512pp": "512pp",
}


def normalize_variant(raw: object) -> str:
    key = str(raw).strip().lower()
    if key not in _VARIANT_ALIASES:
        raise ValueError(f"Unknown generator variant: {raw!r}")
    return _VARIANT_ALIASES[key]


@dataclass(slots=True)
class GeneratorConfig:
    variant: str = "256pp"
    seed: int | None = None

    @classmethod
    def from_mapping(cls, mapping: dict) -> "GeneratorConfig":
        config = cls()
        config.variant = normalize_variant(mapping.get("variant", mapping.get("engine", config.variant)))
        for key in ("manualSeed", "manual_seed", "seed"):
            if key in mapping and mapping[key] is not None:
                config.seed = int(mapping[key])
                break
        return config


def build_generator(config: GeneratorConfig, entropy: EntropyProvider | None = None) -> Generator:
    rng = new_variant(normalize_variant(config.variant), entropy=entropy)
    if config.seed is not None:
        rng.reseed(config.seed)
    return rng

from __future__ import annotations

from typing import Callable

from shirorand.core.engines import ENGINES
from shirorand.core.seeding import manual_seed_state
from shirorand.generator import Generator, new


def ensure_generator(rng: Generator | None = None, factory: Callable[[], Generator] = new) -> Generator:
    """Return *rng* if one was passed, else a freshly seeded one from *factory*.

    Functions that draw random values accept an optional ``rng`` and call
    this to normalise it, so callers can pass a manually seeded generator to
    get reproducible output.
    """
    if rng is not None:
        return rng
    return factory()


def spawn(rng: Generator, count: int, variant: str | None = None) -> list[Generator]:
    """Derive *count* child generators, each reseeded from one parent draw.

    Children default to the parent's variant. The result is reproducible
    whenever the parent is, which makes it the usual way to hand one
    generator to each worker.
    """
    variant = rng.variant if variant is None else variant
    children: list[Generator] = []
    for _ in range(count):
        engine_cls = ENGINES[variant]
        state = manual_seed_state(engine_cls.WORDS, rng.uint64())
        children.append(Generator(engine_cls(state=state)))
    return children

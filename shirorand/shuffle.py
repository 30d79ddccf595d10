"""In-place Fisher-Yates shuffle over any mutable sequence."""

from __future__ import annotations

from typing import Any, MutableSequence

import numpy as np

from shirorand.generator import Generator, new_512pp
from shirorand.utils.random import ensure_generator


def shuffle(rng: Generator | None, collection: MutableSequence[Any] | np.ndarray) -> None:
    """Shuffle *collection* in place.

    Sequences of length 0 or 1 are left untouched. When *rng* is ``None`` a
    xoshiro512++ generator is created for this call only.
    """
    length = len(collection)
    if length <= 1:
        return
    rng = ensure_generator(rng, factory=new_512pp)
    if isinstance(collection, np.ndarray):
        # Fancy indexing copies, so rows of multi-dimensional arrays swap whole.
        for index in range(length - 1, 0, -1):
            other = rng.intn(index + 1)
            collection[[index, other]] = collection[[other, index]]
        return
    for index in range(length - 1, 0, -1):
        other = rng.intn(index + 1)
        collection[index], collection[other] = collection[other], collection[index]

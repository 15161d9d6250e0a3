from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """
    What it does:
    - The slice of `random.Random` the booking flow relies on.

    Behavior:
    - Production code passes a fresh `random.Random()`.
    - Tests pass a seeded `random.Random(seed)` or a scripted fake.
    """

    def randrange(self, start: int, stop: int | None = ..., step: int = ...) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def default_random_source(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


def pick_random(items: Sequence[T], rng: RandomSource) -> T:
    if not items:
        raise ValueError("Cannot pick a random element from an empty sequence")
    return items[rng.randrange(len(items))]

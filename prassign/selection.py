"""Reviewer selection: uniform random sampling without replacement.

No weighting by workload or history. The randomness source is always
passed in, so tests can use a seeded ``random.Random`` while production
uses one seeded from system entropy.
"""

import random
from typing import Iterable, TypeVar

T = TypeVar("T")


def sample_candidates(candidates: Iterable[T], limit: int, rng: random.Random) -> list[T]:
    """Return up to ``limit`` distinct candidates in uniformly random order.

    Fewer are returned when the pool is smaller than ``limit``; a
    non-positive limit yields an empty list.
    """
    if limit <= 0:
        return []
    pool = list(candidates)
    rng.shuffle(pool)
    return pool[:limit]


def make_rng(seed: int | None = None) -> random.Random:
    """Create a dedicated randomness source (system entropy when seed is None)."""
    return random.Random(seed)

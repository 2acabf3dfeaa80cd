"""Wiring: store, randomness source and service from AppConfig."""

from prassign.config import AppConfig
from prassign.selection import make_rng
from prassign.service import ReviewService
from prassign.store import MemoryStore


def build_service(config: AppConfig) -> ReviewService:
    """Create an empty store and the service on top of it.

    Store and service share one randomness source seeded from
    assignment.random_seed (system entropy when unset).
    """
    rng = make_rng(config.assignment.random_seed)
    store = MemoryStore(rng=rng)
    return ReviewService(
        store,
        rng=rng,
        reviewers_per_pr=config.assignment.reviewers_per_pr,
    )

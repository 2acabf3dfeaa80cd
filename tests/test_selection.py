"""Tests for prassign.selection (sampling without replacement)."""

import random

from prassign.selection import make_rng, sample_candidates


class TestSampleCandidates:
    """sample_candidates picks distinct items, at most limit."""

    def test_truncates_to_limit(self) -> None:
        """Returns exactly limit items when the pool is larger."""
        picked = sample_candidates(range(10), 3, random.Random(1))
        assert len(picked) == 3
        assert len(set(picked)) == 3
        assert set(picked) <= set(range(10))

    def test_returns_all_when_pool_smaller(self) -> None:
        """Returns every candidate when fewer than limit are available."""
        picked = sample_candidates(["a", "b"], 5, random.Random(1))
        assert sorted(picked) == ["a", "b"]

    def test_non_positive_limit(self) -> None:
        """Zero or negative limit yields an empty list."""
        assert sample_candidates(["a", "b"], 0, random.Random(1)) == []
        assert sample_candidates(["a", "b"], -1, random.Random(1)) == []

    def test_empty_pool(self) -> None:
        """An empty pool yields an empty list."""
        assert sample_candidates([], 2, random.Random(1)) == []

    def test_same_seed_same_result(self) -> None:
        """A seeded source makes selection reproducible."""
        pool = [f"u{i}" for i in range(20)]
        assert sample_candidates(pool, 5, random.Random(42)) == sample_candidates(pool, 5, random.Random(42))

    def test_does_not_mutate_input(self) -> None:
        """The caller's sequence is left in place."""
        pool = ["a", "b", "c", "d"]
        sample_candidates(pool, 2, random.Random(3))
        assert pool == ["a", "b", "c", "d"]

    def test_every_candidate_can_be_picked(self) -> None:
        """Over many draws each candidate shows up in first position."""
        rng = random.Random(7)
        seen = {sample_candidates(["a", "b", "c"], 1, rng)[0] for _ in range(200)}
        assert seen == {"a", "b", "c"}


def test_make_rng_seeded() -> None:
    """make_rng(seed) returns an independent, reproducible source."""
    assert make_rng(5).random() == make_rng(5).random()
    assert isinstance(make_rng(), random.Random)

"""Unit tests for the match policies."""

from __future__ import annotations

import pytest

from guessbot.errors import InvalidRequest
from guessbot.letters import LetterMultiset
from guessbot.matcher import BoundedDifference, ExactSubset, deficit, matches

POOLS = ["cat", "aabbccx", "listen", "a", "mississippi"]
CANDIDATES = ["cats", "act", "cards", "abcc", "xx", "silent", "tinsel", "a", "", "sips", "ssss"]


def _ms(word: str) -> LetterMultiset:
    return LetterMultiset.build(word)


class TestExactSubset:
    def test_subset_matches(self) -> None:
        assert matches(_ms("aabbccx"), _ms("abcc"), ExactSubset())

    def test_missing_letter_fails(self) -> None:
        assert not matches(_ms("cat"), _ms("cats"), ExactSubset())

    def test_insufficient_count_fails(self) -> None:
        # pool has one x, candidate needs two
        assert not matches(_ms("aabbccx"), _ms("xx"), ExactSubset())

    def test_unused_pool_letters_irrelevant(self) -> None:
        assert matches(_ms("abcdefgh"), _ms("ha"), ExactSubset())

    def test_empty_candidate_matches(self) -> None:
        assert matches(_ms("cat"), _ms(""), ExactSubset())

    def test_case_insensitive(self) -> None:
        assert matches(_ms("CAT"), _ms("Act"), ExactSubset())

    @pytest.mark.parametrize("pool", POOLS)
    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_matches_iff_every_letter_covered(self, pool: str, candidate: str) -> None:
        p, c = pool.lower(), candidate.lower()
        expected = all(p.count(ch) >= c.count(ch) for ch in set(c))
        assert matches(_ms(pool), _ms(candidate), ExactSubset()) is expected


class TestBoundedDifference:
    def test_one_bonus_letter(self) -> None:
        assert matches(_ms("cat"), _ms("cats"), BoundedDifference(1))

    def test_three_missing_letters_exceed_one(self) -> None:
        # "cards" needs r, d and s, none of which "cat" has
        assert deficit(_ms("cat"), _ms("cards")) == 3
        assert not matches(_ms("cat"), _ms("cards"), BoundedDifference(1))
        assert matches(_ms("cat"), _ms("cards"), BoundedDifference(3))

    def test_repeated_missing_letter_counts_each_time(self) -> None:
        assert deficit(_ms("a"), _ms("ssss")) == 4

    def test_shortfall_on_present_letter(self) -> None:
        assert deficit(_ms("aabbccx"), _ms("xx")) == 1

    @pytest.mark.parametrize("pool", POOLS)
    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_zero_equals_exact(self, pool: str, candidate: str) -> None:
        assert matches(_ms(pool), _ms(candidate), BoundedDifference(0)) == matches(
            _ms(pool), _ms(candidate), ExactSubset()
        )

    @pytest.mark.parametrize("pool", POOLS)
    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_monotonic_in_bonus(self, pool: str, candidate: str) -> None:
        results = [matches(_ms(pool), _ms(candidate), BoundedDifference(k)) for k in range(6)]
        first = results.index(True) if True in results else len(results)
        assert all(results[first:])

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidRequest):
            BoundedDifference(-1)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidRequest):
            BoundedDifference("2")  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(BoundedDifference(2)) == "bonus=2"
        assert str(ExactSubset()) == "exact"

"""Match policies deciding whether a candidate word fits a letter pool."""

from __future__ import annotations

from dataclasses import dataclass

from guessbot.errors import InvalidRequest
from guessbot.letters import LetterMultiset


@dataclass(frozen=True)
class ExactSubset:
    """Every candidate letter must be covered by the pool."""

    def __str__(self) -> str:
        return "exact"


@dataclass(frozen=True)
class BoundedDifference:
    """Up to *max_excess* candidate letters may be missing from the pool."""

    max_excess: int

    def __post_init__(self) -> None:
        if isinstance(self.max_excess, bool) or not isinstance(self.max_excess, int):
            raise InvalidRequest(f"Bonus letter count must be an integer, got {self.max_excess!r}")
        if self.max_excess < 0:
            raise InvalidRequest(f"Bonus letter count must not be negative, got {self.max_excess}")

    def __str__(self) -> str:
        return f"bonus={self.max_excess}"


MatchPolicy = ExactSubset | BoundedDifference


def deficit(pool: LetterMultiset, candidate: LetterMultiset) -> int:
    """Number of candidate letters the pool cannot supply."""
    return sum(max(0, count - pool[b]) for b, count in candidate.items())


def matches(pool: LetterMultiset, candidate: LetterMultiset, policy: MatchPolicy) -> bool:
    if isinstance(policy, BoundedDifference):
        return deficit(pool, candidate) <= policy.max_excess
    return all(b in pool and pool[b] >= count for b, count in candidate.items())

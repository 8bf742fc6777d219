"""Split a word list into chat-message sized segments."""

from __future__ import annotations

from collections.abc import Iterable

from guessbot.constants import MESSAGE_BYTE_CAP
from guessbot.letters import utf8_bytes


def chunk(words: Iterable[str], cap_bytes: int = MESSAGE_BYTE_CAP) -> list[list[str]]:
    """Greedily pack *words* into segments, preserving order.

    Each word costs its UTF-8 length plus one separator byte. When a word
    takes the running total past *cap_bytes*, a new segment is opened and
    the total drops by *cap_bytes*, so the overflow carries into the new
    segment. An empty input gives a single empty segment.
    """
    if cap_bytes < 1:
        raise ValueError(f"cap_bytes must be positive, got {cap_bytes}")

    segments: list[list[str]] = [[]]
    total = 0
    for word in words:
        total += len(utf8_bytes(word)) + 1
        if total > cap_bytes:
            segments.append([])
            total -= cap_bytes
        segments[-1].append(word)
    return segments


def render(segments: Iterable[list[str]]) -> list[str]:
    return [" ".join(segment) for segment in segments]

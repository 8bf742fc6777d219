"""Shared fixtures for guess bot tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from guessbot.bot import GuessBot
from guessbot.commands import ChatMessage
from guessbot.config import BotConfig
from guessbot.dictionary import InMemoryWordLists

WORDS = [
    # too short for the default minimum
    "at", "cat", "act", "sat",
    # 4-letter
    "cast", "cats", "scat", "acts", "star", "tsar", "rats", "arts", "card",
    # 5-letter
    "carts", "scart", "stare", "cards", "trace",
    # 6-letter
    "crates", "reacts", "traces", "caster",
    # duplicate entry
    "cats",
    # mixed case and blank lines
    "CAST", "", "   ",
]


@pytest.fixture
def word_lists() -> InMemoryWordLists:
    """A few hand-picked word lists held in memory. No file I/O."""
    return InMemoryWordLists({
        "english": WORDS,
        "tiny": ["abc", "abcc", "aabbcc", "xx", "ab"],
        "empty": [],
    })


@pytest.fixture
def word_list_dir(tmp_path: Path) -> Path:
    """A word-lists directory with one list on disk."""
    root = tmp_path / "word-lists"
    root.mkdir()
    (root / "english.txt").write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    (root / "crlf.txt").write_bytes(b"Cats\r\nCast\r\n\r\nscat\r\n")
    return root


@pytest.fixture
def bot(word_lists: InMemoryWordLists) -> GuessBot:
    return GuessBot(BotConfig(), word_lists)


@pytest.fixture
def mod_message():
    """Build a chat message from a moderator."""
    def _make(text: str, channel: str = "somechannel") -> ChatMessage:
        return ChatMessage(channel, "a_mod", text, frozenset({"moderator"}))
    return _make

"""Guess bot defaults: chat limits, command names and word-list locations."""

from pathlib import Path

# Chat messages longer than this are rejected by the server
MESSAGE_BYTE_CAP: int = 500

# Shortest word returned when the command doesn't say otherwise
DEFAULT_MIN_LENGTH: int = 4

DEFAULT_PREFIX: str = "!"
GUESS_COMMAND: str = "guess"

# Badges that allow a sender to run commands
PRIVILEGED_BADGES: frozenset[str] = frozenset({"moderator", "broadcaster"})

WORD_LIST_DIR: Path = Path("word-lists")
WORD_LIST_SUFFIX: str = ".txt"

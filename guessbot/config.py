"""
Configuration for the guess bot.

Settings are gathered into a BotConfig once at startup and passed to the
bot explicitly. Values come from a YAML file, a ``.env``-style file, or a
plain dictionary.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values

from guessbot.constants import DEFAULT_MIN_LENGTH, DEFAULT_PREFIX, MESSAGE_BYTE_CAP, PRIVILEGED_BADGES, WORD_LIST_DIR
from guessbot.errors import ConfigError


@dataclass
class ChatConfig:
    """Chat account and channel settings."""

    username: str = ""
    oauth_token: str = ""
    channels: list[str] = field(default_factory=list)
    prefix: str = DEFAULT_PREFIX
    privileged_badges: frozenset[str] = PRIVILEGED_BADGES


@dataclass
class SearchConfig:
    """Word search and output settings."""

    word_list_dir: Path = field(default_factory=lambda: WORD_LIST_DIR)
    min_length: int = DEFAULT_MIN_LENGTH
    chunk_cap: int = MESSAGE_BYTE_CAP


def _string_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ConfigError(f"{name} must be a list or a comma separated string, got {value!r}")
    return [str(v).strip().lower() for v in value if str(v).strip()]


def _parse_channels(value: Any) -> list[str]:
    return _string_list(value, "channels")


def _parse_badges(value: Any) -> frozenset[str]:
    return frozenset(_string_list(value, "privileged_badges"))


def _mapping(value: Any, name: str) -> dict[str, Any]:
    value = value or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def _positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None
    if number < 1:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


@dataclass
class BotConfig:
    """Complete guess bot configuration."""

    chat: ChatConfig = field(default_factory=ChatConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BotConfig":
        """Create config from a dictionary (e.g., from YAML)."""
        data = _mapping(data, "config")
        config = cls()

        if "chat" in data:
            chat = _mapping(data["chat"], "chat")
            config.chat = ChatConfig(
                username=str(chat.get("username", "")),
                oauth_token=str(chat.get("oauth_token", "")),
                channels=_parse_channels(chat.get("channels", [])),
                prefix=str(chat.get("prefix", DEFAULT_PREFIX)),
                privileged_badges=_parse_badges(chat.get("privileged_badges", PRIVILEGED_BADGES)),
            )

        if "search" in data:
            search = _mapping(data["search"], "search")
            config.search = SearchConfig(
                word_list_dir=Path(search.get("word_list_dir", WORD_LIST_DIR)),
                min_length=_positive_int(search.get("min_length", DEFAULT_MIN_LENGTH), "min_length"),
                chunk_cap=_positive_int(search.get("chunk_cap", MESSAGE_BYTE_CAP), "chunk_cap"),
            )

        if not config.chat.prefix.strip():
            raise ConfigError(f"Command prefix must not be blank, got {config.chat.prefix!r}")
        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "BotConfig":
        """Load config from a YAML file; a missing file gives the defaults."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = _mapping(yaml.safe_load(f), str(path))

        return cls.from_dict(data.get("guessbot", data))

    @classmethod
    def from_env_file(cls, path: Path) -> "BotConfig":
        """Load the chat settings from a ``.env`` file.

        Reads USERNAME, OAUTH_TOKEN, CHANNELS (comma separated) and
        BOT_PREFIX without exporting them into the process environment.
        Optional WORD_LIST_DIR, MIN_LENGTH and CHUNK_CAP fill the search
        settings.
        """
        values = {k: v for k, v in dotenv_values(path).items() if v is not None}
        data: dict[str, Any] = {
            "chat": {
                "username": values.get("USERNAME", ""),
                "oauth_token": values.get("OAUTH_TOKEN", ""),
                "channels": values.get("CHANNELS", ""),
                "prefix": values.get("BOT_PREFIX", DEFAULT_PREFIX),
            },
            "search": {
                "word_list_dir": values.get("WORD_LIST_DIR", WORD_LIST_DIR),
                "min_length": values.get("MIN_LENGTH", DEFAULT_MIN_LENGTH),
                "chunk_cap": values.get("CHUNK_CAP", MESSAGE_BYTE_CAP),
            },
        }
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary, with the token masked."""
        return {
            "chat": {
                "username": self.chat.username,
                "oauth_token": "***" if self.chat.oauth_token else "",
                "channels": list(self.chat.channels),
                "prefix": self.chat.prefix,
                "privileged_badges": sorted(self.chat.privileged_badges),
            },
            "search": {
                "word_list_dir": str(self.search.word_list_dir),
                "min_length": self.search.min_length,
                "chunk_cap": self.search.chunk_cap,
            },
        }

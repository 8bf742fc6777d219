"""Exceptions raised by the guess pipeline."""

from __future__ import annotations


class GuessBotError(Exception):
    """Base class for every error the bot reports."""


class InvalidRequest(GuessBotError, ValueError):
    """A search request or chat command is malformed."""


class DictionaryNotFound(GuessBotError, LookupError):
    """A word-list identifier did not resolve to readable text."""

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        self.identifier = identifier
        message = f"Word list not found: {identifier!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigError(GuessBotError, ValueError):
    """A configuration value is missing or has the wrong type."""

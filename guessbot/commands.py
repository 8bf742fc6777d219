"""Chat command parsing: prefix, permissions and ``guess`` arguments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from guessbot.constants import DEFAULT_MIN_LENGTH, DEFAULT_PREFIX, GUESS_COMMAND, PRIVILEGED_BADGES
from guessbot.dictionary import SearchRequest
from guessbot.errors import InvalidRequest
from guessbot.letters import ascii_lower
from guessbot.matcher import BoundedDifference, ExactSubset, MatchPolicy


@dataclass(frozen=True)
class ChatMessage:
    """One incoming chat message, already decoded by the transport."""

    channel: str
    sender: str
    text: str
    badges: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Command:
    name: str
    args: tuple[str, ...]


def is_privileged(message: ChatMessage, allowed: Iterable[str] = PRIVILEGED_BADGES) -> bool:
    return any(badge in message.badges for badge in allowed)


def parse_command(
    message: ChatMessage,
    prefix: str = DEFAULT_PREFIX,
    allowed_badges: Iterable[str] = PRIVILEGED_BADGES,
) -> Command | None:
    """Split a prefixed message from a privileged sender into a command.

    Returns None for anything the bot should ignore.
    """
    if not prefix or not message.text.startswith(prefix):
        return None
    if not is_privileged(message, allowed_badges):
        return None

    tokens = message.text.split()
    if not tokens:
        return None
    name = tokens[0][len(prefix):].lower()
    if not name:
        return None
    return Command(name, tuple(tokens[1:]))


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidRequest(f"{name} must be a whole number, got {value!r}") from None


def build_guess_request(args: tuple[str, ...] | list[str],
                        default_min_length: int = DEFAULT_MIN_LENGTH) -> SearchRequest | None:
    """Turn ``guess`` arguments into a search request.

    Arguments are ``<pool-word> <word-list> [min] [max] [bonus]``. The
    maximum length defaults to the pool word's length and a bonus count
    switches to the bounded-difference policy. Returns None when the two
    required arguments are missing.
    """
    if len(args) < 2:
        return None
    if len(args) > 5:
        raise InvalidRequest(f"Too many arguments: expected at most 5, got {len(args)}")

    return make_request(
        args[0],
        args[1],
        min_length=_parse_int(args[2], "min") if len(args) > 2 else None,
        max_length=_parse_int(args[3], "max") if len(args) > 3 else None,
        bonus=_parse_int(args[4], "bonus") if len(args) > 4 else None,
        default_min_length=default_min_length,
    )


def make_request(
    pool_word: str,
    word_list: str,
    min_length: int | None = None,
    max_length: int | None = None,
    bonus: int | None = None,
    default_min_length: int = DEFAULT_MIN_LENGTH,
) -> SearchRequest:
    """Build a search request, filling in the bot's defaults."""
    if min_length is None:
        min_length = default_min_length
    if max_length is None:
        max_length = len(ascii_lower(pool_word))
    policy: MatchPolicy = ExactSubset() if bonus is None else BoundedDifference(bonus)
    return SearchRequest(
        pool_word=pool_word,
        min_length=min_length,
        max_length=max_length,
        dictionary=word_list,
        policy=policy,
    )


def parse_guess(
    message: ChatMessage,
    prefix: str = DEFAULT_PREFIX,
    allowed_badges: Iterable[str] = PRIVILEGED_BADGES,
    default_min_length: int = DEFAULT_MIN_LENGTH,
) -> SearchRequest | None:
    command = parse_command(message, prefix, allowed_badges)
    if command is None or command.name != GUESS_COMMAND:
        return None
    return build_guess_request(command.args, default_min_length)

"""Word lists and the scan that finds words formable from a letter pool."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from guessbot.constants import WORD_LIST_DIR, WORD_LIST_SUFFIX
from guessbot.errors import DictionaryNotFound, InvalidRequest
from guessbot.letters import LetterMultiset, ascii_lower
from guessbot.matcher import ExactSubset, MatchPolicy, matches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchRequest:
    """A validated word search: pool word, length bounds, policy, word list."""

    pool_word: str
    min_length: int
    max_length: int
    dictionary: str
    policy: MatchPolicy = field(default_factory=ExactSubset)

    def __post_init__(self) -> None:
        if not self.pool_word or not self.pool_word.strip():
            raise InvalidRequest("Pool word must not be empty")
        for name in ("min_length", "max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRequest(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidRequest(f"{name} must be positive, got {value}")
        if self.min_length > self.max_length:
            raise InvalidRequest(
                f"min_length ({self.min_length}) is greater than max_length ({self.max_length})"
            )
        if not self.dictionary or not self.dictionary.strip():
            raise InvalidRequest("Word list name must not be empty")


@dataclass(frozen=True)
class SearchResult:
    """Matching words ordered by length, then alphabetically."""

    words: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]


class WordListSource(Protocol):
    def resolve(self, identifier: str) -> str:
        """Return the full text of the named word list."""
        ...


class DirectoryWordLists:
    """Word lists stored as ``<root>/<identifier>.txt``."""

    def __init__(self, root: str | Path = WORD_LIST_DIR) -> None:
        self.root = Path(root)

    def path_for(self, identifier: str) -> Path:
        if not identifier or identifier.startswith(".") or "/" in identifier or "\\" in identifier:
            raise DictionaryNotFound(identifier, "invalid name")
        return self.root / f"{identifier}{WORD_LIST_SUFFIX}"

    def resolve(self, identifier: str) -> str:
        path = self.path_for(identifier)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryNotFound(identifier, str(exc)) from exc

    def available(self) -> list[str]:
        """Names of the word lists present under the root directory."""
        if not self.root.is_dir():
            return []
        return sorted(p.stem for p in self.root.glob(f"*{WORD_LIST_SUFFIX}") if p.is_file())


class InMemoryWordLists:
    """Word lists held in memory, keyed by identifier."""

    def __init__(self, lists: Mapping[str, str | Iterable[str]]) -> None:
        self._lists = {
            name: words if isinstance(words, str) else "\n".join(words)
            for name, words in lists.items()
        }

    def resolve(self, identifier: str) -> str:
        try:
            return self._lists[identifier]
        except KeyError:
            raise DictionaryNotFound(identifier) from None

    def available(self) -> list[str]:
        return sorted(self._lists)


def iter_candidates(text: str) -> Iterator[bytes]:
    """Yield each non-blank line of *text*, lowercased, as bytes."""
    for line in text.split("\n"):
        if not line.strip():
            continue
        yield ascii_lower(line.removesuffix("\r"))


class DictionaryScanner:
    """Finds the words of a word list that can be spelled from a letter pool."""

    def __init__(self, source: WordListSource) -> None:
        self.source = source

    def scan(self, request: SearchRequest) -> SearchResult:
        """Scan the requested word list.

        Every line is checked; there is no index. Words keep their
        duplicates and are ordered alphabetically within each length.
        """
        text = self.source.resolve(request.dictionary)
        pool = LetterMultiset.build(request.pool_word)

        selected: list[bytes] = []
        scanned = 0
        for word in iter_candidates(text):
            scanned += 1
            if not request.min_length <= len(word) <= request.max_length:
                continue
            if matches(pool, LetterMultiset.build(word), request.policy):
                selected.append(word)

        selected.sort()
        selected.sort(key=len)
        logger.debug(
            "Scanned %d words from %r for %r (%d letters, %s): %d matches",
            scanned, request.dictionary, request.pool_word, pool.total, request.policy,
            len(selected),
        )
        return SearchResult(tuple(word.decode("utf-8", errors="replace") for word in selected))

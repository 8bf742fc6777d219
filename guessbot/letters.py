"""Letter multisets: byte value -> occurrence count for a lowercased word."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping


def utf8_bytes(text: str) -> bytes:
    """Encode *text* as UTF-8 without ever failing.

    Lone surrogates from undecodable command line bytes map back to the raw
    bytes they came from; any other lone surrogate is encoded as is.
    """
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="surrogatepass")


def ascii_lower(text: str | bytes) -> bytes:
    """Encode *text* as UTF-8 and lowercase ASCII letters only."""
    if isinstance(text, str):
        text = utf8_bytes(text)
    return text.lower()


class LetterMultiset(Mapping[int, int]):
    """Immutable count of each byte in a word.

    Absent bytes read as 0, so ``pool[b]`` is safe for any byte value.
    """

    __slots__ = ("_counts", "_size")

    def __init__(self, counts: Mapping[int, int] | None = None) -> None:
        self._counts: dict[int, int] = {b: n for b, n in (counts or {}).items() if n > 0}
        self._size = sum(self._counts.values())

    @classmethod
    def build(cls, text: str | bytes) -> LetterMultiset:
        return cls(Counter(ascii_lower(text)))

    def __getitem__(self, byte: int) -> int:
        return self._counts.get(byte, 0)

    def __contains__(self, byte: object) -> bool:
        return byte in self._counts

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LetterMultiset):
            return self._counts == other._counts
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def __repr__(self) -> str:
        letters = "".join(chr(b) * n for b, n in sorted(self._counts.items()))
        return f"LetterMultiset({letters!r})"

    @property
    def total(self) -> int:
        """Number of letters counted, repeats included."""
        return self._size

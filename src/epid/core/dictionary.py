"""Word dictionary for EPID identifiers.

A WordDictionary is an immutable, strictly sorted sequence of unique words.
Position in the sequence is the word's digit value:
  - dictionary[i]        index -> word
  - dictionary.index(w)  word -> index (ordered search), None if absent

The sort order is checked once when the dictionary is built and never
re-established afterwards.
"""

import logging
from bisect import bisect_left
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

from epid.config import Settings

logger = logging.getLogger(__name__)

BUNDLED_WORDS = Path(__file__).resolve().parent.parent / "data" / "words.txt"


class DictionaryError(ValueError):
    """Word list violates the dictionary invariants."""


class WordDictionary:
    """Sorted, unique, read-only word list."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        words = tuple(words)
        for i, word in enumerate(words):
            if not isinstance(word, str) or not word:
                raise DictionaryError(f"Entry {i} is not a non-empty string: {word!r}")
            if "." in word or word != word.strip() or len(word.split()) != 1:
                raise DictionaryError(f"Entry {i} contains a divider or whitespace: {word!r}")
            if i and words[i - 1] >= word:
                raise DictionaryError(
                    f"Entries must be sorted and unique: {words[i - 1]!r} at {i - 1} "
                    f"is not before {word!r} at {i}"
                )
        object.__setattr__(self, "_words", words)

    def __setattr__(self, name, value):
        raise AttributeError("WordDictionary is immutable")

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, position: int) -> str:
        return self._words[position]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word) -> bool:
        return self.index(word) is not None

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words)"

    def index(self, word: str) -> int | None:
        """Exact, case-sensitive lookup. Returns the position or None."""
        pos = bisect_left(self._words, word)
        if pos < len(self._words) and self._words[pos] == word:
            return pos
        return None

    @property
    def words(self) -> tuple[str, ...]:
        return self._words


def read_word_file(path) -> list[str]:
    """Read one word per line. Blank lines and # comments are skipped."""
    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            words.append(line)
    return words


def load_words(path=None) -> WordDictionary:
    """Build a WordDictionary from a word file (default: bundled list)."""
    path = Path(path) if path is not None else BUNDLED_WORDS
    dictionary = WordDictionary(read_word_file(path))
    logger.debug("Loaded %d words from %s", len(dictionary), path)
    return dictionary


@lru_cache(maxsize=None)
def default_dictionary() -> WordDictionary:
    """The shared process-wide dictionary, built on first use."""
    return load_words(Settings.from_env().words_file)

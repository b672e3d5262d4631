"""
The corpus: the fixed universe of legal words plus its letter-popularity table.

A Corpus is built once, eagerly, before any game starts and is then handed to
every solver instance. Nothing in it changes afterwards, so any number of
games (or test cases) can share one object without coordination.
"""

from __future__ import annotations

import logging
from pathlib import Path
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple

from wordlepop import WORD_LENGTH
from .io import read_lines
from .wordlist import DEFAULT_WORDLIST, clean_words

logger = logging.getLogger(__name__)


def letter_popularity(words: Iterable[str]) -> Counter:
    """
    Count, for each letter, how many words contain it at least once.

    letter_popularity(["sassy", "crane"]) -> {'s': 1, 'a': 2, 'y': 1, 'c': 1, ...}
    """
    counts: Counter = Counter()
    for w in words:
        counts.update(set(w))
    return counts


@dataclass(frozen=True)
class Corpus:
    words: Tuple[str, ...]
    popularity: Mapping[str, int]
    members: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "members", frozenset(self.words))

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = WORD_LENGTH) -> "Corpus":
        """
        Clean `words` (lowercase, alphabetic, length N, de-duplicated, order
        kept) and compute the popularity table.

        Raises ValueError if nothing usable is left.
        """
        cleaned = tuple(clean_words(words, N=N))
        if not cleaned:
            raise ValueError(f"Corpus contains no valid {N}-letter words")

        table = MappingProxyType(dict(letter_popularity(cleaned)))
        logger.info("Corpus built: %d words, %d distinct letters", len(cleaned), len(table))
        return cls(words=cleaned, popularity=table)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.members


def load_corpus(path: Path | str = DEFAULT_WORDLIST, N: int = WORD_LENGTH) -> Corpus:
    """
    Read a newline-separated word list and build a Corpus from it.
    Raises FileNotFoundError if the file is missing.
    """
    lines = read_lines(path)
    logger.debug("Read %d lines from %s", len(lines), path)
    return Corpus.from_words(lines, N=N)

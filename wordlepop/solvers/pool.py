"""
Candidate Pool: the words still consistent with every piece of feedback seen
so far in one game.

The pool only ever shrinks. Each filtering pass builds a new tuple of
survivors from the current one; nothing is removed while it is being
iterated.
"""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

from wordlepop.datasets.corpus import Corpus
from wordlepop.engine.constraints import filter_candidates
from wordlepop.engine.status import StatusLike

logger = logging.getLogger(__name__)


class CandidatePool:
    def __init__(self, corpus: Corpus):
        self.corpus = corpus
        self._words: Tuple[str, ...] = corpus.words

    def reset(self) -> None:
        """Repopulate from the full corpus."""
        self._words = self.corpus.words

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def apply(self, guess: str, statuses: StatusLike) -> Tuple[str, ...]:
        """Keep only the words consistent with one guess's feedback; returns the survivors."""
        before = len(self._words)
        self._words = tuple(filter_candidates(self._words, [(guess, statuses)]))
        logger.debug("filter %s: %d -> %d candidates", guess, before, len(self._words))
        return self._words

    def remove(self, word: str) -> None:
        self._words = tuple(w for w in self._words if w != word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"CandidatePool({len(self._words)}/{len(self.corpus)} words)"

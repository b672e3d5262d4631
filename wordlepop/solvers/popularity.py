"""
Letter-popularity solvers.

Turn loop (both variants):
  1) First turn: play an opening word and drop it from the pool.
  2) Later turns: filter the pool by the most recent guess's feedback (earlier
     feedback was already applied on earlier turns), then pick the
     best-scoring survivor and drop it from the pool.

The variants differ only in where the popularity table comes from:
  - popularity:          corpus-wide table, fixed opener 'crane'
  - adaptive_popularity: table rebuilt from the surviving pool every turn,
                         opener chosen by score over the whole corpus
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from wordlepop.datasets.corpus import Corpus, letter_popularity
from wordlepop.engine.result import GuessResult
from .base import BaseSolver, register
from .errors import InvalidFeedback, SolverError
from .pool import CandidatePool
from .selector import choose_best

logger = logging.getLogger(__name__)


@register
class PopularitySolver(BaseSolver):
    id = "popularity"
    name = "Letter Popularity (corpus-wide)"
    version = "1.0.0"

    OPENING_WORD = "crane"

    def __init__(self):
        super().__init__()
        self.pool: Optional[CandidatePool] = None

    def reset(self, *, corpus: Corpus) -> None:
        super().reset(corpus=corpus)
        self._check_opener(corpus)
        if self.pool is not None and self.pool.corpus is corpus:
            self.pool.reset()
        else:
            self.pool = CandidatePool(corpus)

    def _check_opener(self, corpus: Corpus) -> None:
        if self.OPENING_WORD not in corpus:
            raise ValueError(f"Opening word {self.OPENING_WORD!r} is not in the corpus")

    def _opening_guess(self) -> str:
        return self.OPENING_WORD

    def _table(self) -> Mapping[str, int]:
        return self.corpus.popularity

    def pick_next_guess(self, previous: GuessResult) -> str:
        """
        Return the next word to play, given the feedback for the previous one
        (GuessResult.default() on the first turn).

        Raises:
          InvalidFeedback     : `previous.is_valid` is False
          ExhaustedCandidates : no candidate is left to choose from
        """
        if self.pool is None:
            raise SolverError("reset() must be called before pick_next_guess()")
        if not previous.is_valid:
            raise InvalidFeedback("pick_next_guess() must not be called with an invalid result")

        if previous.is_first_turn:
            guess = self._opening_guess()
        else:
            self.pool.apply(previous.word, previous.statuses)
            guess = choose_best(self.pool, self._table())

        self.pool.remove(guess)
        logger.debug("%s: turn %d -> %s (%d left)", self.id, len(previous.guesses) + 1,
                     guess, len(self.pool))
        return guess


@register
class AdaptivePopularitySolver(PopularitySolver):
    id = "adaptive_popularity"
    name = "Letter Popularity (remaining pool)"
    version = "1.0.0"

    OPENING_WORD = None

    def _check_opener(self, corpus: Corpus) -> None:
        pass  # opener is derived from the corpus itself

    def _opening_guess(self) -> str:
        return choose_best(self.corpus.words, self.corpus.popularity)

    def _table(self) -> Mapping[str, int]:
        return letter_popularity(self.pool)

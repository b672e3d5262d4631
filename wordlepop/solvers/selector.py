"""
Guess Selector (distinct-letter popularity).

Score each candidate as the sum of the popularity values of its DISTINCT
letters ('sassy' scores s, a, y once each) and pick the max. Ties go to the
word that comes first in the pool, so the choice is fully deterministic.

This is a greedy single-turn heuristic: it favours words that cover common
letters and does not look at how a guess would partition the pool.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from .errors import ExhaustedCandidates


def distinct_letter_score(word: str, table: Mapping[str, int]) -> int:
    return sum(table.get(ch, 0) for ch in set(word))


def choose_best(pool: Iterable[str], table: Mapping[str, int]) -> str:
    """
    Return the highest-scoring word in `pool`.

    Raises ExhaustedCandidates if `pool` is empty.
    """
    best_word = None
    best_score = None

    for w in pool:
        s = distinct_letter_score(w, table)
        # Strict '>' keeps the earliest word on ties.
        if best_score is None or s > best_score:
            best_word, best_score = w, s

    if best_word is None:
        raise ExhaustedCandidates("No remaining words to choose from")
    return best_word

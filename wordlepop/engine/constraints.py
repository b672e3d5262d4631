"""
Candidate filtering given feedback.

Given:
  - a pool of words
  - one or more (guess, statuses) pairs

Return:
  - the words consistent with ALL of that feedback, in their original order.

Each pair is first turned into a Constraint built from letter counts rather
than per-letter "contains / does not contain" tests, so guesses with repeated
letters are handled exactly:

  - CORRECT at i     -> word[i] must equal guess[i]
  - MISPLACED at i   -> word[i] must differ from guess[i]
  - per letter L, k  = number of CORRECT/MISPLACED marks on L in the guess
      * word must contain L at least k times
      * if any mark on L is UNUSED, word may contain L at most k times
        (k == 0 means L is excluded entirely)

Example: guess "sassy" scored "YY-GY" against "abyss" gives s in [2, 2],
a >= 1, y >= 1, so "abyss" survives while "sissy" (three s) does not.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from wordlepop import WORD_LENGTH
from .status import LetterStatus, StatusLike, as_statuses

# History is a sequence of (guess, statuses) pairs produced by the engine.
History = Iterable[Tuple[str, StatusLike]]


@dataclass(frozen=True)
class Constraint:
    """Everything one guess's feedback says about the hidden word."""
    fixed: Mapping[int, str]               # position -> required letter
    forbidden: Mapping[int, FrozenSet[str]]  # position -> letters that cannot sit there
    min_counts: Mapping[str, int]
    max_counts: Mapping[str, int]
    length: int = WORD_LENGTH

    @classmethod
    def from_feedback(cls, guess: str, statuses: StatusLike) -> "Constraint":
        guess = guess.strip().lower()
        st = as_statuses(statuses, N=len(guess))

        fixed: Dict[int, str] = {}
        forbidden: Dict[int, set] = {}
        found: Counter = Counter()
        has_unused = set()

        for i, (ch, s) in enumerate(zip(guess, st)):
            if s is LetterStatus.CORRECT:
                fixed[i] = ch
                found[ch] += 1
            elif s is LetterStatus.MISPLACED:
                forbidden.setdefault(i, set()).add(ch)
                found[ch] += 1
            else:
                has_unused.add(ch)

        return cls(
            fixed=fixed,
            forbidden={i: frozenset(v) for i, v in forbidden.items()},
            min_counts=dict(found),
            max_counts={ch: found[ch] for ch in has_unused},
            length=len(guess),
        )


def is_consistent(word: str, constraint: Constraint) -> bool:
    """True if `word` could still be the answer under `constraint`."""
    if len(word) != constraint.length:
        return False

    for i, ch in constraint.fixed.items():
        if word[i] != ch:
            return False

    for i, letters in constraint.forbidden.items():
        if word[i] in letters:
            return False

    counts = Counter(word)
    for ch, lo in constraint.min_counts.items():
        if counts[ch] < lo:
            return False
    for ch, hi in constraint.max_counts.items():
        if counts[ch] > hi:
            return False

    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that are consistent with every (guess, statuses) pair in
    `history`.

    Args:
      words   : iterable of candidate words (left untouched)
      history : iterable of (guess, statuses); statuses may be a pattern string

    Returns:
      List[str] of survivors, order preserved as in `words`.
    """
    constraints = [Constraint.from_feedback(g, st) for g, st in history]

    out: List[str] = []
    for w in words:
        if all(is_consistent(w, c) for c in constraints):
            out.append(w)
    return out

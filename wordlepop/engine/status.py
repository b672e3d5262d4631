"""
Per-position feedback for one guess.

Conventions (same characters the reports use):
  - 'G'  : CORRECT   = letter matches this position in the answer
  - 'Y'  : MISPLACED = letter is in the answer, but not at this position
  - '-'  : UNUSED    = letter absent, or guessed more times than the answer has it

A status vector is always a tuple of exactly WORD_LENGTH LetterStatus values.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple, Union

from wordlepop import WORD_LENGTH


class LetterStatus(str, Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    UNUSED = "-"


Statuses = Tuple[LetterStatus, ...]
StatusLike = Union[str, Iterable[Union[LetterStatus, str]]]


def as_statuses(pattern: StatusLike, N: int = WORD_LENGTH) -> Statuses:
    """
    Normalize a pattern string ("GY--G") or a sequence of statuses/characters
    into a tuple of LetterStatus.

    Raises ValueError on unknown characters or a length other than N.
    """
    out = []
    for ch in pattern:
        if isinstance(ch, LetterStatus):
            out.append(ch)
            continue
        try:
            out.append(LetterStatus(str(ch).upper()))
        except ValueError as e:
            raise ValueError(f"Unknown status character: {ch!r}") from e

    if len(out) != N:
        raise ValueError(f"Expected {N} statuses, got {len(out)}")
    return tuple(out)


def to_pattern(statuses: Iterable[LetterStatus]) -> str:
    """Tuple of statuses -> compact pattern string, e.g. 'GY--G'."""
    return "".join(s.value for s in statuses)

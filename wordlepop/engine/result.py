"""
GuessResult: what the game engine hands the solver at the start of each turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .status import LetterStatus, Statuses, StatusLike, as_statuses


@dataclass(frozen=True)
class GuessResult:
    """
    One turn's feedback.

    word     : the word that was guessed ("" before the first guess)
    statuses : per-position feedback for `word`
    guesses  : every guess made so far in this game, `word` included
    is_valid : False when the engine rejected the guess; such a result must
               never be passed to a solver
    """
    word: str = ""
    statuses: Statuses = ()
    guesses: Tuple[str, ...] = field(default_factory=tuple)
    is_valid: bool = True

    @classmethod
    def default(cls) -> "GuessResult":
        """The value passed on the first turn: no guesses yet."""
        return cls()

    @classmethod
    def from_pattern(cls, word: str, pattern: StatusLike,
                     guesses: Tuple[str, ...] = ()) -> "GuessResult":
        """Convenience for tests and interactive use: GuessResult.from_pattern("crane", "G--Y-")."""
        word = word.strip().lower()
        history = tuple(guesses) if guesses else (word,)
        return cls(word=word, statuses=as_statuses(pattern, N=len(word)), guesses=history)

    @property
    def is_first_turn(self) -> bool:
        return len(self.guesses) == 0

    @property
    def is_solved(self) -> bool:
        return bool(self.statuses) and all(s is LetterStatus.CORRECT for s in self.statuses)

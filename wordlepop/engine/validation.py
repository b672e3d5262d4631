"""
Lightweight guess validation.

The harness uses this to check the solver's postcondition: every word it
returns must be a clean N-letter a–z token that belongs to the corpus.
"""

from collections import abc
from typing import AbstractSet, Iterable, Set, Union

from wordlepop import WORD_LENGTH


def validate_guess(word: str, allowed: Union[Iterable[str], AbstractSet[str]],
                   N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a valid guess.

    Args:
      word    : proposed guess
      allowed : words permitted as guesses; pass a set when calling in a loop
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    if isinstance(allowed, abc.Set):
        return w in allowed
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set

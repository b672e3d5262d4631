"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

This is the game engine's side of the contract: the solver never calls it
during play, it only consumes the statuses it produces.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter

from .status import Statuses, as_statuses


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Returns:
      - string of the same length composed only of 'G', 'Y', '-'

    Examples:
      score("belle", "level") -> "-GYYY"
      score("sassy", "abyss") -> "YY-GY"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens, and what is left of the answer for yellows.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows are capped by the answer's leftover multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def feedback(guess: str, answer: str) -> Statuses:
    """Same as score(), as a tuple of LetterStatus."""
    patt = score(guess, answer)
    return as_statuses(patt, N=len(patt))

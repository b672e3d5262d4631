"""
Experiment harness core primitives.

This plays the game engine's role:
- run_case:  play one game (one hidden answer) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit and checks that every guess the solver
  returns belongs to the corpus.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple

from wordlepop.datasets.corpus import Corpus
from wordlepop.engine import GuessResult, feedback, to_pattern, validate_guess
from wordlepop.solvers.errors import SolverError

logger = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


class InvalidGuess(ValueError):
    """The solver returned a word outside the corpus."""


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        corpus: Corpus,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver (reset + pick_next_guess)
        answer:    the hidden word for this case; must be in the corpus
        corpus:    shared, pre-built Corpus
        max_turns: must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), pool_sizes (list[int])

    Raises:
        ValueError   : answer not in corpus
        InvalidGuess : the solver broke its postcondition
        SolverError  : propagated from the solver
    """
    _assert_wordle_turns(max_turns)
    if answer not in corpus:
        raise ValueError(f"Answer {answer!r} is not in the corpus")

    solver.reset(corpus=corpus)

    history: List[Tuple[str, str]] = []
    pool_sizes: List[int] = []
    result = GuessResult.default()
    success = False

    t0 = time.perf_counter()
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        guess = solver.pick_next_guess(result)

        if not validate_guess(guess, corpus.members):
            raise InvalidGuess(f"{solver.id} guessed {guess!r}, which is not in the corpus")

        statuses = feedback(guess, answer)
        history.append((guess, to_pattern(statuses)))
        pool = getattr(solver, "pool", None)
        if pool is not None:
            pool_sizes.append(len(pool))

        result = GuessResult(
            word=guess,
            statuses=statuses,
            guesses=tuple(g for g, _ in history),
        )
        if result.is_solved:
            success = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    logger.debug("%s on %s: %s in %d", solver.id, answer, "won" if success else "lost", len(history))
    return {
        "answer": answer, "success": success, "guesses": len(history),
        "time_ms": dt, "history": history, "pool_sizes": pool_sizes,
    }


def play_case(solver, answer: str, *, corpus: Corpus,
              max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    run_case() for batch runs: a SolverError is fatal to this game only. It is
    logged and the game is recorded as lost, with the message under "error".
    """
    try:
        r = run_case(solver, answer, corpus=corpus, max_turns=max_turns)
    except SolverError as e:
        logger.error("%s failed on %r: %s", solver.id, answer, e)
        r = {"answer": answer, "success": False, "guesses": 0, "time_ms": 0.0,
             "history": [], "pool_sizes": [], "error": str(e)}
    r["solver_id"] = solver.id
    return r


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        corpus: Corpus,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: Optional[int] = None,
        keep_going: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments. With keep_going, a
    SolverError ends only the game it happened in (see play_case).
    """
    _assert_wordle_turns(max_turns)

    cases = list(answers)
    if sample is not None:
        cases = cases[:sample]

    out: List[Dict] = []
    for ans in cases:
        if keep_going:
            r = play_case(solver, ans, corpus=corpus, max_turns=max_turns)
        else:
            r = run_case(solver, ans, corpus=corpus, max_turns=max_turns)
            r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over solved games."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
    }

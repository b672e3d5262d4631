"""Runtime failures a solver can raise mid-game."""


class SolverError(RuntimeError):
    pass


class InvalidFeedback(SolverError):
    """pick_next_guess() was called with a GuessResult marked invalid (caller bug)."""


class ExhaustedCandidates(SolverError):
    """
    No candidate survived filtering. The feedback sequence contradicts itself,
    or the filter is wrong; either way the current game cannot continue.
    """

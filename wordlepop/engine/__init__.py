from .status import LetterStatus, as_statuses, to_pattern
from .scoring import score, feedback
from .result import GuessResult
from .constraints import Constraint, filter_candidates, is_consistent
from .validation import validate_guess

__all__ = [
    "LetterStatus", "as_statuses", "to_pattern",
    "score", "feedback", "GuessResult",
    "Constraint", "filter_candidates", "is_consistent",
    "validate_guess",
]

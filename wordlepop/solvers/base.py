from __future__ import annotations
from typing import Dict, Optional, Type

from wordlepop.datasets.corpus import Corpus
from wordlepop.engine.result import GuessResult

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.corpus: Optional[Corpus] = None

    def reset(self, *, corpus: Corpus) -> None:
        """Start a new game against `corpus`."""
        self.corpus = corpus

    def pick_next_guess(self, previous: GuessResult) -> str:
        raise NotImplementedError("Override in subclass")

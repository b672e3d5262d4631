from .core import WORDLE_MAX_TURNS, InvalidGuess, play_case, run_case, run_batch, summarize
from .io import write_csv, write_manifest

__all__ = ["WORDLE_MAX_TURNS", "InvalidGuess", "play_case", "run_case", "run_batch", "summarize",
           "write_csv", "write_manifest"]

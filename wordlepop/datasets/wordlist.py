"""
Word-list cleaning.

Rules (applied in order):
  - strip surrounding whitespace, lowercase
  - keep only alphabetic tokens of exactly N letters
  - drop repeats, keeping the first occurrence (stable dedupe)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from wordlepop import WORD_LENGTH

# Bundled list used when the CLI isn't given one.
DEFAULT_WORDLIST = Path(__file__).resolve().parent / "data" / "wordle.txt"


def unique_preserve_order(lines: Iterable[str], key: Optional[Callable[[str], str]] = None) -> List[str]:
    seen, out = set(), []
    for s in lines:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def clean_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    words = (ln.strip().lower() for ln in lines)
    return unique_preserve_order(w for w in words if len(w) == N and w.isalpha() and w.isascii())

"""
Word-list validator.

What this module does:
- Check a single word list (the corpus file) line by line: lowercase, a–z only,
  exact length N, one per line.
- Count invalid and duplicate lines; compute SHA-256 of the raw file.
- Optionally confirm that a solver's fixed opening word is in the list.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Unlike load_corpus(), which silently cleans, this reports what it would drop,
so a bad list is noticed before a batch run rather than after.

Typical use:
    from wordlepop.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordlepop/datasets/data/wordle.txt", opening_word="crane")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordlepop import WORD_LENGTH


@dataclass
class ValidationReport:
    path: str
    N: int
    exists: bool
    count: int            # number of VALID lines
    unique_count: int     # valid words after dedupe
    invalid_lines: int
    sha256: str           # empty string if missing
    opening_word: Optional[str]
    opening_word_present: Optional[bool]
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid;
    words must already be lowercase.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and w.isascii() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: int = WORD_LENGTH, opening_word: Optional[str] = None) -> Dict:
    """
    Validate a word list for length N.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` is strict: the file must
        exist, be non-empty, have no invalid lines, and contain the opening
        word when one is given. Duplicates are reported but do not fail.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            path=str(path), N=N, exists=False, count=0, unique_count=0,
            invalid_lines=0, sha256="", opening_word=opening_word,
            opening_word_present=False if opening_word else None,
            passed=False, issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    opening_present = None
    if opening_word:
        opening_present = opening_word in unique
        if not opening_present:
            issues.append(f"opening word {opening_word!r} is not in the word list")

    passed = bool(words) and invalid == 0 and opening_present is not False

    rep = ValidationReport(
        path=str(p), N=N, exists=True, count=len(words), unique_count=len(unique),
        invalid_lines=invalid, sha256=_sha256_file(p), opening_word=opening_word,
        opening_word_present=opening_present, passed=passed, issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | opener 'crane'=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    opener = ""
    if report.get("opening_word"):
        opener = f" | opener {report['opening_word']!r}={report['opening_word_present']}"
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}){opener} | {status}"
    )

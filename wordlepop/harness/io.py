"""
I/O utilities for experiment runs.

- write_csv:      one row per game, guesses and patterns in fixed columns.
- write_manifest: JSON manifest with config, word-list report and metadata.
- timestamp_id:   UTC run ID string.
- git_commit_or_unknown: short commit hash, or 'unknown' outside a git checkout.

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, answer, success, guesses, time_ms, error,
      guess_1, patt_1, pool_1, ..., guess_<max_turns>, patt_<max_turns>, pool_<max_turns>

    pool_i is the number of candidates left after guess i was chosen.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms", "error"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"pool_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error", ""),
            }
            hist = r.get("history", [])
            sizes = r.get("pool_sizes", [])
            for i in range(1, max_turns + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
                row[f"pool_{i}"] = sizes[i - 1] if i <= len(sizes) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()

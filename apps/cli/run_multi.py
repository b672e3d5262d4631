# apps/cli/run_multi.py
"""
Run several solvers over the same cases and print a side-by-side summary.

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

try:
    from tqdm import tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordlepop.datasets import DEFAULT_WORDLIST, load_corpus, pretty_summary, validate_wordlist
from wordlepop.harness import WORDLE_MAX_TURNS, run_batch, summarize
from wordlepop.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlepop.solvers import create_solver, get_solver_ids


def main(argv: Optional[List[str]] = None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="wordlepop - compare solvers")
    ap.add_argument("--solvers", nargs="+", default=["ALL"],
                    help=f"solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST))
    ap.add_argument("--sample", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="auto=bar if tqdm is available and stderr is a terminal")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.wordlist)
    print(pretty_summary(rep))
    try:
        corpus = load_corpus(args.wordlist)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e

    cases = list(corpus.words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[:args.sample]

    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = registered
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "off"
    if mode == "bar" and not _HAS_TQDM:
        mode = "off"

    outdir = Path(args.outdir)
    run_id = timestamp_id()
    rows = []
    for sid in todo:
        solver = create_solver(sid)
        it = tqdm(cases, ncols=80, desc=sid, unit="game") if mode == "bar" else cases
        results = run_batch(solver, it, corpus=corpus, keep_going=True)
        summary = summarize(results)
        rows.append((sid, summary))

        sdir = outdir / sid
        write_csv(results, str(sdir / f"run_{run_id}.csv"), max_turns=WORDLE_MAX_TURNS)
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": {"solver": sid, "wordlist": args.wordlist, "seed": args.seed,
                       "num_cases": len(cases)},
            "wordlist": rep,
            "solver_id": sid,
            "summary": summary,
        }, str(sdir / f"run_{run_id}_manifest.json"))

    print(f"{'solver':<22} {'solved':>10} {'mean':>7}")
    for sid, s in rows:
        print(f"{sid:<22} {s['wins']:>4}/{s['games']:<5} {s['mean_guesses']:>7.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

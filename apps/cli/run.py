# apps/cli/run.py
"""
CLI entry point for running wordlepop solver experiments.

This script:
  1) Validates the word list (counts + SHA, opener present) and builds the
     shared Corpus once, before any game starts.
  2) Instantiates the requested solver.
  3) Plays every (or a sampled subset of) corpus word as the hidden answer
     with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern/pool-size columns
       - JSON: manifest with config, word-list report, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

# Optional rich progress bar
try:
    from tqdm import tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordlepop.datasets import DEFAULT_WORDLIST, load_corpus, pretty_summary, validate_wordlist
from wordlepop.harness import WORDLE_MAX_TURNS, play_case, summarize
from wordlepop.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlepop.solvers import create_solver, get_solver_ids

logger = logging.getLogger("wordlepop.cli")


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlepop - run solver experiments")
    ap.add_argument("--solver", default="popularity",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST),
                    help="newline-separated word list (answers and guesses)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate and load once. A missing or empty list is fatal before any game starts.
    solver = create_solver(args.solver)
    opener = getattr(solver, "OPENING_WORD", None)
    rep = validate_wordlist(args.wordlist, opening_word=opener)
    print(pretty_summary(rep))
    try:
        corpus = load_corpus(args.wordlist)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e
    try:
        solver.reset(corpus=corpus)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    # 2) Choose cases (deterministic sample by seed)
    cases = list(corpus.words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        results.append(play_case(solver, ans, corpus=corpus))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    logger.info("Finished %d games in %.1fs", total, time.time() - start)
    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"{solver.id}: {summary['wins']}/{summary['games']} solved, "
          f"mean {summary['mean_guesses']:.3f} guesses")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

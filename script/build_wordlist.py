"""
Build a clean word list for the solver.

Sources (any combination):
  --fetch        past Wordle answers scraped from wordlehints.co.uk
  --in FILE      existing newline-separated lists (repeatable)

The result is lowercased, filtered to 5-letter a–z words, de-duplicated in
first-seen order, optionally sorted, then written and validated.

Usage:
    python -m script.build_wordlist --fetch --out wordlepop/datasets/data/wordle.txt
    python -m script.build_wordlist --in extra.txt --in more.txt --sort --out words.txt
"""

import argparse
import logging

from wordlepop.datasets import clean_words, pretty_summary, read_lines, validate_wordlist, write_lines
from wordlepop.datasets.fetch import URL, fetch_answers


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build a clean 5-letter word list")
    ap.add_argument("--fetch", action="store_true", help="include past answers from --url")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--in", dest="inputs", action="append", default=[], help="input .txt file")
    ap.add_argument("--out", default="wordlepop/datasets/data/wordle.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "first-seen order")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.fetch and not args.inputs:
        ap.error("nothing to do: pass --fetch and/or --in FILE")

    raw = []
    if args.fetch:
        raw += fetch_answers(args.url)
    for path in args.inputs:
        raw += read_lines(path)

    words = clean_words(raw)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_wordlist(args.out)))


if __name__ == "__main__":
    main()

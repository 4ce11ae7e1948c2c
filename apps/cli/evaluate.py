# apps/cli/evaluate.py
"""
CLI entry point for self-play evaluation of the ranking.

This script:
  1) Summarizes the word source (counts + SHA, blacklist hits).
  2) Indexes it and picks the hidden answers (all words, a list, or a sample).
  3) Plays every answer, always guessing the top suggestion, and writes:
       - CSV:  one row per game with its guess path
       - JSON: config, word-list report and batch summary
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordrank.datasets import (DEFAULT_WORDS, clean_words, load_index, pretty_summary,
                               read_blacklist, read_lines, validate_wordlist)
from wordrank.errors import WordrankError
from wordrank.harness import WORDLE_MAX_TURNS, run_case, summarize, write_csv

logger = logging.getLogger("wordrank.evaluate")


def main():
    ap = argparse.ArgumentParser(description="wordrank: play every answer with the top suggestion")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="word source (one word per line)")
    ap.add_argument("--answers", help="hidden answers to play (default: every indexed word)")
    ap.add_argument("--blacklist", help="words to drop from the index")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("--sample", type=int,
                    help="play a random subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", dest="volume", action="store_const", const=logging.INFO,
                    default=logging.WARNING)
    args = ap.parse_args()
    logging.basicConfig(stream=sys.stderr, level=args.volume, format="%(message)s")

    try:
        blacklist = read_blacklist(args.blacklist)
        report = validate_wordlist(args.N, args.words, blacklist)
        print(pretty_summary(report))

        index = load_index(args.words, N=args.N, blacklist=blacklist)
        answers = clean_words(read_lines(args.answers), N=args.N) if args.answers else list(index.words)
    except (WordrankError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    missing = [a for a in answers if a not in index]
    if missing:
        logger.warning("%d answer(s) are not in the index and can never be found, e.g. %s",
                       len(missing), missing[:5])

    if args.sample and args.sample < len(answers):
        answers = random.Random(args.seed).sample(answers, args.sample)

    results = [run_case(index, ans, max_turns=args.max_turns)
               for ans in tqdm(answers, ncols=80, desc="Playing", unit="game",
                               disable=args.no_progress)]

    summary = summarize(results)
    print(f"Solved {summary['solved']}/{summary['num_cases']} | "
          f"mean guesses (solved) {summary['mean_guesses']:.3f}")

    run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"eval_{run_id}.csv"))
    manifest_path = outdir / f"eval_{run_id}.json"
    manifest_path.write_text(json.dumps(
        {"run_id": run_id, "config": vars(args), "wordlist": report, "summary": summary},
        indent=2), encoding="utf-8")

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

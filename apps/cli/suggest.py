# apps/cli/suggest.py
"""
CLI entry point: suggest the next guess.

  1) Parse constraint tokens (fails fast on a malformed token).
  2) Load and index the word source.
  3) Rank the matching words and print the top K as '<word> (<score>)'.

Every argument that does not start with '--' is a constraint token, so
'-st' means "no s, no t", never an option.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from wordrank.datasets import DEFAULT_WORDS, load_index, pretty_summary, read_blacklist, validate_wordlist
from wordrank.engine import TOP_N, WORD_LENGTH, format_suggestion, parse_constraints, rank, top
from wordrank.errors import InvalidConstraintToken, SourceUnavailable

logger = logging.getLogger("wordrank.cli")

USAGE = f"""\
usage: suggest [OPTIONS] [TOKEN ...]

Rank candidate words for a Wordle-style puzzle. Words are scored by how
common their letters are, overall and at each position; repeated letters
only count once.

Constraint tokens:
  +LETTERS   each letter must appear; repeat a letter to require more
             copies ('+ee' = at least two e's)
  -LETTERS   each letter must be absent, or, when it also has '+' facts,
             must appear exactly that many times ('+e -e' = exactly one e)
  =Lp        letter L is at position p (0-{WORD_LENGTH - 1})
  !Lp        letter L is not at position p (0-{WORD_LENGTH - 1})

Options:
  --words PATH       word source, one word per line (default: {DEFAULT_WORDS})
  --blacklist PATH   words to never suggest, one per line
  --top K            number of suggestions to print (default: {TOP_N})
  --length N         word length (default: {WORD_LENGTH})
  --check            summarize the word source and exit
  --verbose          log progress to stderr
  --debug            log everything to stderr
  --quiet            log nothing but fatal errors
  --help             print this text and exit

Examples:
  suggest                         best opening words
  suggest +ae -rst =c0 !a2        c first, a not in the middle, no r/s/t
  suggest +ll -l                  exactly two l's
"""

VALUE_OPTIONS = frozenset({"--words", "--blacklist", "--top", "--length"})


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate '--option [value]' arguments from constraint tokens, keeping
    token order. Everything after a bare '--' is a token.
    """
    opts: List[str] = []
    tokens: List[str] = []
    it = iter(argv)
    for a in it:
        if a == "--":
            tokens.extend(it)
            break
        if a.startswith("--"):
            opts.append(a)
            if a in VALUE_OPTIONS:
                nxt = next(it, None)
                if nxt is not None:
                    opts.append(nxt)
        else:
            tokens.append(a)
    return opts, tokens


def positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {s}")
    return n


def make_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="suggest", add_help=False, allow_abbrev=False)
    ap.add_argument("--words", default=DEFAULT_WORDS)
    ap.add_argument("--blacklist")
    ap.add_argument("--top", type=positive_int, default=TOP_N)
    ap.add_argument("--length", type=positive_int, default=WORD_LENGTH)
    ap.add_argument("--check", action="store_true")
    volume = ap.add_mutually_exclusive_group()
    volume.add_argument("--quiet", dest="volume", action="store_const", const=logging.CRITICAL,
                        default=logging.WARNING)
    volume.add_argument("--verbose", dest="volume", action="store_const", const=logging.INFO)
    volume.add_argument("--debug", dest="volume", action="store_const", const=logging.DEBUG)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if "--help" in argv:
        print(USAGE, end="")
        return 0

    opts, tokens = split_argv(argv)
    args = make_argparser().parse_args(opts)
    logging.basicConfig(stream=sys.stderr, level=args.volume, format="%(message)s")

    try:
        # tokens first: a bad token must abort before any indexing
        constraints = parse_constraints(tokens, N=args.length)
        blacklist = read_blacklist(args.blacklist)

        if args.check:
            rep = validate_wordlist(args.length, args.words, blacklist)
            print(pretty_summary(rep))
            for issue in rep["issues"]:
                logger.warning("%s", issue)
            return 0 if rep["passed"] else 1

        index = load_index(args.words, N=args.length, blacklist=blacklist)
    except InvalidConstraintToken as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except SourceUnavailable as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for s in top(rank(index, constraints), args.top):
        print(format_suggestion(s))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except BrokenPipeError:
        pass

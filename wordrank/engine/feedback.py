"""
Wordle-style feedback for a (guess, answer) pair, and its translation into
constraint tokens.

Pattern conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

feedback() is the canonical two-pass algorithm:
  1) mark greens and count the answer's unmatched letters
  2) mark yellows only while the letter still has remaining count

feedback_to_tokens() turns a whole history into tokens for
parse_constraints(), so the hidden answer always survives filtering.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Literal, Tuple

PatternChar = Literal["G", "Y", "-"]
History = Iterable[Tuple[str, str]]  # (guess, pattern)

_PATTERN_CHARS = frozenset("GY-")


def feedback(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      feedback("belle", "level") -> "-GYYY"
      feedback("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer lengths differ: {guess!r} vs {answer!r}")

    pattern = ["-"] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def _check_pair(guess: str, patt: str) -> None:
    if len(guess) != len(patt):
        raise ValueError(f"pattern {patt!r} does not fit guess {guess!r}")
    if not set(patt) <= _PATTERN_CHARS:
        raise ValueError(f"pattern {patt!r} may only contain 'G', 'Y' and '-'")


def feedback_to_tokens(history: History) -> List[str]:
    """
    Translate (guess, pattern) pairs into constraint tokens.

    Word scope (letters in first-seen order):
      - the largest green+yellow count of a letter within one guess becomes
        that many inclusion facts ('+ee')
      - any gray occurrence adds an exclusion fact ('-e'), pinning the count
    Position scope:
      - green -> '=cI', yellow or gray -> '!cI' (duplicates dropped)
    """
    at_least: Dict[str, int] = {}
    exact: set = set()
    positional: List[str] = []

    for guess, patt in history:
        guess = guess.strip().lower()
        _check_pair(guess, patt)

        hits = Counter()
        for i, (ch, p) in enumerate(zip(guess, patt)):
            at_least.setdefault(ch, 0)
            if p == "-":
                exact.add(ch)
            else:
                hits[ch] += 1
            tok = f"={ch}{i}" if p == "G" else f"!{ch}{i}"
            if tok not in positional:
                positional.append(tok)

        for ch, n in hits.items():
            at_least[ch] = max(at_least[ch], n)

    tokens: List[str] = []
    for ch, n in at_least.items():
        if n:
            tokens.append("+" + ch * n)
        if ch in exact:
            tokens.append("-" + ch)
    return tokens + positional

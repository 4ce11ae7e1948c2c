"""
Self-play evaluation of the ranking.

- run_case:  play one puzzle (one hidden answer), always guessing the
             top-ranked word under the feedback collected so far.
- run_batch: run many puzzles in sequence (optionally a sample prefix).

Each turn rebuilds the ConstraintSet from the full history via
feedback_to_tokens(), so the hidden answer is never filtered out.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple

from wordrank.datasets import DictionaryIndex
from wordrank.engine import feedback, feedback_to_tokens, parse_constraints, rank

logger = logging.getLogger(__name__)

WORDLE_MAX_TURNS = 6


def next_guess(index: DictionaryIndex, history: Sequence[Tuple[str, str]]) -> Tuple[Optional[str], int]:
    """
    Return (best guess, number of remaining candidates) for the history so far.
    The guess is None when nothing in the index fits.
    """
    constraints = parse_constraints(feedback_to_tokens(history), N=index.N)
    ranked = rank(index, constraints)
    if not ranked:
        return None, 0
    return ranked[0].word, len(ranked)


def run_case(
        index: DictionaryIndex,
        answer: str,
        *,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play until the answer is found or the turn budget runs out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (list[int]),
            candidates before each guess
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")

    answer = answer.strip().lower()
    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        guess, left = next_guess(index, history)
        if guess is None:
            logger.warning("no candidates left for %r after %d guess(es)", answer, len(history))
            break
        remaining.append(left)

        patt = feedback(guess, answer)
        history.append((guess, patt))
        if patt == "G" * index.N:
            success = True
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "remaining": remaining,
    }


def run_batch(
        index: DictionaryIndex,
        answers: Sequence[str],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers of length N are played.
    """
    pool = [w for w in answers if len(w) == index.N]
    if sample is not None:
        pool = pool[:sample]
    return [run_case(index, ans, max_turns=max_turns) for ans in pool]

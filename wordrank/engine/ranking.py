"""
Ranking: filter, score, order.

rank(index, constraints) is a pure function of its inputs:
  - survivors of filter_candidates(index.words, constraints)
  - each paired with score_word(word, index)
  - sorted by score descending; ties keep dictionary order (stable sort)
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, List, NamedTuple, Optional

from .constraints import ConstraintSet
from .filtering import filter_candidates
from .scoring import score_word

logger = logging.getLogger(__name__)

TOP_N = 20


class Suggestion(NamedTuple):
    word: str
    score: int


def rank(index, constraints: Optional[ConstraintSet] = None) -> List[Suggestion]:
    """
    Rank every word of `index` that satisfies `constraints`.

    An empty survivor set yields an empty list; there are no error cases.
    """
    if constraints is None:
        constraints = ConstraintSet(N=index.N)

    scored = [Suggestion(w, score_word(w, index)) for w in filter_candidates(index.words, constraints)]
    # sorted() is stable, reverse=True included
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    logger.info("%d of %d word(s) match", len(ranked), len(index.words))
    return ranked


def top(ranked: Iterable[Suggestion], n: int = TOP_N) -> List[Suggestion]:
    return list(islice(ranked, n))


def format_suggestion(s: Suggestion) -> str:
    """'crane (1234)'"""
    return f"{s.word} ({s.score})"

"""
Candidate filtering given a ConstraintSet.

A word survives iff:
  1) word scope: walking the 'word' facts in declaration order over a
     shrinking multiset of the word's letters,
       - inclusion c : remove one c from the multiset, reject if none left
       - exclusion c : reject unless the word's TOTAL count of c equals the
                       number of inclusion facts for c
  2) position scope: every equality/inequality fact holds at its index.

Consuming inclusions one at a time is what lets "+aa" mean "at least two
a's"; adding "-a" turns that into "exactly two".
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List

from .constraints import ConstraintSet

logger = logging.getLogger(__name__)


def _passes_word_scope(w: str, constraints: ConstraintSet) -> bool:
    total = Counter(w)
    remaining = Counter(total)

    for c in constraints.word:
        if c.kind == "inclusion":
            if remaining[c.char] <= 0:
                return False
            remaining[c.char] -= 1  # consume one occurrence
        elif total[c.char] != constraints.required_count(c.char):
            return False
    return True


def _passes_position_scope(w: str, constraints: ConstraintSet) -> bool:
    for cons in constraints.positions:
        for c in cons:
            if not c.accepts(w):
                return False
    return True


def matches(w: str, constraints: ConstraintSet) -> bool:
    """True if `w` satisfies every fact in `constraints`."""
    if len(w) != constraints.N:
        return False
    return _passes_word_scope(w, constraints) and _passes_position_scope(w, constraints)


def filter_candidates(words: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """
    Keep only words consistent with `constraints`.

    Args:
      words       : candidate words (typically DictionaryIndex.words)
      constraints : facts accumulated from previous guesses

    Returns:
      List[str] of survivors, order preserved as in `words`.
    """
    out = [w for w in words if matches(w, constraints)]
    logger.debug("filter kept %d candidate(s)", len(out))
    return out

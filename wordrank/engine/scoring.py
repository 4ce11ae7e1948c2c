"""
Heuristic score for a single candidate word.

For every position i with character c:
    base = letter_frequency[c] + position_frequency[i][c]

A letter contributes only once per word, at its best position: when c
repeats with a higher base, the earlier contribution is swapped out for the
new one; otherwise the repeat adds nothing. Words that spread over many
common letters therefore beat words that repeat them.

Example (frequencies from a dictionary index):
    'e' scores 10 at position 1 and 15 at position 3 -> 'e' adds 15, not 25.
"""

from __future__ import annotations

from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from wordrank.datasets.dictionary import DictionaryIndex


def score_word(w: str, index: "DictionaryIndex") -> int:
    total = 0
    seen: Dict[str, int] = {}  # char -> best base score counted so far

    for i, ch in enumerate(w):
        base = index.letter_frequency[ch] + index.position_frequency[i][ch]
        if ch in seen:
            if base <= seen[ch]:
                continue
            total -= seen[ch]
        seen[ch] = base
        total += base

    return total

"""
Dictionary index: the candidate words plus two frequency tables.

  - words              : unique legal words, first-seen order
  - letter_frequency   : letter -> number of words containing it at least once
  - position_frequency : per position p, letter -> number of words with that
                         letter at p

Both tables are derived from `words` at build time and never touched again.

Typical use:
    from wordrank.datasets import load_index
    index = load_index("/usr/share/dict/words")
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable, Tuple

from wordrank.engine.validation import ALPHABET, WORD_LENGTH, is_word
from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_WORDS = "/usr/share/dict/words"


@dataclass(frozen=True)
class DictionaryIndex:
    N: int
    words: Tuple[str, ...]
    letter_frequency: Counter
    position_frequency: Tuple[Counter, ...]

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, w: object) -> bool:
        return w in self._word_set

    @cached_property
    def _word_set(self) -> frozenset:
        return frozenset(self.words)


def normalize(line: str) -> str:
    return line.strip().lower()


def clean_words(
        raw_lines: Iterable[str],
        N: int = WORD_LENGTH,
        alphabet: str = ALPHABET,
        blacklist: Iterable[str] = (),
) -> list[str]:
    """
    Normalize each line (trim, lowercase) and keep it iff it is a legal word
    of length N and not blacklisted. Duplicates are dropped, first one wins.
    """
    banned = frozenset(blacklist)
    seen, out = set(), []
    for ln in raw_lines:
        w = normalize(ln)
        if w in seen or w in banned or not is_word(w, N, alphabet):
            continue
        seen.add(w)
        out.append(w)
    return out


def build_index(
        raw_lines: Iterable[str],
        N: int = WORD_LENGTH,
        alphabet: str = ALPHABET,
        blacklist: Iterable[str] = (),
) -> DictionaryIndex:
    """
    Build a DictionaryIndex from raw text lines.

    letter_frequency counts a letter once per word ('geese' adds 1 to 'e');
    position_frequency counts every position of every word.
    """
    if N < 1:
        raise ValueError(f"word length must be positive; got {N}")
    words = clean_words(raw_lines, N=N, alphabet=alphabet, blacklist=blacklist)

    letters = Counter()
    positions = tuple(Counter() for _ in range(N))
    for w in words:
        letters.update(set(w))
        for i, ch in enumerate(w):
            positions[i][ch] += 1

    logger.debug("indexed %d word(s) of length %d", len(words), N)
    return DictionaryIndex(N=N, words=tuple(words), letter_frequency=letters,
                           position_frequency=positions)


def load_index(
        path: Path | str = DEFAULT_WORDS,
        N: int = WORD_LENGTH,
        alphabet: str = ALPHABET,
        blacklist: Iterable[str] = (),
) -> DictionaryIndex:
    """
    Read a newline-delimited word source and index it.
    Raises SourceUnavailable if the file can't be read.
    """
    index = build_index(read_lines(path), N=N, alphabet=alphabet, blacklist=blacklist)
    logger.info("loaded %d %d-letter word(s) from %s", len(index), N, path)
    return index

"""
Shape checks for words and constraint tokens.

Two questions are answered here:
  - is this string a legal word (exact length N, only alphabet characters)?
  - which token shape, if any, does a constraint token have?

Token shapes (whole string, nothing before or after):
  [+-][a-z]+      word-scope run: '+' inclusion, '-' exclusion per letter
  [=!][a-z][0-9]  one position fact: '=' equality, '!' inequality
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

WORD_LENGTH = 5
ALPHABET = "a-z"  # body of a regex character class

_WORD_TOKEN_RE = re.compile(r"([+-])([a-z]+)")
_POSITION_TOKEN_RE = re.compile(r"([=!])([a-z])([0-9])")


@lru_cache(maxsize=None)
def word_pattern(N: int = WORD_LENGTH, alphabet: str = ALPHABET) -> re.Pattern:
    """Compiled `[alphabet]{N}`; use with fullmatch."""
    return re.compile(rf"[{alphabet}]{{{int(N)}}}")


def is_word(w: str, N: int = WORD_LENGTH, alphabet: str = ALPHABET) -> bool:
    """
    Return True if `w` is already a normalized word of length N.

    No trimming or lowercasing happens here; callers normalize first.
    """
    if not isinstance(w, str) or N < 1:
        return False
    return word_pattern(N, alphabet).fullmatch(w) is not None


def match_word_token(token: str) -> Optional[re.Match]:
    return _WORD_TOKEN_RE.fullmatch(token)


def match_position_token(token: str, N: int = WORD_LENGTH) -> Optional[re.Match]:
    """
    Match a position token; the digit must name a position in [0, N).
    For N=5 this accepts exactly [=!][a-z][0-4].
    """
    m = _POSITION_TOKEN_RE.fullmatch(token)
    if m is None or int(m.group(3)) >= N:
        return None
    return m

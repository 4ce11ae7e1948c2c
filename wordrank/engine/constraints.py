"""
Constraint model built from feedback tokens.

Two kinds of facts:
  - WordConstraint     : scope 'word'; 'inclusion' (letter must appear, one
                         more time per repeated fact) or 'exclusion' (letter
                         count must equal the number of inclusion facts,
                         i.e. zero when there are none)
  - PositionConstraint : scope = position index; 'equality' or 'inequality'
                         of the character at that index

A ConstraintSet is built once from an ordered token sequence and never
changes. Facts keep their declaration order; nothing is merged, deduplicated
or checked for contradictions (`=a0 !a0` just filters everything out).

Example:
    cs = parse_constraints(["+aa", "-a", "=c0", "!t4"])
    cs["word"]   -> (inclusion a, inclusion a, exclusion a)
    cs[0]        -> (equality c @0,)
    cs.required_count("a") -> 2
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Literal, Tuple, Union

from wordrank.errors import InvalidConstraintToken
from .validation import WORD_LENGTH, match_position_token, match_word_token

logger = logging.getLogger(__name__)

WordKind = Literal["inclusion", "exclusion"]
PositionKind = Literal["equality", "inequality"]
Scope = Union[Literal["word"], int]

WORD_SCOPE = "word"

_WORD_KINDS = {"+": "inclusion", "-": "exclusion"}
_POSITION_KINDS = {"=": "equality", "!": "inequality"}


@dataclass(frozen=True)
class WordConstraint:
    kind: WordKind
    char: str

    def __str__(self) -> str:
        return ("+" if self.kind == "inclusion" else "-") + self.char


@dataclass(frozen=True)
class PositionConstraint:
    kind: PositionKind
    char: str
    position: int

    def __str__(self) -> str:
        return ("=" if self.kind == "equality" else "!") + self.char + str(self.position)

    def accepts(self, w: str) -> bool:
        if self.kind == "equality":
            return w[self.position] == self.char
        return w[self.position] != self.char


@dataclass(frozen=True)
class ConstraintSet:
    """Immutable, order-preserving collection of word and position facts."""
    N: int = WORD_LENGTH
    word: Tuple[WordConstraint, ...] = ()
    positions: Tuple[Tuple[PositionConstraint, ...], ...] = ()
    _required: Counter = field(default_factory=Counter, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.positions:
            object.__setattr__(self, "positions", tuple(() for _ in range(self.N)))
        required = Counter(c.char for c in self.word if c.kind == "inclusion")
        object.__setattr__(self, "_required", required)

    def __getitem__(self, scope: Scope) -> tuple:
        if scope == WORD_SCOPE:
            return self.word
        if isinstance(scope, int) and 0 <= scope < self.N:
            return self.positions[scope]
        raise KeyError(scope)

    def scopes(self):
        """Yield (scope, constraints) for every scope holding at least one fact."""
        if self.word:
            yield WORD_SCOPE, self.word
        for p, cons in enumerate(self.positions):
            if cons:
                yield p, cons

    def required_count(self, ch: str) -> int:
        """Number of inclusion facts recorded for `ch` (0 if none)."""
        return self._required[ch]

    def is_empty(self) -> bool:
        return not self.word and not any(self.positions)

    def __len__(self) -> int:
        return len(self.word) + sum(len(p) for p in self.positions)

    def tokens(self) -> list[str]:
        """One canonical token per fact, word scope first then by position."""
        out = [str(c) for c in self.word]
        for cons in self.positions:
            out.extend(str(c) for c in cons)
        return out


def parse_constraints(tokens: Iterable[str], N: int = WORD_LENGTH) -> ConstraintSet:
    """
    Build a ConstraintSet from constraint tokens, in order.

    Args:
      tokens : e.g. ["+ae", "-st", "=c0", "!a2"]
      N      : word length; position digits must be in [0, N)

    Raises:
      InvalidConstraintToken on the first token matching neither shape.
      Nothing is returned in that case (no partial set).
    """
    word: list[WordConstraint] = []
    positions: list[list[PositionConstraint]] = [[] for _ in range(N)]

    for tok in tokens:
        m = match_word_token(tok) if isinstance(tok, str) else None
        if m:
            kind = _WORD_KINDS[m.group(1)]
            # one fact per letter, left to right
            word.extend(WordConstraint(kind, ch) for ch in m.group(2))
            continue

        m = match_position_token(tok, N) if isinstance(tok, str) else None
        if m:
            p = int(m.group(3))
            positions[p].append(PositionConstraint(_POSITION_KINDS[m.group(1)], m.group(2), p))
            continue

        raise InvalidConstraintToken(tok)

    cs = ConstraintSet(N=N, word=tuple(word), positions=tuple(tuple(p) for p in positions))
    logger.debug("parsed %d constraint(s): %s", len(cs), " ".join(cs.tokens()))
    return cs

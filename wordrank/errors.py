"""
Error taxonomy.

Nothing here is retried or recovered internally: library code raises,
the CLI boundary reports and exits.
"""

from __future__ import annotations


class WordrankError(Exception):
    """Base class for all errors raised by wordrank."""


class SourceUnavailable(WordrankError):
    """The word source (or blacklist) could not be read."""

    def __init__(self, path, reason: str = "cannot read"):
        self.path = str(path)
        super().__init__(f"word source unavailable: {self.path} ({reason})")


class InvalidConstraintToken(WordrankError, ValueError):
    """A constraint token matches none of the recognised shapes."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"invalid constraint token: {token!r} "
            "(expected [+-]letters or [=!]<letter><position>)"
        )

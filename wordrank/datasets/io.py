from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, Iterable, List

from wordrank.errors import SourceUnavailable


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises SourceUnavailable if the file is missing or unreadable.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise SourceUnavailable(p, "not found") from e
    except OSError as e:
        raise SourceUnavailable(p, e.strerror or type(e).__name__) from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def read_blacklist(p: Path | str | None) -> FrozenSet[str]:
    """
    Load banned words, one per line. Blank lines and '#' comments are skipped;
    entries are trimmed and lowercased. None means no blacklist.
    """
    if p is None:
        return frozenset()
    out = set()
    for ln in read_lines(p):
        w = ln.strip().lower()
        if w and not w.startswith("#"):
            out.add(w)
    return frozenset(out)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)

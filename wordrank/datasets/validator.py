"""
Word-list diagnostics.

What this module does:
- Inspect one word source the way build_index() will read it
  (trim, lowercase, exact length N, alphabet only).
- Count invalid lines, duplicates and blacklisted hits; hash the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordrank.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List
import hashlib

from wordrank.engine.validation import ALPHABET, is_word
from .dictionary import normalize


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word source."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # raw line count
    count: int           # legal words, duplicates included
    unique_count: int    # legal words after dedupe and blacklist
    invalid_lines: int   # blank or not matching the length/alphabet rule
    duplicates: int      # repeated legal words
    blacklisted: int     # legal words dropped by the blacklist
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(
        N: int,
        path: str,
        blacklist: Iterable[str] = (),
        alphabet: str = ALPHABET,
) -> Dict:
    """
    Inspect the word source at `path` for length-N words.

    Returns
    -------
    Dict
        A JSON-serializable WordlistReport. `passed` requires the file to
        exist and yield at least one usable word; invalid lines and
        duplicates are reported but tolerated, since indexing skips them.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word source not found: {path}")
        rep = WordlistReport(N, str(path), False, 0, 0, 0, 0, 0, 0, "", False, issues)
        return asdict(rep)

    banned = frozenset(blacklist)

    lines = count = invalid = dups = hit = 0
    seen = set()
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            lines += 1
            w = normalize(raw)
            if not is_word(w, N, alphabet):
                invalid += 1
                continue
            count += 1
            if w in banned:
                hit += 1
            elif w in seen:
                dups += 1
            else:
                seen.add(w)

    if not seen:
        issues.append(f"word source contains 0 usable {N}-letter words")
    if dups:
        issues.append(f"{dups} duplicate word(s)")
    if hit:
        issues.append(f"{hit} blacklisted word(s) dropped")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        lines=lines,
        count=count,
        unique_count=len(seen),
        invalid_lines=invalid,
        duplicates=dups,
        blacklisted=hit,
        sha256=_sha256_file(p),
        passed=bool(seen),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        N=5 | words=8497 (uniq=8497, sha=abc123...) | invalid=226370 | blacklisted=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | blacklisted={report['blacklisted']} | {status}"
    )

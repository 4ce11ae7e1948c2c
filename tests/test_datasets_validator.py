from pathlib import Path
from wordrank.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_counts_problems(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Crane", "crane", "raise", "toolong", "", "slate"])

    rep = validate_wordlist(5, str(p), blacklist={"slate"})
    assert rep["lines"] == 6
    assert rep["count"] == 4
    assert rep["unique_count"] == 2
    assert rep["invalid_lines"] == 2
    assert rep["duplicates"] == 1
    assert rep["blacklisted"] == 1
    assert rep["passed"] is True
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("blacklisted" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_or_empty(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "missing.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)

    p = tmp_path / "words.txt"
    _write(p, ["letter", "planet"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert any("0 usable" in msg for msg in rep["issues"])

from pathlib import Path

import pytest
from wordrank.datasets import build_index, load_index, read_blacklist
from wordrank.engine import is_word
from wordrank.errors import SourceUnavailable


RAW = [" Crane ", "crane", "raise\n", "toolong", "abc", "st4re", "", "Slate", "banned", "raise"]


def test_build_index_normalizes_filters_and_dedupes():
    index = build_index(RAW, blacklist={"slate"})
    assert index.words == ("crane", "raise")
    assert len(set(index.words)) == len(index.words)
    assert all(is_word(w) for w in index.words)
    assert "slate" not in index
    assert "crane" in index

def test_letter_frequency_counts_presence_not_occurrences():
    index = build_index(["geese", "sheep"])
    assert index.letter_frequency["e"] == 2
    assert index.letter_frequency["g"] == 1
    assert index.letter_frequency["z"] == 0

def test_position_frequency_counts_every_position():
    index = build_index(["geese", "sheep"])
    assert index.position_frequency[1]["e"] == 1
    assert index.position_frequency[2]["e"] == 2
    assert index.position_frequency[3]["e"] == 1
    assert index.position_frequency[4]["e"] == 1
    assert sum(index.position_frequency[0].values()) == 2

def test_build_index_other_length_and_alphabet():
    index = build_index(["letter", "crane", "früher"], N=6, alphabet="a-zäöüß")
    assert index.words == ("letter", "früher")
    assert len(index.position_frequency) == 6

def test_load_index_reads_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nRAISE\n\ncrane\nsalet\n", encoding="utf-8")
    index = load_index(p, blacklist={"salet"})
    assert index.words == ("crane", "raise")

def test_load_index_missing_source(tmp_path: Path):
    with pytest.raises(SourceUnavailable) as exc:
        load_index(tmp_path / "nope.txt")
    assert "nope.txt" in str(exc.value)
    assert isinstance(exc.value.__cause__, OSError)

def test_read_blacklist(tmp_path: Path):
    p = tmp_path / "blacklist.txt"
    p.write_text("# never suggest these\nSlate\n\n  crane \n", encoding="utf-8")
    assert read_blacklist(p) == {"slate", "crane"}
    assert read_blacklist(None) == frozenset()

@pytest.mark.parametrize("w,ok", [
    ("crane", True), ("crane\n", False), (" crane", False), ("Crane", False), ("crané", False),
])
def test_is_word_checks_the_whole_string(w, ok):
    assert is_word(w) is ok

def test_build_index_rejects_non_positive_length():
    with pytest.raises(ValueError):
        build_index(["", "crane"], N=0)
    assert is_word("", N=0) is False

import csv
from pathlib import Path

import pytest
from wordrank.datasets import build_index
from wordrank.harness import CSV_FIELDS, next_guess, run_batch, run_case, summarize, write_csv

WORDS = ["crane", "raise", "stare", "trace", "cared"]


@pytest.mark.parametrize("answer", WORDS)
def test_run_case_solves_small_dictionary(answer):
    index = build_index(WORDS)
    r = run_case(index, answer)
    assert r["success"] is True
    assert r["history"][-1] == (answer, "GGGGG")
    assert r["guesses"] == len(r["history"]) <= 5
    assert r["remaining"][0] == len(WORDS)
    assert r["remaining"] == sorted(r["remaining"], reverse=True)

def test_run_case_gives_up_when_answer_missing():
    index = build_index(WORDS)
    r = run_case(index, "pious")
    assert r["success"] is False
    assert r["guesses"] <= 6

def test_next_guess_is_top_ranked_word():
    index = build_index(["aaaaa", "abcde"])
    assert next_guess(index, []) == ("abcde", 2)
    assert next_guess(index, [("abcde", "G----")]) == ("aaaaa", 1)

def test_run_batch_sample():
    index = build_index(WORDS)
    out = run_batch(index, WORDS + ["toolong"], sample=2)
    assert [r["answer"] for r in out] == ["crane", "raise"]

def test_write_csv_one_row_per_game(tmp_path: Path):
    index = build_index(WORDS)
    results = run_batch(index, WORDS)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(WORDS)
    assert list(rows[0]) == CSV_FIELDS
    for row, r in zip(rows, results):
        steps = row["path"].split()
        assert len(steps) == r["guesses"]
        assert steps[-1] == f"{r['answer']}:GGGGG"
        assert row["candidates"].split()[0] == str(len(WORDS))
        assert row["solved"] == "1"

def test_summarize_counts_solved_and_missed():
    index = build_index(WORDS)
    results = run_batch(index, ["crane", "pious"])
    s = summarize(results)
    assert s["num_cases"] == 2 and s["solved"] == 1
    assert s["missed"] == ["pious"]
    assert sum(s["guess_histogram"].values()) == 1
    assert s["mean_guesses"] == results[0]["guesses"]

"""
Result summaries and CSV export for self-play runs.

One CSV row per game. The guess path is kept in a single column as
'guess:pattern' steps ("crane:-YY-- rally:GGGGG") alongside the candidate
counts each guess was chosen from ("2315 41"), so rows stay the same width
whatever the turn budget.
"""

from __future__ import annotations

import csv
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

CSV_FIELDS = ["answer", "solved", "guesses", "time_ms", "path", "candidates"]


def result_rows(results: Iterable[Dict]) -> Iterator[Dict]:
    for r in results:
        yield {
            "answer": r["answer"],
            "solved": int(r["success"]),
            "guesses": r["guesses"],
            "time_ms": round(float(r["time_ms"]), 3),
            "path": " ".join(f"{g}:{p}" for g, p in r["history"]),
            "candidates": " ".join(str(n) for n in r["remaining"]),
        }


def write_csv(results: Iterable[Dict], path: str) -> str:
    """Write one row per game (see CSV_FIELDS); returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        w.writerows(result_rows(results))
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: solve rate, mean guesses over solved games, a
    guesses histogram and the answers that were missed.
    """
    solved = [r for r in results if r["success"]]
    hist = Counter(r["guesses"] for r in solved)
    return {
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0,
        "guess_histogram": {str(k): hist[k] for k in sorted(hist)},
        "missed": [r["answer"] for r in results if not r["success"]],
    }

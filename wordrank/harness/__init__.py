from .core import run_case, run_batch, next_guess, WORDLE_MAX_TURNS
from .io import write_csv, result_rows, summarize, CSV_FIELDS

__all__ = [
    "run_case", "run_batch", "next_guess", "WORDLE_MAX_TURNS",
    "write_csv", "result_rows", "summarize", "CSV_FIELDS",
]

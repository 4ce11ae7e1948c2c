from .constraints import ConstraintSet, PositionConstraint, WordConstraint, parse_constraints
from .filtering import filter_candidates, matches
from .scoring import score_word
from .ranking import Suggestion, rank, top, format_suggestion, TOP_N
from .feedback import feedback, feedback_to_tokens
from .validation import WORD_LENGTH, ALPHABET, is_word

__all__ = [
    "ConstraintSet", "PositionConstraint", "WordConstraint", "parse_constraints",
    "filter_candidates", "matches", "score_word",
    "Suggestion", "rank", "top", "format_suggestion", "TOP_N",
    "feedback", "feedback_to_tokens",
    "WORD_LENGTH", "ALPHABET", "is_word",
]

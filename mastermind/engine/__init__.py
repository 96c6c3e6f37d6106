from .pegs import (CODE_LENGTH, MAX_GUESSES, PALETTE, Code, Color, Feedback, Guess,
                   InvalidInput, Marker, Peg, code_str, make_code)
from .scoring import evaluate, format_feedback, from_pattern, is_solved, key_pegs, to_pattern
from .constraints import all_codes, filter_candidates
from .validation import parse_code, validate_code

__all__ = [
    "CODE_LENGTH", "MAX_GUESSES", "PALETTE", "Code", "Color", "Feedback", "Guess",
    "InvalidInput", "Marker", "Peg", "code_str", "make_code",
    "evaluate", "is_solved", "to_pattern", "from_pattern", "key_pegs", "format_feedback",
    "all_codes", "filter_candidates",
    "parse_code", "validate_code",
]

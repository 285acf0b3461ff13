from .rules import CODE_LENGTH, COLOURS, DEFAULT_RULES, MAX_TURNS, Code, Colour, Feedback, Rules
from .errors import (
    EmptyCandidateSet,
    GameOver,
    InvalidColour,
    InvalidLength,
    MastermindError,
    SolverNotReady,
)
from .scoring import score, score_unchecked, is_win
from .constraints import filter_candidates, is_consistent
from .validation import validate_code, is_legal, parse_code
from .codes import all_codes, random_code

__all__ = [
    "CODE_LENGTH", "COLOURS", "DEFAULT_RULES", "MAX_TURNS", "Code", "Colour", "Feedback", "Rules",
    "EmptyCandidateSet", "GameOver", "InvalidColour", "InvalidLength", "MastermindError",
    "SolverNotReady",
    "score", "score_unchecked", "is_win",
    "filter_candidates", "is_consistent",
    "validate_code", "is_legal", "parse_code",
    "all_codes", "random_code",
]

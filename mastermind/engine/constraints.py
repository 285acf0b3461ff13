"""
Candidate filtering given game history.

Given:
  - a pool of codes (e.g., the whole code space)
  - a history of (guess, feedback) pairs

Return:
  - codes that are consistent with ALL feedback seen so far.

A code is consistent iff, were it the secret, scoring every past guess
against it reproduces the recorded feedback exactly. This is the only
rule the solver trusts; any shortcut it takes must agree with it.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .rules import Code, Feedback
from .scoring import score_unchecked

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[Sequence[str], Feedback]]


def is_consistent(candidate: Sequence[str], history: History) -> bool:
    """True iff `candidate` as the secret would have produced every recorded feedback."""
    for guess, feedback in history:
        if score_unchecked(candidate, guess) != feedback:
            return False
    return True


def filter_candidates(candidates: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only candidates consistent with every (guess, feedback) in `history`.

    Returns:
      List of consistent codes (order preserved as in `candidates`).
    """
    # History may be a generator; it is consumed once per candidate.
    history = list(history)
    return [c for c in candidates if is_consistent(c, history)]

"""
Error taxonomy.

  InvalidLength / InvalidColour : caller misuse, recoverable (re-prompt)
  SolverNotReady                : solver used before initialize()
  EmptyCandidateSet             : fatal, scoring and filtering disagree
  GameOver                      : a turn was played after the game ended
"""

from __future__ import annotations

from typing import Sequence


class MastermindError(Exception):
    """Base class for every error raised by this package."""


class InvalidLength(MastermindError, ValueError):
    def __init__(self, code: Sequence, expected: int):
        self.code = tuple(code)
        self.expected = expected
        super().__init__(f"code must have exactly {expected} colours; got {len(self.code)}: {list(self.code)}")


class InvalidColour(MastermindError, ValueError):
    def __init__(self, colour, palette: Sequence[str]):
        self.colour = colour
        self.palette = tuple(palette)
        super().__init__(f"invalid colour {colour!r}. Allowed: {', '.join(self.palette)}")


class SolverNotReady(MastermindError, RuntimeError):
    """Raised when observe()/next_guess() run before initialize()."""


class EmptyCandidateSet(MastermindError, RuntimeError):
    """
    No code is consistent with the feedback seen so far.

    Under correct scoring this cannot happen, so it is never retried: the
    automated codebreaker must stop. `history` holds the (guess, feedback)
    pairs that led here.
    """

    def __init__(self, history: Sequence = ()):
        self.history = list(history)
        turns = "; ".join(f"{' '.join(g)} -> {f}" for g, f in self.history) or "none"
        super().__init__(
            "candidate set is empty: no code reproduces the observed feedback "
            f"(scoring/filtering mismatch or tampered feedback). Turns: {turns}"
        )


class GameOver(MastermindError):
    """Raised when a turn is played on a finished game."""

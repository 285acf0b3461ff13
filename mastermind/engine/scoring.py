"""
Mastermind scoring (key pegs) for a single (secret, guess) pair.

Conventions:
  - perfect : right colour in the right position   (black peg)
  - exists  : right colour in the wrong position   (white peg)

Algorithm (two-pass, duplicate-safe):
  1) Perfect pass: positions where guess[i] == secret[i] are counted and
     consumed on both sides.
  2) Exists pass: over the unconsumed pegs only, each colour contributes
     min(count in guess, count in secret).

The min() rule is what stops a colour guessed twice from scoring twice
against a single occurrence in the secret.

Examples:
  score(("red","red","green","blue"), ("red","green","red","blue")) -> (2, 2)
  score(("pink",)*4, ("red",)*4)                                    -> (0, 0)
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .rules import DEFAULT_RULES, Feedback, Rules
from .validation import validate_code


def score_unchecked(secret: Sequence[str], guess: Sequence[str]) -> Feedback:
    """
    Score without validation.

    Preconditions:
      - len(secret) == len(guess)
    Used by the solver's filtering loop on codes it enumerated itself.
    """
    perfect = 0
    secret_left: Counter = Counter()
    guess_left: Counter = Counter()

    # Pass 1: perfect matches; everything else goes to the leftover pools.
    for s, g in zip(secret, guess):
        if s == g:
            perfect += 1
        else:
            secret_left[s] += 1
            guess_left[g] += 1

    # Pass 2: colour overlap of the leftovers, capped by multiplicity.
    exists = sum(min(n, secret_left[c]) for c, n in guess_left.items())

    return Feedback(perfect, exists)


def score(secret: Sequence[str], guess: Sequence[str], rules: Rules = DEFAULT_RULES) -> Feedback:
    """
    Compute the feedback for `guess` against `secret`.

    Raises:
      InvalidLength / InvalidColour if either code is not legal under `rules`.
    """
    secret = validate_code(secret, rules)
    guess = validate_code(guess, rules)
    return score_unchecked(secret, guess)


def is_win(feedback: Feedback, rules: Rules = DEFAULT_RULES) -> bool:
    return feedback.is_win(rules.code_length)

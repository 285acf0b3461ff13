"""
One game of Mastermind: the secret, the rules and the turn history.

The Game is the orchestrator's record of play. It scores guesses against
its secret and enforces the row budget; it knows nothing about who is
guessing. Solvers and players never hold a reference to it.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from mastermind.engine import DEFAULT_RULES, Code, Feedback, GameOver, Rules, score, validate_code

logger = logging.getLogger(__name__)


class Game:
    turns: List[Tuple[Code, Feedback]]

    def __init__(self, secret, rules: Rules = DEFAULT_RULES):
        self.rules = rules
        self.secret: Code = validate_code(secret, rules)
        self.turns = []

    def __str__(self):
        return "\n".join(f"{' '.join(g)}  {f}" for g, f in self.turns)

    @property
    def num_turns(self) -> int:
        return len(self.turns)

    @property
    def turns_left(self) -> int:
        return self.rules.max_turns - self.num_turns

    @property
    def is_won(self) -> bool:
        return bool(self.turns) and self.turns[-1][1].is_win(self.rules.code_length)

    @property
    def is_finished(self) -> bool:
        return self.is_won or self.num_turns >= self.rules.max_turns

    def play_turn(self, guess) -> Feedback:
        """
        Score `guess`, append it to the history and return the feedback.

        Raises:
          GameOver                      : the game already ended
          InvalidLength / InvalidColour : illegal guess (nothing is recorded)
        """
        if self.is_finished:
            raise GameOver(f"game finished after {self.num_turns} turns")

        guess = validate_code(guess, self.rules)
        feedback = score(self.secret, guess, self.rules)
        self.turns.append((guess, feedback))

        if self.is_won:
            logger.info("Code broken in %d turn(s).", self.num_turns)
        elif self.is_finished:
            logger.info("Out of turns; the code was %s.", " ".join(self.secret))

        return feedback

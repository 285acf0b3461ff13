"""
Game rules and the small value types shared by every layer.

Conventions:
  - a Colour is a lowercase palette name, e.g. "red"
  - a Code is an immutable tuple of Colours (duplicates allowed)
  - Feedback is (perfect, exists):
      perfect = right colour in the right position   (black key peg)
      exists  = right colour in the wrong position   (white key peg)

The defaults describe the classic board: six colours, four slots and
twelve rows. Variants are built by constructing a different `Rules`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

Colour = str
Code = Tuple[Colour, ...]

COLOURS: Tuple[Colour, ...] = ("pink", "red", "green", "blue", "purple", "yellow")
CODE_LENGTH = 4
MAX_TURNS = 12


class Feedback(NamedTuple):
    """Key pegs for one turn. Immutable once created."""
    perfect: int
    exists: int

    def is_win(self, code_length: int = CODE_LENGTH) -> bool:
        return self.perfect == code_length

    def __str__(self) -> str:
        return f"{self.perfect}/{self.exists}"


@dataclass(frozen=True)
class Rules:
    """Board configuration: palette, slots per code and the row budget."""
    colours: Tuple[Colour, ...] = COLOURS
    code_length: int = CODE_LENGTH
    max_turns: int = MAX_TURNS

    def __post_init__(self):
        colours = tuple(c.strip().lower() for c in self.colours)
        if not colours:
            raise ValueError("palette must contain at least one colour")
        if len(set(colours)) != len(colours):
            raise ValueError(f"palette contains duplicate colours: {colours}")
        if self.code_length < 1:
            raise ValueError(f"code_length must be >= 1; got {self.code_length}")
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {self.max_turns}")
        object.__setattr__(self, "colours", colours)

    @property
    def space_size(self) -> int:
        """Number of distinct codes, len(colours) ** code_length."""
        return len(self.colours) ** self.code_length


DEFAULT_RULES = Rules()

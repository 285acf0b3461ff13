"""
Text rendering for the board: the rules intro, key pegs and the rows
played so far. Pure string builders; callers decide where to print.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from mastermind.engine import DEFAULT_RULES, Code, Feedback, Rules

BLACK_PEG = "●"
WHITE_PEG = "○"
EMPTY_PEG = "·"


def introduce_rules(rules: Rules = DEFAULT_RULES) -> str:
    return "\n".join([
        "These are the possible colours in the game:",
        "  " + ", ".join(rules.colours),
        f"When asked, type {rules.code_length} colours in order, separated by spaces.",
        "Your guesses appear on the left and their key pegs on the right:",
        f"  {BLACK_PEG} (black) means a colour is in its place.",
        f"  {WHITE_PEG} (white) means the colour is in the code but not in that place.",
        f"You have {rules.max_turns} turns. Good luck and have fun!",
    ])


def format_feedback(feedback: Feedback, code_length: int = DEFAULT_RULES.code_length) -> str:
    """Key pegs, blacks first: Feedback(2, 1) -> '●●○·'."""
    blanks = code_length - feedback.perfect - feedback.exists
    return BLACK_PEG * feedback.perfect + WHITE_PEG * feedback.exists + EMPTY_PEG * blanks


def render_board(history: Iterable[Tuple[Code, Feedback]], rules: Rules = DEFAULT_RULES) -> str:
    """One line per played row, then empty rows up to the turn budget."""
    width = max(len(c) for c in rules.colours)
    lines = []
    for i, (guess, feedback) in enumerate(history, start=1):
        cells = " ".join(c.ljust(width) for c in guess)
        lines.append(f"{i:>2} | {cells} | {format_feedback(feedback, rules.code_length)}")
    empty_cells = " ".join("_" * width for _ in range(rules.code_length))
    for i in range(len(lines) + 1, rules.max_turns + 1):
        lines.append(f"{i:>2} | {empty_cells} |")
    return "\n".join(lines)

"""
Code legality checks.

A code is legal iff:
  - it has exactly `rules.code_length` elements
  - every element is a colour of `rules.colours`

Length is checked before colours, so a short code with a bad colour is
reported as InvalidLength. Input layers (the interactive CLI) should call
these before handing codes to the engine; the engine calls them again
defensively.
"""

from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidColour, InvalidLength, MastermindError
from .rules import DEFAULT_RULES, Code, Rules

_SEPARATORS = re.compile(r"[\s,]+")


def validate_code(code: Iterable[str], rules: Rules = DEFAULT_RULES) -> Code:
    """
    Return `code` as a tuple if it is legal, otherwise raise.

    Raises:
      InvalidLength : wrong number of colours
      InvalidColour : an element outside the palette
    """
    # Strings are iterable too; a bare "red" is not a code.
    if isinstance(code, str):
        raise InvalidLength((code,), rules.code_length)

    seq = tuple(code)
    if len(seq) != rules.code_length:
        raise InvalidLength(seq, rules.code_length)

    for colour in seq:
        if colour not in rules.colours:
            raise InvalidColour(colour, rules.colours)

    return seq


def is_legal(code: Iterable[str], rules: Rules = DEFAULT_RULES) -> bool:
    """Non-raising variant of validate_code()."""
    try:
        validate_code(code, rules)
    except MastermindError:
        return False
    return True


def parse_code(text: str, rules: Rules = DEFAULT_RULES) -> Code:
    """
    Parse human input such as "Red green, RED blue" into a legal Code.

    Colours are case-insensitive and may be separated by spaces or commas.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip().lower()) if t]
    return validate_code(tokens, rules)

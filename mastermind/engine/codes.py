"""
Code space enumeration and codemaker secret generation.
"""

from __future__ import annotations

import itertools
import random
from typing import List

from .rules import DEFAULT_RULES, Code, Rules


def all_codes(rules: Rules = DEFAULT_RULES) -> List[Code]:
    """
    Every code of the game: the palette taken `code_length` at a time,
    order matters, repeats allowed. Lexicographic in palette order.
    """
    return list(itertools.product(rules.colours, repeat=rules.code_length))


def random_code(rng: random.Random, rules: Rules = DEFAULT_RULES) -> Code:
    """Draw a secret uniformly at random from the injected RNG."""
    return tuple(rng.choice(rules.colours) for _ in range(rules.code_length))

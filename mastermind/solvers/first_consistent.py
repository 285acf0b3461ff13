"""
First Consistent solver.

Always plays the lexicographically smallest surviving code (palette order),
including on turn 1. Fully deterministic; the RNG is never consulted.
Useful as a reproducible baseline next to random_consistent.
"""

from __future__ import annotations

from typing import List

from mastermind.engine import Code
from .base import BaseSolver, register


@register
class FirstConsistentSolver(BaseSolver):
    id = "first_consistent"
    name = "First Consistent"
    version = "1.0.0"

    def choose(self, candidates: List[Code]) -> Code:
        # all_codes() is lexicographic and filtering preserves order.
        return candidates[0]

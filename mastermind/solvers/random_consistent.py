"""
Random Consistent solver.

Strategy:
  - Turn 1: fixed opening, the first two palette colours twice each
    (pink pink red red on the default board).
  - Afterwards: choose uniformly at random from the CURRENT candidate set
    (codes still consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Never probes non-candidate codes, so every guess could be the secret.
"""

from __future__ import annotations

from typing import List

from mastermind.engine import Code
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def opening_guess(self) -> Code:
        colours = self.rules.colours
        n = self.rules.code_length
        if len(colours) < 2:
            return (colours[0],) * n
        half = n // 2
        return (colours[0],) * half + (colours[1],) * (n - half)

    def choose(self, candidates: List[Code]) -> Code:
        """Pick any candidate uniformly at random (seeded RNG)."""
        i = self.rng.randrange(len(candidates))
        return candidates[i]

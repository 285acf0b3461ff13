"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden secret) with an automated codebreaker.
- run_batch: play many games in sequence.
- The row budget comes from the solver's Rules and is enforced by Game.

The harness owns the Game and the solver and passes Codes and Feedback
between them; neither holds a reference back to the harness.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

from .game import Game


def run_case(solver, secret, *, seed: int | None = None) -> Dict:
    """
    Execute one game until the solver wins or the rows run out.

    Args:
        solver: a BaseSolver; its rules define palette, length and turn budget
        secret: the hidden code for this case
        seed:   RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(code, feedback)]), secret (code), solver_id (str)

    Raises:
        EmptyCandidateSet if the solver's deduction breaks down; the game
        is not continued with a blind guess.
    """
    game = Game(secret, solver.rules)
    solver.initialize(seed=seed)

    t0 = time.perf_counter()
    while not game.is_finished:
        guess = solver.next_guess()
        feedback = game.play_turn(guess)
        if game.is_won:
            break
        # Narrow the candidate set before the next turn
        solver.observe(guess, feedback)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": game.is_won,
        "guesses": game.num_turns,
        "time_ms": dt,
        "history": list(game.turns),
        "secret": game.secret,
        "solver_id": solver.id,
    }


def run_batch(solver, secrets: Iterable, *, seed: int | None = None) -> List[Dict]:
    """
    Run many cases back-to-back.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    out: List[Dict] = []
    for idx, secret in enumerate(secrets, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, seed=case_seed))
    return out

# apps/cli/play.py
"""
Interactive Mastermind in the terminal.

Roles:
  --role breaker : the computer makes a secret, you guess it.
  --role maker   : you think of a secret, the computer guesses; you answer
                   each guess with two numbers, "perfect exists".
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from mastermind.engine import (
    DEFAULT_RULES,
    EmptyCandidateSet,
    Feedback,
    MastermindError,
    random_code,
    parse_code,
)
from mastermind.harness import Game
from mastermind.harness.display import introduce_rules, render_board
from mastermind.solvers import create_solver, get_solver_ids

logger = logging.getLogger("mastermind.play")


def _read_feedback(prompt: str, code_length: int) -> Feedback:
    """Ask until the user types two non-negative integers that fit on the board."""
    while True:
        raw = input(prompt).replace(",", " ").split()
        try:
            perfect, exists = (int(x) for x in raw)
        except ValueError:
            print("Please type two numbers, e.g. '1 2'.")
            continue
        if perfect < 0 or exists < 0 or perfect + exists > code_length:
            print(f"Both numbers must be >= 0 and add up to at most {code_length}.")
            continue
        if perfect == code_length - 1 and exists == 1:
            print("That feedback is impossible: the last peg would have to be perfect too.")
            continue
        return Feedback(perfect, exists)


def play_breaker(rules, rng: random.Random) -> int:
    game = Game(random_code(rng, rules), rules)
    while not game.is_finished:
        try:
            game.play_turn(parse_code(input("What is your guess? "), rules))
        except MastermindError as e:
            # InvalidLength / InvalidColour: ask again
            print(e)
            continue
        print(render_board(game.turns, rules))

    if game.is_won:
        print(f"You broke the code in {game.num_turns} turn(s)!")
    else:
        print(f"Out of turns. The code was: {' '.join(game.secret)}")
    return 0


def play_maker(rules, solver_id: str, seed: int | None) -> int:
    solver = create_solver(solver_id, rules=rules)
    solver.initialize(seed=seed)
    history = []

    print("Think of a secret code and keep it to yourself.")
    for _ in range(rules.max_turns):
        try:
            guess = solver.next_guess()
        except EmptyCandidateSet as e:
            logger.error("%s", e)
            return 2
        print(f"Computer guesses: {' '.join(guess)}  ({len(solver.candidates)} codes possible)")
        feedback = _read_feedback("Feedback (perfect exists): ", rules.code_length)
        history.append((guess, feedback))
        print(render_board(history, rules))
        if feedback.is_win(rules.code_length):
            print(f"The computer broke your code in {len(history)} turn(s).")
            return 0
        try:
            solver.observe(guess, feedback)
        except EmptyCandidateSet as e:
            # Inconsistent answers: no code fits all of them.
            logger.error("%s", e)
            print("No code matches all of that feedback; please check your answers.")
            return 2

    print("You win: the computer ran out of turns.")
    return 0


def main():
    ap = argparse.ArgumentParser(description="mastermind: play in the terminal")
    ap.add_argument("--role", choices=["breaker", "maker"], default="breaker",
                    help="breaker: you guess; maker: the computer guesses your code")
    ap.add_argument("--solver", default="random_consistent", choices=get_solver_ids(),
                    help="solver used for --role maker")
    ap.add_argument("--seed", type=int, help="RNG seed (secret and solver choices)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    rules = DEFAULT_RULES
    print(introduce_rules(rules))
    print()

    try:
        if args.role == "breaker":
            return play_breaker(rules, random.Random(args.seed))
        return play_maker(rules, args.solver, args.seed)
    except (KeyboardInterrupt, EOFError):
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())

# apps/cli/run.py
"""
CLI entry point for running Mastermind solver experiments.

This script:
  1) Draws the requested number of secrets from a seeded RNG.
  2) Instantiates the requested solver.
  3) Runs a batch of games with a live progress indicator and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, rules, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections import Counter
from pathlib import Path

from tqdm import tqdm

from mastermind.engine import DEFAULT_RULES, EmptyCandidateSet, random_code
from mastermind.harness import run_case
from mastermind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mastermind.solvers import create_solver, get_solver_ids

logger = logging.getLogger("mastermind.run")


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="mastermind: run solver experiments")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar (auto=only when stderr is a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    rules = DEFAULT_RULES
    try:
        solver = create_solver(args.solver, rules=rules)
    except ValueError as e:
        ap.error(str(e))

    # Secrets come from their own RNG so every solver sees the same cases for a seed
    rng = random.Random(args.seed)
    cases = [random_code(rng, rules) for _ in range(args.games)]
    total = len(cases)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = []

    for idx, secret in enumerate(tqdm(cases, ncols=80, desc=solver.id, unit="game", disable=not show_bar), 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        try:
            r = run_case(solver, secret, seed=per_seed)
        except EmptyCandidateSet:
            logger.exception("Solver %s lost track of secret %s", solver.id, " ".join(secret))
            return 2
        results.append(r)

    # Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    wins = [r for r in results if r["success"]]
    write_csv(results, str(csv_path), max_turns=rules.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "rules": {
            "colours": list(rules.colours),
            "code_length": rules.code_length,
            "max_turns": rules.max_turns,
        },
        "num_cases": len(results),
        "wins": len(wins),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    # Turn distribution summary
    dist = Counter(r["guesses"] for r in wins)
    for turns in sorted(dist):
        print(f"{turns:>2}: {dist[turns]}")
    if wins:
        avg = sum(r["guesses"] for r in wins) / len(wins)
        print(f"won {len(wins)}/{total}, average {avg:.3f} guesses")
    else:
        print(f"won 0/{total}")

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import logging
import random
from typing import Dict, List, Tuple, Type

from mastermind.engine import (
    DEFAULT_RULES,
    Code,
    EmptyCandidateSet,
    Feedback,
    Rules,
    SolverNotReady,
    all_codes,
    filter_candidates,
    validate_code,
)

logger = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Deductive codebreaker.

    Keeps the set of codes still consistent with every (guess, feedback)
    observed and proposes the next guess from it. Subclasses only decide
    the opening guess and how to pick among the survivors.

    States: Uninitialized -> Ready (after initialize()). The candidate set
    only ever shrinks while Ready; initialize() starts a fresh game.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, rules: Rules = DEFAULT_RULES, rng: random.Random | None = None):
        self.rules = rules
        self.rng = rng if rng is not None else random.Random()
        self._candidates: List[Code] | None = None
        self._history: List[Tuple[Code, Feedback]] = []

    # -- state --

    @property
    def is_ready(self) -> bool:
        return self._candidates is not None

    @property
    def candidates(self) -> Tuple[Code, ...]:
        """Snapshot of the surviving codes (read-only)."""
        self._require_ready()
        return tuple(self._candidates)

    @property
    def history(self) -> List[Tuple[Code, Feedback]]:
        return list(self._history)

    def _require_ready(self) -> None:
        if self._candidates is None:
            raise SolverNotReady(f"{self.id}: call initialize() first")

    # -- contract --

    def initialize(self, seed: int | None = None) -> None:
        """Populate the candidate set with the whole code space."""
        if seed is not None:
            self.rng.seed(seed)
        self._candidates = all_codes(self.rules)
        self._history = []
        logger.debug("%s: initialized with %d candidates", self.id, len(self._candidates))

    def observe(self, guess, feedback: Feedback) -> None:
        """
        Keep only candidates c with score(c, guess) == feedback.

        Feedback (0, 0) and (code_length, 0) take shortcuts; both give the
        same set as filter_candidates(). Impossible feedback such as (4, 1)
        leaves nothing and raises EmptyCandidateSet. Observing the same pair
        twice changes nothing the second time.
        """
        self._require_ready()
        guess = validate_code(guess, self.rules)
        feedback = Feedback(*feedback)
        before = len(self._candidates)

        if feedback.perfect == 0 and feedback.exists == 0:
            # No colour of the guess can appear anywhere in the secret.
            banned = set(guess)
            self._candidates = [c for c in self._candidates if banned.isdisjoint(c)]
        elif feedback == Feedback(self.rules.code_length, 0):
            # Only the guess itself scores all-perfect against the guess.
            self._candidates = [c for c in self._candidates if c == guess]
        else:
            self._candidates = filter_candidates(self._candidates, [(guess, feedback)])

        self._history.append((guess, feedback))
        logger.debug("%s: %s -> %s, candidates %d -> %d",
                     self.id, " ".join(guess), feedback, before, len(self._candidates))

        if not self._candidates:
            raise EmptyCandidateSet(self._history)

    def next_guess(self) -> Code:
        """
        Opening guess on turn 1, otherwise a pick from the candidate set.

        Raises:
          SolverNotReady    : before initialize()
          EmptyCandidateSet : nothing left to pick from
        """
        self._require_ready()
        if not self._candidates:
            raise EmptyCandidateSet(self._history)
        if not self._history:
            return self.opening_guess()
        return self.choose(self._candidates)

    # -- strategy hooks --

    def opening_guess(self) -> Code:
        return self._candidates[0]

    def choose(self, candidates: List[Code]) -> Code:
        raise NotImplementedError("Override in subclass")

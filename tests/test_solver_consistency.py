import random

import pytest
from mastermind.engine import (
    EmptyCandidateSet,
    Feedback,
    InvalidColour,
    Rules,
    SolverNotReady,
    all_codes,
    filter_candidates,
    random_code,
    score,
)
from mastermind.solvers import create_solver, get_solver_ids


def C(text):
    return tuple(text.split())


def test_registry_lists_both_strategies():
    assert get_solver_ids() == ["first_consistent", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("minimax")


@pytest.mark.parametrize("solver_id", ["random_consistent", "first_consistent"])
def test_uninitialized_solver_refuses_work(solver_id):
    solver = create_solver(solver_id)
    assert solver.is_ready is False
    with pytest.raises(SolverNotReady):
        solver.next_guess()
    with pytest.raises(SolverNotReady):
        solver.observe(C("red red red red"), Feedback(0, 0))


def test_initialize_and_winning_feedback():
    solver = create_solver("random_consistent")
    solver.initialize(seed=1)
    assert len(solver.candidates) == 1296
    guess = C("red green blue pink")
    solver.observe(guess, Feedback(4, 0))
    assert solver.candidates == (guess,)
    assert solver.next_guess() == guess


def test_zero_feedback_drops_every_shared_colour():
    solver = create_solver("first_consistent")
    solver.initialize()
    solver.observe(C("pink pink red red"), Feedback(0, 0))
    assert len(solver.candidates) == 4 ** 4
    assert all("pink" not in c and "red" not in c for c in solver.candidates)


@pytest.mark.parametrize("guess", [
    "pink pink red red",
    "red green blue pink",
    "yellow yellow yellow yellow",
    "blue blue blue purple",
])
def test_observe_matches_brute_force_for_every_feedback(guess):
    guess = C(guess)
    universe = all_codes()
    reachable = {score(c, guess) for c in universe}
    for fb in reachable:
        solver = create_solver("random_consistent")
        solver.initialize()
        solver.observe(guess, fb)
        assert list(solver.candidates) == filter_candidates(universe, [(guess, fb)])


@pytest.mark.parametrize("fb", [(4, 1), (3, 1), (2, 3), (-1, 0), (0, 5)])
@pytest.mark.parametrize("guess", ["pink pink red red", "red green blue pink"])
def test_impossible_feedback_empties_the_set(guess, fb):
    guess = C(guess)
    fb = Feedback(*fb)
    assert filter_candidates(all_codes(), [(guess, fb)]) == []

    solver = create_solver("random_consistent")
    solver.initialize()
    with pytest.raises(EmptyCandidateSet):
        solver.observe(guess, fb)
    assert solver.candidates == ()


def test_observe_is_idempotent():
    solver = create_solver("random_consistent")
    solver.initialize()
    guess, fb = C("red red green blue"), Feedback(1, 1)
    solver.observe(guess, fb)
    once = solver.candidates
    solver.observe(guess, fb)
    assert solver.candidates == once


def test_observe_accepts_plain_tuple_feedback():
    a = create_solver("first_consistent")
    b = create_solver("first_consistent")
    a.initialize()
    b.initialize()
    a.observe(["red", "red", "green", "blue"], (1, 2))
    b.observe(C("red red green blue"), Feedback(1, 2))
    assert a.candidates == b.candidates


def test_observe_validates_guess():
    solver = create_solver("first_consistent")
    solver.initialize()
    with pytest.raises(InvalidColour):
        solver.observe(C("red red red orange"), Feedback(0, 0))
    assert len(solver.candidates) == 1296


@pytest.mark.parametrize("solver_id", ["random_consistent", "first_consistent"])
def test_true_secret_never_leaves_candidate_set(solver_id):
    rng = random.Random(2024)
    for case in range(25):
        secret = random_code(rng)
        solver = create_solver(solver_id)
        solver.initialize(seed=case)
        for _turn in range(12):
            guess = solver.next_guess()
            assert guess in solver.candidates
            fb = score(secret, guess)
            if fb == Feedback(4, 0):
                break
            solver.observe(guess, fb)
            assert secret in solver.candidates
        else:
            pytest.fail(f"{solver_id} did not find {secret}")


def test_candidate_set_only_shrinks():
    secret = C("purple blue blue green")
    solver = create_solver("random_consistent")
    solver.initialize(seed=3)
    sizes = [len(solver.candidates)]
    while True:
        guess = solver.next_guess()
        fb = score(secret, guess)
        if fb.is_win():
            break
        solver.observe(guess, fb)
        sizes.append(len(solver.candidates))
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[-1] >= 1


def test_tampered_feedback_is_fatal():
    solver = create_solver("random_consistent")
    solver.initialize()
    guess = C("pink pink red red")
    solver.observe(guess, Feedback(4, 0))
    with pytest.raises(EmptyCandidateSet) as exc:
        solver.observe(guess, Feedback(0, 0))
    assert len(exc.value.history) == 2
    assert len(solver.candidates) == 0
    with pytest.raises(EmptyCandidateSet):
        solver.next_guess()


def test_contradictory_feedback_pair_is_fatal():
    solver = create_solver("first_consistent")
    solver.initialize()
    solver.observe(C("pink pink pink pink"), Feedback(0, 0))
    with pytest.raises(EmptyCandidateSet):
        solver.observe(C("pink red green blue"), Feedback(0, 4))


def test_openings():
    rc = create_solver("random_consistent")
    rc.initialize(seed=9)
    assert rc.next_guess() == C("pink pink red red")

    fc = create_solver("first_consistent")
    fc.initialize()
    assert fc.next_guess() == C("pink pink pink pink")


def test_random_choice_is_seeded():
    def play(seed):
        solver = create_solver("random_consistent")
        solver.initialize(seed=seed)
        solver.observe(solver.next_guess(), Feedback(0, 1))
        return [solver.next_guess() for _ in range(5)]

    assert play(17) == play(17)


def test_reinitialize_starts_a_fresh_game():
    solver = create_solver("first_consistent")
    solver.initialize()
    solver.observe(C("pink pink pink pink"), Feedback(0, 0))
    solver.initialize()
    assert len(solver.candidates) == 1296
    assert solver.history == []


def test_custom_rules_space():
    rules = Rules(colours=("a", "b", "c", "d"), code_length=3)
    solver = create_solver("random_consistent", rules=rules, rng=random.Random(0))
    solver.initialize()
    assert len(solver.candidates) == 64
    assert solver.next_guess() == C("a b b")


def test_independent_solvers_do_not_share_candidates():
    a = create_solver("random_consistent")
    b = create_solver("random_consistent")
    a.initialize()
    b.initialize()
    a.observe(C("pink pink red red"), Feedback(0, 0))
    assert len(b.candidates) == 1296

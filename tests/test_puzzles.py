import random
from itertools import permutations

import pytest

from drillbook.puzzles import (
    bit_clearing_sequence,
    count_charging_minutes,
    diversity_after_increment,
    diversity_with_set,
    max_draws,
    max_draws_bruteforce,
    max_product_after_increments,
    reduce_grid,
)


# max_product_after_increments

def test_max_product_worked_example():
    assert max_product_after_increments(2, 3, 4) == 100


@pytest.mark.parametrize("abc", [(1, 1, 1), (2, 3, 4), (10, 1, 10), (5, 7, 2)])
def test_max_product_symmetric(abc):
    results = {max_product_after_increments(*p) for p in permutations(abc)}
    assert len(results) == 1


@pytest.mark.parametrize("abc", [(1, 1, 1), (2, 3, 4), (10, 1, 10), (5, 7, 2)])
def test_max_product_beats_single_choices(abc):
    a, b, c = abc
    best = max_product_after_increments(a, b, c)
    assert best >= (a + 5) * b * c
    assert best >= a * (b + 5) * c
    assert best >= a * b * (c + 5)
    assert best >= (a + 2) * (b + 2) * (c + 1)


# reduce_grid

def _expand(pattern, k):
    return ["".join(ch * k for ch in row) for row in pattern for _ in range(k)]


@pytest.mark.parametrize("k", [1, 2, 3])
def test_reduce_grid_round_trip(k):
    pattern = ["010", "111", "001"]
    assert reduce_grid(_expand(pattern, k), k) == pattern


def test_reduce_grid_whole_block():
    assert reduce_grid(["0000"] * 4, 4) == ["0"]


def test_reduce_grid_rejects_zero_block():
    with pytest.raises(ValueError):
        reduce_grid(["00", "00"], 0)


# count_charging_minutes

@pytest.mark.parametrize("a, b, expected", [(3, 5, 6), (4, 4, 5)])
def test_charging_examples(a, b, expected):
    assert count_charging_minutes(a, b) == expected


def test_charging_both_at_one():
    assert count_charging_minutes(1, 1) == 0


@pytest.mark.parametrize("a, b", [(2, 9), (7, 3), (1, 100), (50, 50)])
def test_charging_symmetric(a, b):
    assert count_charging_minutes(a, b) == count_charging_minutes(b, a)


def test_charging_dead_joystick():
    assert count_charging_minutes(0, 10) == 0


# max_draws

@pytest.mark.parametrize("scores", [(1, 1, 1), (3, 3, 3), (0, 0, 1)])
def test_max_draws_odd_total(scores):
    assert max_draws(*scores) is None
    assert max_draws_bruteforce(*scores) is None


def test_max_draws_examples():
    assert max_draws(0, 0, 0) == 0
    assert max_draws(3, 4, 5) == 6


def test_max_draws_matches_bruteforce():
    for p1 in range(7):
        for p2 in range(p1, 7):
            for p3 in range(p2, 9):
                assert max_draws(p1, p2, p3) == max_draws_bruteforce(p1, p2, p3)


def test_max_draws_bounded_by_two_lower_scores():
    for p3 in range(0, 20, 2):
        assert max_draws(0, 0, p3) == 0
        assert max_draws_bruteforce(0, 0, p3) == 0


# bit_clearing_sequence

def test_bit_clearing_worked_example():
    assert bit_clearing_sequence(13) == [13, 12, 8]


def test_bit_clearing_zero():
    assert bit_clearing_sequence(0) == []


@pytest.mark.parametrize("n", [1, 2, 7, 255, 1024, 123456789])
def test_bit_clearing_invariants(n):
    seq = bit_clearing_sequence(n)
    assert seq[0] == n
    assert len(seq) == bin(n).count("1")
    assert seq[-1] & (seq[-1] - 1) == 0
    for prev, nxt in zip(seq, seq[1:]):
        assert nxt == prev - (prev & -prev)


def test_bit_clearing_negative():
    with pytest.raises(ValueError):
        bit_clearing_sequence(-3)


# diversity

def test_diversity_example():
    notes = [1, 2, 2, 2, 5, 6]
    assert diversity_after_increment(notes) == 5
    assert diversity_with_set(notes) == 5


def test_diversity_all_distinct_unchanged():
    notes = [1, 3, 5, 7]
    assert diversity_after_increment(notes) == len(notes)
    assert diversity_with_set(notes) == len(notes)


def test_diversity_methods_agree_on_sorted_input():
    rng = random.Random(1466)
    for _ in range(300):
        notes = sorted(rng.randint(1, 8) for _ in range(rng.randint(1, 10)))
        got = diversity_after_increment(notes)
        assert got == diversity_with_set(notes)
        assert len(set(notes)) <= got <= len(notes)


def test_diversity_does_not_modify_input():
    notes = [4, 4]
    assert diversity_after_increment(notes) == 2
    assert notes == [4, 4]


def test_diversity_empty():
    assert diversity_after_increment([]) == 0
    assert diversity_with_set([]) == 0
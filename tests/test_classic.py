import random

import pytest

from drillbook.classic import (
    Move,
    hanoi_moves,
    max_subarray_sum,
    max_subarray_sum_cubic,
    max_subarray_sum_quadratic,
)

SOURCE_ARRAY = [1, 2, -2, 3, 22, -1, 4, 5, -3, 6, 7, 8, -9, 19, 20]


def test_source_example():
    assert max_subarray_sum_cubic(SOURCE_ARRAY) == 82
    assert max_subarray_sum_quadratic(SOURCE_ARRAY) == 82
    assert max_subarray_sum(SOURCE_ARRAY) == 82


def test_empty_and_all_negative_give_zero():
    assert max_subarray_sum_cubic([]) == 0
    assert max_subarray_sum_quadratic([]) == 0
    assert max_subarray_sum([]) == 0
    assert max_subarray_sum_cubic([-3, -1, -7]) == 0
    assert max_subarray_sum_quadratic([-3, -1, -7]) == 0
    assert max_subarray_sum([-3, -1, -7]) == 0


def test_all_positive_gives_total():
    values = [4, 1, 9, 2, 7]
    assert max_subarray_sum_cubic(values) == 23
    assert max_subarray_sum_quadratic(values) == 23
    assert max_subarray_sum(values) == 23


def test_single_element():
    assert max_subarray_sum_cubic([5]) == 5
    assert max_subarray_sum_quadratic([5]) == 5
    assert max_subarray_sum([5]) == 5


def test_implementations_agree_on_random_input():
    rng = random.Random(2024)
    for _ in range(60):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 25))]
        expected = max_subarray_sum_cubic(values)
        assert max_subarray_sum_quadratic(values) == expected
        assert max_subarray_sum(values) == expected


def test_result_bounded_by_positive_total():
    rng = random.Random(7)
    for _ in range(40):
        values = [rng.randint(-15, 15) for _ in range(20)]
        result = max_subarray_sum(values)
        assert 0 <= result <= sum(v for v in values if v > 0)
        assert result >= max(values)


def test_kadane_accepts_generator():
    assert max_subarray_sum(v for v in SOURCE_ARRAY) == max_subarray_sum(SOURCE_ARRAY)


def test_move_text():
    assert str(Move(1, 1, 3)) == "Move disk 1 from rod 1 to rod 3"


def test_single_disk():
    assert list(hanoi_moves(1, 1, 3, 2)) == [Move(1, 1, 3)]


@pytest.mark.parametrize("disks", range(1, 9))
def test_move_count(disks):
    assert len(list(hanoi_moves(disks, 1, 3, 2))) == 2 ** disks - 1


@pytest.mark.parametrize("disks", [1, 2, 3, 5, 7])
def test_moves_are_legal_and_complete(disks):
    rods = {1: list(range(disks, 0, -1)), 2: [], 3: []}
    for move in hanoi_moves(disks, 1, 3, 2):
        assert rods[move.source][-1] == move.disk
        disk = rods[move.source].pop()
        if rods[move.target]:
            assert rods[move.target][-1] > disk
        rods[move.target].append(disk)
    assert rods[3] == list(range(disks, 0, -1))
    assert rods[1] == [] and rods[2] == []


def test_largest_disk_moves_once_in_the_middle():
    moves = list(hanoi_moves(4, 1, 3, 2))
    largest = [i for i, m in enumerate(moves) if m.disk == 4]
    assert largest == [len(moves) // 2]
    assert moves[len(moves) // 2] == Move(4, 1, 3)


@pytest.mark.parametrize("disks", [0, -2])
def test_no_disks_rejected(disks):
    with pytest.raises(ValueError):
        list(hanoi_moves(disks, 1, 3, 2))
import random

from dslabs.evens import even_indices, fill_random, main
from dslabs.fixed_array import FixedArray


def _array_of(values):
    array = FixedArray(len(values))
    for index, value in enumerate(values):
        array[index] = value
    return array


def test_fill_random_counts_evens_and_stays_in_range():
    array = FixedArray(40)
    count = fill_random(array, random.Random(42))
    assert count == sum(1 for value in array if value % 2 == 0)
    assert all(0 <= value <= 50 for value in array)


def test_fill_random_is_deterministic_for_a_seed():
    first, second = FixedArray(15), FixedArray(15)
    fill_random(first, random.Random(3))
    fill_random(second, random.Random(3))
    assert list(first) == list(second)


def test_even_indices_of_known_values():
    assert list(even_indices(_array_of([1, 2, 3, 4]))) == [1, 3]


def test_even_indices_matches_fill_count():
    array = FixedArray(30)
    count = fill_random(array, random.Random(11))
    positions = even_indices(array)
    assert len(positions) == count
    assert all(array[position] % 2 == 0 for position in positions)


def test_even_indices_of_empty_array():
    assert len(even_indices(FixedArray(0))) == 0


def test_main_prints_increasing_positions(capsys):
    assert main(["6"]) == 0
    out = capsys.readouterr().out
    positions = [int(piece) for piece in out.strip().split(",") if piece.strip()]
    assert positions == sorted(set(positions))
    assert all(0 <= position < 6 for position in positions)


def test_main_rejects_bad_length():
    assert main(["abc"]) == 2
    assert main(["-3"]) == 2
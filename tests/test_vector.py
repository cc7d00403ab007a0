import pytest

from dslabs.vector import Vector


def test_resize_set_get_shrink():
    vector = Vector()
    vector.resize(5)
    assert len(vector) == 5

    for i in range(len(vector)):
        vector[i] = i
    assert [vector[i] for i in range(len(vector))] == [0, 1, 2, 3, 4]

    vector.resize(10)
    assert len(vector) == 10
    assert list(vector)[:5] == [0, 1, 2, 3, 4]

    vector.resize(3)
    assert len(vector) == 3
    assert list(vector) == [0, 1, 2]


def test_growth_keeps_values_and_sums():
    vector = Vector()
    vector.resize(3)
    for i in range(3):
        vector[i] = i
    n = 100_000
    for i in range(1, n + 1):
        vector.resize(i)
        vector[i - 1] = i
    assert len(vector) == n
    assert vector[0] == 1
    assert vector[n - 1] == n
    assert sum(vector) == sum(range(1, n + 1))


def test_new_vector_is_empty_with_initial_capacity():
    vector = Vector()
    assert len(vector) == 0
    assert list(vector) == []
    assert vector.capacity() == 10


def test_capacity_doubles_requested_size_when_exceeded():
    vector = Vector()
    vector.resize(10)
    assert vector.capacity() == 10
    vector.resize(11)
    assert vector.capacity() == 22
    vector.resize(20)
    assert vector.capacity() == 22


def test_grown_slots_are_none():
    vector = Vector()
    vector.resize(2)
    vector[0] = "a"
    vector[1] = "b"
    vector.resize(30)
    assert list(vector)[:2] == ["a", "b"]
    assert list(vector)[2:] == [None] * 28


def test_shrink_then_grow_does_not_resurrect_values():
    vector = Vector()
    vector.resize(4)
    for i in range(4):
        vector[i] = i + 100
    vector.resize(1)
    vector.resize(4)
    assert list(vector) == [100, None, None, None]


def test_negative_index_counts_from_end():
    vector = Vector()
    vector.resize(3)
    for i in range(3):
        vector[i] = i * 10
    assert vector[-1] == 20
    vector[-3] = 7
    assert vector[0] == 7


@pytest.mark.parametrize("index", [3, 100, -4])
def test_out_of_range_get_raises(index):
    vector = Vector()
    vector.resize(3)
    for i in range(3):
        vector[i] = i + 1
    with pytest.raises(IndexError):
        vector[index]
    assert len(vector) == 3
    assert list(vector) == [1, 2, 3]


def test_out_of_range_set_raises():
    vector = Vector()
    with pytest.raises(IndexError):
        vector[0] = 1
    assert len(vector) == 0
    assert list(vector) == []


def test_negative_resize_raises():
    vector = Vector()
    with pytest.raises(ValueError):
        vector.resize(-1)
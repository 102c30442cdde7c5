import math

import pytest

from kata.numbers import (
    collatz_length,
    fib,
    magnitude,
    min_of,
    normalize,
    offset_differences,
    transpose,
)


def test_collatz_length():
    assert collatz_length(11) == 15


def test_collatz_length_of_one():
    assert collatz_length(1) == 1


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (10, 55), (20, 6765)])
def test_fib(n, expected):
    assert fib(n) == expected


def test_fib_recurrence():
    for n in range(2, 30):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative():
    with pytest.raises(ValueError):
        fib(-1)


def test_transpose():
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    assert transpose(matrix) == [
        [101, 201, 301],
        [102, 202, 302],
        [103, 203, 303],
    ]


def test_transpose_twice_is_identity():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert transpose(transpose(matrix)) == matrix


def test_transpose_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_magnitude_of_unit_vector():
    assert magnitude([0.0, 1.0, 0.0]) == 1.0


def test_normalize_gives_unit_length():
    v = [1.0, 2.0, 9.0]
    normalized = normalize(v)
    assert math.isclose(magnitude(normalized), 1.0)
    assert v == [1.0, 2.0, 9.0]
    assert math.isclose(normalized[1] / normalized[0], 2.0)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (0, 10, 0),
        (500, 123, 123),
        ("a", "z", "a"),
        ("7", "1", "1"),
        ("hello", "goodbye", "goodbye"),
        ("bat", "armadillo", "armadillo"),
    ],
)
def test_min_of(left, right, expected):
    assert min_of(left, right) == expected


def test_min_of_prefers_left_on_tie():
    left, right = [1], [1]
    assert min_of(left, right) is left


def test_offset_one():
    assert offset_differences(1, [1, 3, 5, 7]) == [2, 2, 2, -6]
    assert offset_differences(1, [1, 3, 5]) == [2, 2, -4]
    assert offset_differences(1, [1, 3]) == [2, -2]


def test_larger_offsets():
    assert offset_differences(2, [1, 3, 5, 7]) == [4, 4, -4, -4]
    assert offset_differences(3, [1, 3, 5, 7]) == [6, -2, -2, -2]
    assert offset_differences(4, [1, 3, 5, 7]) == [0, 0, 0, 0]
    assert offset_differences(5, [1, 3, 5, 7]) == [2, 2, 2, -6]


def test_custom_type():
    assert offset_differences(1, [1.0, 11.0, 5.0, 0.0]) == [10.0, -6.0, -5.0, 1.0]


def test_degenerate_cases():
    assert offset_differences(1, [0]) == [0]
    assert offset_differences(1, [1]) == [0]
    assert offset_differences(1, []) == []
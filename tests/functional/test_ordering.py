import numpy as np
import pytest
from slimcommons.core.exceptions import InvalidRangeError
from slimcommons.functional.ordering import reverse


def test_reverse_whole_array():
    values = [1, 2, 3, 4, 5]
    reverse(values)
    assert values == [5, 4, 3, 2, 1]


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (1, 4, [1, 4, 3, 2, 5]),
        (-3, 2, [2, 1, 3, 4, 5]),
        (3, 100, [1, 2, 3, 5, 4]),
        (5, 8, [1, 2, 3, 4, 5]),
        (3, 1, [1, 2, 3, 4, 5]),
        (2, 3, [1, 2, 3, 4, 5]),
    ],
)
def test_reverse_range(start, end, expected):
    values = [1, 2, 3, 4, 5]
    reverse(values, start, end)
    assert values == expected


def test_reverse_none_and_empty():
    reverse(None)
    empty = []
    reverse(empty)
    assert empty == []


def test_reverse_numpy():
    values = np.array([True, False, False])
    reverse(values)
    np.testing.assert_array_equal(values, [False, False, True])

    matrix = np.arange(6).reshape(3, 2)
    reverse(matrix)
    np.testing.assert_array_equal(matrix, [[4, 5], [2, 3], [0, 1]])


def test_reverse_twice_restores():
    original = list("slimcommons")
    values = list(original)
    reverse(values, 2, 9)
    reverse(values, 2, 9)
    assert values == original


def test_reverse_strict():
    values = [1, 2, 3]
    with pytest.raises(InvalidRangeError):
        reverse(values, 0, 4, strict=True)
    with pytest.raises(InvalidRangeError):
        reverse(values, 2, 1, strict=True)
    assert values == [1, 2, 3]
    reverse(values, strict=True)
    assert values == [3, 2, 1]


def test_reverse_list_of_arrays_keeps_identity():
    items = [np.zeros(2), np.ones(2), np.full(2, 7.0)]
    values = list(items)
    reverse(values)
    assert values[0] is items[2]
    assert values[2] is items[0]

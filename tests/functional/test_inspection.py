import numpy as np
import pytest
from slimcommons.functional.inspection import (
    get_length,
    is_empty,
    is_not_empty,
    is_same_length,
    is_same_type,
)


@pytest.mark.parametrize(
    "array, expected",
    [
        (None, 0),
        ([], 0),
        ([None], 1),
        ([True, False], 2),
        (np.zeros(3), 3),
        (("a", "b", "c"), 3),
    ],
)
def test_get_length(array, expected):
    assert get_length(array) == expected


def test_get_length_rejects_unsized():
    with pytest.raises(TypeError):
        get_length(42)


@pytest.mark.parametrize("text", ["abc", "", b"abc"])
def test_get_length_rejects_text(text):
    with pytest.raises(TypeError):
        get_length(text)
    with pytest.raises(TypeError):
        is_empty(text)


def test_get_length_accepts_bytearray():
    assert get_length(bytearray(b"abc")) == 3


def test_is_empty():
    assert is_empty(None)
    assert is_empty([])
    assert is_empty(np.array([]))
    assert not is_empty([0])
    assert is_not_empty([0])
    assert not is_not_empty(None)


def test_is_same_length_treats_none_as_empty():
    assert is_same_length(None, [])
    assert is_same_length([1, 2], np.array([3, 4]))
    assert not is_same_length([1], None)


def test_is_same_type():
    assert is_same_type([1], ["a"])
    assert not is_same_type([1], (1,))
    assert is_same_type(np.array([1, 2]), np.array([3]))
    assert not is_same_type(np.array([1, 2]), np.array([1.0, 2.0]))
    assert not is_same_type(np.zeros(4), np.zeros((2, 2)))


def test_is_same_type_rejects_none():
    with pytest.raises(ValueError):
        is_same_type(None, [])
    with pytest.raises(ValueError):
        is_same_type([], None)

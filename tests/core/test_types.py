import array

import numpy as np
import pytest
from slimcommons.core.exceptions import InvalidRangeError
from slimcommons.core.types import (
    MutableArray,
    validate_index_range,
    validate_swap_span,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, 2], True),
        (bytearray(b"x"), True),
        (array.array("i"), True),
        (np.zeros(2), True),
        ((1, 2), False),
        ("text", False),
    ],
)
def test_mutable_array_protocol(value, expected):
    assert isinstance(value, MutableArray) is expected


@pytest.mark.parametrize("start, end, length", [(0, 0, 0), (0, 5, 5), (2, 3, 5), (5, 5, 5)])
def test_valid_index_range(start, end, length):
    checked = validate_index_range(start, end, length)
    assert (checked.start, checked.end, checked.length) == (start, end, length)


@pytest.mark.parametrize("start, end, length", [(-1, 2, 5), (3, 2, 5), (0, 6, 5)])
def test_invalid_index_range(start, end, length):
    with pytest.raises(InvalidRangeError):
        validate_index_range(start, end, length)


def test_index_range_accepts_numpy_integers():
    checked = validate_index_range(np.int64(1), np.int32(2), 3)
    assert checked.end == 2


@pytest.mark.parametrize(
    "offset1, offset2, count, length",
    [(0, 2, 2, 4), (3, 0, 1, 4), (1, 1, 0, 4)],
)
def test_valid_swap_span(offset1, offset2, count, length):
    validate_swap_span(offset1, offset2, count, length)


@pytest.mark.parametrize(
    "offset1, offset2, count, length",
    [(0, 3, 2, 4), (-1, 0, 1, 4), (0, 4, 1, 4), (0, 1, -1, 4), (0, 0, 1, 0)],
)
def test_invalid_swap_span(offset1, offset2, count, length):
    with pytest.raises(InvalidRangeError):
        validate_swap_span(offset1, offset2, count, length)

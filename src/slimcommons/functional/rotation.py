"""In-place bounded swap and cyclic rotation of array ranges.

Both operations work on any ``MutableArray`` (lists, bytearrays, ``array.array``
and numpy arrays) and never change the array length. Out-of-range requests are
clamped or ignored rather than reported, unless strict mode is enabled either
per call (``strict=True``) or globally through ``SLIMCOMMONS_STRICT_RANGES``.

The rotation is the block-swap algorithm: each round swaps the shorter of the
two blocks into its final place and continues on the remainder, which takes
O(n) element exchanges in total and no extra buffer.

Examples:
    >>> from slimcommons.functional.rotation import shift_range, swap
    >>> values = [1, 2, 3, 4, 5]
    >>> shift_range(values, 0, 5, 2)
    >>> values
    [4, 5, 1, 2, 3]
    >>> values = [1, 2, 3, 4]
    >>> swap(values, 0, 2, 2)
    >>> values
    [3, 4, 1, 2]
"""

import typing as tp

import numpy as np

from slimcommons.core.config import resolve_strict
from slimcommons.core.types import (
    MutableArray,
    validate_index_range,
    validate_swap_span,
)
from slimcommons.logger.logger import get_logger

__all__ = ["swap", "shift", "shift_range"]

logger = get_logger(__name__)


def _exchange(array: MutableArray, i: int, j: int) -> None:
    aux = array[i]
    # Rows of a multi-dimensional ndarray are views and must be detached first;
    # elements of any other container are swapped by reference
    if isinstance(array, np.ndarray) and array.ndim > 1:
        aux = aux.copy()
    array[i] = array[j]
    array[j] = aux


def swap(
    array: tp.Optional[MutableArray],
    offset1: int,
    offset2: int,
    length: int = 1,
    *,
    strict: tp.Optional[bool] = None,
) -> None:
    """Swap ``length`` elements at ``offset1`` with those at ``offset2``.

    Does nothing for a ``None`` or empty array, or when either offset is past the
    end. Negative offsets are promoted to 0. If a run would overrun the array the
    swap stops at the end, so as many elements as fit are exchanged.

    Pairs are exchanged one at a time in increasing order, so overlapping runs
    behave like the sequential loop, not like a block copy.

    Examples:
        - ``swap([1, 2, 3, 4], 0, 2, 1)`` -> ``[3, 2, 1, 4]``
        - ``swap([1, 2, 3, 4], 2, 0, 2)`` -> ``[3, 4, 1, 2]``
        - ``swap([1, 2, 3, 4], -3, 2, 2)`` -> ``[3, 4, 1, 2]``
        - ``swap([1, 2, 3, 4], 0, 3, 3)`` -> ``[4, 2, 3, 1]``

    Args:
        array: The array to modify in place, may be ``None``.
        offset1: Index of the first element of the first run.
        offset2: Index of the first element of the second run.
        length: Number of elements to swap. Defaults to a single element.
        strict: Raise instead of clamping. ``None`` uses the global setting.

    Raises:
        InvalidRangeError: In strict mode, if either run is not fully inside
            the array.
    """
    if array is None:
        return
    size = len(array)
    if resolve_strict(strict):
        validate_swap_span(offset1, offset2, length, size)
    if size == 0 or offset1 >= size or offset2 >= size:
        logger.debug(
            f"swap ignored: offsets ({offset1}, {offset2}) outside array of length {size}"
        )
        return
    offset1 = max(offset1, 0)
    offset2 = max(offset2, 0)
    length = min(length, size - offset1, size - offset2)
    for i in range(length):
        _exchange(array, offset1 + i, offset2 + i)


def shift_range(
    array: tp.Optional[MutableArray],
    start_index: int,
    end_index: int,
    offset: int,
    *,
    strict: tp.Optional[bool] = None,
) -> None:
    """Rotate ``array[start_index:end_index]`` in place by ``offset`` positions.

    A positive offset moves elements towards the end (to the right), a negative
    one towards the front. Offsets larger than the range wrap around.

    Does nothing for a ``None`` array, when ``start_index >= len(array) - 1`` or
    ``end_index <= 0``, or when the clamped range holds fewer than two elements.
    A negative start is promoted to 0 and an end past the array is demoted to
    its length.

    Examples:
        - ``shift_range([1, 2, 3, 4, 5], 0, 5, 2)`` -> ``[4, 5, 1, 2, 3]``
        - ``shift_range([1, 2, 3, 4, 5], 0, 5, -2)`` -> ``[3, 4, 5, 1, 2]``
        - ``shift_range([1, 2, 3, 4, 5], 1, 4, 1)`` -> ``[1, 4, 2, 3, 5]``

    Args:
        array: The array to rotate in place, may be ``None``.
        start_index: First index of the range, inclusive.
        end_index: End of the range, exclusive.
        offset: Number of positions to rotate by.
        strict: Raise instead of clamping. ``None`` uses the global setting.

    Raises:
        InvalidRangeError: In strict mode, unless
            ``0 <= start_index <= end_index <= len(array)``.
    """
    if array is None:
        return
    size = len(array)
    if resolve_strict(strict):
        validate_index_range(start_index, end_index, size)
    if start_index >= size - 1 or end_index <= 0:
        logger.debug(
            f"shift ignored: range [{start_index}, {end_index}) "
            f"outside array of length {size}"
        )
        return
    start_index = max(start_index, 0)
    end_index = min(end_index, size)
    n = end_index - start_index
    if n <= 1:
        return

    # Python's modulo already lands in [0, n) for negative offsets
    offset %= n
    while n > 1 and offset > 0:
        complement = n - offset
        if offset > complement:
            # Trailing block is shorter: move it to the front, then finish
            # rotating the leading ``offset`` elements
            swap(array, start_index, start_index + n - complement, complement, strict=False)
            n = offset
            offset -= complement
        elif offset < complement:
            # Leading block is shorter: it lands in its final place and the
            # remainder starts right after it
            swap(array, start_index, start_index + complement, offset, strict=False)
            start_index += offset
            n = complement
        else:
            swap(array, start_index, start_index + complement, offset, strict=False)
            break


def shift(
    array: tp.Optional[MutableArray],
    offset: int,
    *,
    strict: tp.Optional[bool] = None,
) -> None:
    """Rotate the whole array in place by ``offset`` positions.

    Equivalent to ``shift_range(array, 0, len(array), offset)``; does nothing for
    a ``None`` array.
    """
    if array is None:
        return
    shift_range(array, 0, len(array), offset, strict=strict)

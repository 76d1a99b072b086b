"""Linear search helpers that tolerate ``None`` arrays.

Every function returns ``INDEX_NOT_FOUND`` (or ``False``) for a ``None`` array
instead of raising. Elements compare with ``==``; a ``None`` value is matched by
identity. Rows of a 2-D numpy array match a value of the same shape when every entry
matches. Passing ``tolerance`` switches to a closed-interval match
``value - tolerance <= element <= value + tolerance``, meant for floating point
data.

Note:
    NaN compares unequal to everything, itself included, so searching for NaN
    without a tolerance never succeeds.
"""

import typing as tp

import numpy as np

__all__ = ["INDEX_NOT_FOUND", "index_of", "last_index_of", "contains"]

# Returned by the search helpers when no element matches
INDEX_NOT_FOUND = -1


def _matches(element: tp.Any, value: tp.Any, tolerance: tp.Optional[float]) -> bool:
    if value is None:
        return element is None
    if element is None:
        return False
    if isinstance(element, np.ndarray) or isinstance(value, np.ndarray):
        # Rows of a 2-D array match only a value of the same shape
        if np.shape(element) != np.shape(value):
            return False
    if tolerance is not None:
        return _truth(
            (element >= value - tolerance) & (element <= value + tolerance)
        )
    return _truth(element == value)


def _truth(result: tp.Any) -> bool:
    if isinstance(result, np.ndarray):
        return bool(np.all(result))
    return bool(result)


def index_of(
    array: tp.Optional[tp.Sequence[tp.Any]],
    value: tp.Any,
    start_index: int = 0,
    tolerance: tp.Optional[float] = None,
) -> int:
    """Find the first index of ``value`` at or after ``start_index``.

    A negative start is treated as 0; a start past the end finds nothing.

    Args:
        array: The array to search, may be ``None``.
        value: The value to look for.
        start_index: Index to start searching from.
        tolerance: Optional absolute tolerance for numeric matches.

    Returns:
        The index of the first match, or ``INDEX_NOT_FOUND``.
    """
    if array is None:
        return INDEX_NOT_FOUND
    for i in range(max(start_index, 0), len(array)):
        if _matches(array[i], value, tolerance):
            return i
    return INDEX_NOT_FOUND


def last_index_of(
    array: tp.Optional[tp.Sequence[tp.Any]],
    value: tp.Any,
    start_index: tp.Optional[int] = None,
    tolerance: tp.Optional[float] = None,
) -> int:
    """Find the last index of ``value`` at or before ``start_index``.

    The search runs backwards. A negative start finds nothing; a start past the
    end (or ``None``) begins at the last element.

    Args:
        array: The array to search, may be ``None``.
        value: The value to look for.
        start_index: Index to search backwards from.
        tolerance: Optional absolute tolerance for numeric matches.

    Returns:
        The index of the last match, or ``INDEX_NOT_FOUND``.
    """
    if array is None:
        return INDEX_NOT_FOUND
    size = len(array)
    if start_index is None or start_index >= size:
        start_index = size - 1
    elif start_index < 0:
        return INDEX_NOT_FOUND
    for i in range(start_index, -1, -1):
        if _matches(array[i], value, tolerance):
            return i
    return INDEX_NOT_FOUND


def contains(
    array: tp.Optional[tp.Sequence[tp.Any]],
    value: tp.Any,
    tolerance: tp.Optional[float] = None,
) -> bool:
    """Check whether ``value`` occurs in ``array``; ``False`` for ``None``."""
    return index_of(array, value, 0, tolerance) != INDEX_NOT_FOUND

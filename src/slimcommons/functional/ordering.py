"""In-place reversal of array ranges."""

import typing as tp

from slimcommons.core.config import resolve_strict
from slimcommons.core.types import MutableArray, validate_index_range
from slimcommons.functional.rotation import _exchange
from slimcommons.logger.logger import get_logger

__all__ = ["reverse"]

logger = get_logger(__name__)


def reverse(
    array: tp.Optional[MutableArray],
    start_index: int = 0,
    end_index: tp.Optional[int] = None,
    *,
    strict: tp.Optional[bool] = None,
) -> None:
    """Reverse ``array[start_index:end_index]`` in place.

    A negative start is promoted to 0 and a start past the end changes nothing.
    ``end_index`` defaults to the array length and is demoted to it when larger;
    an end at or before the start changes nothing. There is no special handling
    for multi-dimensional arrays beyond swapping whole rows.

    Args:
        array: The array to reverse, may be ``None``.
        start_index: First index of the range, inclusive.
        end_index: End of the range, exclusive. Defaults to ``len(array)``.
        strict: Raise instead of clamping. ``None`` uses the global setting.

    Raises:
        InvalidRangeError: In strict mode, unless
            ``0 <= start_index <= end_index <= len(array)``.
    """
    if array is None:
        return
    size = len(array)
    if end_index is None:
        end_index = size
    if resolve_strict(strict):
        validate_index_range(start_index, end_index, size)

    i = max(start_index, 0)
    j = min(size, end_index) - 1
    if j <= i:
        logger.debug(
            f"reverse ignored: range [{start_index}, {end_index}) "
            f"holds fewer than two elements of {size}"
        )
        return
    while j > i:
        _exchange(array, i, j)
        i += 1
        j -= 1

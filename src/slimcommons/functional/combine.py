"""Copying and concatenating arrays without touching the inputs."""

import array as pyarray
import copy
import typing as tp
from collections.abc import Sequence

import numpy as np

__all__ = ["clone", "add_all"]

T = tp.TypeVar("T")


def clone(array: tp.Optional[T]) -> tp.Optional[T]:
    """Return a shallow copy of ``array`` of the same type, or ``None``."""
    if array is None:
        return None
    if isinstance(array, np.ndarray):
        return array.copy()
    return copy.copy(array)


def add_all(array1: tp.Optional[T], *array2: tp.Any) -> tp.Optional[T]:
    """Concatenate two arrays into a new one of ``array1``'s type.

    ``array2`` follows the variadic form: ``add_all(a, 4, 5)`` appends 4 and 5,
    while ``add_all(a, [4, 5])`` appends the elements of the single sequence
    argument. A ``None`` first array yields a copy of the second and vice versa;
    ``add_all(None, None)`` is ``None``.

    Examples:
        - ``add_all([1, 2], [3])`` -> ``[1, 2, 3]``
        - ``add_all(None, [3])`` -> ``[3]``
        - ``add_all(("a",), "b", "c")`` -> ``("a", "b", "c")``

    Raises:
        TypeError: If the elements cannot be stored in ``array1``, e.g. floats
            into an integer ndarray, or ``array1`` cannot be extended at all.
    """
    if len(array2) == 1 and (array2[0] is None or _is_array_like(array2[0])):
        tail = array2[0]
    else:
        tail = list(array2)

    if array1 is None:
        return clone(tail)
    if tail is None or len(tail) == 0:
        return clone(array1)

    if isinstance(array1, np.ndarray):
        return np.concatenate(
            (array1, np.asarray(tail)), dtype=array1.dtype, casting="same_kind"
        )
    if isinstance(array1, tuple):
        return array1 + tuple(tail)  # type: ignore[return-value]
    joined = clone(array1)
    if not hasattr(joined, "extend"):
        raise TypeError(f"Cannot extend an array of type {type(array1).__name__}")
    joined.extend(tail)  # type: ignore[union-attr]
    return joined


def _is_array_like(value: tp.Any) -> bool:
    if isinstance(value, str):
        return False
    return isinstance(value, (Sequence, np.ndarray, pyarray.array))

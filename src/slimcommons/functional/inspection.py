"""Length and type checks that treat ``None`` as an empty array."""

import typing as tp

import numpy as np

__all__ = [
    "get_length",
    "is_empty",
    "is_not_empty",
    "is_same_length",
    "is_same_type",
]


def get_length(array: tp.Optional[tp.Sized]) -> int:
    """Return ``len(array)``, or 0 for ``None``.

    Text is not an array: ``str`` and ``bytes`` are rejected, while a mutable
    ``bytearray`` is accepted.

    Raises:
        TypeError: If ``array`` has no length or is a ``str`` or ``bytes``.
    """
    if array is None:
        return 0
    if isinstance(array, (str, bytes)):
        raise TypeError(f"Expected an array, got {type(array).__name__}")
    return len(array)


def is_empty(array: tp.Optional[tp.Sized]) -> bool:
    return get_length(array) == 0


def is_not_empty(array: tp.Optional[tp.Sized]) -> bool:
    return get_length(array) != 0


def is_same_length(
    array1: tp.Optional[tp.Sized], array2: tp.Optional[tp.Sized]
) -> bool:
    """Check whether two arrays have the same length, ``None`` counting as 0."""
    return get_length(array1) == get_length(array2)


def is_same_type(array1: tp.Any, array2: tp.Any) -> bool:
    """Check whether two arrays are of the same kind.

    Plain containers compare by class. numpy arrays must also agree on ``dtype``
    and number of dimensions, so an ``int64`` vector and a ``float64`` vector, or
    a vector and a matrix, are different types.

    Raises:
        ValueError: If either array is ``None``.
    """
    if array1 is None or array2 is None:
        raise ValueError("The array must not be None")
    if type(array1) is not type(array2):
        return False
    if isinstance(array1, np.ndarray):
        return array1.dtype == array2.dtype and array1.ndim == array2.ndim
    return True

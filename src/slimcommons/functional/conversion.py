"""Conversion between sequences of Python objects and packed numpy arrays.

``to_primitive`` packs a sequence of Python scalars (possibly holding ``None``)
into a typed ``numpy.ndarray``; ``to_object`` unpacks an ndarray back into a list
of plain Python scalars. Both pass ``None`` straight through.

Examples:
    >>> import numpy as np
    >>> from slimcommons.functional.conversion import to_primitive, to_object
    >>> to_primitive([1, None, 3], value_for_none=0, dtype="int64")
    array([1, 0, 3])
    >>> to_object(np.array([1.5, 2.5]))
    [1.5, 2.5]
"""

import typing as tp

import numpy as np
import numpy.typing as npt

__all__ = ["to_primitive", "to_object"]

_UNSET: tp.Any = object()


def to_primitive(
    array: tp.Optional[tp.Sequence[tp.Any]],
    value_for_none: tp.Any = _UNSET,
    dtype: npt.DTypeLike = None,
) -> tp.Optional[np.ndarray]:
    """Pack a sequence of Python scalars into a numpy array.

    Args:
        array: The values to pack, may be ``None``.
        value_for_none: Substitute for ``None`` elements. When omitted a ``None``
            element is an error.
        dtype: Target dtype. Inferred by numpy when omitted; an empty input
            defaults to ``float64``.

    Returns:
        A new ndarray, or ``None`` for a ``None`` input.

    Raises:
        TypeError: If an element is ``None`` and no ``value_for_none`` is given.
    """
    if array is None:
        return None
    if len(array) == 0:
        return np.empty(0, dtype=dtype if dtype is not None else np.float64)

    values = list(array)
    for i, value in enumerate(values):
        if value is None:
            if value_for_none is _UNSET:
                raise TypeError(f"Element at index {i} is None and has no substitute")
            values[i] = value_for_none
    return np.asarray(values, dtype=dtype)


def to_object(array: tp.Optional[tp.Any]) -> tp.Optional[tp.List[tp.Any]]:
    """Unpack an array into a list of plain Python scalars.

    numpy scalars become ``int``, ``float``, ``bool`` and so on; the result is a
    new list even when the input already is one.

    Returns:
        A new list, or ``None`` for a ``None`` input.
    """
    if array is None:
        return None
    if isinstance(array, np.ndarray):
        return array.tolist()
    return [value.item() if isinstance(value, np.generic) else value for value in array]

"""Null-safe helpers for arrays and sequences."""

from slimcommons.core.exceptions import InvalidRangeError
from slimcommons.functional import (
    INDEX_NOT_FOUND,
    add_all,
    clone,
    contains,
    get_length,
    index_of,
    is_empty,
    is_not_empty,
    is_same_length,
    is_same_type,
    last_index_of,
    reverse,
    shift,
    shift_range,
    swap,
    to_object,
    to_primitive,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidRangeError",
    "swap",
    "shift",
    "shift_range",
    "reverse",
    "INDEX_NOT_FOUND",
    "index_of",
    "last_index_of",
    "contains",
    "get_length",
    "is_empty",
    "is_not_empty",
    "is_same_length",
    "is_same_type",
    "to_primitive",
    "to_object",
    "clone",
    "add_all",
]

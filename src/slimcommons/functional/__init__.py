"""Array helpers for slimcommons.

Each helper is a plain function over any mutable, indexable sequence (lists,
bytearrays, ``array.array`` and numpy arrays). They keep no state, accept
``None`` wherever an array is expected, and never change an array's length.
"""

from slimcommons.functional.combine import add_all, clone
from slimcommons.functional.conversion import to_object, to_primitive
from slimcommons.functional.inspection import (
    get_length,
    is_empty,
    is_not_empty,
    is_same_length,
    is_same_type,
)
from slimcommons.functional.ordering import reverse
from slimcommons.functional.rotation import shift, shift_range, swap
from slimcommons.functional.search import (
    INDEX_NOT_FOUND,
    contains,
    index_of,
    last_index_of,
)

__all__ = [
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

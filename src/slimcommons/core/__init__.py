"""Settings, exceptions and shared types."""

from slimcommons.core.config import Settings
from slimcommons.core.exceptions import InvalidRangeError
from slimcommons.core.types import MutableArray, IndexRange, SwapSpan

__all__ = [
    "Settings",
    "InvalidRangeError",
    "MutableArray",
    "IndexRange",
    "SwapSpan",
]

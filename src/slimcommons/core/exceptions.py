"""Exceptions raised by slimcommons."""

__all__ = ["InvalidRangeError"]


class InvalidRangeError(ValueError):
    """Raised in strict mode when an index range falls outside the array.

    Outside strict mode the same requests are clamped or ignored silently.
    """

"""Reusable type definitions for slimcommons.

This module provides the structural type accepted by the in-place helpers and
the constrained models used to check index ranges in strict mode.

Type Aliases:
    Index: A non-negative integer position or count.
    MutableArray: Any sized sequence supporting integer get/set item.

Strict-mode checks build an ``IndexRange`` or ``SwapSpan`` and translate the
pydantic ``ValidationError`` into ``InvalidRangeError``.
"""

import typing as tp
from typing import Annotated

import annotated_types as at
from pydantic import BaseModel, ValidationError, model_validator

from slimcommons.core.exceptions import InvalidRangeError

__all__ = [
    "Index",
    "MutableArray",
    "IndexRange",
    "SwapSpan",
    "validate_index_range",
    "validate_swap_span",
]

# A position or element count, never negative
Index = Annotated[int, at.Ge(0)]


@tp.runtime_checkable
class MutableArray(tp.Protocol):
    """Sized sequence whose elements can be read and replaced by position."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> tp.Any: ...

    def __setitem__(self, index: int, value: tp.Any) -> None: ...


class IndexRange(BaseModel):
    """Half-open range ``[start, end)`` over an array of ``length`` elements."""

    start: Index
    end: Index
    length: Index

    @model_validator(mode="after")
    def check_bounds(self) -> "IndexRange":
        if self.start > self.end:
            raise ValueError(
                f"Range start {self.start} is past range end {self.end}"
            )
        if self.end > self.length:
            raise ValueError(
                f"Range end {self.end} exceeds array length {self.length}"
            )
        return self


class SwapSpan(BaseModel):
    """Two runs of ``count`` elements at ``offset1`` and ``offset2``."""

    offset1: Index
    offset2: Index
    count: Index
    length: Index

    @model_validator(mode="after")
    def check_bounds(self) -> "SwapSpan":
        for offset in (self.offset1, self.offset2):
            if offset >= self.length:
                raise ValueError(
                    f"Offset {offset} is outside an array of length {self.length}"
                )
            if offset + self.count > self.length:
                raise ValueError(
                    f"Run of {self.count} elements at offset {offset} "
                    f"overruns an array of length {self.length}"
                )
        return self


def _first_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


def validate_index_range(start: int, end: int, length: int) -> IndexRange:
    """Check that ``0 <= start <= end <= length``.

    Raises:
        InvalidRangeError: If the range does not fit the array.
    """
    try:
        return IndexRange(start=int(start), end=int(end), length=int(length))
    except ValidationError as exc:
        raise InvalidRangeError(_first_message(exc)) from exc


def validate_swap_span(
    offset1: int, offset2: int, count: int, length: int
) -> SwapSpan:
    """Check that both runs of ``count`` elements lie inside the array.

    Raises:
        InvalidRangeError: If either run starts or ends outside the array.
    """
    try:
        return SwapSpan(
            offset1=int(offset1),
            offset2=int(offset2),
            count=int(count),
            length=int(length),
        )
    except ValidationError as exc:
        raise InvalidRangeError(_first_message(exc)) from exc

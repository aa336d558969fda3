"""Argument and state checks shared by every module of the toolkit."""

from typing import Any, Optional, TypeVar

from .errors import (
    IllegalStateError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NullReferenceError,
    UnsupportedOperationError,
)

T = TypeVar("T")


def check_argument(expression: bool, message: Optional[str] = None) -> None:
    """Raise InvalidArgumentError when expression is false"""
    if not expression:
        raise InvalidArgumentError(message) if message else InvalidArgumentError()


def check_state(expression: bool, message: Optional[str] = None) -> None:
    """Raise IllegalStateError when expression is false"""
    if not expression:
        raise IllegalStateError(message) if message else IllegalStateError()


def check_not_null(reference: Optional[T], name: Optional[str] = None) -> T:
    """Return reference, or raise NullReferenceError if it is None"""
    if reference is None:
        raise NullReferenceError(f"{name} must not be None" if name else None)
    return reference


def check_element_index(index: int, size: int, desc: str = "index") -> int:
    """Validate an index that must address an existing element: 0 <= index < size"""
    if index < 0 or index >= size:
        raise IndexOutOfBoundsError(_bad_element_index(index, size, desc))
    return index


def check_position_index(index: int, size: int, desc: str = "index") -> int:
    """Validate a position between elements: 0 <= index <= size"""
    if index < 0 or index > size:
        raise IndexOutOfBoundsError(_bad_position_index(index, size, desc))
    return index


def check_position_indexes(start: int, end: int, size: int) -> None:
    """Validate a half-open range [start, end) within a sequence of the given size"""
    if start < 0 or end < start or end > size:
        if start < 0 or start > size:
            message = _bad_position_index(start, size, "start index")
        elif end < 0 or end > size:
            message = _bad_position_index(end, size, "end index")
        else:
            message = f"end index ({end}) must not be less than start index ({start})"
        raise IndexOutOfBoundsError(message)


def check_slice(index: slice, size: int) -> range:
    """
    Positions selected by a slice over a sequence of the given size. Negative
    bounds are rejected like negative indexes; bounds past the end are clamped.
    """
    for bound, desc in ((index.start, "slice start"), (index.stop, "slice stop")):
        if bound is not None and bound < 0:
            raise IndexOutOfBoundsError(f"{desc} ({bound}) must not be negative")
    return range(*index.indices(size))


def reject_slice(index) -> None:
    """Views write element by element; slice assignment and deletion go through sub_list()"""
    if isinstance(index, slice):
        raise UnsupportedOperationError("slice assignment and deletion are not supported; use sub_list()")


def check_index_nonnegative(value: int) -> None:
    if value < 0:
        raise IndexOutOfBoundsError(f"value ({value}) must not be negative")


def check_nonnegative(value: int, name: str) -> int:
    if value < 0:
        raise InvalidArgumentError(f"{name} cannot be negative but was: {value}")
    return value


def check_remove(can_remove: bool) -> None:
    check_state(can_remove, "no calls to next() since the last call to remove()")


def _bad_element_index(index: int, size: int, desc: str) -> str:
    if index < 0:
        return f"{desc} ({index}) must not be negative"
    if size < 0:
        raise InvalidArgumentError(f"negative size: {size}")
    return f"{desc} ({index}) must be less than size ({size})"


def _bad_position_index(index: int, size: int, desc: str) -> str:
    if index < 0:
        return f"{desc} ({index}) must not be negative"
    if size < 0:
        raise InvalidArgumentError(f"negative size: {size}")
    return f"{desc} ({index}) must not be greater than size ({size})"


def describe(value: Any) -> str:
    """Short type-qualified rendering used in error messages"""
    return f"{type(value).__name__}({value!r})"

"""
Fixed-size sequence helpers.

Each concat function builds a new sequence and leaves its inputs untouched.
A tuple input gives a tuple back; any other sequence gives a list.
"""

from typing import Any, List, Optional, Sequence

from .preconditions import check_nonnegative, check_not_null


def new_array(length: int) -> List[Any]:
    """List of `length` None slots"""
    check_nonnegative(length, "length")
    return [None] * length


def concat(first: Sequence[Any], second: Sequence[Any]) -> Sequence[Any]:
    """Elements of first followed by the elements of second"""
    check_not_null(first, "first")
    check_not_null(second, "second")
    return _like(first, [*first, *second])


def prepend(element: Any, array: Sequence[Any]) -> Sequence[Any]:
    """element (None allowed) followed by the elements of array"""
    check_not_null(array, "array")
    return _like(array, [element, *array])


def append(array: Sequence[Any], element: Any) -> Sequence[Any]:
    """The elements of array followed by element (None allowed)"""
    check_not_null(array, "array")
    return _like(array, [*array, element])


def first_non_null(*items: Any) -> Optional[Any]:
    """First argument that is not None, or None when there is none"""
    for item in items:
        if item is not None:
            return item
    return None


def _like(template: Sequence[Any], items: List[Any]) -> Sequence[Any]:
    if isinstance(template, tuple):
        return tuple(items)
    return items

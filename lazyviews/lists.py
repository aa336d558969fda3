"""List factories and the list views: reverse(), partition(), sub_list()."""

from collections import deque
from collections.abc import Collection
from typing import Any, Deque, Iterable, List

from . import iterables
from .partition import Partition, RandomAccessPartition, partition
from .preconditions import check_not_null
from .reverse_list import RandomAccessReverseList, ReverseList, ReverseListCursor, reverse
from .sublists import RandomAccessSubList, SubList, sub_list

__all__ = [
    "new_list",
    "new_list_from",
    "new_linked_list",
    "partition",
    "reverse",
    "sub_list",
    "Partition",
    "RandomAccessPartition",
    "ReverseList",
    "RandomAccessReverseList",
    "ReverseListCursor",
    "SubList",
    "RandomAccessSubList",
]


def new_list(*elements: Any) -> List[Any]:
    return list(elements)


def new_list_from(elements: Iterable[Any]) -> List[Any]:
    """Mutable list holding the elements of any iterable or cursor"""
    check_not_null(elements, "elements")
    if isinstance(elements, Collection):
        return list(elements)
    result: List[Any] = []
    iterables.add_all(result, elements)
    return result


def new_linked_list(elements: Iterable[Any] = ()) -> Deque[Any]:
    """Mutable sequence with O(1) insertion at both ends but no O(1) positional access"""
    result: Deque[Any] = deque()
    iterables.add_all(result, check_not_null(elements, "elements"))
    return result

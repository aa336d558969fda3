"""Live sub-range views over mutable sequences."""

from collections.abc import MutableSequence, Sequence
from typing import Any, List

from .iterables import elements_equal, to_string
from .more_collections import RandomAccess, is_random_access
from .preconditions import (
    check_element_index,
    check_position_index,
    check_position_indexes,
    check_slice,
    reject_slice,
)


class SubList(MutableSequence):
    """
    Window [start, end) of a backing sequence.

    Reads and writes go straight to the backing sequence. Inserting or
    deleting through the window moves its end; changing the backing
    sequence's length by other means leaves the window undefined.
    """

    def __init__(self, backing: Sequence, start: int, end: int):
        check_position_indexes(start, end, len(backing))
        self._backing = backing
        self._offset = start
        self._size = end - start

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in check_slice(index, self._size)]
        check_element_index(index, self._size)
        return self._backing[self._offset + index]

    def __setitem__(self, index: int, value: Any) -> None:
        reject_slice(index)
        check_element_index(index, self._size)
        self._backing[self._offset + index] = value

    def __delitem__(self, index: int) -> None:
        reject_slice(index)
        check_element_index(index, self._size)
        del self._backing[self._offset + index]
        self._size -= 1

    def insert(self, index: int, value: Any) -> None:
        check_position_index(index, self._size)
        self._backing.insert(self._offset + index, value)
        self._size += 1

    def pop(self, index: int = None) -> Any:
        if index is None:
            index = self._size - 1
        value = self[index]
        del self[index]
        return value

    def clear(self) -> None:
        for n in range(self._size - 1, -1, -1):
            del self._backing[self._offset + n]
        self._size = 0

    def sub_list(self, start: int, end: int) -> "SubList":
        return sub_list(self, start, end)

    def to_list(self) -> List[Any]:
        return list(self)

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return elements_equal(self, other)

    def __repr__(self) -> str:
        return to_string(self)


class RandomAccessSubList(SubList, RandomAccess):
    pass


def sub_list(backing: Sequence, start: int, end: int) -> SubList:
    """Live view of backing[start:end]; keeps the backing's RandomAccess marker"""
    if is_random_access(backing):
        return RandomAccessSubList(backing, start, end)
    return SubList(backing, start, end)

"""
Live reversed view of a mutable sequence.

View index i addresses underlying index len - 1 - i, and view insertion
position p addresses underlying position len - p. Both are recomputed on
every call because the underlying length may have changed in between.
"""

import logging
from collections.abc import MutableSequence, Sequence
from typing import Any, List

from .cursors import CursorBase, ListCursor
from .errors import NoSuchElementError
from .iterables import elements_equal, to_string
from .more_collections import RandomAccess, is_random_access
from .preconditions import (
    check_element_index,
    check_not_null,
    check_position_index,
    check_position_indexes,
    check_remove,
    check_slice,
    check_state,
    reject_slice,
)
from .sublists import sub_list

logger = logging.getLogger(__name__)


class ReverseList(MutableSequence):
    """Reversed, read-write view of forward_list; holds no elements of its own"""

    def __init__(self, forward_list: MutableSequence):
        self._forward = check_not_null(forward_list, "forward_list")

    @property
    def forward_list(self) -> MutableSequence:
        return self._forward

    def _reverse_index(self, index: int) -> int:
        size = len(self)
        check_element_index(index, size)
        return size - 1 - index

    def _reverse_position(self, index: int) -> int:
        size = len(self)
        check_position_index(index, size)
        return size - index

    def __len__(self) -> int:
        return len(self._forward)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in check_slice(index, len(self))]
        return self._forward[self._reverse_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        reject_slice(index)
        self._forward[self._reverse_index(index)] = value

    def __delitem__(self, index: int) -> None:
        reject_slice(index)
        del self._forward[self._reverse_index(index)]

    def insert(self, index: int, value: Any) -> None:
        self._forward.insert(self._reverse_position(index), value)

    def pop(self, index: int = None) -> Any:
        if index is None:
            index = len(self) - 1
        value = self[index]
        del self[index]
        return value

    def clear(self) -> None:
        self._forward.clear()

    def remove_range(self, start: int, end: int) -> None:
        self.sub_list(start, end).clear()

    def sub_list(self, start: int, end: int) -> MutableSequence:
        """Live view of view positions [start, end), itself a reversed view"""
        check_position_indexes(start, end, len(self))
        return reverse(sub_list(self._forward, self._reverse_position(end), self._reverse_position(start)))

    def list_cursor(self, index: int = 0) -> "ReverseListCursor":
        start = self._reverse_position(index)
        return ReverseListCursor(self, ListCursor(self._forward, start))

    def cursor(self) -> "ReverseListCursor":
        return self.list_cursor()

    def __iter__(self):
        return self.list_cursor()

    def __reversed__(self):
        return iter(self._forward)

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


class RandomAccessReverseList(ReverseList, RandomAccess):
    pass


class ReverseListCursor(CursorBase):
    """
    List cursor of a ReverseList, driving a ListCursor of the forward list
    backwards: next() is the forward previous() and vice versa.
    """

    def __init__(self, owner: ReverseList, forward_cursor: ListCursor):
        self._owner = owner
        self._forward = forward_cursor
        self._can_remove_or_set = False

    def has_next(self) -> bool:
        return self._forward.has_previous()

    def has_previous(self) -> bool:
        return self._forward.has_next()

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        self._can_remove_or_set = True
        return self._forward.previous()

    def previous(self) -> Any:
        if not self.has_previous():
            raise NoSuchElementError()
        self._can_remove_or_set = True
        return self._forward.next()

    def next_index(self) -> int:
        return self._owner._reverse_position(self._forward.next_index())

    def previous_index(self) -> int:
        return self.next_index() - 1

    def remove(self) -> None:
        check_remove(self._can_remove_or_set)
        self._forward.remove()
        self._can_remove_or_set = False

    def set(self, element: Any) -> None:
        check_state(self._can_remove_or_set, "set() is only valid right after next() or previous()")
        self._forward.set(element)

    def add(self, element: Any) -> None:
        # step back over the new element so the next view step is unaffected
        self._forward.add(element)
        self._forward.previous()
        self._can_remove_or_set = False


def reverse(sequence: MutableSequence) -> MutableSequence:
    """
    Live reversed view of sequence. Reversing a reversed view returns the
    original sequence itself.
    """
    if isinstance(sequence, ReverseList):
        return sequence.forward_list
    if is_random_access(sequence):
        logger.debug(f"Reversing random-access {type(sequence).__name__}")
        return RandomAccessReverseList(sequence)
    return ReverseList(sequence)

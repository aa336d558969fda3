"""
Cursors: one-shot, forward traversal handles.

A cursor answers has_next(), hands out elements with next() and may support
remove() of the element it handed out last. Every cursor is also a regular
Python iterator, so it can be fed to for-loops, list() and itertools.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, MutableMapping, MutableSequence, MutableSet
from typing import Any, Iterable, List

from .errors import NoSuchElementError, UnsupportedOperationError
from .preconditions import check_not_null, check_position_index, check_remove, check_state

_MISSING = object()


class CursorBase(ABC):
    """Python iterator protocol on top of has_next()/next()"""

    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self) -> Any:
        pass

    def remove(self) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support remove()")

    def __iter__(self) -> "CursorBase":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class IteratorCursor(CursorBase):
    """Cursor over a plain Python iterator, reading one element ahead"""

    def __init__(self, iterator: Iterator):
        self._iterator = check_not_null(iterator, "iterator")
        self._peeked = _MISSING

    def has_next(self) -> bool:
        if self._peeked is _MISSING:
            try:
                self._peeked = next(self._iterator)
            except StopIteration:
                return False
        return True

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        element, self._peeked = self._peeked, _MISSING
        return element


class ListCursor(CursorBase):
    """
    Bidirectional cursor over a MutableSequence.

    The cursor sits between elements: next() returns the element after it,
    previous() the one before it. remove() and set() act on the element
    returned by the most recent next()/previous() and are rejected once
    add() or remove() has been called since.
    """

    def __init__(self, sequence: MutableSequence, index: int = 0):
        self._sequence = check_not_null(sequence, "sequence")
        self._cursor = check_position_index(index, len(sequence))
        self._last = -1

    def has_next(self) -> bool:
        return self._cursor < len(self._sequence)

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        self._last = self._cursor
        self._cursor += 1
        return self._sequence[self._last]

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous(self) -> Any:
        if not self.has_previous():
            raise NoSuchElementError()
        self._cursor -= 1
        self._last = self._cursor
        return self._sequence[self._last]

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def remove(self) -> None:
        check_remove(self._last >= 0)
        del self._sequence[self._last]
        if self._last < self._cursor:
            self._cursor -= 1
        self._last = -1

    def set(self, element: Any) -> None:
        check_state(self._last >= 0, "set() requires a preceding next() or previous()")
        self._sequence[self._last] = element

    def add(self, element: Any) -> None:
        self._sequence.insert(self._cursor, element)
        self._cursor += 1
        self._last = -1


class SnapshotCursor(CursorBase):
    """
    Cursor over a MutableSet, or the keys of a MutableMapping.

    Those collections cannot change size while a native iterator is open,
    so the cursor walks a copy of the members and removes from the live
    collection.
    """

    def __init__(self, collection):
        self._collection = check_not_null(collection, "collection")
        self._members: List[Any] = list(collection)
        self._position = 0
        self._can_remove = False

    def has_next(self) -> bool:
        return self._position < len(self._members)

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        element = self._members[self._position]
        self._position += 1
        self._can_remove = True
        return element

    def remove(self) -> None:
        check_remove(self._can_remove)
        element = self._members[self._position - 1]
        if isinstance(self._collection, MutableMapping):
            del self._collection[element]
        else:
            self._collection.discard(element)
        self._can_remove = False


def cursor_of(iterable: Iterable) -> CursorBase:
    """A fresh cursor over iterable, removal-capable where the collection allows it"""
    check_not_null(iterable, "iterable")
    factory = getattr(iterable, "cursor", None)
    if callable(factory):
        return factory()
    if isinstance(iterable, MutableSequence):
        return ListCursor(iterable)
    if isinstance(iterable, (MutableSet, MutableMapping)):
        return SnapshotCursor(iterable)
    return IteratorCursor(iter(iterable))


def as_cursor(source: Any) -> CursorBase:
    """
    Normalize source for the cursor functions: cursors pass through,
    iterators are wrapped as they are, other iterables get a fresh cursor.
    """
    if isinstance(source, CursorBase):
        return source
    if isinstance(source, Iterator):
        return IteratorCursor(source)
    return cursor_of(source)

"""
Functions over cursors.

Each function accepts a cursor or any Python iterator (wrapped on the fly, see
cursors.as_cursor). Functions that return cursors are lazy: they only pull
from their source when the caller asks for the next element. Unless noted,
functions that scan leave the source exhausted.
"""

from enum import Enum
from typing import Any, Callable, Collection, List, Optional

from .cursors import CursorBase, as_cursor
from .errors import IndexOutOfBoundsError, InvalidArgumentError, NoSuchElementError, NotFoundError
from .more_collections import add_to_collection, render
from .predicates import equal_to, in_, instance_of, not_
from .preconditions import check_argument, check_index_nonnegative, check_not_null

_MISSING = object()

Pred = Callable[[Any], bool]


class _State(Enum):
    SEEKING = "seeking"   # next element not computed yet
    READY = "ready"       # next element computed and held
    DONE = "done"         # source exhausted


class FilteringCursor(CursorBase):
    """
    Lazily yields the source elements that satisfy predicate.

    has_next() moves SEEKING -> READY by pulling from the source until an
    element matches, or SEEKING -> DONE when the source runs dry. next() hands
    out the held element and returns to SEEKING. Removal is not supported.
    """

    def __init__(self, source: CursorBase, predicate: Pred):
        self._source = source
        self._predicate = predicate
        self._state = _State.SEEKING
        self._next = None

    def has_next(self) -> bool:
        if self._state is _State.SEEKING:
            self._seek()
        return self._state is _State.READY

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError()
        element, self._next = self._next, None
        self._state = _State.SEEKING
        return element

    def peek(self) -> Any:
        """The element next() would return, without consuming it"""
        if not self.has_next():
            raise NoSuchElementError()
        return self._next

    def _seek(self) -> None:
        while self._source.has_next():
            element = self._source.next()
            if self._predicate(element):
                self._next = element
                self._state = _State.READY
                return
        self._state = _State.DONE


class PartitioningCursor(CursorBase):
    """
    Yields consecutive lists of `size` source elements.

    Each next() pulls one window eagerly. The last window is padded with None
    up to `size` when pad is set, otherwise it is cut short.
    """

    def __init__(self, source: CursorBase, size: int, pad: bool):
        self._source = source
        self._size = size
        self._pad = pad

    def has_next(self) -> bool:
        return self._source.has_next()

    def next(self) -> List[Any]:
        if not self.has_next():
            raise NoSuchElementError()
        window = []
        while len(window) < self._size and self._source.has_next():
            window.append(self._source.next())
        if self._pad and len(window) < self._size:
            window.extend([None] * (self._size - len(window)))
        return window


def size(cursor) -> int:
    """Number of remaining elements"""
    cursor = as_cursor(cursor)
    count = 0
    while cursor.has_next():
        cursor.next()
        count += 1
    return count


def contains(cursor, element: Any) -> bool:
    return any_match(cursor, equal_to(element))


def remove_all(cursor, elements_to_remove: Collection[Any]) -> bool:
    """Remove every element that belongs to elements_to_remove"""
    return remove_if(cursor, in_(elements_to_remove))


def remove_if(cursor, predicate: Pred) -> bool:
    """
    Remove, through the cursor, every element that satisfies predicate.
    Returns True if anything was removed.
    """
    check_not_null(predicate, "predicate")
    cursor = as_cursor(cursor)
    modified = False
    while cursor.has_next():
        if predicate(cursor.next()):
            cursor.remove()
            modified = True
    return modified


def retain_all(cursor, elements_to_retain: Collection[Any]) -> bool:
    """Remove every element that does not belong to elements_to_retain"""
    return remove_if(cursor, not_(in_(elements_to_retain)))


def elements_equal(cursor1, cursor2) -> bool:
    """True if both cursors yield the same number of pairwise-equal elements"""
    cursor1 = as_cursor(cursor1)
    cursor2 = as_cursor(cursor2)
    while cursor1.has_next():
        if not cursor2.has_next():
            return False
        if not cursor1.next() == cursor2.next():
            return False
    return not cursor2.has_next()


def to_string(cursor) -> str:
    """Text form `[e1, e2, ..., en]`"""
    return render(as_cursor(cursor))


def get_only_element(cursor, default: Any = _MISSING) -> Any:
    """
    The single remaining element. An empty cursor raises NoSuchElementError
    unless a default is given; more than one element raises InvalidArgumentError.
    """
    cursor = as_cursor(cursor)
    if default is not _MISSING and not cursor.has_next():
        return default
    first = cursor.next()
    if not cursor.has_next():
        return first
    raise InvalidArgumentError(f"expected one element but found multiple: {first!r}, {cursor.next()!r}, ...")


def add_all(collection, cursor) -> bool:
    """Add every remaining element to collection; True if it changed"""
    check_not_null(collection, "collection")
    cursor = as_cursor(cursor)
    modified = False
    while cursor.has_next():
        modified |= add_to_collection(collection, cursor.next())
    return modified


def partition(cursor, size: int) -> PartitioningCursor:
    """
    Consecutive lists of `size` elements, the last one possibly shorter.
    [a, b, c, d, e] with size 3 gives [[a, b, c], [d, e]].
    """
    return _partition(cursor, size, False)


def padded_partition(cursor, size: int) -> PartitioningCursor:
    """
    Consecutive lists of exactly `size` elements, the last one padded with None.
    [a, b, c, d, e] with size 3 gives [[a, b, c], [d, e, None]].
    """
    return _partition(cursor, size, True)


def _partition(cursor, size: int, pad: bool) -> PartitioningCursor:
    check_not_null(cursor, "cursor")
    check_argument(size > 0, f"partition size must be positive but was: {size}")
    return PartitioningCursor(as_cursor(cursor), size, pad)


def filter(cursor, predicate: Pred) -> FilteringCursor:
    """Lazy cursor over the elements that satisfy predicate"""
    check_not_null(cursor, "cursor")
    check_not_null(predicate, "predicate")
    return FilteringCursor(as_cursor(cursor), predicate)


def filter_instances(cursor, kind) -> FilteringCursor:
    """Lazy cursor over the elements that are instances of kind"""
    return filter(cursor, instance_of(kind))


def any_match(cursor, predicate: Pred) -> bool:
    return index_of(cursor, predicate) != -1


def all_match(cursor, predicate: Pred) -> bool:
    """True if every element satisfies predicate; True for an empty cursor"""
    check_not_null(predicate, "predicate")
    cursor = as_cursor(cursor)
    while cursor.has_next():
        if not predicate(cursor.next()):
            return False
    return True


def find(cursor, predicate: Pred, default: Any = _MISSING) -> Any:
    """
    First element that satisfies predicate. Without a match, return default
    when one is given, else raise NotFoundError.
    """
    matches = filter(cursor, predicate)
    if matches.has_next():
        return matches.next()
    if default is _MISSING:
        raise NotFoundError("no element satisfies the predicate")
    return default


def try_find(cursor, predicate: Pred) -> Optional[Any]:
    """First element that satisfies predicate, or None"""
    return find(cursor, predicate, None)


def index_of(cursor, predicate: Pred) -> int:
    """
    Position of the first element that satisfies predicate, or -1. On a
    match the cursor is left just past the matching element.
    """
    check_not_null(predicate, "predicate")
    cursor = as_cursor(cursor)
    i = 0
    while cursor.has_next():
        if predicate(cursor.next()):
            return i
        i += 1
    return -1


def advance(cursor, number_to_advance: int) -> int:
    """
    Call next() number_to_advance times or until the cursor is exhausted,
    whichever comes first. Returns the number of steps taken.
    """
    check_not_null(cursor, "cursor")
    check_argument(number_to_advance >= 0, "number_to_advance must be nonnegative")
    cursor = as_cursor(cursor)
    i = 0
    while i < number_to_advance and cursor.has_next():
        cursor.next()
        i += 1
    return i


def get(cursor, position: int, default: Any = _MISSING) -> Any:
    """
    Element `position` steps ahead. When the cursor runs out first, return
    default if given, else raise IndexOutOfBoundsError.
    """
    check_index_nonnegative(position)
    cursor = as_cursor(cursor)
    skipped = advance(cursor, position)
    if cursor.has_next():
        return cursor.next()
    if default is not _MISSING:
        return default
    raise IndexOutOfBoundsError(
        f"position ({position}) must be less than the number of elements that remained ({skipped})"
    )


def get_next(cursor, default: Any = None) -> Any:
    cursor = as_cursor(cursor)
    return cursor.next() if cursor.has_next() else default


def get_last(cursor, default: Any = _MISSING) -> Any:
    """Last element; an empty cursor returns default or raises NoSuchElementError"""
    cursor = as_cursor(cursor)
    if not cursor.has_next():
        if default is _MISSING:
            raise NoSuchElementError()
        return default
    current = cursor.next()
    while cursor.has_next():
        current = cursor.next()
    return current


def clear(cursor) -> None:
    """Remove every remaining element through the cursor"""
    check_not_null(cursor, "cursor")
    cursor = as_cursor(cursor)
    while cursor.has_next():
        cursor.next()
        cursor.remove()

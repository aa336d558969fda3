"""
Functions over restartable iterables.

These mirror the cursor functions in iterators.py. Where the argument is a
known collection, the native operation (len, in, discard, positional
access) is used instead of a full traversal.
"""

import logging
from collections.abc import Collection, Hashable, MutableMapping, MutableSequence, MutableSet, Sequence, Sized
from typing import Any, Callable, Iterable, List, Optional

from . import iterators
from .cursors import cursor_of
from .errors import NoSuchElementError
from .more_collections import is_random_access, render, safe_contains
from .predicates import in_, instance_of, not_
from .preconditions import check_argument, check_element_index, check_index_nonnegative, check_not_null

logger = logging.getLogger(__name__)

_MISSING = object()

_TEXT_TYPES = (str, bytes, bytearray)

Pred = Callable[[Any], bool]


class FilteredIterable:
    """Restartable lazy view of the elements of an iterable that satisfy a predicate"""

    def __init__(self, unfiltered: Iterable[Any], predicate: Pred):
        self._unfiltered = unfiltered
        self._predicate = predicate

    def cursor(self) -> iterators.FilteringCursor:
        return iterators.filter(cursor_of(self._unfiltered), self._predicate)

    def __iter__(self):
        return self.cursor()

    def __repr__(self) -> str:
        return to_string(self)


class PartitionedIterable:
    """Restartable lazy view chunking an iterable; every traversal re-chunks from the start"""

    def __init__(self, iterable: Iterable[Any], size: int, pad: bool):
        self._iterable = iterable
        self._size = size
        self._pad = pad

    def cursor(self) -> iterators.PartitioningCursor:
        if self._pad:
            return iterators.padded_partition(cursor_of(self._iterable), self._size)
        return iterators.partition(cursor_of(self._iterable), self._size)

    def __iter__(self):
        return self.cursor()

    def __repr__(self) -> str:
        return to_string(self)


def size(iterable: Iterable[Any]) -> int:
    if isinstance(iterable, Sized):
        return len(iterable)
    logger.debug(f"{type(iterable).__name__} has no len(); counting by traversal")
    return iterators.size(cursor_of(iterable))


def contains(iterable: Iterable[Any], element: Any) -> bool:
    # `in` on text is a substring test, not element membership
    if isinstance(iterable, Collection) and not isinstance(iterable, _TEXT_TYPES):
        return safe_contains(iterable, element)
    return iterators.contains(cursor_of(iterable), element)


def is_empty(iterable: Iterable[Any]) -> bool:
    """True if iterable has no elements; never mutates it"""
    native = getattr(iterable, "is_empty", None)
    if callable(native):
        return native()
    if isinstance(iterable, Sized):
        return len(iterable) == 0
    return not cursor_of(iterable).has_next()


def remove_all(remove_from: Iterable[Any], elements_to_remove: Collection[Any]) -> bool:
    """Remove from remove_from every element that belongs to elements_to_remove"""
    check_not_null(elements_to_remove, "elements_to_remove")
    native = getattr(remove_from, "remove_all", None)
    if callable(native):
        return native(elements_to_remove)
    if isinstance(remove_from, MutableSet):
        before = len(remove_from)
        for element in elements_to_remove:
            try:
                remove_from.discard(element)
            except TypeError:
                continue
        return len(remove_from) != before
    if isinstance(remove_from, MutableMapping):
        before = len(remove_from)
        for key in elements_to_remove:
            try:
                remove_from.pop(key, None)
            except TypeError:
                continue
        return len(remove_from) != before
    return remove_if(remove_from, in_(elements_to_remove))


def retain_all(remove_from: Iterable[Any], elements_to_retain: Collection[Any]) -> bool:
    """Remove from remove_from every element that does not belong to elements_to_retain"""
    check_not_null(elements_to_retain, "elements_to_retain")
    native = getattr(remove_from, "retain_all", None)
    if callable(native):
        return native(elements_to_retain)
    intersection_update = getattr(remove_from, "intersection_update", None)
    if isinstance(remove_from, MutableSet) and callable(intersection_update):
        before = len(remove_from)
        # unhashable elements can never be members, so they cannot be retained
        intersection_update([e for e in elements_to_retain if isinstance(e, Hashable)])
        return len(remove_from) != before
    if isinstance(remove_from, MutableMapping):
        absent = [key for key in remove_from.keys() if not safe_contains(elements_to_retain, key)]
        for key in absent:
            del remove_from[key]
        return bool(absent)
    return remove_if(remove_from, not_(in_(elements_to_retain)))


def remove_if(remove_from: Iterable[Any], predicate: Pred) -> bool:
    """
    Remove every element that satisfies predicate; True if anything was removed.

    A random-access MutableSequence is compacted in place, one pass plus a
    truncation of the tail, instead of deleting elements one by one.
    """
    check_not_null(predicate, "predicate")
    if isinstance(remove_from, MutableSequence) and is_random_access(remove_from):
        return _remove_if_from_random_access(remove_from, predicate)
    logger.debug(f"Removing from {type(remove_from).__name__} through a cursor")
    return iterators.remove_if(cursor_of(remove_from), predicate)


def _remove_if_from_random_access(sequence: MutableSequence, predicate: Pred) -> bool:
    # Survivors are copied down into [0, to); [to, src) holds values already
    # known to be removable.
    src = 0
    to = 0
    while src < len(sequence):
        element = sequence[src]
        if not predicate(element):
            if src > to:
                try:
                    sequence[to] = element
                except NotImplementedError:
                    logger.debug(
                        f"{type(sequence).__name__} rejected positional overwrite; "
                        f"removing the remaining elements one by one"
                    )
                    _slow_remove_if_for_remaining(sequence, predicate, to, src)
                    return True
            to += 1
        src += 1

    for n in range(len(sequence) - 1, to - 1, -1):
        del sequence[n]
    return src != to


def _slow_remove_if_for_remaining(sequence: MutableSequence, predicate: Pred, to: int, src: int) -> None:
    # Zones at this point (to < src):
    #   [0, to)      kept
    #   [to, src)    to be removed
    #   src          kept
    #   (src, end)   not tested yet
    # Delete back to front so lower indices stay valid.
    for n in range(len(sequence) - 1, src, -1):
        if predicate(sequence[n]):
            del sequence[n]
    for n in range(src - 1, to - 1, -1):
        del sequence[n]


def remove_first_matching(remove_from: Iterable[Any], predicate: Pred) -> Optional[Any]:
    """Remove and return the first element that satisfies predicate, or None"""
    check_not_null(predicate, "predicate")
    cursor = cursor_of(remove_from)
    while cursor.has_next():
        element = cursor.next()
        if predicate(element):
            cursor.remove()
            return element
    return None


def elements_equal(iterable1: Iterable[Any], iterable2: Iterable[Any]) -> bool:
    if isinstance(iterable1, Sized) and isinstance(iterable2, Sized):
        if len(iterable1) != len(iterable2):
            return False
    return iterators.elements_equal(cursor_of(iterable1), cursor_of(iterable2))


def to_string(iterable: Iterable[Any]) -> str:
    return render(cursor_of(iterable))


def get_only_element(iterable: Iterable[Any], default: Any = _MISSING) -> Any:
    if default is _MISSING:
        return iterators.get_only_element(cursor_of(iterable))
    return iterators.get_only_element(cursor_of(iterable), default)


def add_all(add_to, elements_to_add: Iterable[Any]) -> bool:
    """Add every element of elements_to_add to add_to; True if add_to changed"""
    check_not_null(elements_to_add, "elements_to_add")
    native = getattr(add_to, "add_all", None)
    if callable(native) and isinstance(elements_to_add, Collection):
        return native(elements_to_add)
    return iterators.add_all(add_to, cursor_of(elements_to_add))


def any_match(iterable: Iterable[Any], predicate: Pred) -> bool:
    return iterators.any_match(cursor_of(iterable), predicate)


def all_match(iterable: Iterable[Any], predicate: Pred) -> bool:
    return iterators.all_match(cursor_of(iterable), predicate)


def find(iterable: Iterable[Any], predicate: Pred, default: Any = _MISSING) -> Any:
    if default is _MISSING:
        return iterators.find(cursor_of(iterable), predicate)
    return iterators.find(cursor_of(iterable), predicate, default)


def try_find(iterable: Iterable[Any], predicate: Pred) -> Optional[Any]:
    return iterators.try_find(cursor_of(iterable), predicate)


def index_of(iterable: Iterable[Any], predicate: Pred) -> int:
    return iterators.index_of(cursor_of(iterable), predicate)


def get(iterable: Iterable[Any], position: int, default: Any = _MISSING) -> Any:
    """
    Element at position. Past the end, return default if given, else raise
    IndexOutOfBoundsError. Negative positions are always out of bounds.
    """
    check_not_null(iterable, "iterable")
    if isinstance(iterable, Sequence):
        if default is _MISSING:
            return iterable[check_element_index(position, len(iterable))]
        check_index_nonnegative(position)
        return iterable[position] if position < len(iterable) else default
    if default is _MISSING:
        return iterators.get(cursor_of(iterable), position)
    return iterators.get(cursor_of(iterable), position, default)


def get_first(iterable: Iterable[Any], default: Any = None) -> Any:
    return iterators.get_next(cursor_of(iterable), default)


def get_last(iterable: Iterable[Any], default: Any = _MISSING) -> Any:
    """Last element; an empty iterable returns default or raises NoSuchElementError"""
    if isinstance(iterable, Sequence):
        if len(iterable) == 0:
            if default is _MISSING:
                raise NoSuchElementError()
            return default
        return iterable[len(iterable) - 1]
    if default is _MISSING:
        return iterators.get_last(cursor_of(iterable))
    return iterators.get_last(cursor_of(iterable), default)


def partition(iterable: Iterable[Any], size: int) -> PartitionedIterable:
    """Restartable view of consecutive lists of `size` elements, the last possibly shorter"""
    check_not_null(iterable, "iterable")
    check_argument(size > 0, f"partition size must be positive but was: {size}")
    return PartitionedIterable(iterable, size, False)


def padded_partition(iterable: Iterable[Any], size: int) -> PartitionedIterable:
    """Restartable view of consecutive lists of `size` elements, the last padded with None"""
    check_not_null(iterable, "iterable")
    check_argument(size > 0, f"partition size must be positive but was: {size}")
    return PartitionedIterable(iterable, size, True)


def filter(unfiltered: Iterable[Any], predicate: Pred) -> FilteredIterable:
    check_not_null(unfiltered, "unfiltered")
    check_not_null(predicate, "predicate")
    return FilteredIterable(unfiltered, predicate)


def filter_instances(unfiltered: Iterable[Any], kind) -> FilteredIterable:
    check_not_null(kind, "kind")
    return filter(unfiltered, instance_of(kind))


def to_list(iterable: Iterable[Any]) -> List[Any]:
    """Copy of the elements, in traversal order"""
    return list(cursor_of(iterable))

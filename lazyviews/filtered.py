"""
Live filtered view of a collection.

The view stores nothing of its own: every query goes back to the
underlying collection and re-applies the predicate, and every change is
made on the underlying collection. The predicate should agree with
element equality, otherwise `in` and iteration may disagree.
"""

from collections.abc import Collection
from typing import Any, Callable, Iterable, List

from . import iterables, iterators
from .cursors import cursor_of
from .errors import InvalidArgumentError
from .more_collections import add_to_collection, contains_all_impl, safe_contains
from .predicates import and_, in_, not_
from .preconditions import check_not_null, describe

Pred = Callable[[Any], bool]


class FilteredCollection(Collection):
    """Elements of `unfiltered` that satisfy `predicate`, read through on every call"""

    def __init__(self, unfiltered, predicate: Pred):
        self.unfiltered = unfiltered
        self.predicate = predicate

    def create_combined(self, new_predicate: Pred) -> "FilteredCollection":
        """Filter further, still over the same underlying collection"""
        return FilteredCollection(self.unfiltered, and_(self.predicate, new_predicate))

    def add(self, element: Any) -> bool:
        self._check_accepts(element)
        return add_to_collection(self.unfiltered, element)

    def add_all(self, elements: Iterable[Any]) -> bool:
        """Add every element; nothing is added if any of them is rejected"""
        elements = list(elements)
        for element in elements:
            self._check_accepts(element)
        return iterables.add_all(self.unfiltered, elements)

    def clear(self) -> None:
        """Remove the matching elements from the underlying collection"""
        iterables.remove_if(self.unfiltered, self.predicate)

    def contains(self, element: Any) -> bool:
        if safe_contains(self.unfiltered, element):
            return bool(self.predicate(element))
        return False

    __contains__ = contains

    def contains_all(self, elements: Iterable[Any]) -> bool:
        return contains_all_impl(self, elements)

    def is_empty(self) -> bool:
        return not iterables.any_match(self.unfiltered, self.predicate)

    def cursor(self) -> iterators.FilteringCursor:
        return iterators.filter(cursor_of(self.unfiltered), self.predicate)

    def __iter__(self):
        return self.cursor()

    def remove(self, element: Any) -> bool:
        """Remove one occurrence of element if it is visible through the view"""
        if not self.contains(element):
            return False
        self.unfiltered.remove(element)
        return True

    def remove_all(self, elements: Collection) -> bool:
        return iterables.remove_if(self.unfiltered, and_(self.predicate, in_(elements)))

    def retain_all(self, elements: Collection) -> bool:
        return iterables.remove_if(self.unfiltered, and_(self.predicate, not_(in_(elements))))

    def size(self) -> int:
        return iterators.size(self.cursor())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def to_list(self) -> List[Any]:
        # filter once
        return list(self.cursor())

    def __repr__(self) -> str:
        return iterables.to_string(self)

    def _check_accepts(self, element: Any) -> None:
        if not self.predicate(element):
            raise InvalidArgumentError(f"{describe(element)} does not satisfy the view's predicate")


def filter(unfiltered, predicate: Pred) -> FilteredCollection:
    """
    Live view of the elements of `unfiltered` that satisfy predicate.

    Filtering a filtered view yields a single view over the original
    collection with both predicates combined, so clear(), remove_all() and
    retain_all() still reach the real elements.
    """
    if isinstance(unfiltered, FilteredCollection):
        return unfiltered.create_combined(check_not_null(predicate, "predicate"))
    return FilteredCollection(check_not_null(unfiltered, "unfiltered"), check_not_null(predicate, "predicate"))

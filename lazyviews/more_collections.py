"""Low-level helpers for working with arbitrary Python collections."""

import logging
from abc import ABC
from array import array
from typing import Any, Collection, Iterable

from .config import get_settings
from .errors import UnsupportedOperationError
from .preconditions import check_not_null
from .strings import Joiner

logger = logging.getLogger(__name__)


class RandomAccess(ABC):
    """
    Marker for sequences whose positional access is O(1).

    Views pick their algorithm from it: a partition of a RandomAccess list
    hands out live sub-ranges, anything else gets copied chunks.
    """
    pass


for _kind in (list, tuple, range, str, bytes, bytearray, memoryview, array):
    RandomAccess.register(_kind)


def is_random_access(sequence: Any) -> bool:
    return isinstance(sequence, RandomAccess)


def safe_contains(collection: Collection[Any], element: Any) -> bool:
    """
    `element in collection`, except that a TypeError raised by the
    collection (an unhashable probe against a set, for instance) means False.
    """
    check_not_null(collection, "collection")
    try:
        return element in collection
    except TypeError as e:
        logger.debug(f"Containment check on {type(collection).__name__} rejected {type(element).__name__}: {e}")
        return False


def add_to_collection(collection: Any, element: Any) -> bool:
    """
    Add element to a list-like (append) or set-like (add) collection.
    Returns True if the collection changed.
    """
    before = len(collection)
    if hasattr(collection, "add"):
        result = collection.add(element)
        if isinstance(result, bool):
            return result
    elif hasattr(collection, "append"):
        collection.append(element)
    else:
        raise UnsupportedOperationError(f"Cannot add to {type(collection).__name__}")
    return len(collection) != before


def contains_all_impl(collection: Collection[Any], elements: Iterable[Any]) -> bool:
    for element in elements:
        if not safe_contains(collection, element):
            return False
    return True


def standard_joiner() -> Joiner:
    settings = get_settings()
    return Joiner(settings.separator).use_for_null(settings.null_text)


def render(values: Iterable[Any]) -> str:
    """Bracketed, separated text form of values, e.g. [a, b, c]"""
    settings = get_settings()
    parts = standard_joiner().append_to([settings.open_bracket], values)
    parts.append(settings.close_bracket)
    return "".join(parts)

"""
lazyviews - lazy cursors and live collection views

Modules:
- iterators: functions over one-shot cursors (size, advance, get, find, filter, partition, remove_if)
- iterables: the same functions over restartable iterables, using native collection operations where possible
- filtered: live filtered view of a collection
- lists: live reversed and partitioned views of sequences, sub-range views and list factories
- more_arrays: concat, prepend, append and first_non_null over fixed-size sequences
- predicates, strings, preconditions, errors, config: supporting pieces
"""

from . import iterables, iterators, lists, more_arrays, predicates
from .config import ToolkitSettings, configure, configure_logging, get_settings
from .cursors import CursorBase, IteratorCursor, ListCursor, SnapshotCursor, as_cursor, cursor_of
from .errors import (
    CollectionsError,
    IllegalStateError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NoSuchElementError,
    NotFoundError,
    NullReferenceError,
    UnsupportedOperationError,
)
from .filtered import FilteredCollection, filter
from .lists import partition, reverse, sub_list

__version__ = "0.1.0"

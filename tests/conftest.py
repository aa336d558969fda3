"""
Pytest configuration for the lazyviews tests.

Puts the project root on the Python path so the tests can import lazyviews
without installing it, and provides collections that record how they are
used so the tests can tell a native fast path from a traversal.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from collections.abc import Collection, MutableSet

import pytest

from lazyviews import config
from lazyviews.errors import UnsupportedOperationError


class NoTraversalCollection(Collection):
    """Answers len() and `in` natively; iterating it fails the test"""

    def __init__(self, items):
        self._items = list(items)
        self.len_calls = 0
        self.contains_calls = 0

    def __len__(self):
        self.len_calls += 1
        return len(self._items)

    def __contains__(self, item):
        self.contains_calls += 1
        return item in self._items

    def __iter__(self):
        raise AssertionError("collection was traversed instead of using its native operation")


class NoTraversalSet(MutableSet):
    """A set whose members may be added and discarded but never iterated"""

    def __init__(self, items):
        self._items = set(items)

    def __contains__(self, item):
        return item in self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        raise AssertionError("set was traversed instead of using discard()")

    def add(self, item):
        self._items.add(item)

    def discard(self, item):
        self._items.discard(item)

    def snapshot(self):
        return set(self._items)


class NoOverwriteList(list):
    """A list that rejects positional overwrite after `allowed_sets` successful writes"""

    def __init__(self, items, allowed_sets=0):
        super().__init__(items)
        self.allowed_sets = allowed_sets
        self.set_calls = 0

    def __setitem__(self, index, value):
        self.set_calls += 1
        if self.set_calls > self.allowed_sets:
            raise UnsupportedOperationError("positional overwrite not supported")
        super().__setitem__(index, value)


@pytest.fixture
def no_traversal_collection():
    return NoTraversalCollection


@pytest.fixture
def no_traversal_set():
    return NoTraversalSet


@pytest.fixture
def no_overwrite_list():
    return NoOverwriteList


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from the default settings"""
    config.reset_settings()
    config.configure(config.ToolkitSettings())
    yield
    config.reset_settings()

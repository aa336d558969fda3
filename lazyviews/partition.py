"""
Read-only view of a sequence split into consecutive chunks.

Chunk k covers [k * size, min((k + 1) * size, len)) of the underlying
sequence at the time of the call. A random-access sequence hands out live
sub-range views; any other sequence is read through a copy of each chunk.
"""

import itertools
import logging
from collections.abc import Sequence
from typing import Any, List

from . import iterators
from .iterables import elements_equal, to_string
from .more_collections import RandomAccess, is_random_access
from .preconditions import check_argument, check_element_index, check_not_null, check_slice
from .sublists import sub_list

logger = logging.getLogger(__name__)


class Partition(Sequence):
    """Chunks of a sequence without O(1) positional access (a deque, for instance)"""

    def __init__(self, sequence: Sequence, size: int):
        self._sequence = sequence
        self._size = size

    @property
    def chunk_size(self) -> int:
        return self._size

    def _bounds(self, index: int):
        check_element_index(index, len(self))
        start = index * self._size
        end = min(start + self._size, len(self._sequence))
        return start, end

    def _chunk(self, start: int, end: int) -> Any:
        return list(itertools.islice(self._sequence, start, end))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in check_slice(index, len(self))]
        start, end = self._bounds(index)
        return self._chunk(start, end)

    def __len__(self) -> int:
        div, rem = divmod(len(self._sequence), self._size)
        return div + 1 if rem else div

    def is_empty(self) -> bool:
        return len(self._sequence) == 0

    def __iter__(self):
        # one pass over the sequence instead of one islice per chunk
        return iterators.partition(iter(self._sequence), self._size)

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


class RandomAccessPartition(Partition, RandomAccess):
    """Chunks of a random-access sequence, each a live sub-range view"""

    def _chunk(self, start: int, end: int) -> Any:
        return sub_list(self._sequence, start, end)

    def __iter__(self):
        for index in range(len(self)):
            yield self[index]


def partition(sequence: Sequence, size: int) -> Partition:
    """
    Consecutive chunks of `size` elements, the last possibly shorter:
    [a, b, c, d, e] with size 3 gives [[a, b, c], [d, e]].
    """
    check_not_null(sequence, "sequence")
    check_argument(size > 0, f"partition size must be positive but was: {size}")
    if is_random_access(sequence):
        return RandomAccessPartition(sequence, size)
    logger.debug(f"{type(sequence).__name__} lacks O(1) positional access; chunks will be copied")
    return Partition(sequence, size)

from collections import deque

import pytest

from lazyviews.errors import IndexOutOfBoundsError, InvalidArgumentError
from lazyviews.lists import Partition, RandomAccessPartition, partition
from lazyviews.sublists import SubList


class TestPartitionShape:
    """Chunk count and chunk boundaries"""

    def test_example(self):
        assert list(partition(["a", "b", "c", "d", "e"], 3)) == [["a", "b", "c"], ["d", "e"]]

    @pytest.mark.parametrize("length", [0, 1, 5, 6, 7, 12])
    @pytest.mark.parametrize("size", [1, 2, 3, 6])
    def test_chunk_count_is_ceiling(self, length, size):
        view = partition(list(range(length)), size)
        expected = -(-length // size)
        assert len(view) == expected, f"len={length}, size={size}: expected {expected} chunks, got {len(view)}"

    def test_concatenation_reproduces_input(self):
        data = list(range(23))
        chunks = partition(data, 5)
        assert [x for chunk in chunks for x in chunk] == data
        last = len(chunks) - 1
        assert all(len(chunk) == 5 for chunk in chunks[:last])
        assert len(chunks[last]) == 3

    def test_empty(self):
        view = partition([], 4)
        assert len(view) == 0
        assert view.is_empty()
        assert list(view) == []

    @pytest.mark.parametrize("size", [0, -1])
    def test_nonpositive_size_rejected(self, size):
        with pytest.raises(InvalidArgumentError):
            partition([1, 2, 3], size)

    def test_chunk_size_property(self):
        assert partition([1], 4).chunk_size == 4


class TestPartitionAccess:
    """Positional access to chunks"""

    def test_getitem(self):
        view = partition([1, 2, 3, 4, 5], 2)
        assert view[0] == [1, 2]
        assert view[2] == [5]

    def test_out_of_bounds(self):
        view = partition([1, 2, 3], 2)
        with pytest.raises(IndexOutOfBoundsError):
            view[2]
        with pytest.raises(IndexOutOfBoundsError):
            view[-1]

    def test_slices_follow_index_rules(self):
        """A slice takes the same non-negative positions as integer indexing"""
        view = partition([1, 2, 3, 4, 5], 2)
        assert view[1:] == [[3, 4], [5]]
        assert view[1:10] == [[3, 4], [5]], "Slice bounds past the end are clamped"
        with pytest.raises(IndexOutOfBoundsError):
            view[-1:]
        with pytest.raises(IndexOutOfBoundsError):
            view[:-1]

    def test_reads_current_contents(self):
        """Chunks are computed from the underlying sequence at the time of the call"""
        data = [1, 2, 3]
        view = partition(data, 2)
        assert len(view) == 2
        data.extend([4, 5])
        assert len(view) == 3
        assert view[1] == [3, 4]

    def test_repr_and_equality(self):
        view = partition([1, 2, 3], 2)
        assert repr(view) == "[[1, 2], [3]]"
        assert view == [[1, 2], [3]]
        assert view.to_list() == [[1, 2], [3]]


class TestPartitionVariants:
    """Random-access and sequential inputs give the same chunks"""

    def test_variant_selection(self):
        assert isinstance(partition([1, 2], 1), RandomAccessPartition)
        view = partition(deque([1, 2]), 1)
        assert isinstance(view, Partition)
        assert not isinstance(view, RandomAccessPartition)

    def test_same_contents(self):
        data = list("abcdefg")
        from_list = partition(data, 3)
        from_deque = partition(deque(data), 3)
        assert len(from_list) == len(from_deque)
        for i in range(len(from_list)):
            assert list(from_list[i]) == list(from_deque[i]), f"Chunk {i} differs"
        assert [list(c) for c in from_list] == [list(c) for c in from_deque]

    def test_random_access_chunks_are_live(self):
        data = [1, 2, 3, 4]
        chunk = partition(data, 2)[1]
        assert isinstance(chunk, SubList)
        chunk[0] = 30
        assert data == [1, 2, 30, 4]

    def test_sequential_chunks_are_copies(self):
        data = deque([1, 2, 3, 4])
        chunk = partition(data, 2)[1]
        chunk[0] = 30
        assert list(data) == [1, 2, 3, 4]

    def test_tuple_input(self):
        assert list(partition((1, 2, 3), 2)) == [[1, 2], [3]]

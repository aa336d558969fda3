from collections import deque

import pytest

from lazyviews.errors import (
    IllegalStateError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from lazyviews.lists import RandomAccessReverseList, ReverseList, reverse


class TestIndexTranslation:
    """View index i maps to underlying index len - 1 - i"""

    def test_reverse(self):
        assert list(reverse([1, 2, 3])) == [3, 2, 1]

    def test_get(self):
        data = ["a", "b", "c", "d"]
        view = reverse(data)
        for i in range(len(data)):
            assert view[i] == data[len(data) - 1 - i], f"Mismatch at view index {i}"

    def test_out_of_bounds(self):
        view = reverse([1, 2])
        with pytest.raises(IndexOutOfBoundsError):
            view[2]
        with pytest.raises(IndexOutOfBoundsError):
            view[-1]

    def test_slice_returns_copy(self):
        assert reverse([1, 2, 3, 4])[1:3] == [3, 2]

    def test_negative_slice_bounds_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            reverse([1, 2, 3])[-2:]

    def test_tracks_underlying_size_changes(self):
        """Translation is recomputed on every access"""
        data = [1, 2, 3]
        view = reverse(data)
        assert view[0] == 3
        data.append(4)
        assert view[0] == 4
        assert len(view) == 4

    def test_equality(self):
        assert reverse([1, 2, 3]) == [3, 2, 1]
        assert [3, 2, 1] == reverse([1, 2, 3])
        assert reverse([1, 2]) != [1, 2]

    def test_repr(self):
        assert repr(reverse([1, 2, 3])) == "[3, 2, 1]"


class TestDoubleReverse:
    """Reversing a reversed view gives back the original object"""

    def test_identity(self):
        data = [1, 2, 3]
        assert reverse(reverse(data)) is data

    def test_variant_follows_random_access(self):
        assert isinstance(reverse([1]), RandomAccessReverseList)
        view = reverse(deque([1]))
        assert isinstance(view, ReverseList)
        assert not isinstance(view, RandomAccessReverseList)


class TestMutationThroughView:
    """Writes through the view land at the translated positions"""

    def test_set(self):
        data = [1, 2, 3]
        view = reverse(data)
        view[0] = 30
        assert data == [1, 2, 30]

    def test_delete(self):
        data = [1, 2, 3]
        del reverse(data)[0]
        assert data == [1, 2]

    def test_insert_translates_position(self):
        """View position p maps to underlying position len - p"""
        data = [1, 2, 3]
        view = reverse(data)
        view.insert(0, 4)
        assert data == [1, 2, 3, 4]
        view.insert(len(view), 0)
        assert data == [0, 1, 2, 3, 4]
        view.insert(2, 9)
        assert list(view) == [4, 3, 9, 2, 1, 0]

    def test_append_prepends_underneath(self):
        data = [1, 2]
        reverse(data).append(0)
        assert data == [0, 1, 2]

    def test_pop_and_remove(self):
        data = [1, 2, 3]
        view = reverse(data)
        assert view.pop() == 1
        assert data == [2, 3]
        view.remove(3)
        assert data == [2]

    def test_clear(self):
        data = [1, 2]
        reverse(data).clear()
        assert data == []

    def test_slice_writes_rejected(self):
        data = [1, 2, 3]
        view = reverse(data)
        with pytest.raises(UnsupportedOperationError):
            view[0:2] = [9, 8]
        with pytest.raises(UnsupportedOperationError):
            del view[0:2]
        assert data == [1, 2, 3]

    def test_works_over_deque(self):
        data = deque([1, 2, 3])
        view = reverse(data)
        view[0] = 9
        view.insert(1, 8)
        assert list(data) == [1, 2, 8, 9]
        assert list(view) == [9, 8, 2, 1]


class TestSubList:
    """Sub-ranges of the view are reversed views of underlying sub-ranges"""

    def test_sub_list(self):
        assert reverse([1, 2, 3]).sub_list(0, 2) == [3, 2]

    def test_sub_list_is_live(self):
        data = [1, 2, 3, 4, 5]
        window = reverse(data).sub_list(1, 3)
        assert window == [4, 3]
        window[0] = 40
        assert data == [1, 2, 3, 40, 5]

    def test_sub_list_reversed_again_is_forward_range(self):
        data = [1, 2, 3, 4, 5]
        forward = reverse(reverse(data).sub_list(1, 4))
        assert forward == [2, 3, 4]

    def test_remove_range(self):
        data = [1, 2, 3, 4, 5]
        reverse(data).remove_range(0, 2)
        assert data == [1, 2, 3]

    def test_sub_list_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            reverse([1, 2]).sub_list(1, 3)
        with pytest.raises(IndexOutOfBoundsError):
            reverse([1, 2]).sub_list(2, 1)


class TestReverseListCursor:
    """The view's list cursor drives the underlying list cursor backwards"""

    def test_traversal_both_ways(self):
        cursor = reverse([1, 2, 3]).list_cursor()
        assert cursor.next() == 3
        assert cursor.next() == 2
        assert cursor.previous() == 2
        assert cursor.next_index() == 1
        assert cursor.previous_index() == 0

    def test_start_position(self):
        cursor = reverse(["a", "b", "c"]).list_cursor(1)
        assert cursor.next() == "b"
        assert cursor.has_previous()

    def test_exhaustion(self):
        cursor = reverse([1]).list_cursor()
        cursor.next()
        with pytest.raises(NoSuchElementError):
            cursor.next()
        with pytest.raises(NoSuchElementError):
            reverse([1]).list_cursor().previous()

    def test_set_after_next(self):
        data = [1, 2, 3]
        cursor = reverse(data).list_cursor()
        cursor.next()
        cursor.set(30)
        assert data == [1, 2, 30]

    def test_set_requires_next_or_previous(self):
        cursor = reverse([1, 2]).list_cursor()
        with pytest.raises(IllegalStateError):
            cursor.set(0)

    def test_set_after_add_fails(self):
        cursor = reverse([1, 2]).list_cursor()
        cursor.next()
        cursor.add(5)
        with pytest.raises(IllegalStateError):
            cursor.set(0)

    def test_set_after_remove_fails(self):
        data = [1, 2]
        cursor = reverse(data).list_cursor()
        cursor.next()
        cursor.remove()
        assert data == [1]
        with pytest.raises(IllegalStateError):
            cursor.set(0)
        with pytest.raises(IllegalStateError):
            cursor.remove()

    def test_add_inserts_before_cursor(self):
        """next() after add() continues with the element that followed the cursor"""
        data = ["a", "b", "c"]
        view = reverse(data)
        cursor = view.list_cursor()
        assert cursor.next() == "c"
        cursor.add("x")
        assert list(view) == ["c", "x", "b", "a"]
        assert data == ["a", "b", "x", "c"]
        assert cursor.next_index() == 2
        assert cursor.next() == "b"
        assert cursor.previous() == "b"
        assert cursor.previous() == "x"

    def test_remove_during_iteration(self):
        data = [1, 2, 3, 4]
        cursor = reverse(data).list_cursor()
        while cursor.has_next():
            if cursor.next() % 2 == 0:
                cursor.remove()
        assert data == [1, 3]

    def test_iteration_uses_cursor(self):
        assert [x for x in reverse([1, 2, 3])] == [3, 2, 1]
        assert list(reversed(reverse([1, 2, 3]))) == [1, 2, 3]

"""
Error kinds raised by lazyviews.

Every error derives from CollectionsError and from the builtin exception
that is closest in meaning, so callers may catch either.
"""


class CollectionsError(Exception):
    """Base class for every error raised by the toolkit."""
    pass


class InvalidArgumentError(CollectionsError, ValueError):
    """An argument is outside the range the operation accepts."""
    pass


class IllegalStateError(CollectionsError, RuntimeError):
    """An operation was called at a point where it is not allowed."""
    pass


class IndexOutOfBoundsError(CollectionsError, IndexError):
    """An index or position falls outside the sequence."""
    pass


class NoSuchElementError(CollectionsError, LookupError):
    """A cursor was advanced past its last element."""
    pass


class NotFoundError(NoSuchElementError):
    """No element satisfied the search predicate."""
    pass


class UnsupportedOperationError(CollectionsError, NotImplementedError):
    """The cursor or collection does not offer the requested operation."""
    pass


class NullReferenceError(CollectionsError, TypeError):
    """A required reference was None."""
    pass

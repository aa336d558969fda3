"""String helpers and the Joiner used to render sequences as text."""

from typing import Any, Iterable, List, Optional

from .errors import NullReferenceError
from .preconditions import check_not_null

EMPTY = ""


class Joiner:
    """
    Joins the text form of values with a separator.

    A joiner is immutable: use_for_null() and skip_nulls() return configured
    copies. Without either, meeting None raises NullReferenceError.
    """

    def __init__(self, separator: str, null_text: Optional[str] = None, skip_nulls: bool = False):
        self.separator = check_not_null(separator, "separator")
        self.null_text = null_text
        self._skip_nulls = skip_nulls

    def use_for_null(self, null_text: str) -> "Joiner":
        check_not_null(null_text, "null_text")
        return Joiner(self.separator, null_text=null_text)

    def skip_nulls(self) -> "Joiner":
        return Joiner(self.separator, skip_nulls=True)

    def append_to(self, parts: List[str], values: Iterable[Any]) -> List[str]:
        """Append the rendered, separated values to parts and return parts"""
        first = True
        for value in values:
            if value is None and self._skip_nulls:
                continue
            if not first:
                parts.append(self.separator)
            parts.append(self._render(value))
            first = False
        return parts

    def join(self, values: Iterable[Any]) -> str:
        return EMPTY.join(self.append_to([], values))

    def _render(self, value: Any) -> str:
        if value is None:
            if self.null_text is None:
                raise NullReferenceError("Joiner met None; configure use_for_null() or skip_nulls()")
            return self.null_text
        return str(value)

    def __repr__(self) -> str:
        return f"Joiner(separator={self.separator!r}, null_text={self.null_text!r})"


def join_on(separator: str) -> Joiner:
    return Joiner(separator)


def null_to_empty(string: Optional[str]) -> str:
    return EMPTY if string is None else str(string)


def is_null_or_empty(string: Optional[str]) -> bool:
    return string is None or len(string) == 0


def is_blank(string: Optional[str]) -> bool:
    return is_null_or_empty(null_to_empty(string).strip())


def is_not_blank(string: Optional[str]) -> bool:
    return not is_blank(string)


def safe_to_string(value: Any) -> str:
    return EMPTY if value is None else str(value)


def to_hex_string(data: bytes) -> str:
    """Lower-case hex rendering, two digits per byte"""
    return data.hex()

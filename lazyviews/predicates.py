"""
Composable boolean tests over values.

Views and cursors accept any callable returning a bool; Predicate adds the
&, | and ~ operators on top of a plain callable. Combinators hold on to their
components and only evaluate them when the combined predicate is applied.
"""

from typing import Any, Callable, Collection, Iterable, Tuple, Union

from .preconditions import check_not_null


class Predicate:
    """Callable wrapper around a single-argument boolean test"""

    __slots__ = ("_fn", "_label")

    def __init__(self, fn: Callable[[Any], bool], label: str = None):
        self._fn = check_not_null(fn, "fn")
        self._label = label or getattr(fn, "__name__", repr(fn))

    def apply(self, value: Any) -> bool:
        return bool(self._fn(value))

    __call__ = apply

    def __and__(self, other: Callable[[Any], bool]) -> "Predicate":
        return and_(self, other)

    def __or__(self, other: Callable[[Any], bool]) -> "Predicate":
        return or_(self, other)

    def __invert__(self) -> "Predicate":
        return not_(self)

    def __repr__(self) -> str:
        return f"Predicate({self._label})"


def predicate(fn: Callable[[Any], bool]) -> Predicate:
    """Wrap fn unless it already is a Predicate"""
    if isinstance(fn, Predicate):
        return fn
    return Predicate(fn)


def always_true() -> Predicate:
    return Predicate(lambda value: True, "always_true")


def always_false() -> Predicate:
    return Predicate(lambda value: False, "always_false")


def is_none() -> Predicate:
    return Predicate(lambda value: value is None, "is_none")


def not_none() -> Predicate:
    return Predicate(lambda value: value is not None, "not_none")


def and_(*components: Callable[[Any], bool]) -> Predicate:
    """True when every component holds; stops at the first that does not"""
    parts = tuple(check_not_null(c, "component") for c in components)

    def test(value):
        for part in parts:
            if not part(value):
                return False
        return True

    return Predicate(test, "and(" + ", ".join(_label(p) for p in parts) + ")")


def or_(*components: Callable[[Any], bool]) -> Predicate:
    """True when any component holds; stops at the first that does"""
    parts = tuple(check_not_null(c, "component") for c in components)

    def test(value):
        for part in parts:
            if part(value):
                return True
        return False

    return Predicate(test, "or(" + ", ".join(_label(p) for p in parts) + ")")


def not_(component: Callable[[Any], bool]) -> Predicate:
    check_not_null(component, "component")
    return Predicate(lambda value: not component(value), f"not({_label(component)})")


def in_(target: Collection[Any]) -> Predicate:
    """
    Membership in target. A TypeError raised by the target's containment
    check (an unhashable probe against a set, for instance) counts as absent.
    """
    check_not_null(target, "target")

    def test(value):
        try:
            return value in target
        except TypeError:
            return False

    return Predicate(test, f"in({type(target).__name__})")


def equal_to(expected: Any) -> Predicate:
    if expected is None:
        return is_none()
    return Predicate(lambda value: expected == value, f"equal_to({expected!r})")


def instance_of(kind: Union[type, Tuple[type, ...]]) -> Predicate:
    """
    Capability check: accepts a class, a tuple of classes, or a
    runtime_checkable Protocol describing the interface a value must offer.
    """
    check_not_null(kind, "kind")
    return Predicate(lambda value: isinstance(value, kind), f"instance_of({_kind_name(kind)})")


def _label(part: Callable[[Any], bool]) -> str:
    if isinstance(part, Predicate):
        return part._label
    return getattr(part, "__name__", repr(part))


def _kind_name(kind) -> str:
    if isinstance(kind, tuple):
        return "(" + ", ".join(_kind_name(k) for k in kind) + ")"
    return getattr(kind, "__name__", repr(kind))


def all_of(components: Iterable[Callable[[Any], bool]]) -> Predicate:
    return and_(*components)


def any_of(components: Iterable[Callable[[Any], bool]]) -> Predicate:
    return or_(*components)

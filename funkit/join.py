"""Set-like joins of two sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from funkit.helpers import is_collection

JoinFn = Callable[[Sequence[Any], Sequence[Any]], list[Any]]


class _Lookup:
    """Membership test that hashes what it can and compares the rest by equality."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._unhashable: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: Any) -> bool:
        try:
            if item in self._hashed:
                return True
        except TypeError:
            pass
        return any(item == other for other in self._unhashable)


def join(left: Sequence[Any], right: Sequence[Any], join_fn: JoinFn) -> list[Any]:
    """Combine two sequences of the same type with join_fn."""
    if not is_collection(left):
        raise TypeError("First parameter must be a collection")
    if not is_collection(right):
        raise TypeError("Second parameter must be a collection")
    if type(left) is not type(right):
        raise TypeError("Parameters must have the same type")
    return join_fn(left, right)


def inner_join(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Return the items of left also found in right, each once, in left's order."""
    present = _Lookup(right)
    seen = _Lookup()
    result = []
    for item in left:
        if item in present and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def left_join(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Return the items of left that are not found in right."""
    present = _Lookup(right)
    return [item for item in left if item not in present]


def right_join(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Return the items of right that are not found in left."""
    return left_join(right, left)


def outer_join(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Return the items found in only one of the two sequences, left's first."""
    return left_join(left, right) + right_join(left, right)
"""Intersection and difference of sequences."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Any

from funkit.helpers import is_collection


def _check_pair(x: Any, y: Any) -> None:
    if not is_collection(x):
        raise TypeError("First parameter must be a collection")
    if not is_collection(y):
        raise TypeError("Second parameter must be a collection")
    if type(x) is not type(y):
        raise TypeError("Parameters must have the same type")


def _lookup(items: Sequence[Any]) -> Collection[Any]:
    """A set of the items where they are hashable, otherwise the items themselves."""
    try:
        return set(items)
    except TypeError:
        return list(items)


def _contains(lookup: Collection[Any], value: Any) -> bool:
    try:
        return value in lookup
    except TypeError:
        return False


def _common(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    seen = _lookup(x)
    return [value for value in y if _contains(seen, value)]


def _missing(source: Sequence[Any], other: Sequence[Any]) -> list[Any]:
    present = _lookup(other)
    return [value for value in source if not _contains(present, value)]


def intersect(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return the items of y that also occur in x, in y's order, duplicates kept."""
    _check_pair(x, y)
    return _common(x, y)


def intersect_string(x: Sequence[str], y: Sequence[str]) -> list[str]:
    """Return the strings of y that also occur in x."""
    if not x or not y:
        return []
    return _common(x, y)


def difference(x: Sequence[Any], y: Sequence[Any]) -> tuple[list[Any], list[Any]]:
    """Return the items of x missing from y and the items of y missing from x."""
    _check_pair(x, y)
    return _missing(x, y), _missing(y, x)


def difference_string(x: Sequence[str], y: Sequence[str]) -> tuple[list[str], list[str]]:
    """Return the strings of x missing from y and the strings of y missing from x."""
    return _missing(x, y), _missing(y, x)
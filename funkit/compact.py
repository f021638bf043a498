"""Removal of empty values from a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from funkit.helpers import is_collection, is_empty


def compact(values: Sequence[Any]) -> list[Any]:
    """Return a list of the items of values that are not empty or zero."""
    if not is_collection(values):
        raise TypeError("First parameter must be array or slice")
    return [value for value in values if not is_empty(value)]
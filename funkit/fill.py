"""Filling a sequence with a single value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from funkit.helpers import is_collection


def _describe(values: Sequence[Any], element_types: set[type]) -> str:
    container = type(values).__name__
    if len(element_types) == 1:
        (element_type,) = element_types
        return f"{container}[{element_type.__name__}]"
    return container


def fill(values: Sequence[Any], fill_value: Any) -> list[Any]:
    """Return a new list as long as values, every item being fill_value.

    Every existing item must have exactly the type of fill_value.
    """
    if not is_collection(values):
        raise TypeError("Can only fill slices and arrays")
    element_types = {type(value) for value in values}
    if element_types - {type(fill_value)}:
        raise TypeError(
            f"Cannot fill '{_describe(values, element_types)}' "
            f"with '{type(fill_value).__name__}'"
        )
    return [fill_value] * len(values)
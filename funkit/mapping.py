"""Keys and values of mappings and dataclass instances."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any


def _is_dataclass_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def keys(obj: Any) -> list[Any]:
    """Return the keys of a mapping or the field names of a dataclass instance."""
    if isinstance(obj, Mapping):
        return list(obj.keys())
    if _is_dataclass_instance(obj):
        return [field.name for field in dataclasses.fields(obj)]
    raise TypeError(f"Type {type(obj).__name__} is not supported by keys")


def values(obj: Any) -> list[Any]:
    """Return the values of a mapping or the field values of a dataclass instance."""
    if isinstance(obj, Mapping):
        return list(obj.values())
    if _is_dataclass_instance(obj):
        return [getattr(obj, field.name) for field in dataclasses.fields(obj)]
    raise TypeError(f"Type {type(obj).__name__} is not supported by values")
"""Predicates, comparisons and small utilities shared by the collection helpers."""

from __future__ import annotations

import copy
import dataclasses
import random
import string
import types
import typing
from collections.abc import Mapping, Sequence, Sized
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)
_MISSING = object()

DEFAULT_LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits


def _is_dataclass_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _is_blank_scalar(obj: Any) -> bool:
    """True for None, False, the empty string and numeric zeros."""
    if obj is None or obj is False:
        return True
    if isinstance(obj, str):
        return obj == ""
    if isinstance(obj, (int, float)) and not isinstance(obj, bool):
        return obj == 0
    return False


def to_float64(x: Any) -> float:
    """Convert an int or float to float; raise TypeError for anything else."""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise TypeError(f"{type(x).__name__} is not a numeric type")
    return float(x)


def ptr_of(obj: Any) -> Any:
    """Return a shallow copy of obj."""
    return copy.copy(obj)


def _function_parts(obj: Any) -> tuple[list[str], dict[str, Any]] | None:
    """Return the positional parameter names and raw annotations of a callable."""
    skip = 0
    if isinstance(obj, types.FunctionType):
        func = obj
    elif isinstance(obj, types.MethodType):
        func = obj.__func__
        skip = 1
    else:
        call = getattr(type(obj), "__call__", None)
        if not isinstance(call, types.FunctionType):
            return None
        func = call
        skip = 1
    code = getattr(func, "__code__", None)
    if code is None:
        return None
    names = list(code.co_varnames[: code.co_argcount])[skip:]
    annotations = dict(getattr(func, "__annotations__", None) or {})
    return names, annotations


def _result_count(annotations: dict[str, Any]) -> int:
    """Count results from the return annotation; unannotated functions count as one."""
    ann = annotations.get("return", _MISSING)
    if ann is _MISSING:
        return 1
    if ann is None or ann is type(None) or ann == "None":
        return 0
    if typing.get_origin(ann) is tuple:
        args = typing.get_args(ann)
        if Ellipsis not in args:
            return len(args)
    return 1


def _is_plain_function(obj: Any) -> bool:
    return callable(obj) and not isinstance(obj, type)


def is_function(obj: Any, *args: int) -> bool:
    """Tell whether obj is a function, optionally with the given numbers of inputs and results."""
    if not _is_plain_function(obj):
        return False
    parts = _function_parts(obj)
    if parts is None:
        return not args
    names, annotations = parts
    if len(args) >= 1 and len(names) != args[0]:
        return False
    if len(args) == 2 and _result_count(annotations) != args[1]:
        return False
    return True


def _returns_bool(annotations: dict[str, Any]) -> bool:
    ann = annotations.get("return", _MISSING)
    return ann is bool or ann == "bool"


def _convertible(in_type: type, annotation: Any) -> bool:
    if annotation is _MISSING or annotation is Any:
        return True
    if isinstance(annotation, type):
        return issubclass(in_type, annotation)
    if isinstance(annotation, str):
        return annotation == in_type.__name__
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return any(_convertible(in_type, arg) for arg in typing.get_args(annotation))
    if isinstance(origin, type):
        return issubclass(in_type, origin)
    return True


def is_predicate(obj: Any, *args: type | None) -> bool:
    """Tell whether obj is a function returning bool whose inputs accept the given types.

    With no types, a single input of any type is expected; None accepts any type.
    """
    in_types = args or (None,)
    if not _is_plain_function(obj):
        return False
    parts = _function_parts(obj)
    if parts is None:
        return False
    names, annotations = parts
    if not _returns_bool(annotations):
        return False
    if len(names) != len(in_types):
        return False
    return all(
        in_type is None or _convertible(in_type, annotations.get(name, _MISSING))
        for in_type, name in zip(in_types, names)
    )


def is_equal(expected: Any, actual: Any) -> bool:
    """Compare two values; values of different types are never equal, byte strings compare by content."""
    if expected is None or actual is None:
        return expected is actual
    if isinstance(expected, (bytes, bytearray)):
        return isinstance(actual, (bytes, bytearray)) and bytes(expected) == bytes(actual)
    return type(expected) is type(actual) and expected == actual


def is_type(expected: Any, actual: Any) -> bool:
    """Tell whether both values have exactly the same type."""
    return type(expected) is type(actual)


def equal(expected: Any, actual: Any) -> bool:
    """Alias of is_equal."""
    return is_equal(expected, actual)


def not_equal(expected: Any, actual: Any) -> bool:
    """Negation of is_equal."""
    return not is_equal(expected, actual)


def is_collection(obj: Any) -> bool:
    """Tell whether obj is a sequence other than text."""
    return isinstance(obj, Sequence) and not isinstance(obj, _TEXT_TYPES)


def is_iteratee(obj: Any) -> bool:
    """Tell whether obj is a sequence (other than text) or a mapping."""
    return isinstance(obj, Mapping) or is_collection(obj)


def slice_of(obj: Any) -> list[Any]:
    """Return a list holding obj."""
    return [obj]


def any_of(*args: Any) -> bool:
    """True if any argument is not empty; False when there are none."""
    return any(not is_empty(obj) for obj in args)


def all_of(*args: Any) -> bool:
    """True if no argument is empty; True when there are none."""
    return all(not is_empty(obj) for obj in args)


def zero_of(obj: Any) -> Any:
    """Return the zero value of obj's type, or None where there is none."""
    if obj is None:
        return None
    if _is_dataclass_instance(obj):
        try:
            return dataclasses.replace(
                obj,
                **{
                    field.name: zero_of(getattr(obj, field.name))
                    for field in dataclasses.fields(obj)
                    if field.init
                },
            )
        except (TypeError, ValueError):
            pass
    try:
        return type(obj)()
    except (TypeError, ValueError):
        return None


def is_empty(obj: Any) -> bool:
    """Tell whether obj is None, false, zero, an empty container or a zero dataclass."""
    if _is_blank_scalar(obj):
        return True
    if isinstance(obj, Sized):
        return len(obj) == 0
    if _is_dataclass_instance(obj):
        return is_equal(obj, zero_of(obj))
    return False


def not_empty(obj: Any) -> bool:
    """Negation of is_empty."""
    return not is_empty(obj)


def is_zero(obj: Any) -> bool:
    """Tell whether obj equals the zero value of its type."""
    if _is_blank_scalar(obj):
        return True
    return is_equal(obj, zero_of(obj))


def random_int(low: int, high: int) -> int:
    """Return a random int in [low, high)."""
    if high <= low:
        raise ValueError("high must be greater than low")
    return random.randrange(low, high)


def shard(text: str, width: int, depth: int, rest_only: bool) -> list[str]:
    """Split the first depth*width characters of text into depth pieces of width.

    The last item is the remainder when rest_only is true, otherwise the whole text.
    """
    if width < 0 or depth < 0:
        raise ValueError("width and depth must not be negative")
    if width * depth > len(text):
        raise ValueError(f"text of length {len(text)} is too short for {depth} shards of width {width}")
    parts = [text[width * i : width * (i + 1)] for i in range(depth)]
    parts.append(text[width * depth :] if rest_only else text)
    return parts


def random_string(n: int, allowed_chars: Sequence[str] | None = None) -> str:
    """Return a random string of n characters drawn from allowed_chars."""
    letters = DEFAULT_LETTERS if allowed_chars is None else allowed_chars
    if not letters:
        raise ValueError("allowed_chars must not be empty")
    if n < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(letters, k=n))
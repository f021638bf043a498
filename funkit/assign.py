"""Setting a value at a dotted attribute path inside nested objects."""

from __future__ import annotations

import dataclasses
import inspect
import re
import types
import typing
from collections.abc import Mapping
from typing import Any

_UNKNOWN = object()
_SCALARS = (str, bytes, bytearray, int, float, complex, bool)
_LEXEME_PATTERN = re.compile(r"\s*(?:([A-Za-z_][\w.]*)|(\.\.\.)|([\[\],|]))")

_BASE_NAMESPACE: dict[str, Any] = {
    "int": int,
    "str": str,
    "float": float,
    "bool": bool,
    "complex": complex,
    "bytes": bytes,
    "bytearray": bytearray,
    "list": list,
    "tuple": tuple,
    "dict": dict,
    "set": set,
    "frozenset": frozenset,
    "object": object,
    "type": type,
    "Any": Any,
    "Optional": typing.Optional,
    "Union": typing.Union,
    "List": typing.List,
    "Tuple": typing.Tuple,
    "Dict": typing.Dict,
    "Set": typing.Set,
    "typing": typing,
}


class AssignError(ValueError):
    """Raised when a value cannot be set at the requested path."""


class _Unresolved(Exception):
    """An annotation text that cannot be turned into a type."""


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def _type_name(obj: Any) -> str:
    return type(obj).__name__


def _tokenize(text: str) -> list[str]:
    text = text.strip()
    pieces = []
    pos = 0
    while pos < len(text):
        match = _LEXEME_PATTERN.match(text, pos)
        if match is None or match.end() == pos:
            raise _Unresolved(text)
        pieces.append(match.group(1) or match.group(2) or match.group(3))
        pos = match.end()
    return pieces


class _AnnotationParser:
    """Turns annotation text such as ``list[Bar | None]`` into typing objects."""

    def __init__(self, text: str, namespace: dict[str, Any]) -> None:
        self._pieces = _tokenize(text)
        self._pos = 0
        self._namespace = namespace

    def parse(self) -> Any:
        result = self._union()
        if self._pos != len(self._pieces):
            raise _Unresolved("trailing text")
        return result

    def _peek(self) -> str | None:
        return self._pieces[self._pos] if self._pos < len(self._pieces) else None

    def _take(self) -> str:
        piece = self._peek()
        if piece is None:
            raise _Unresolved("unexpected end")
        self._pos += 1
        return piece

    def _union(self) -> Any:
        items = [self._atom()]
        while self._peek() == "|":
            self._take()
            items.append(self._atom())
        if len(items) == 1:
            return items[0]
        try:
            return typing.Union[tuple(items)]
        except TypeError as exc:
            raise _Unresolved("bad union") from exc

    def _lookup(self, dotted: str) -> Any:
        head, *rest = dotted.split(".")
        if head == "None":
            value: Any = None
        elif head in self._namespace:
            value = self._namespace[head]
        else:
            raise _Unresolved(head)
        for name in rest:
            try:
                value = getattr(value, name)
            except AttributeError as exc:
                raise _Unresolved(dotted) from exc
        return value

    def _atom(self) -> Any:
        piece = self._take()
        if piece == "...":
            return Ellipsis
        if piece in ("[", "]", ",", "|"):
            raise _Unresolved(piece)
        base = self._lookup(piece)
        if self._peek() != "[":
            return base
        self._take()
        args = [self._union()]
        while self._peek() == ",":
            self._take()
            args.append(self._union())
        if self._take() != "]":
            raise _Unresolved("missing ]")
        try:
            return base[tuple(args)] if len(args) > 1 else base[args[0]]
        except TypeError as exc:
            raise _Unresolved(piece) from exc


def _resolve(annotation: Any, namespace: dict[str, Any]) -> Any:
    """Resolve annotation text and forward references where the names are known."""
    if isinstance(annotation, str):
        try:
            return _AnnotationParser(annotation, namespace).parse()
        except _Unresolved:
            return annotation
    if isinstance(annotation, typing.ForwardRef):
        resolved = _resolve(annotation.__forward_arg__, namespace)
        return annotation if isinstance(resolved, str) else resolved
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin is None or not args:
        return annotation
    resolved_args = tuple(_resolve(arg, namespace) for arg in args)
    if resolved_args == args:
        return annotation
    try:
        if origin is typing.Union or origin is types.UnionType:
            return typing.Union[resolved_args]
        return origin[resolved_args if len(resolved_args) > 1 else resolved_args[0]]
    except TypeError:
        return annotation


def _own_annotations(klass: type) -> dict[str, Any]:
    own = vars(klass)
    raw = own.get("__annotations__")
    if isinstance(raw, dict):
        return raw
    if "__annotate__" in own:
        found = getattr(klass, "__annotations__", None)
        if isinstance(found, dict):
            return found
    return {}


def _module_namespace(klass: type) -> dict[str, Any]:
    module = inspect.getmodule(klass)
    if module is None:
        return {}
    return dict(vars(module))


def _hints(obj: Any) -> dict[str, Any]:
    mro = type(obj).__mro__
    local = {klass.__name__: klass for klass in mro}
    hints: dict[str, Any] = {}
    try:
        for klass in reversed(mro):
            namespace = {**_BASE_NAMESPACE, **_module_namespace(klass), **local}
            for name, annotation in _own_annotations(klass).items():
                hints[name] = _resolve(annotation, namespace)
    except (NameError, TypeError, AttributeError):
        return {}
    return hints


def _field_names(obj: Any, hints: dict[str, Any]) -> set[str]:
    if dataclasses.is_dataclass(obj):
        return {field.name for field in dataclasses.fields(obj)}
    names = set(hints)
    if hasattr(obj, "__dict__"):
        names.update(vars(obj))
    return names


def _without_none(annotation: Any) -> list[Any]:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    return [annotation]


def _instantiate(annotation: Any) -> Any:
    """Build a fresh value for a None found along the path, or return None."""
    candidates = _without_none(annotation)
    if len(candidates) != 1 or not isinstance(candidates[0], type):
        return None
    try:
        return candidates[0]()
    except TypeError:
        return None


def _element_annotation(annotation: Any) -> Any:
    candidates = _without_none(annotation)
    if len(candidates) == 1:
        args = typing.get_args(candidates[0])
        if args and typing.get_origin(candidates[0]) in (list, tuple):
            return args[0]
    return _UNKNOWN


def _accepts(annotation: Any, value: Any, current: Any) -> bool:
    if annotation is _UNKNOWN:
        return current is None or isinstance(value, type(current))
    if annotation is Any or annotation is object or isinstance(annotation, str):
        return True
    if annotation is None or annotation is type(None):
        return value is None
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return any(_accepts(arg, value, current) for arg in typing.get_args(annotation))
    if origin is not None:
        return not isinstance(origin, type) or isinstance(value, origin)
    if isinstance(annotation, type):
        if annotation is float and isinstance(value, int) and not isinstance(value, bool):
            return True
        try:
            return isinstance(value, annotation)
        except TypeError:
            return True
    return True


def _element_for_none(sequence: Any, annotation: Any) -> Any:
    if annotation is not _UNKNOWN:
        return _instantiate(annotation)
    sibling = next((item for item in sequence if item is not None), None)
    if sibling is None:
        return None
    try:
        return type(sibling)()
    except TypeError:
        return None


def _assign_into(obj: Any, annotation: Any, parts: list[str], value: Any) -> None:
    if obj is None:
        raise AssignError("Cannot traverse None along the path")

    if _is_sequence(obj):
        element_annotation = _element_annotation(annotation)
        for index, item in enumerate(obj):
            if item is None:
                item = _element_for_none(obj, element_annotation)
                if item is None:
                    raise AssignError("Cannot initialise None element along the path")
                if isinstance(obj, tuple):
                    raise AssignError("Cannot replace None element of a tuple")
                obj[index] = item
            _assign_into(item, element_annotation, parts, value)
        return

    name, rest = parts[0], parts[1:]
    if isinstance(obj, (Mapping, *_SCALARS)):
        raise AssignError(f"type {_type_name(obj)} in path {name} is not supported")

    hints = _hints(obj)
    if name not in _field_names(obj, hints):
        raise AssignError(f"field name {name} is not found in type {_type_name(obj)}")
    if name.startswith("_"):
        raise AssignError(f"field name {name} is not exported in type {_type_name(obj)}")

    field_annotation = hints.get(name, _UNKNOWN)
    current = getattr(obj, name, None)

    if not rest:
        if not _accepts(field_annotation, value, current):
            raise AssignError(
                f"cannot set target {name} of type {_type_name(current)} "
                f"with type {_type_name(value)}"
            )
        setattr(obj, name, value)
        return

    if current is None:
        if field_annotation is _UNKNOWN:
            raise AssignError(f"Cannot traverse uninitialised field {name}")
        current = _instantiate(field_annotation)
        if current is None:
            raise AssignError(f"Cannot traverse uninitialised field {name}")
        setattr(obj, name, current)
    _assign_into(current, field_annotation, rest, value)


def _replace_in_place(target: Any, value: Any) -> None:
    if isinstance(target, list) and isinstance(value, list):
        target[:] = value
    elif isinstance(target, dict) and isinstance(value, Mapping):
        target.clear()
        target.update(value)
    elif isinstance(target, _SCALARS + (tuple,)) or type(target) is not type(value):
        raise AssignError(
            f"cannot set target of type {_type_name(target)} with type {_type_name(value)}"
        )
    elif dataclasses.is_dataclass(target):
        for field in dataclasses.fields(target):
            setattr(target, field.name, getattr(value, field.name))
    elif hasattr(target, "__dict__"):
        vars(target).update(vars(value))
    else:
        raise AssignError(f"Type {_type_name(target)} not supported by assign")


def assign(target: Any, value: Any, path: str) -> None:
    """Set value at the dotted attribute path inside target.

    Lists and tuples along the path are traversed element by element, so every
    element receives the value. None found along the path is replaced by a new
    instance of the declared type where one can be built. An empty path replaces
    the contents of target itself.
    """
    if target is None:
        raise AssignError("Cannot Set nil")
    if not path:
        _replace_in_place(target, value)
        return
    _assign_into(target, _UNKNOWN, path.split("."), value)


def must_assign(target: Any, value: Any, path: str) -> Any:
    """Assign like assign and return target, for use in expressions."""
    assign(target, value, path)
    return target
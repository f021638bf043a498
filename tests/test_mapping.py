from dataclasses import dataclass, field
from typing import Any, Optional

import pytest

from funkit.mapping import keys, values


@dataclass
class Bar:
    name: str = ""


@dataclass
class Foo:
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    age: int = 0
    bar: Optional[Bar] = None
    bars: list = field(default_factory=list)
    empty_value: Optional[int] = None
    bar_pointer: Optional[Bar] = None
    general_interface: Any = None
    bar_interface: Any = None
    zero_bool_value: bool = False
    zero_int_value: int = 0
    zero_int_ptr_value: Optional[int] = None


FOO = Foo(id=1, first_name="Dark", last_name="Vador", age=30, bar=Bar("Test"))


def test_keys_of_mapping():
    assert sorted(keys({"one": 1, "two": 2})) == ["one", "two"]


def test_keys_of_dataclass():
    assert sorted(keys(FOO)) == [
        "age",
        "bar",
        "bar_interface",
        "bar_pointer",
        "bars",
        "empty_value",
        "first_name",
        "general_interface",
        "id",
        "last_name",
        "zero_bool_value",
        "zero_int_ptr_value",
        "zero_int_value",
    ]


def test_values_of_mapping():
    assert sorted(values({"one": 1, "two": 2})) == [1, 2]


def test_values_of_dataclass():
    result = values(FOO)
    assert len(result) == 13
    assert result[:5] == [1, "Dark", "Vador", 30, Bar("Test")]


def test_keys_and_values_line_up():
    data = {"a": 1, "b": 2, "c": 3}
    assert dict(zip(keys(data), values(data))) == data


@pytest.mark.parametrize("value", [5, "abc", [1, 2], Foo])
def test_unsupported_types(value):
    with pytest.raises(TypeError, match="is not supported by keys"):
        keys(value)
    with pytest.raises(TypeError, match="is not supported by values"):
        values(value)
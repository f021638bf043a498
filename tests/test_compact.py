from collections import deque
from dataclasses import dataclass

import pytest

from funkit.compact import compact


@dataclass
class Point:
    x: int = 0
    y: int = 0


def non_empty_func():
    return True


def test_compact_nones():
    assert compact([42, None, None]) == [42]


def test_compact_functions():
    result = compact([42, None, non_empty_func])
    assert len(result) == 2
    assert result[0] == 42
    assert result[1] is non_empty_func


def test_compact_containers():
    non_empty_map = {1: 2}
    non_empty_queue = deque([True])
    result = compact(
        [42, {}, [], non_empty_map, {}, non_empty_map, non_empty_queue, deque()]
    )
    assert result == [42, non_empty_map, non_empty_map, non_empty_queue]


def test_compact_scalars():
    assert compact([True, 0, 0.0, "", "42", False]) == [True, "42"]


def test_compact_dataclasses():
    assert compact([Point(), Point(1, 0)]) == [Point(1, 0)]


def test_compact_tuple_input_gives_list():
    assert compact((0, 1, "", "a")) == [1, "a"]


@pytest.mark.parametrize("value", [5, "abc", {"a": 1}, None])
def test_compact_rejects_non_sequences(value):
    with pytest.raises(TypeError, match="First parameter must be array or slice"):
        compact(value)
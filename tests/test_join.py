from __future__ import annotations

from dataclasses import dataclass

import pytest

from funkit.join import inner_join, join, left_join, outer_join, right_join


@dataclass
class Foo:
    id: int
    first_name: str


f = Foo(1, "Foo")
b = Foo(2, "Bar")
c = Foo(3, "Harald")


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (["foo", "bar"], ["bar", "baz"], ["bar"]),
        (["foo", "bar", "bar"], ["bar", "baz"], ["bar"]),
        (["foo", "bar"], ["bar", "bar", "baz"], ["bar"]),
        (["foo", "bar", "bar"], ["bar", "bar", "baz"], ["bar"]),
        ([0, 1, 2, 3, 4], [3, 4, 5, 6, 7], [3, 4]),
        ([f, b], [b, c], [b]),
    ],
)
def test_inner_join(left, right, expected):
    assert join(left, right, inner_join) == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (["foo", "bar"], ["bar", "baz"], ["foo", "baz"]),
        ([0, 1, 2, 3, 4], [3, 4, 5, 6, 7], [0, 1, 2, 5, 6, 7]),
        ([f, b], [b, c], [f, c]),
    ],
)
def test_outer_join(left, right, expected):
    assert join(left, right, outer_join) == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (["foo", "bar"], ["bar", "baz"], ["foo"]),
        ([0, 1, 2, 3, 4], [3, 4, 5, 6, 7], [0, 1, 2]),
        ([f, b], [b, c], [f]),
    ],
)
def test_left_join(left, right, expected):
    assert join(left, right, left_join) == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (["foo", "bar"], ["bar", "baz"], ["baz"]),
        ([0, 1, 2, 3, 4], [3, 4, 5, 6, 7], [5, 6, 7]),
        ([f, b], [b, c], [c]),
    ],
)
def test_right_join(left, right, expected):
    assert join(left, right, right_join) == expected


def test_float_joins():
    assert inner_join([1.5, 2.5, 2.5], [2.5, 3.5]) == [2.5]
    assert outer_join([1.5, 2.5], [2.5, 3.5]) == [1.5, 3.5]


def test_unhashable_items_are_compared_by_equality():
    left = [[1], [2], [2]]
    right = [[2], [3]]
    assert inner_join(left, right) == [[2]]
    assert left_join(left, right) == [[1]]
    assert right_join(left, right) == [[3]]


def test_left_join_keeps_duplicates():
    assert left_join([1, 1, 2], [2]) == [1, 1]


def test_empty_inputs():
    assert inner_join([], [1, 2]) == []
    assert outer_join([], [1, 2]) == [1, 2]


def test_join_rejects_non_collection_first():
    with pytest.raises(TypeError, match="First parameter must be a collection"):
        join("abc", ["a"], inner_join)


def test_join_rejects_non_collection_second():
    with pytest.raises(TypeError, match="Second parameter must be a collection"):
        join(["a"], 3, inner_join)


def test_join_rejects_mixed_types():
    with pytest.raises(TypeError, match="Parameters must have the same type"):
        join([1, 2], (1, 2), inner_join)
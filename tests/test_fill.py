import re

import pytest

from funkit.fill import fill


def test_fill_mismatched_types():
    with pytest.raises(TypeError, match=re.escape("Cannot fill 'list[str]' with 'int'")):
        fill(["a", "b"], 1)


def test_fill_bool_is_not_int():
    with pytest.raises(TypeError, match=re.escape("Cannot fill 'list[int]' with 'bool'")):
        fill([1, 2], True)


@pytest.mark.parametrize("unfillable", ["", 0, False])
def test_fill_unfillable_types(unfillable):
    with pytest.raises(TypeError, match="Can only fill slices and arrays"):
        fill(unfillable, 1)


def test_fill_list():
    values = [1, 2, 3]
    assert fill(values, 1) == [1, 1, 1]
    assert values == [1, 2, 3]


def test_fill_tuple():
    values = (1, 2, 3)
    assert fill(values, 2) == [2, 2, 2]
    assert values == (1, 2, 3)


def test_fill_empty():
    assert fill([], "x") == []
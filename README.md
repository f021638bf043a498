# funkit

Small functional helpers for working with Python lists, tuples, mappings and
dataclass instances. Pure Python, no dependencies.

## Installation

```
pip install funkit
```

## Modules

### `funkit.helpers`

- `is_empty(obj)` / `not_empty(obj)`: `None`, `False`, `""`, numeric zero,
  any empty sized container, and a dataclass instance whose fields all hold
  zero values count as empty.
- `is_zero(obj)`: whether `obj` equals the zero value of its type.
- `zero_of(obj)`: the zero value of `obj`'s type (`type(obj)()`, with
  dataclass fields zeroed), or `None` where there is none.
- `any_of(*args)` / `all_of(*args)`: whether any / all arguments are not
  empty. `any_of()` is `False`, `all_of()` is `True`.
- `is_equal(expected, actual)` (alias `equal`) and `not_equal`: values of
  different types are never equal; `bytes` and `bytearray` compare by content.
- `is_type(expected, actual)`: both values have exactly the same type.
- `is_collection(obj)`: a sequence other than `str`, `bytes` or `bytearray`.
- `is_iteratee(obj)`: a collection or a mapping.
- `is_function(obj, *counts)`: a callable, optionally with the given number
  of positional parameters and of results (read from the return annotation).
- `is_predicate(obj, *types)`: a function annotated to return `bool` whose
  parameters accept the given types (`None` accepts any type; with no types,
  one parameter is expected).
- `to_float64(x)`: an `int` or `float` as `float`; other types raise
  `TypeError`.
- `ptr_of(obj)`: a shallow copy. `slice_of(obj)`: `[obj]`.
- `random_int(low, high)`: a random int in `[low, high)`; raises
  `ValueError` when `high <= low`.
- `random_string(n, allowed_chars=None)`: `n` random characters, by default
  from ASCII letters and digits.
- `shard(text, width, depth, rest_only)`: `depth` pieces of `width`
  characters, followed by the remainder (`rest_only=True`) or the whole text.

### `funkit.compact`

`compact(values)` returns a list of the items that are not empty.

### `funkit.fill`

`fill(values, fill_value)` returns a new list as long as `values`, every item
being `fill_value`. Every existing item must have the type of `fill_value`,
otherwise `TypeError` is raised; non-collections raise `TypeError` too.

### `funkit.mapping`

`keys(obj)` and `values(obj)` for mappings and dataclass instances (field
names and field values). Other types raise `TypeError`.

### `funkit.intersection`

- `intersect(x, y)`: items of `y` also in `x`, in `y`'s order, duplicates kept.
- `intersect_string(x, y)`: the same for sequences of strings.
- `difference(x, y)` / `difference_string(x, y)`: a pair of lists, the items
  of `x` missing from `y` and the items of `y` missing from `x`.

`intersect` and `difference` require both arguments to be collections of the
same type and raise `TypeError` otherwise.

### `funkit.join`

`join(left, right, join_fn)` checks that both arguments are collections of
the same type and calls `join_fn(left, right)`. Join functions:

- `inner_join`: items of `left` also in `right`, each once, in `left`'s order.
- `left_join`: items of `left` not in `right`.
- `right_join`: items of `right` not in `left`.
- `outer_join`: `left_join` followed by `right_join`.

Unhashable items are compared by equality.

### `funkit.assign`

`assign(target, value, path)` sets `value` at a dotted attribute path inside
`target`. Lists and tuples along the path are walked element by element, so
every element receives the value. A `None` found along the path is replaced
by a new instance of the field's annotated type where one can be built. The
value is checked against the field's annotation (or the type of the current
value). An empty path replaces the contents of `target` itself (lists, dicts,
dataclasses and plain objects). Failures raise `AssignError`, a subclass of
`ValueError`.

`must_assign(target, value, path)` does the same and returns `target`.

## Examples

```python
from funkit.compact import compact
from funkit.join import join, inner_join, outer_join
from funkit.helpers import shard

compact([42, None, 0, "", "42", False])             # [42, "42"]
join(["foo", "bar"], ["bar", "baz"], inner_join)    # ["bar"]
join([0, 1, 2, 3, 4], [3, 4, 5, 6, 7], outer_join)  # [0, 1, 2, 5, 6, 7]
shard("e89d66bd", 2, 2, True)                       # ["e8", "9d", "66bd"]
```

```python
from dataclasses import dataclass, field
from funkit.assign import assign

@dataclass
class Bar:
    name: str = ""
    bars: list = field(default_factory=list)

root = Bar("root", [Bar("a"), Bar("b")])
assign(root, "val", "bars.name")
[b.name for b in root.bars]   # ["val", "val"]
```

## What it does not do

funkit offers no chaining or lazy pipeline interface and no general
`map`, `filter`, `reduce`, `chunk` or `flatten` helpers; use Python's
built-ins and comprehensions for those. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```
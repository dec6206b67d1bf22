# combovec

Two small list-like containers:

- `ReArr` (in `combovec.re_arr`): a fixed-capacity array that holds a variable
  number of elements. Pushing past its capacity raises `IndexError`.
- `ComboVec` (in `combovec.combo_vec`): a `ReArr` for the first
  `stack_capacity` elements, followed by an unbounded overflow ("heap") part.
  It never runs out of room. When any elements are in the overflow part, the
  vector is said to have *spilled*.

Both containers share their comparison, formatting and conversion behaviour
through `combovec.base.SequenceMixin`.

## Installation

```
pip install combovec
```

## Building containers

```python
from combovec.re_arr import ReArr
from combovec.combo_vec import ComboVec

arr = ReArr(5, [1, 2, 3])                         # capacity 5, length 3
same = ReArr.from_arr_and_len([1, 2, 3, None, None])
assert arr == same
assert len(same) == 3 and same.capacity() == 5

full = ReArr.from_arr([1, 2, 3])                  # capacity 3, length 3

vec = ComboVec.from_arr([1, 2, 3])                # stack capacity 3
vec.push(4)                                       # goes to the overflow part
assert vec.spilled()
assert vec.stack_len() == 3 and vec.heap_len() == 1
assert vec.to_list() == [1, 2, 3, 4]

heap_only = ComboVec.from_iterable(range(4))      # stack capacity 0
```

In `from_arr_and_len`, `None` marks an empty slot. Once an empty slot is seen,
every later slot must also be empty, or `ValueError` is raised.

## Working with elements

```python
vec = ComboVec.from_arr([1, 2, 3])
vec.extend([4, 5, 6])
assert vec.remove(3) == 4
assert vec.to_list() == [1, 2, 3, 5, 6]
vec.truncate(2)
vec.resize(4, 0)
assert vec.join(", ") == "1, 2, 0, 0"
assert vec.first() == 1 and vec.last() == 0
assert str(vec) == "[1, 2, 0, 0]"
```

The main operations:

- `push`, `pop`, `extend`, `clear`, `truncate`
- `resize(new_len, value)` and `resize_with(new_len, factory)`
- `remove(index)`, which shifts later elements left
- `swap_remove(index)`, which moves the last element into the gap
- `first`, `last`, `get`, `is_empty`, `to_list`, `join`, `copy`

For `ComboVec` there are also `stack_len`, `heap_len`, `stack_capacity`,
`heap_capacity`, `capacity`, `spilled` and `reserve(additional)`.
`reserve` only raises the figure that `heap_capacity()` reports.

## Errors and edge cases

- `get(index)` returns `None` when no element is at `index`.
  `container[index]` raises `IndexError` instead, and it accepts negative
  indices counted from the end.
- `pop()`, `first()` and `last()` return `None` on an empty container.
- On a `ReArr`:
  - `push` and `extend` raise `IndexError` once it is full.
  - `resize` or `resize_with` beyond the capacity raises `ValueError`.
  - `truncate` beyond the capacity raises `IndexError`.
  - `swap_remove` of the last element raises `IndexError`.
- `truncate` to a length greater than the current length leaves the
  container unchanged.

## Comparison

Containers compare element by element and lexicographically, and only with
containers of the same class. They are mutable and unhashable.

## What this package does not include

There are no shorthand builder functions. Containers are created through the
class constructors and the `from_arr`, `from_arr_and_len` and
`from_iterable` class methods shown above.

## Running the tests

```
pip install -e .[test]
pytest
```
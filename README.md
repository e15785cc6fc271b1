# iterkit

Small helpers for working with Python iterables, using only the standard
library.

## Installation

```
pip install iterkit
```

## Modules

### `iterkit.grouping_map`

Group items by key and fold each group in a single pass. Every operation
consumes the input and returns a `dict` from each key to that group's result,
with keys in the order they were first seen.

- `into_grouping_map(pairs)` builds a `GroupingMap` from `(key, value)` pairs.
- `into_grouping_map_by(iterable, key)` keys each element with `key(element)`.

`GroupingMap` methods:

- `aggregate(operation)` calls `operation(acc, key, value)`, where `acc` is
  `None` when the group has no accumulator yet. Returning `None` discards the
  accumulator; a group whose last step discards it is left out of the result.
- `fold(init, operation)` starts each group from a deep copy of `init`.
- `fold_first(operation)` starts each group from its first element.
- `collect(factory=list)` gathers each group's elements, in order, and passes
  them to `factory`.
- `max()`, `max_by(compare)`, `max_by_key(key)` pick the maximum; among equal
  maxima the last one wins.
- `min()`, `min_by(compare)`, `min_by_key(key)` pick the minimum; among equal
  minima the first one wins.
- `minmax()`, `minmax_by(compare)`, `minmax_by_key(key)` give `OneElement(value)`
  for a single-element group and `MinMax(min, max)` otherwise.
- `sum()` and `product()` fold each group with `+` and `*`.

`compare(key, a, b)` returns a negative number, zero or a positive number;
`key(group_key, value)` returns the value to compare by.

### `iterkit.intersperse`

- `intersperse(iterable, element)` yields the items with `element` between
  each pair.
- `intersperse_with(iterable, make_element)` calls `make_element()` for each
  separator, exactly once per gap.

### `iterkit.k_smallest`

- `k_smallest(iterable, k)` returns the `k` smallest items as an ascending
  list. With `k == 0` the input is not read; a negative `k` raises
  `ValueError`.

### `iterkit.kmerge`

- `kmerge(iterables)` lazily merges any number of iterables in ascending order.
- `kmerge_by(iterables, less_than)` merges with a `less_than(a, b)` predicate.
- `KMergeBy` is the iterator both return; it supports `operator.length_hint`.

If every input is sorted, the merged output is sorted too.

### `iterkit.lazy_buffer`

`LazyBuffer(iterable)` keeps the items pulled from an iterator so far:

- `get_next()` buffers one more item and returns whether there was one.
- `prefill(length)` pulls items until the buffer holds `length` or the input
  ends.
- `len(buffer)` and `buffer[index]` (including slices) read the buffered items.

## Examples

```python
from iterkit.grouping_map import into_grouping_map_by
from iterkit.intersperse import intersperse
from iterkit.kmerge import kmerge
from iterkit.k_smallest import k_smallest

into_grouping_map_by(range(1, 8), lambda n: n % 3).sum()
# {1: 12, 2: 7, 0: 9}

list(intersperse([1, 2, 3], 0))            # [1, 0, 2, 0, 3]
list(kmerge([[0, 2, 4], [1, 3, 5], [6]]))  # [0, 1, 2, 3, 4, 5, 6]
k_smallest([5, 1, 4, 2, 3], 2)             # [1, 2]
```

## What it does not do

iterkit is a library only: it has no command-line interface.
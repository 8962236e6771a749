# iteradaptors

Extra iterator adaptors and sources for Python. They work on any iterable
and read their input lazily, except where noted below. The package has no
dependencies outside the standard library.

## Installation

```
pip install iteradaptors
```

To run the test suite:

```
pip install "iteradaptors[test]"
pytest
```

## Contents

| Module | Names |
| --- | --- |
| `iteradaptors.sources` | `repeat_call`, `unfold` / `Unfold`, `iterate` / `Iterate` |
| `iteradaptors.repeatn` | `repeat_n` / `RepeatN` |
| `iteradaptors.put_back_n` | `put_back_n` / `PutBackN` |
| `iteradaptors.multipeek` | `multipeek` / `MultiPeek` |
| `iteradaptors.peek_nth` | `peek_nth` / `PeekNth` |
| `iteradaptors.peeking_take_while` | `peeking_take_while`, `PeekingNext`, `SeqIter` |
| `iteradaptors.rciter` | `rciter` / `RcIter` |
| `iteradaptors.tee` | `tee` / `Tee` |
| `iteradaptors.zip_eq` | `zip_eq` |
| `iteradaptors.zip_longest` | `zip_longest` / `ZipLongest`, `Left`, `Right`, `Both` |
| `iteradaptors.ziptuple` | `multizip` / `Zip` |
| `iteradaptors.unziptuple` | `multiunzip` |
| `iteradaptors.merge_join` | `merge_join_by` / `MergeJoinBy` |
| `iteradaptors.with_position` | `with_position`, `Position` |
| `iteradaptors.pad_tail` | `pad_using` / `PadUsing` |
| `iteradaptors.unique` | `unique`, `unique_by` / `UniqueBy` |
| `iteradaptors.process_results` | `process_results`, `Ok`, `Err`, `ResultsError` |
| `iteradaptors.minmax` | `minmax`, `minmax_by_key`, `minmax_by`, `MinMaxResult`, `NoElements`, `OneElement`, `MinMax` |
| `iteradaptors.permutations` | `permutations` / `Permutations` |
| `iteradaptors.powerset` | `powerset` / `Powerset` |
| `iteradaptors.tuples` | `tuples` / `Tuples`, `TupleBuffer`, `tuple_windows` / `TupleWindows`, `circular_tuple_windows` |
| `iteradaptors.size_hint` | `add`, `add_scalar`, `sub_scalar`, `mul`, `mul_scalar`, `pow_scalar_base`, `hint_max`, `hint_min`, `size_hint_of` |

## Overview

- **Sources.** `repeat_call(f)` yields `f()` forever. `unfold(state, f)` yields
  `f(state)` until it returns `None`. `iterate(x, f)` yields `x`, `f(x)`,
  `f(f(x))`, ... forever. `repeat_n(x, n)` yields `x` exactly `n` times.
- **Peeking.** `put_back_n` lets you push any number of items back onto the
  front (most recent first). `multipeek` has a cursor that moves further ahead
  on each `peek()` and goes back to the front on `next()` or `reset_peek()`.
  `peek_nth` looks `n` items ahead with `peek_nth(n)` without moving anything.
  `peek()` returns a `default` (normally `None`) when nothing is left.
- **Take while.** `peeking_take_while(it, pred)` yields items while `pred`
  holds and leaves the first rejected item in `it`. `it` must have a
  `peeking_next(accept)` method: `PutBackN`, `MultiPeek`, `PeekNth` and
  `SeqIter` (a sequence iterator, forwards or with `reverse=True`) all do.
  Anything else raises `TypeError`.
- **Sharing.** `rciter(it)` returns a handle whose `clone()` shares the same
  underlying iterator. `tee(it)` returns two iterators that both see every item.
- **Zipping.** `zip_eq(a, b)` raises `ValueError` if the lengths differ.
  `zip_longest(a, b)` yields `Both(l, r)`, then `Left(l)` or `Right(r)` once one
  side runs out. `multizip(*its)` zips any number of iterables; `reversed()` on
  it collects the rest and yields it last to first. `multiunzip(rows, arity)`
  returns a tuple of `arity` lists and raises `ValueError` on a row of the
  wrong length.
- **Merge join.** `merge_join_by(left, right, cmp_fn)` walks two ascending
  iterables; `cmp_fn` returns a negative, zero or positive number. Equal pairs
  come out as `Both`, the smaller side alone as `Left` or `Right`. It also has
  `count()`, `last()` and `nth(n)`.
- **Position and padding.** `with_position(it)` yields `(Position, item)` pairs
  with `Position.FIRST`, `MIDDLE`, `LAST` or `ONLY`. `pad_using(it, n, filler)`
  appends `filler(index)` until at least `n` items have been yielded.
- **Unique.** `unique(it)` and `unique_by(it, key)` drop items whose key was
  seen before; `count()` consumes the rest and counts the new keys.
- **Results.** `process_results(items, processor)` calls `processor` on an
  iterator of the values inside the `Ok` items. That iterator stops at the
  first `Err`, whose error is then raised as `ResultsError` (with `.error`).
  Items that are neither `Ok` nor `Err` raise `TypeError`.
- **Min and max.** `minmax`, `minmax_by_key` and `minmax_by` find both in one
  pass; the first minimum and the last maximum win. They return `NoElements()`,
  `OneElement(value)` or `MinMax(minimum, maximum)`; `into_option()` gives
  `None` or a `(minimum, maximum)` pair.
- **Combinatorics.** `permutations(it, k)` yields every `k`-permutation as a
  list, in lexicographic order of positions, reading the source lazily; `k == 0`
  yields one empty list. `powerset(it)` yields every subset as a list, by size.
- **Tuples.** `tuples(it, n)` yields non-overlapping tuples of `n`; after it
  ends, `into_buffer()` returns the leftover items. `tuple_windows(it, n)`
  yields every window of `n` consecutive items. `circular_tuple_windows(it, n)`
  reads the whole input first and yields one window starting at each item,
  wrapping around to the start.

## Size hints

Many adaptors have a `size_hint()` method returning `(lower, upper)`, where
`upper` is `None` when no bound is known. Counts behave like 64-bit unsigned
integers: lower bounds saturate and upper bounds become `None` on overflow.
`iteradaptors.size_hint` holds the arithmetic, and `size_hint_of(obj)` gives a
hint for any object: its own `size_hint()`, else `len()`, else
`__length_hint__`, else `(0, None)`.

## Examples

```python
from iteradaptors.sources import iterate
from iteradaptors.peek_nth import peek_nth
from iteradaptors.zip_longest import zip_longest
from iteradaptors.tuples import tuple_windows
from iteradaptors.minmax import minmax
from iteradaptors.put_back_n import put_back_n
from iteradaptors.peeking_take_while import peeking_take_while

list(zip(range(5), iterate(1, lambda i: i * 3)))
# [(0, 1), (1, 3), (2, 9), (3, 27), (4, 81)]

it = peek_nth([1, 2, 3])
it.peek_nth(1)      # 2, nothing consumed
next(it)            # 1

list(zip_longest([1, 2, 3], "ab"))   # [Both(1, 'a'), Both(2, 'b'), Left(3)]

list(tuple_windows(range(5), 3))     # [(0, 1, 2), (1, 2, 3), (2, 3, 4)]

minmax([4, 1, 7]).into_option()      # (1, 7)

r = put_back_n(range(10))
list(peeking_take_while(r, lambda x: x <= 3))   # [0, 1, 2, 3]
next(r)                                         # 4
```

## What this package does not do

It is a library only: it has no command-line program. It has no general
extension method interface; every adaptor is a plain function or class that
takes the iterable as its first argument.
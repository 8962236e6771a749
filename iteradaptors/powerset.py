"""All subsets of the elements of an iterable, smallest first."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, TypeVar

from .size_hint import (
    USIZE_MAX,
    SizeHint,
    add_scalar,
    pow_scalar_base,
    size_hint_of,
    sub_scalar,
)

T = TypeVar("T")

_MISSING: Any = object()


class Powerset(Iterator[List[T]]):
    """Yields every subset as a list: by size, then in lexicographic index order.

    The source is read lazily, one element at a time as larger subsets need it.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._pool: List[T] = []
        self._indices: List[int] = []
        self._first = True
        self._done = False
        # Count of yielded elements, saturating.
        self._pos = 0

    def _pull(self) -> bool:
        if self._iter is None:
            return False
        item = next(self._iter, _MISSING)
        if item is _MISSING:
            self._iter = None
            return False
        self._pool.append(item)
        return True

    def _reset(self, k: int) -> None:
        self._indices = list(range(k))
        self._first = True
        self._done = False
        while len(self._pool) < k and self._pull():
            pass

    def _next_combination(self) -> Optional[List[T]]:
        if self._done:
            return None
        k = len(self._indices)
        if self._first:
            self._first = False
            if k > len(self._pool):
                self._done = True
                return None
        else:
            if k == 0:
                self._done = True
                return None
            i = k - 1
            if self._indices[i] == len(self._pool) - 1:
                self._pull()
            while self._indices[i] == i + len(self._pool) - k:
                if i == 0:
                    self._done = True
                    return None
                i -= 1
            self._indices[i] += 1
            for j in range(i + 1, k):
                self._indices[j] = self._indices[j - 1] + 1
        return [self._pool[i] for i in self._indices]

    def __next__(self) -> List[T]:
        combo = self._next_combination()
        if combo is None:
            k = len(self._indices)
            if k < len(self._pool) or k == 0:
                self._reset(k + 1)
                combo = self._next_combination()
            if combo is None:
                raise StopIteration
        self._pos = min(self._pos + 1, USIZE_MAX)
        return combo

    def size_hint(self) -> SizeHint:
        source = (0, 0) if self._iter is None else size_hint_of(self._iter)
        src_total = add_scalar(source, len(self._pool))
        self_total = pow_scalar_base(2, src_total)
        if self._pos < USIZE_MAX:
            return sub_scalar(self_total, self._pos)
        return 0, self_total[1]


def powerset(iterable: Iterable[T]) -> Powerset[T]:
    """Iterate the powerset of the elements of ``iterable``."""
    return Powerset(iterable)
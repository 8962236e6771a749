"""Pad an iterable to a minimum length."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional, TypeVar

from .size_hint import SizeHint, hint_max, size_hint_of

P = TypeVar("P")


class PadUsing(Iterator[P]):
    """Yields the elements of an iterable, then ``filler(index)`` up to ``min_len`` items."""

    def __init__(self, iterable: Iterable[P], min_len: int, filler: Callable[[int], P]) -> None:
        if min_len < 0:
            raise ValueError("min_len must not be negative")
        self._iter: Optional[Iterator[P]] = iter(iterable)
        self._min = min_len
        self._pos = 0
        self._filler = filler

    def __next__(self) -> P:
        if self._iter is not None:
            try:
                item = next(self._iter)
            except StopIteration:
                self._iter = None
            else:
                self._pos += 1
                return item
        if self._pos >= self._min:
            raise StopIteration
        value = self._filler(self._pos)
        self._pos += 1
        return value

    def size_hint(self) -> SizeHint:
        tail = max(self._min - self._pos, 0)
        if self._iter is None:
            return tail, tail
        return hint_max(size_hint_of(self._iter), (tail, tail))


def pad_using(iterable: Iterable[P], min_len: int, filler: Callable[[int], P]) -> PadUsing[P]:
    """Pad ``iterable`` to at least ``min_len`` items using ``filler(index)``."""
    return PadUsing(iterable, min_len, filler)
"""Take elements while a predicate holds, without losing the first rejected one."""

from __future__ import annotations

from typing import Callable, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

from .size_hint import SizeHint

T = TypeVar("T")


@runtime_checkable
class PeekingNext(Protocol[T]):
    """An iterator that can look at its next element before giving it up."""

    def __next__(self) -> T:
        """Return the next element."""

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it.

        Otherwise raise StopIteration and leave the element in place.
        """


class SeqIter(Iterator[T]):
    """Iterator over a sequence, forwards or backwards, that supports peeking."""

    def __init__(self, sequence: Sequence[T], reverse: bool = False) -> None:
        self._seq = sequence
        size = len(sequence)
        self._order = range(size - 1, -1, -1) if reverse else range(size)
        self._pos = 0

    def __next__(self) -> T:
        if self._pos >= len(self._order):
            raise StopIteration
        item = self._seq[self._order[self._pos]]
        self._pos += 1
        return item

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it; otherwise raise StopIteration."""
        saved = self._pos
        item = next(self)
        if not accept(item):
            self._pos = saved
            raise StopIteration
        return item

    def __len__(self) -> int:
        return len(self._order) - self._pos

    def size_hint(self) -> SizeHint:
        remaining = len(self)
        return remaining, remaining


def _take_while(iterator: PeekingNext[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    while True:
        try:
            item = iterator.peeking_next(predicate)
        except StopIteration:
            return
        yield item


def peeking_take_while(iterator: PeekingNext[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield elements of ``iterator`` while ``predicate`` holds.

    The first element that fails ``predicate`` stays in ``iterator``.
    Raises TypeError if ``iterator`` cannot peek.
    """
    if not isinstance(iterator, PeekingNext):
        raise TypeError(f"{type(iterator).__name__} does not support peeking_next")
    return _take_while(iterator, predicate)
"""Filter out elements whose key has been seen before."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator, Optional, Set, TypeVar

from .size_hint import SizeHint, size_hint_of

T = TypeVar("T")


class UniqueBy(Iterator[T]):
    """Yields each element whose key was not produced by an earlier element.

    Without a key function the element itself is the key.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        key: Optional[Callable[[T], Hashable]] = None,
    ) -> None:
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._key = key
        self._used: Set[Any] = set()

    def _key_of(self, item: T) -> Any:
        return item if self._key is None else self._key(item)

    def __next__(self) -> T:
        if self._iter is not None:
            for item in self._iter:
                key = self._key_of(item)
                if key not in self._used:
                    self._used.add(key)
                    return item
            self._iter = None
        raise StopIteration

    def count(self) -> int:
        """Consume the iterator and return how many elements it would have yielded."""
        if self._iter is None:
            return 0
        before = len(self._used)
        self._used.update(self._key_of(item) for item in self._iter)
        self._iter = None
        return len(self._used) - before

    def size_hint(self) -> SizeHint:
        if self._iter is None:
            return 0, 0
        low, high = size_hint_of(self._iter)
        return (1 if low > 0 and not self._used else 0), high


def unique(iterable: Iterable[T]) -> UniqueBy[T]:
    """Yield the elements of ``iterable`` that have not been seen before."""
    return UniqueBy(iterable)


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> UniqueBy[T]:
    """Yield the elements of ``iterable`` whose ``key`` has not been seen before."""
    return UniqueBy(iterable, key)
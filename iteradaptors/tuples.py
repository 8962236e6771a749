"""Group elements into fixed-size tuples, or slide a fixed-size window over them."""

from __future__ import annotations

from collections import deque
from itertools import cycle, islice
from typing import Any, Deque, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("tuple size must be at least 1")


class TupleBuffer(Iterator[T]):
    """The elements left over when the source did not fill a whole tuple."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items: Deque[T] = deque(items)

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class Tuples(Iterator[Tuple[T, ...]]):
    """Yields consecutive, non-overlapping tuples of ``n`` elements.

    Elements that do not fill a final tuple are kept; see :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._n = n
        self._buffer: List[T] = []

    def __next__(self) -> Tuple[T, ...]:
        items = [] if self._iter is None else list(islice(self._iter, self._n))
        if len(items) == self._n:
            return tuple(items)
        self._iter = None
        self._buffer = items
        raise StopIteration

    def into_buffer(self) -> TupleBuffer[T]:
        """Return the elements that were too few to form a tuple."""
        return TupleBuffer(self._buffer)


class TupleWindows(Iterator[Tuple[T, ...]]):
    """Yields every contiguous window of ``n`` elements as a tuple."""

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iter = iter(iterable)
        self._n = n
        self._window: Optional[Deque[T]] = None
        if n != 1:
            first = next(self._iter, _MISSING)
            if first is not _MISSING:
                rest = list(islice(self._iter, n - 2))
                if len(rest) == n - 2:
                    # A duplicate of the first element is shifted out on the first step.
                    self._window = deque([first, first, *rest], maxlen=n)

    def __next__(self) -> Tuple[T, ...]:
        if self._n == 1:
            return (next(self._iter),)
        if self._window is not None:
            item = next(self._iter, _MISSING)
            if item is not _MISSING:
                self._window.append(item)
                return tuple(self._window)
        raise StopIteration


def tuples(iterable: Iterable[T], n: int) -> Tuples[T]:
    """Group the elements of ``iterable`` into tuples of ``n``."""
    return Tuples(iterable, n)


def tuple_windows(iterable: Iterable[T], n: int) -> TupleWindows[T]:
    """Iterate all windows of ``n`` consecutive elements of ``iterable``."""
    return TupleWindows(iterable, n)


def circular_tuple_windows(iterable: Iterable[T], n: int) -> Iterator[Tuple[T, ...]]:
    """Iterate one window of ``n`` elements starting at each element, wrapping around."""
    items = list(iterable)
    return islice(TupleWindows(cycle(items), n), len(items))
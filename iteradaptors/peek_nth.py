"""An iterator adaptor that can look any number of elements ahead."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional, TypeVar

from .size_hint import SizeHint, add_scalar, size_hint_of

T = TypeVar("T")

_MISSING: Any = object()


class PeekNth(Iterator[T]):
    """Iterator that can peek at the ``n``-th upcoming element without advancing.

    Repeated peeks return the same value until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._buf: Deque[T] = deque()

    def _fill(self, count: int) -> None:
        while self._iter is not None and len(self._buf) < count:
            item = next(self._iter, _MISSING)
            if item is _MISSING:
                self._iter = None
            else:
                self._buf.append(item)

    def peek(self, default: Any = None) -> Any:
        """Return the next element without advancing, or ``default``."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the ``n``-th upcoming element without advancing, or ``default``."""
        if n < 0:
            raise ValueError("n must not be negative")
        self._fill(n + 1)
        return self._buf[n] if n < len(self._buf) else default

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next element if ``accept`` approves it; otherwise raise StopIteration."""
        item = self.peek(_MISSING)
        if item is _MISSING or not accept(item):
            raise StopIteration
        return next(self)

    def __next__(self) -> T:
        if self._buf:
            return self._buf.popleft()
        self._fill(1)
        if not self._buf:
            raise StopIteration
        return self._buf.popleft()

    def size_hint(self) -> SizeHint:
        inner = (0, 0) if self._iter is None else size_hint_of(self._iter)
        return add_scalar(inner, len(self._buf))


def peek_nth(iterable: Iterable[T]) -> PeekNth[T]:
    """Wrap ``iterable`` so that elements ahead can be peeked at by index."""
    return PeekNth(iterable)
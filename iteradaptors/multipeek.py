"""An iterator adaptor that can peek at several upcoming elements."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional, TypeVar

from .size_hint import SizeHint, add_scalar, size_hint_of

V = TypeVar("V")

_EMPTY: Any = object()


class MultiPeek(Iterator[V]):
    """Iterator with a peeking cursor that moves further ahead on every ``peek``.

    Calling ``next`` resets the cursor to the front. The wrapped iterator is
    never advanced again once it has been exhausted.
    """

    def __init__(self, iterable: Iterable[V]) -> None:
        self._iter: Optional[Iterator[V]] = iter(iterable)
        self._buf: Deque[V] = deque()
        self._index = 0

    def _pull(self) -> Any:
        if self._iter is not None:
            try:
                return next(self._iter)
            except StopIteration:
                self._iter = None
        return _EMPTY

    def reset_peek(self) -> None:
        """Move the peeking cursor back to the front."""
        self._index = 0

    def peek(self, default: Any = None) -> Any:
        """Return the element under the cursor and move the cursor forward.

        Returns ``default`` without moving the cursor when nothing is left.
        """
        if self._index >= len(self._buf):
            fetched = self._pull()
            if fetched is _EMPTY:
                return default
            self._buf.append(fetched)
        value = self._buf[self._index]
        self._index += 1
        return value

    def peeking_next(self, accept: Callable[[V], bool]) -> V:
        """Return the next element if ``accept`` approves it; otherwise raise StopIteration."""
        upcoming = self._buf[0] if self._buf else self.peek(_EMPTY)
        if upcoming is not _EMPTY and not accept(upcoming):
            raise StopIteration
        return next(self)

    def __next__(self) -> V:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        fetched = self._pull()
        if fetched is _EMPTY:
            raise StopIteration
        return fetched

    def size_hint(self) -> SizeHint:
        inner = size_hint_of(self._iter) if self._iter is not None else (0, 0)
        return add_scalar(inner, len(self._buf))


def multipeek(iterable: Iterable[V]) -> MultiPeek[V]:
    """Wrap ``iterable`` so that several upcoming elements can be peeked at."""
    return MultiPeek(iterable)
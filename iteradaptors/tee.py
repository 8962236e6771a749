"""Split one iterable into two independent iterators over the same elements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Iterable, Iterator, Tuple, TypeVar

from .size_hint import SizeHint, add_scalar, size_hint_of

T = TypeVar("T")


@dataclass
class _TeeBuffer:
    iterator: Iterator[Any]
    backlog: Deque[Any] = field(default_factory=deque)
    # Which half should read from the backlog.
    owner: bool = False


class Tee(Iterator[T]):
    """One half of a pair of iterators that both yield every element."""

    def __init__(self, buffer: _TeeBuffer, ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __next__(self) -> T:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def size_hint(self) -> SizeHint:
        buffer = self._buffer
        hint = size_hint_of(buffer.iterator)
        if buffer.owner == self._id:
            return add_scalar(hint, len(buffer.backlog))
        return hint


def tee(iterable: Iterable[T]) -> Tuple[Tee[T], Tee[T]]:
    """Return two iterators that each yield all elements of ``iterable``."""
    buffer = _TeeBuffer(iter(iterable))
    return Tee(buffer, True), Tee(buffer, False)
"""Tag each element with its position: first, middle, last or only."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


class Position(enum.Enum):
    """Where an element stands in the sequence."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def with_position(iterable: Iterable[T]) -> Iterator[Tuple[Position, T]]:
    """Yield ``(position, element)`` pairs for every element of ``iterable``."""
    it = iter(iterable)
    current = next(it, _MISSING)
    if current is _MISSING:
        return
    position = Position.FIRST
    for item in it:
        yield position, current
        position = Position.MIDDLE
        current = item
    yield (Position.ONLY if position is Position.FIRST else Position.LAST), current
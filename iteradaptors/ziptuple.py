"""Run any number of iterables in lock step."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple

from .size_hint import USIZE_MAX, SizeHint, hint_min, size_hint_of


class Zip(Iterator[Tuple[Any, ...]]):
    """Yields tuples until any of the component iterators runs out.

    Components are advanced in order, so earlier ones may give one element
    more than later ones when the lengths differ.
    """

    def __init__(self, *iterables: Iterable[Any]) -> None:
        if not iterables:
            raise ValueError("multizip needs at least one iterable")
        self._iters = [iter(iterable) for iterable in iterables]

    def __next__(self) -> Tuple[Any, ...]:
        return tuple([next(it) for it in self._iters])

    def __reversed__(self) -> Iterator[Tuple[Any, ...]]:
        """Iterate the remaining tuples from last to first, consuming this iterator."""
        return reversed(list(self))

    def size_hint(self) -> SizeHint:
        hint: SizeHint = (USIZE_MAX, None)
        for it in self._iters:
            hint = hint_min(size_hint_of(it), hint)
        return hint


def multizip(*args: Iterable[Any]) -> Zip:
    """Zip any number of iterables into tuples."""
    return Zip(*args)
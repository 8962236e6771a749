"""Iterators that produce elements from parameters rather than another iterator."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .size_hint import USIZE_MAX, SizeHint

T = TypeVar("T")
S = TypeVar("S")


def repeat_call(function: Callable[[], T]) -> Iterator[T]:
    """Yield ``function()`` forever."""
    while True:
        yield function()


class Unfold(Iterator[T], Generic[S, T]):
    """Yields ``f(state)`` until it returns ``None``.

    ``state`` is passed to ``f`` on every step; ``f`` may mutate it.
    """

    def __init__(self, initial_state: S, f: Callable[[S], Optional[T]]) -> None:
        self.state = initial_state
        self._f = f

    def __next__(self) -> T:
        value = self._f(self.state)
        if value is None:
            raise StopIteration
        return value


def unfold(initial_state: S, f: Callable[[S], Optional[T]]) -> Unfold[S, T]:
    """Create an iterator driven by ``f`` and a mutable ``initial_state``."""
    return Unfold(initial_state, f)


class Iterate(Iterator[S]):
    """Yields ``x``, ``f(x)``, ``f(f(x))``, ... forever."""

    def __init__(self, initial_value: S, f: Callable[[S], S]) -> None:
        self._state = initial_value
        self._f = f

    def __next__(self) -> S:
        current = self._state
        self._state = self._f(current)
        return current

    def size_hint(self) -> SizeHint:
        return USIZE_MAX, None


def iterate(initial_value: S, f: Callable[[S], S]) -> Iterate[S]:
    """Create an iterator that repeatedly applies ``f`` to a value."""
    return Iterate(initial_value, f)
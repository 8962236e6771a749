"""Share one underlying iterator between several handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TypeVar

from .size_hint import SizeHint, size_hint_of

T = TypeVar("T")


@dataclass
class _Shared:
    iterator: Iterator[Any]
    busy: bool = False


class RcIter(Iterator[T]):
    """A handle on a shared iterator; every clone advances the same iterator.

    Advancing a handle from inside the shared iterator's own ``next`` raises
    RuntimeError.
    """

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared

    def clone(self) -> RcIter[T]:
        """Return another handle on the same iterator."""
        return RcIter(self._shared)

    __copy__ = clone

    def __next__(self) -> T:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("shared iterator re-entered while advancing")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False

    def size_hint(self) -> SizeHint:
        # Other handles may drain elements, so no lower bound can be promised.
        return 0, size_hint_of(self._shared.iterator)[1]


def rciter(iterable: Iterable[T]) -> RcIter[T]:
    """Wrap ``iterable`` in a handle that can be cloned to share its iterator."""
    return RcIter(_Shared(iter(iterable)))
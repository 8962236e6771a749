"""An iterator that yields one element a fixed number of times."""

from typing import Iterator, TypeVar

from .size_hint import SizeHint

E = TypeVar("E")

_TAKEN = object()


class RepeatN(Iterator[E]):
    """Yields ``element`` ``n`` times, then stays exhausted."""

    def __init__(self, element: E, n: int) -> None:
        if n < 0:
            raise ValueError("repeat count must not be negative")
        self._n = n
        self._element = element if n > 0 else _TAKEN

    def __next__(self) -> E:
        if self._n > 1:
            self._n -= 1
            return self._element
        self._n = 0
        element, self._element = self._element, _TAKEN
        if element is _TAKEN:
            raise StopIteration
        return element

    def __len__(self) -> int:
        return self._n

    def size_hint(self) -> SizeHint:
        return self._n, self._n


def repeat_n(element: E, n: int) -> RepeatN[E]:
    """Create an iterator that produces ``n`` repetitions of ``element``."""
    return RepeatN(element, n)
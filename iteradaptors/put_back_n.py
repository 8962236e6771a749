"""An iterator adaptor that can have any number of items pushed back onto its front."""

from typing import Callable, Iterable, Iterator, TypeVar

from .size_hint import SizeHint, add_scalar, size_hint_of

Item = TypeVar("Item")


class PutBackN(Iterator[Item]):
    """Iterator whose front can receive pushed-back items, most recent first."""

    def __init__(self, iterable: Iterable[Item]) -> None:
        self._top: list[Item] = []
        self._iter = iter(iterable)

    def put_back(self, x: Item) -> None:
        """Put ``x`` in front of the iterator."""
        self._top.append(x)

    def __next__(self) -> Item:
        return self._top.pop() if self._top else next(self._iter)

    def peeking_next(self, accept: Callable[[Item], bool]) -> Item:
        """Return the next item if ``accept`` approves it; otherwise raise StopIteration."""
        item = next(self)
        if accept(item):
            return item
        self.put_back(item)
        raise StopIteration

    def size_hint(self) -> SizeHint:
        return add_scalar(size_hint_of(self._iter), len(self._top))


def put_back_n(iterable: Iterable[Item]) -> PutBackN[Item]:
    """Create an iterator onto which values can be put back."""
    return PutBackN(iterable)
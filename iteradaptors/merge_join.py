"""Merge-join two ascending iterables, pairing elements that compare equal."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from .size_hint import SizeHint, add_scalar, size_hint_of
from .zip_longest import Both, EitherOrBoth, Left, Right

L = TypeVar("L")
R = TypeVar("R")
_V = TypeVar("_V")

_ABSENT: Any = object()

_Tail = Optional[Tuple[Iterator[Any], Callable[[Any], EitherOrBoth]]]


class _PutBack(Generic[_V]):
    """A fused iterator with a single slot for one pushed-back item."""

    def __init__(self, iterable: Iterable[_V]) -> None:
        self._iter: Optional[Iterator[_V]] = iter(iterable)
        self._slot: Any = _ABSENT

    def take(self) -> Any:
        if self._slot is not _ABSENT:
            item, self._slot = self._slot, _ABSENT
            return item
        if self._iter is None:
            return _ABSENT
        item = next(self._iter, _ABSENT)
        if item is _ABSENT:
            self._iter = None
        return item

    def put_back(self, item: _V) -> None:
        self._slot = item

    def rest(self) -> Iterator[_V]:
        while (item := self.take()) is not _ABSENT:
            yield item

    def size_hint(self) -> SizeHint:
        base = (0, 0) if self._iter is None else size_hint_of(self._iter)
        return add_scalar(base, 0 if self._slot is _ABSENT else 1)


class MergeJoinBy(Iterator[EitherOrBoth]):
    """Walks two ascending iterables together.

    ``cmp_fn(left, right)`` returns a negative number, zero or a positive
    number. Equal pairs come out as :class:`Both`; the smaller side comes
    out alone as :class:`Left` or :class:`Right`.
    """

    def __init__(
        self,
        left: Iterable[L],
        right: Iterable[R],
        cmp_fn: Callable[[L, R], int],
    ) -> None:
        self._left: _PutBack[L] = _PutBack(left)
        self._right: _PutBack[R] = _PutBack(right)
        self._cmp = cmp_fn

    def _step(self) -> Tuple[Optional[EitherOrBoth], _Tail]:
        """Produce one item.

        The second value is set once one side has run dry: the remaining
        items of the other side and the wrapper that labels them.
        """
        left = self._left.take()
        right = self._right.take()
        if left is _ABSENT and right is _ABSENT:
            return None, None
        if right is _ABSENT:
            return Left(left), (self._left.rest(), Left)
        if left is _ABSENT:
            return Right(right), (self._right.rest(), Right)
        order = self._cmp(left, right)
        if order == 0:
            return Both(left, right), None
        if order < 0:
            self._right.put_back(right)
            return Left(left), None
        self._left.put_back(left)
        return Right(right), None

    def __next__(self) -> EitherOrBoth:
        item, _ = self._step()
        if item is None:
            raise StopIteration
        return item

    def count(self) -> int:
        """Consume the iterator and return how many items it would have yielded."""
        total = 0
        while True:
            item, tail = self._step()
            if item is None:
                return total
            total += 1
            if tail is not None:
                return total + sum(1 for _ in tail[0])

    def last(self) -> Optional[EitherOrBoth]:
        """Consume the iterator and return its final item, or ``None`` if empty."""
        previous: Optional[EitherOrBoth] = None
        while True:
            item, tail = self._step()
            if item is None:
                return previous
            if tail is not None:
                rest, wrap = tail
                final = deque(rest, maxlen=1)
                return wrap(final[0]) if final else item
            previous = item

    def nth(self, n: int) -> Optional[EitherOrBoth]:
        """Skip ``n`` items and return the next one, or ``None`` if there is none."""
        if n < 0:
            raise ValueError("n must not be negative")
        while True:
            item, tail = self._step()
            if item is None or n == 0:
                return item
            n -= 1
            if tail is not None:
                rest, wrap = tail
                found = next(islice(rest, n, None), _ABSENT)
                return None if found is _ABSENT else wrap(found)

    def size_hint(self) -> SizeHint:
        a_low, a_high = self._left.size_hint()
        b_low, b_high = self._right.size_hint()
        high = None if a_high is None or b_high is None else a_high + b_high
        return max(a_low, b_low), high


def merge_join_by(
    left: Iterable[L],
    right: Iterable[R],
    cmp_fn: Callable[[L, R], int],
) -> MergeJoinBy:
    """Merge-join ``left`` and ``right`` in ascending order using ``cmp_fn``."""
    return MergeJoinBy(left, right, cmp_fn)
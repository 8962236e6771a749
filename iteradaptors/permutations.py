"""All ``k``-permutations of the elements of an iterable, in lexicographic index order."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Any, Iterable, Iterator, List, Optional, TypeVar, Union

from .size_hint import USIZE_MAX, SizeHint

T = TypeVar("T")

_MISSING: Any = object()


@dataclass
class _StartUnknownLen:
    k: int


@dataclass
class _OngoingUnknownLen:
    k: int
    min_n: int


@dataclass
class _CompleteStart:
    n: int
    k: int


@dataclass
class _CompleteOngoing:
    indices: List[int]
    cycles: List[int]


@dataclass
class _Empty:
    pass


_CompleteState = Union[_CompleteStart, _CompleteOngoing]
_State = Union[_StartUnknownLen, _OngoingUnknownLen, _CompleteStart, _CompleteOngoing, _Empty]


def _advance_complete(state: _CompleteState) -> _CompleteState:
    if isinstance(state, _CompleteStart):
        n, k = state.n, state.k
        return _CompleteOngoing(list(range(n)), list(range(n - 1, n - k - 1, -1)))
    indices, cycles = state.indices, state.cycles
    n, k = len(indices), len(cycles)
    for i in reversed(range(k)):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices.append(indices.pop(i))
        else:
            j = n - cycles[i]
            indices[i], indices[j] = indices[j], indices[i]
            cycles[i] -= 1
            return state
    return _CompleteStart(n, k)


def _remaining(state: _CompleteState) -> int:
    if isinstance(state, _CompleteStart):
        if state.n < state.k:
            return 0
        return prod(range(state.n - state.k + 1, state.n + 1))
    count = 0
    radix = len(state.indices)
    for offset, cycle in enumerate(state.cycles):
        count = count * (radix - offset) + cycle
    return count


class Permutations(Iterator[List[T]]):
    """Yields every ordered selection of ``k`` distinct positions as a list.

    Elements are pulled from the source lazily: the first permutations are
    produced before the source's length is known.
    """

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self._iter: Optional[Iterator[T]] = iter(iterable)
        self._vals: List[T] = []
        self._state: _State
        if k == 0:
            # A single empty permutation, whatever the source holds.
            self._state = _CompleteStart(0, 0)
            return
        while len(self._vals) < k:
            if not self._pull():
                self._state = _Empty()
                return
        self._state = _StartUnknownLen(k)

    def _pull(self) -> bool:
        if self._iter is None:
            return False
        item = next(self._iter, _MISSING)
        if item is _MISSING:
            self._iter = None
            return False
        self._vals.append(item)
        return True

    def _drain(self) -> int:
        if self._iter is None:
            return 0
        rest = sum(1 for _ in self._iter)
        self._iter = None
        return rest

    def _advance(self) -> None:
        match self._state:
            case _StartUnknownLen(k=k):
                self._state = _OngoingUnknownLen(k, k)
            case _OngoingUnknownLen(k=k, min_n=min_n):
                if self._pull():
                    self._state = _OngoingUnknownLen(k, min_n + 1)
                else:
                    n = min_n
                    complete: _CompleteState = _CompleteStart(n, k)
                    # Skip the permutations already produced while the length was unknown.
                    for _ in range(n - k + 2):
                        complete = _advance_complete(complete)
                    self._state = complete
            case _CompleteStart() | _CompleteOngoing():
                self._state = _advance_complete(self._state)
            case _:
                pass

    def __next__(self) -> List[T]:
        self._advance()
        match self._state:
            case _OngoingUnknownLen(k=k, min_n=min_n):
                return [*self._vals[: k - 1], self._vals[min_n - 1]]
            case _CompleteOngoing(indices=indices, cycles=cycles):
                return [self._vals[i] for i in indices[: len(cycles)]]
            case _:
                self._state = _Empty()
                raise StopIteration

    def count(self) -> int:
        """Consume the iterator and return how many permutations were left."""
        match self._state:
            case _StartUnknownLen(k=k):
                n = len(self._vals) + self._drain()
                result = _remaining(_CompleteStart(n, k))
            case _OngoingUnknownLen(k=k, min_n=min_n):
                already = min_n - k + 1
                n = len(self._vals) + self._drain()
                result = _remaining(_CompleteStart(n, k)) - already
            case _CompleteStart() | _CompleteOngoing():
                result = _remaining(self._state)
            case _:
                result = 0
        self._state = _Empty()
        return result

    def size_hint(self) -> SizeHint:
        match self._state:
            case _StartUnknownLen() | _OngoingUnknownLen():
                return 0, None
            case _CompleteStart() | _CompleteOngoing():
                left = _remaining(self._state)
                if left > USIZE_MAX:
                    return USIZE_MAX, None
                return left, left
            case _:
                return 0, 0


def permutations(iterable: Iterable[T], k: int) -> Permutations[T]:
    """Iterate all ``k``-permutations of the elements of ``iterable``."""
    return Permutations(iterable, k)
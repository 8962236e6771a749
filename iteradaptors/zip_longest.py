"""Zip two iterables to the end of the longer one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar, Union

from .size_hint import SizeHint, hint_max, size_hint_of

A = TypeVar("A")
B = TypeVar("B")

_MISSING = object()


@dataclass(frozen=True)
class Left(Generic[A]):
    """Only the left iterable had an element."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """Only the right iterable had an element."""

    value: B


@dataclass(frozen=True)
class Both(Generic[A, B]):
    """Both iterables had an element."""

    left: A
    right: B


EitherOrBoth = Union[Left[A], Right[B], Both[A, B]]


def _advance(it: Optional[Iterator]) -> object:
    return _MISSING if it is None else next(it, _MISSING)


def _hint(it: Optional[Iterator]) -> SizeHint:
    return (0, 0) if it is None else size_hint_of(it)


class ZipLongest(Iterator[EitherOrBoth]):
    """Pairs elements of two iterables until both are exhausted."""

    def __init__(self, a: Iterable[A], b: Iterable[B]) -> None:
        self._a: Optional[Iterator[A]] = iter(a)
        self._b: Optional[Iterator[B]] = iter(b)

    def __next__(self) -> EitherOrBoth:
        a = _advance(self._a)
        if a is _MISSING:
            self._a = None
        b = _advance(self._b)
        if b is _MISSING:
            self._b = None
        if a is _MISSING and b is _MISSING:
            raise StopIteration
        if b is _MISSING:
            return Left(a)
        if a is _MISSING:
            return Right(b)
        return Both(a, b)

    def size_hint(self) -> SizeHint:
        return hint_max(_hint(self._a), _hint(self._b))


def zip_longest(a: Iterable[A], b: Iterable[B]) -> ZipLongest:
    """Create an iterator over ``a`` and ``b`` that runs to the longer one's end."""
    return ZipLongest(a, b)
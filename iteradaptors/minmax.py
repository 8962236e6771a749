"""Find the minimum and maximum of an iterable in one pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_MISSING = object()


class MinMaxResult(Generic[T]):
    """Result of a min/max search: :class:`NoElements`, :class:`OneElement` or :class:`MinMax`."""

    __slots__ = ()

    def into_option(self) -> Optional[Tuple[T, T]]:
        """Return ``None`` when empty, otherwise ``(minimum, maximum)``."""
        match self:
            case OneElement(value=x):
                return x, x
            case MinMax(minimum=lo, maximum=hi):
                return lo, hi
            case _:
                return None


@dataclass(frozen=True)
class NoElements(MinMaxResult[T]):
    """The iterable was empty."""


@dataclass(frozen=True)
class OneElement(MinMaxResult[T]):
    """The iterable held exactly one element."""

    value: T


@dataclass(frozen=True)
class MinMax(MinMaxResult[T]):
    """Two or more elements; ``minimum`` is not greater than ``maximum``."""

    minimum: T
    maximum: T


def _minmax_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], Any],
    lt: Callable[[T, T, Any, Any], bool],
) -> MinMaxResult[T]:
    it = iter(iterable)
    x = next(it, _MISSING)
    if x is _MISSING:
        return NoElements()
    y = next(it, _MISSING)
    if y is _MISSING:
        return OneElement(x)
    xk, yk = key_for(x), key_for(y)
    if not lt(y, x, yk, xk):
        lo, hi, lo_key, hi_key = x, y, xk, yk
    else:
        lo, hi, lo_key, hi_key = y, x, yk, xk

    # Compare elements pairwise: three comparisons for every two elements.
    for first in it:
        second = next(it, _MISSING)
        first_key = key_for(first)
        if second is _MISSING:
            if lt(first, lo, first_key, lo_key):
                lo = first
            elif not lt(first, hi, first_key, hi_key):
                hi = first
            break
        second_key = key_for(second)
        if not lt(second, first, second_key, first_key):
            small, small_key, large, large_key = first, first_key, second, second_key
        else:
            small, small_key, large, large_key = second, second_key, first, first_key
        if lt(small, lo, small_key, lo_key):
            lo, lo_key = small, small_key
        if not lt(large, hi, large_key, hi_key):
            hi, hi_key = large, large_key

    return MinMax(lo, hi)


def minmax(iterable: Iterable[T]) -> MinMaxResult[T]:
    """Minimum and maximum by natural order; the first minimum and the last maximum win."""
    return _minmax_impl(iterable, lambda _: None, lambda a, b, _ka, _kb: a < b)


def minmax_by_key(iterable: Iterable[T], key: Callable[[T], K]) -> MinMaxResult[T]:
    """Minimum and maximum by ``key``; the first minimum and the last maximum win."""
    return _minmax_impl(iterable, key, lambda _a, _b, ka, kb: ka < kb)


def minmax_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> MinMaxResult[T]:
    """Minimum and maximum by a comparison returning a negative, zero or positive int."""
    return _minmax_impl(iterable, lambda _: None, lambda a, b, _ka, _kb: compare(a, b) < 0)
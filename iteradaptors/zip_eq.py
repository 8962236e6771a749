"""Zip two iterables that must have the same length."""

from collections.abc import Iterable, Iterator


def zip_eq(i: Iterable, j: Iterable) -> Iterator[tuple]:
    """Iterate ``i`` and ``j`` in lock step.

    Raises ValueError if one ends before the other.
    """
    return zip(i, j, strict=True)
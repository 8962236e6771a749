"""Split an iterable of tuples into one list per column."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple


def multiunzip(iterable: Iterable[Iterable[Any]], arity: int) -> Tuple[List[Any], ...]:
    """Consume rows of ``arity`` items and return ``arity`` column lists.

    Raises ValueError if ``arity`` is negative or a row has a different length.
    """
    if arity < 0:
        raise ValueError("arity must not be negative")
    columns: Tuple[List[Any], ...] = tuple([] for _ in range(arity))
    for row in iterable:
        values = tuple(row)
        if len(values) != arity:
            raise ValueError(f"expected {arity} items per row, got {len(values)}")
        for column, value in zip(columns, values):
            column.append(value)
    return columns
"""Run a function over the values of an iterable of results, stopping at the first error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failure carrying an error value."""

    error: E


class ResultsError(Exception, Generic[E]):
    """Raised by :func:`process_results` when the iterable produced an :class:`Err`."""

    def __init__(self, error: E) -> None:
        super().__init__(error)
        self.error = error


def process_results(iterable: Iterable[Any], processor: Callable[[Iterator[Any]], R]) -> R:
    """Call ``processor`` on the values of the :class:`Ok` items of ``iterable``.

    The iterator handed to ``processor`` ends at the first :class:`Err`; once
    ``processor`` returns, that error is raised as :class:`ResultsError`.
    Otherwise ``processor``'s return value is returned.
    """
    failure: Optional[Err[Any]] = None

    def values() -> Iterator[Any]:
        nonlocal failure
        for item in iterable:
            match item:
                case Ok(value=value):
                    yield value
                case Err():
                    failure = item
                    return
                case _:
                    raise TypeError(f"expected Ok or Err, got {type(item).__name__}")

    result = processor(values())
    if failure is not None:
        raise ResultsError(failure.error)
    return result
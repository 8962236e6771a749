from itertools import islice

from hypothesis import given
from hypothesis import strategies as st
import pytest

from iteradaptors.unique import unique, unique_by


class _Flaky:
    """Ends once, then yields 0, then ends for good."""

    def __init__(self, values):
        self._it = iter(values)
        self._ends = 0

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return next(self._it)
        except StopIteration:
            self._ends += 1
            if self._ends == 2:
                return 0
            raise


def _hints(it):
    hints = [it.size_hint()]
    for _ in it:
        hints.append(it.size_hint())
    return hints


def _violations(hints):
    remaining = range(len(hints) - 1, -1, -1)
    return [
        (rem, (low, high))
        for rem, (low, high) in zip(remaining, hints)
        if low > rem or (high is not None and high < rem)
    ]


def test_unique_keeps_first_occurrence():
    assert list(unique([3, 1, 3, 2, 1])) == [3, 1, 2]


def test_unique_by_key():
    assert list(unique_by(["a", "bb", "c", "dd", "eee"], len)) == ["a", "bb", "eee"]


def test_size_hint_values():
    it = unique([1, 2])
    assert it.size_hint() == (1, 2)
    next(it)
    assert it.size_hint() == (0, 1)


def test_count_after_partial_iteration():
    it = unique([1, 1, 2, 3, 2])
    assert next(it) == 1
    assert it.count() == 2
    with pytest.raises(StopIteration):
        next(it)


def test_fused_unique():
    it = unique(_Flaky([5, 6]))
    assert list(it) == [5, 6]
    for _ in range(5):
        with pytest.raises(StopIteration):
            next(it)


def test_fused_unique_by():
    it = unique_by(_Flaky([150, 250, 7]), lambda x: x % 100)
    assert list(it) == [150, 7]
    with pytest.raises(StopIteration):
        next(it)


@given(st.lists(st.integers(-128, 127)))
def test_size_unique(data):
    hints = _hints(unique(data))
    assert len(hints) == len(set(data)) + 1
    assert _violations(hints) == []


@given(st.lists(st.integers(-128, 127)), st.integers(0, 255))
def test_count_unique(data, take_first):
    answer = len(set(data))
    it = unique(data)
    first_count = sum(1 for _ in islice(it, take_first))
    rest_count = it.count()
    assert first_count + rest_count == answer


@given(st.lists(st.integers(-1000, 1000)))
def test_unique_by_keys_are_distinct(data):
    result = list(unique_by(data, lambda x: x % 100))
    keys = [x % 100 for x in result]
    assert len(keys) == len(set(keys))
    assert set(keys) == {x % 100 for x in data}
import copy

from hypothesis import given
from hypothesis import strategies as st
import pytest

from iteradaptors.rciter import rciter
from iteradaptors.ziptuple import multizip


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


def test_documented_example():
    it = rciter(range(9))
    z = zip(it.clone(), it.clone())
    assert next(z) == (0, 1)
    assert next(z) == (2, 3)
    assert next(z) == (4, 5)
    assert next(it) == 6
    assert next(z) == (7, 8)
    assert next(z, None) is None


def test_copy_shares_state():
    it = rciter([1, 2, 3])
    other = copy.copy(it)
    assert next(other) == 1
    assert next(it) == 2
    assert list(other) == [3]


def test_size_hint_has_no_lower_bound():
    it = rciter([1, 2, 3])
    assert it.size_hint() == (0, 3)
    next(it)
    assert it.size_hint() == (0, 2)


def test_reentry_raises():
    cell = []
    rc = rciter(next(cell[0]) for _ in range(3))
    cell.append(rc)
    with pytest.raises(RuntimeError):
        next(rc)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_size_zip_rc(a, b):
    rc = rciter(a)
    hints = _hints(multizip(rc.clone(), rc.clone(), b))
    assert len(hints) == min(len(a) // 2, len(b)) + 1
    assert _violations(hints) == []


@given(st.lists(st.integers()))
def test_clones_split_elements(data):
    it = rciter(data)
    first, second = it.clone(), it.clone()
    seen = []
    for x in first:
        seen.append(x)
        y = next(second, None)
        if y is not None:
            seen.append(y)
    assert sorted(seen) == sorted(data)
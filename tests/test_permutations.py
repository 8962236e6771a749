import itertools
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradaptors.permutations import permutations


def assert_correct_size_hint(it):
    hints = [it.size_hint()]
    for _ in it:
        hints.append(it.size_hint())
    total = len(hints) - 1
    for remaining, (low, high) in zip(range(total, -1, -1), hints):
        assert low <= remaining
        assert high is None or high >= remaining


def assert_correct_count(make):
    total = sum(1 for _ in make())
    for consumed in range(total + 1):
        it = make()
        for _ in range(consumed):
            next(it)
        assert it.count() == total - consumed


def test_two_of_three():
    assert list(permutations([0, 1, 2], 2)) == [
        [0, 1],
        [0, 2],
        [1, 0],
        [1, 2],
        [2, 0],
        [2, 1],
    ]


def test_k_larger_than_input_is_empty():
    perms = permutations([1, 2], 3)
    assert perms.size_hint() == (0, 0)
    assert list(perms) == []


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        permutations([1, 2], -1)


@given(st.integers(min_value=0, max_value=20))
def test_k_zero_yields_once(n):
    assert list(permutations(range(n), 0)) == [[]]


@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=5))
def test_lexicographic_order(a, b):
    n, k = max(a, b), min(a, b)
    perms = list(permutations(range(n), k))
    assert perms[0] == list(range(k))
    for prev, cur in zip(perms, perms[1:]):
        assert cur > prev
    assert perms[-1] == list(range(n - k, n))[::-1]


@given(st.sets(st.integers(), max_size=5), st.integers(min_value=0, max_value=6))
def test_permutations_are_distinct_and_valid(vals, k):
    seen = set()
    for perm in permutations(vals, k):
        assert len(perm) == k
        assert all(p in vals for p in perm)
        assert len(set(perm)) == k
        key = tuple(perm)
        assert key not in seen
        seen.add(key)


@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=6))
def test_matches_standard_library(n, k):
    expected = [list(p) for p in itertools.permutations(range(n), k)]
    assert list(permutations((x for x in range(n)), k)) == expected


@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=6))
def test_count_from_every_position(n, k):
    assert_correct_count(lambda: permutations(range(n), k))


@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=6))
def test_size_hint_with_known_length(n, k):
    assert_correct_size_hint(permutations(iter(range(n)), k))


@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=6))
def test_size_hint_with_unknown_length(n, k):
    assert_correct_size_hint(permutations((x for x in range(n)), k))


def test_size_hint_unknown_until_source_exhausted():
    perms = permutations(range(5), 2)
    assert perms.size_hint() == (0, None)


def test_count_of_large_input():
    assert permutations(range(25), 25).count() == math.factorial(25)


def test_exhausted_stays_exhausted():
    perms = permutations([1], 0)
    assert list(perms) == [[]]
    with pytest.raises(StopIteration):
        next(perms)
    assert perms.count() == 0
import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradaptors.unziptuple import multiunzip


def test_documented_example():
    inputs = [(1, 2, 3), (4, 5, 6), (7, 8, 9)]
    a, b, c = multiunzip(inputs, 3)
    assert a == [1, 4, 7]
    assert b == [2, 5, 8]
    assert c == [3, 6, 9]


def test_empty_input_gives_empty_columns():
    assert multiunzip([], 2) == ([], [])


def test_zero_arity():
    assert multiunzip([(), ()], 0) == ()


def test_row_length_mismatch_raises():
    with pytest.raises(ValueError):
        multiunzip([(1, 2), (3,)], 2)


def test_negative_arity_raises():
    with pytest.raises(ValueError):
        multiunzip([], -1)


@given(st.lists(st.tuples(st.integers(), st.text(max_size=3), st.booleans()), max_size=20))
def test_round_trip_with_zip(rows):
    columns = multiunzip(rows, 3)
    assert len(columns) == 3
    assert list(zip(*columns)) == rows


@given(st.lists(st.lists(st.integers(), min_size=4, max_size=4), max_size=10))
def test_columns_have_row_count(rows):
    columns = multiunzip(iter(rows), 4)
    assert all(len(column) == len(rows) for column in columns)
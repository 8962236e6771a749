import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradaptors.put_back_n import put_back_n


def _hint_report(it):
    """Drain ``it``; return how many items it gave and which hints were wrong."""
    hints = [it.size_hint()]
    hints.extend(it.size_hint() for _ in it)
    wrong = [
        (left, hint)
        for left, hint in enumerate(reversed(hints))
        if hint[0] > left or (hint[1] is not None and hint[1] < left)
    ]
    return len(hints) - 1, wrong


def test_put_back_documented_example():
    it = put_back_n(range(1, 5))
    next(it)
    it.put_back(1)
    it.put_back(0)
    assert list(it) == list(range(5))


@pytest.mark.parametrize("source", [list, lambda a: (x for x in a)])
@given(st.lists(st.integers(0, 255)), st.lists(st.integers(0, 255)))
def test_size_put_backn(source, a, b):
    it = put_back_n(source(a))
    for elt in b:
        it.put_back(elt)
    assert _hint_report(it) == (len(a) + len(b), [])


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_put_back_order(a, b):
    it = put_back_n(a)
    for elt in b:
        it.put_back(elt)
    assert list(it) == list(reversed(b)) + a


def test_peeking_next_accepts_and_rejects():
    it = put_back_n([1, 2, 3])
    assert it.peeking_next(lambda x: x < 2) == 1
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x < 2)
    assert list(it) == [2, 3]


def test_peeking_next_on_empty():
    it = put_back_n([])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda _: True)
import heapq
from collections import deque
from itertools import islice, takewhile

from iteradaptors.sources import iterate, repeat_call, unfold

U32_MAX = 2**32 - 1


def test_repeat_call_constant():
    assert list(islice(repeat_call(lambda: 1), 5)) == [1, 1, 1, 1, 1]


def test_repeat_call_drains_heap():
    data = [2, 5, 3, 7, 8]
    heap = list(data)
    heapq.heapify(heap)

    def pop():
        return heapq.heappop(heap) if heap else None

    drained = list(takewhile(lambda x: x is not None, repeat_call(pop)))
    assert drained == sorted(data)
    assert heap == []


def _fibonacci_step(state):
    x1, x2 = state
    nxt = min(x1 + x2, U32_MAX)
    ret = x1
    state[0], state[1] = x2, nxt
    if ret == state[0] and ret > 1:
        return None
    return ret


def test_unfold_fibonacci():
    fib = unfold([1, 1], _fibonacci_step)
    assert list(islice(fib, 8)) == [1, 1, 2, 3, 5, 8, 13, 21]
    last = deque(fib, maxlen=1)
    assert list(last) == [2_971_215_073]


def test_unfold_exposes_state():
    counter = unfold([0], lambda s: None if s[0] >= 3 else s.__setitem__(0, s[0] + 1) or s[0])
    assert list(counter) == [1, 2, 3]
    assert counter.state == [3]


def test_iterate_powers_of_three():
    assert list(islice(iterate(1, lambda i: i * 3), 5)) == [1, 3, 9, 27, 81]


def test_iterate_first_is_initial():
    it = iterate("seed", lambda s: s + "!")
    assert next(it) == "seed"
    assert next(it) == "seed!"
    assert it.size_hint()[1] is None
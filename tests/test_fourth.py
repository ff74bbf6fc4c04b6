import pytest

from toomanylists.fourth import Deque


def _deque(*values):
    d = Deque()
    for value in values:
        d.push_back(value)
    return d


@pytest.mark.parametrize(
    "push, pop", [("push_front", "pop_front"), ("push_back", "pop_back")]
)
def test_basics(push, pop):
    d = Deque()
    assert getattr(d, pop)() is None

    for value in (1, 2, 3):
        getattr(d, push)(value)
    assert [getattr(d, pop)() for _ in range(2)] == [3, 2]

    for value in (4, 5):
        getattr(d, push)(value)
    assert [getattr(d, pop)() for _ in range(4)] == [5, 4, 1, None]


def test_peek():
    d = Deque()
    assert (d.peek_front(), d.peek_back()) == (None, None)

    for value in (1, 2, 3):
        d.push_front(value)
    assert (d.peek_front(), d.peek_back()) == (3, 1)


def test_set_ends():
    d = _deque(1, 2, 3)
    d.set_front(10)
    d.set_back(30)
    assert list(d) == [10, 2, 30]


@pytest.mark.parametrize("method", ["set_front", "set_back"])
def test_set_on_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)(1)


def test_drain_both_ends():
    d = _deque(3, 2, 1)
    it = d.drain()
    assert [next(it), it.next_back(), next(it), it.next_back()] == [3, 1, 2, None]
    with pytest.raises(StopIteration):
        next(it)
    assert len(d) == 0


def test_iter_and_len():
    d = _deque(1, 2, 3)
    d.push_front(0)
    assert (list(d), len(d)) == ([0, 1, 2, 3], 4)
    d.pop_back()
    assert len(d) == 3


def test_drain_yields_none_values():
    assert list(_deque(None, 1).drain()) == [None, 1]


def test_clear():
    d = _deque(*range(5))
    d.clear()
    assert (list(d), d.peek_front(), d.peek_back()) == ([], None, None)
    d.push_back(7)
    assert d.peek_front() == 7
    assert repr(d) == "Deque([7])"
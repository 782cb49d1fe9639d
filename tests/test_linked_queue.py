import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.linked_queue import Queue, main


def test_fifo_order():
    queue = Queue()
    for v in ("a", "b", "c"):
        queue.push(v)
    assert queue.front() == "a"
    assert queue.pop() is True
    assert queue.front() == "b"
    assert len(queue) == 2


def test_pop_empty_returns_false():
    queue = Queue()
    assert queue.pop() is False
    assert len(queue) == 0


def test_front_empty_raises():
    with pytest.raises(IndexError):
        Queue().front()


def test_reuse_after_emptying():
    queue = Queue()
    queue.push(1)
    assert queue.pop() is True
    assert queue.pop() is False
    queue.push(9)
    assert queue.front() == 9
    assert len(queue) == 1


@given(st.lists(st.integers()))
def test_drains_in_push_order(values):
    queue = Queue()
    for v in values:
        queue.push(v)
    assert len(queue) == len(values)
    drained = []
    while len(queue):
        drained.append(queue.front())
        assert queue.pop() is True
    assert drained == values
    assert queue.pop() is False


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "2", "3"]
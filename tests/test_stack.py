import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.stack import Stack, main


def test_lifo_order():
    stack = Stack()
    stack.push("x")
    stack.push("y")
    assert stack.front() == "y"
    assert stack.pop() == "y"
    assert stack.front() == "x"
    assert len(stack) == 1


def test_empty_stack_errors():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.front()


def test_empty_after_popping_everything():
    stack = Stack()
    stack.push(3)
    assert stack.pop() == 3
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.pop()


@given(st.lists(st.integers()))
def test_drains_in_reverse(values):
    stack = Stack()
    for v in values:
        stack.push(v)
    assert len(stack) == len(values)
    drained = [stack.pop() for _ in values]
    assert drained == values[::-1]
    assert len(stack) == 0


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["2", "1"]
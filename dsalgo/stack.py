"""A last-in, first-out stack built from singly linked nodes."""

from __future__ import annotations

import sys
from typing import Any, Optional


class _Node:
    __slots__ = ("val", "under")

    def __init__(self, val: Any, under: Optional[_Node]) -> None:
        self.val = val
        self.under = under


class Stack:
    """A LIFO stack."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._len = 0

    def push(self, val: Any) -> None:
        """Put ``val`` on top of the stack."""
        self._top = _Node(val, self._top)
        self._len += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.under
        self._len -= 1
        return node.val

    def front(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("front of an empty stack")
        return self._top.val

    def __len__(self) -> int:
        return self._len


def main(argv: Optional[list[str]] = None) -> int:
    stack = Stack()
    stack.push(1)
    stack.push(2)
    print(stack.front())
    stack.pop()
    print(stack.front())
    stack.pop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
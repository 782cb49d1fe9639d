"""A first-in, first-out queue built from singly linked nodes."""

from __future__ import annotations

import sys
from typing import Any, Optional


class _Node:
    __slots__ = ("val", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.next: Optional[_Node] = None


class Queue:
    """A FIFO queue with a sentinel head and a tail pointer."""

    def __init__(self) -> None:
        self._head = _Node(None)
        self._tail = self._head
        self._len = 0

    def push(self, val: Any) -> None:
        """Append ``val`` at the back of the queue."""
        node = _Node(val)
        self._tail.next = node
        self._tail = node
        self._len += 1

    def pop(self) -> bool:
        """Drop the front value; return False if the queue was empty."""
        first = self._head.next
        if first is None:
            return False
        self._head.next = first.next
        if self._head.next is None:
            self._tail = self._head
        self._len -= 1
        return True

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        first = self._head.next
        if first is None:
            raise IndexError("front of an empty queue")
        return first.val

    def __len__(self) -> int:
        return self._len


def main(argv: Optional[list[str]] = None) -> int:
    queue = Queue()
    queue.push(1)
    queue.push(2)
    queue.push(3)
    print(queue.front())
    queue.pop()
    print(queue.front())
    queue.pop()
    print(queue.front())
    queue.pop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""A doubly linked list with constant-time operations at both ends."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, Optional, TextIO


class _Node:
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList:
    """A circular doubly linked list built around a sentinel node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._nil = _Node(None)
        self._len = 0
        for item in items or ():
            self.push_back(item)

    def _link_after(self, anchor: _Node, val: Any) -> None:
        node = _Node(val)
        node.prev = anchor
        node.next = anchor.next
        anchor.next.prev = node
        anchor.next = node
        self._len += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._len -= 1
        return node.val

    def push_front(self, val: Any) -> None:
        """Insert ``val`` at the head of the list."""
        self._link_after(self._nil, val)

    def push_back(self, val: Any) -> None:
        """Append ``val`` at the tail of the list."""
        self._link_after(self._nil.prev, val)

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        if self._nil.next is self._nil:
            raise IndexError("pop from an empty list")
        return self._unlink(self._nil.next)

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        if self._nil.prev is self._nil:
            raise IndexError("pop from an empty list")
        return self._unlink(self._nil.prev)

    def __iter__(self) -> Iterator[Any]:
        node = self._nil.next
        while node is not self._nil:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._len

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write each value on its own line, head first."""
        out = file if file is not None else sys.stdout
        for val in self:
            print(val, file=out)


def main(argv: Optional[list[str]] = None) -> int:
    items = LinkedList()
    items.push_front(20)
    items.push_front(30)
    items.push_back(50)
    items.print()

    print()
    print("pop front", items.pop_front())
    items.print()

    print()
    print("pop back", items.pop_back())
    items.print()

    print(items.pop_back())
    return 0


if __name__ == "__main__":
    sys.exit(main())
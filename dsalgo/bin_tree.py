"""An unbalanced binary search tree of distinct keys."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any, Optional, TextIO


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinTree:
    """A plain binary search tree; duplicate keys are ignored."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[_Node] = None
        for item in items or ():
            self.insert(item)

    def _search(self, val: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != val:
            parent = node
            node = node.left if val < node.key else node.right
        return node, parent

    def insert(self, val: Any) -> None:
        """Add ``val`` unless it is already present."""
        node, parent = self._search(val)
        if node is not None:
            return
        new = _Node(val)
        if parent is None:
            self._root = new
        elif val < parent.key:
            parent.left = new
        else:
            parent.right = new

    def contains(self, val: Any) -> bool:
        """Return whether ``val`` is stored in the tree."""
        return self._search(val)[0] is not None

    def __contains__(self, val: Any) -> bool:
        return self.contains(val)

    def _replace_child(
        self, parent: Optional[_Node], old: _Node, new: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def erase(self, val: Any) -> bool:
        """Remove ``val``; return False if it was not present.

        A node with two children takes the smallest key of its right subtree.
        """
        target, parent = self._search(val)
        if target is None:
            return False
        if target.left is None or target.right is None:
            child = target.left if target.left is not None else target.right
            self._replace_child(parent, target, child)
            return True
        succ_parent = target
        succ = target.right
        while succ.left is not None:
            succ_parent = succ
            succ = succ.left
        target.key = succ.key
        self._replace_child(succ_parent, succ, succ.right)
        return True

    def minimum(self) -> Any:
        """Return the smallest key."""
        node = self._root
        if node is None:
            raise ValueError("minimum of an empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """Return the largest key."""
        node = self._root
        if node is None:
            raise ValueError("maximum of an empty tree")
        while node.right is not None:
            node = node.right
        return node.key

    def walk(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(key, depth)`` pairs in post-order."""
        if self._root is None:
            return
        stack: list[tuple[_Node, int, bool]] = [(self._root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield node.key, depth
                continue
            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write one ``key depth`` line per node, in post-order."""
        out = file if file is not None else sys.stdout
        for key, depth in self.walk():
            print(key, depth, file=out)


def main(argv: Optional[list[str]] = None) -> int:
    tree = BinTree()
    for i in range(10):
        tree.insert(i + 2 * i)
        tree.insert(i - 2 * i)
    tree.print()
    print()
    tree.erase(0)
    tree.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
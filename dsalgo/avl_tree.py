"""A self-balancing binary search tree with order statistics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("key", "left", "right", "height", "size")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1
        self.size = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _size(node: Optional[_Node]) -> int:
    return node.size if node else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1
    node.size = _size(node.left) + _size(node.right) + 1


def _factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _factor(node)
    if factor > 1:
        assert node.right is not None
        if _factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor < -1:
        assert node.left is not None
        if _factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Optional[_Node], x: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(x), True
    if x == node.key:
        return node, False
    if x < node.key:
        node.left, added = _insert(node.left, x)
    else:
        node.right, added = _insert(node.right, x)
    return (_rebalance(node), True) if added else (node, False)


def _pop_min(node: _Node) -> tuple[Optional[_Node], _Node]:
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return _rebalance(node), smallest


def _remove(node: Optional[_Node], x: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if x == node.key:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.right, successor = _pop_min(node.right)
        node.key = successor.key
        return _rebalance(node), True
    if x < node.key:
        node.left, removed = _remove(node.left, x)
    else:
        node.right, removed = _remove(node.right, x)
    return (_rebalance(node), True) if removed else (node, False)


class AVLTree:
    """An ordered set of distinct keys kept in a height-balanced tree."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[_Node] = None
        for item in items or ():
            self.insert(item)

    def find(self, x: Any) -> bool:
        """Return whether ``x`` is stored in the tree."""
        node = self._root
        while node is not None:
            if x == node.key:
                return True
            node = node.left if x < node.key else node.right
        return False

    def __contains__(self, x: Any) -> bool:
        return self.find(x)

    def at(self, k: int) -> Any:
        """Return the ``k``-th smallest key, counting from zero."""
        if not 0 <= k < len(self):
            raise IndexError("AVLTree index out of range")
        node = self._root
        while node is not None:
            left_size = _size(node.left)
            if k == left_size:
                return node.key
            if k < left_size:
                node = node.left
            else:
                k -= left_size + 1
                node = node.right
        raise IndexError("AVLTree index out of range")

    def insert(self, x: Any) -> bool:
        """Add ``x``; return False if it was already present."""
        self._root, added = _insert(self._root, x)
        return added

    def remove(self, x: Any) -> bool:
        """Remove ``x``; return False if it was not present."""
        self._root, removed = _remove(self._root, x)
        return removed

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Return the number of levels in the tree; zero when empty."""
        return _height(self._root)
"""Simple in-place sorting routines and binary-heap index helpers."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, MutableSequence
from typing import Any, Optional

Less = Callable[[Any, Any], bool]


def index_left(x: int) -> int:
    """Index of the left child of heap slot ``x``."""
    return x * 2 + 1


def index_right(x: int) -> int:
    """Index of the right child of heap slot ``x``."""
    return x * 2 + 2


def index_parent(x: int) -> int:
    """Index of the parent of heap slot ``x``; the root has none."""
    if x == 0:
        raise ValueError("the root slot has no parent")
    return (x - 1) // 2


def bubble_sort(values: MutableSequence[Any], less: Optional[Less] = None) -> None:
    """Sort ``values`` in place by exchanging out-of-order pairs."""
    less = less or operator.lt
    n = len(values)
    for i in range(n):
        for j in range(i + 1, n):
            if not less(values[i], values[j]):
                values[i], values[j] = values[j], values[i]


def _quick(values: MutableSequence[Any], less: Less, first: int, last: int) -> None:
    i, j = first, last
    pivot = values[(first + last) // 2]
    while True:
        while less(values[i], pivot):
            i += 1
        while less(pivot, values[j]):
            j -= 1
        if i >= j:
            break
        values[i], values[j] = values[j], values[i]
        i += 1
        j -= 1
    if first < i - 1:
        _quick(values, less, first, i - 1)
    if j + 1 < last:
        _quick(values, less, j + 1, last)


def quick_sort(values: MutableSequence[Any], less: Optional[Less] = None) -> None:
    """Sort ``values`` in place with a middle-pivot quicksort."""
    if len(values) > 1:
        _quick(values, less or operator.lt, 0, len(values) - 1)


def selection_sort(values: MutableSequence[Any], less: Optional[Less] = None) -> None:
    """Sort ``values`` in place by repeatedly selecting the smallest rest."""
    less = less or operator.lt
    n = len(values)
    for i in range(n):
        best = i
        for j in range(i + 1, n):
            if less(values[j], values[best]):
                best = j
        values[i], values[best] = values[best], values[i]


def heap_queue(values: MutableSequence[Any], less: Optional[Less] = None) -> None:
    """Sift smaller values towards the root, level by level, in place.

    Afterwards the first slot holds the least value.
    """
    less = less or operator.lt
    n = len(values)
    p = 0
    while p < n:
        p = index_left(p)
        for i in range(n - 1, p - 1, -1):
            par = index_parent(i)
            if less(values[i], values[par]):
                values[i], values[par] = values[par], values[i]


def main(argv: Optional[list[str]] = None) -> int:
    values = [1, 2, 4, 3, -2, 9, -1]
    heap_queue(values)
    for v in values:
        print(v)
    return 0


if __name__ == "__main__":
    sys.exit(main())
# dsalgo

Small, readable implementations of classic data structures and sorting
algorithms, in plain Python with no dependencies.

## What is inside

| Module                 | Provides                                                          |
|------------------------|-------------------------------------------------------------------|
| `dsalgo.avl_tree`      | `AVLTree`: a self-balancing ordered set with rank lookup          |
| `dsalgo.bin_tree`      | `BinTree`: an unbalanced binary search tree                       |
| `dsalgo.linked_list`   | `LinkedList`: a doubly linked list with pushes and pops at both ends |
| `dsalgo.linked_queue`  | `Queue`: a first-in, first-out queue                              |
| `dsalgo.stack`         | `Stack`: a last-in, first-out stack                               |
| `dsalgo.sorting`       | `bubble_sort`, `quick_sort`, `selection_sort`, `heap_queue` and heap index helpers |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### AVL tree

`AVLTree` stores distinct keys and keeps itself height-balanced.

```python
from dsalgo.avl_tree import AVLTree

tree = AVLTree([5, 1, 9, 3])
tree.insert(7)        # True: newly added
tree.insert(7)        # False: already present
3 in tree             # True (same as tree.find(3))
tree.at(0)            # 1, the smallest key; ranks start at 0
list(tree)            # keys in ascending order
tree.remove(9)        # True; False if the key was absent
len(tree)
tree.height()         # number of levels, 0 when empty
```

`at` raises `IndexError` for a rank outside `0 .. len(tree) - 1`.

### Binary search tree

`BinTree` ignores duplicate keys and does no rebalancing. Erasing a node
with two children replaces its key with the smallest key of its right
subtree.

```python
from dsalgo.bin_tree import BinTree

tree = BinTree([8, 3, 10, 1, 6])
tree.insert(4)
tree.contains(6)      # True (same as 6 in tree)
tree.erase(3)         # True; False if the key was absent
tree.minimum(), tree.maximum()
for key, depth in tree.walk():   # post-order, root at depth 0
    ...
tree.print()          # one "key depth" line per node, post-order
```

`minimum` and `maximum` raise `ValueError` on an empty tree.

### Linked list, queue and stack

```python
from dsalgo.linked_list import LinkedList
from dsalgo.linked_queue import Queue
from dsalgo.stack import Stack

items = LinkedList([20, 50])
items.push_front(30)
items.push_back(70)
items.pop_front()     # 30
items.pop_back()      # 70
list(items), len(items)
items.print()         # one value per line, head first

q = Queue()
q.push(1)
q.push(2)
q.front()             # 1
q.pop()               # True; False when the queue was empty

s = Stack()
s.push(1)
s.push(2)
s.front()             # 2
s.pop()               # 2
```

`LinkedList.pop_front`/`pop_back`, `Queue.front`, and `Stack.front`/`pop`
raise `IndexError` when the structure is empty.

### Sorting

Each function rearranges the given list in place. An optional `less(a, b)`
callable replaces the default `<` comparison.

```python
from dsalgo.sorting import bubble_sort, quick_sort, selection_sort, heap_queue

values = [1, 2, 4, 3, -2, 9, -1]
selection_sort(values)
quick_sort(values, lambda a, b: a > b)   # descending
```

`heap_queue` passes over the list level by level, swapping each value with
its parent slot when it is smaller, so that afterwards the first slot holds
the least value. The slot layout is the usual array heap given by
`index_left`, `index_right` and `index_parent`; `index_parent(0)` raises
`ValueError`.

## Command-line demos

Each of these runs a short fixed demonstration and prints the result:

```
dsalgo-bin-tree
dsalgo-list
dsalgo-queue
dsalgo-stack
dsalgo-sort
```

There is no demonstration command for `AVLTree`, and the commands take no
input of their own.
"""AVL tree, binary search tree, linked list, queue, stack and simple sorts."""

__version__ = "0.1.0"
"""Classic data structures and algorithms in plain Python: sorting, heaps,
AVL and binary trees, linked lists, stacks, queues, expressions, graphs,
mazes, tries and dynamic programming."""

__version__ = "0.1.0"
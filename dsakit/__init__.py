"""Classic data structures and algorithms: linked lists, stacks, queues, trees, heaps, graphs, recursion and string utilities."""

__version__ = "0.1.0"
"""Classic data structures (stacks, queues, lists, trees, tries, caches, a
graph and a thread pool) and algorithm routines in plain Python."""

__version__ = "0.1.0"
"""Classic data structures and algorithms for study: stacks, queues and their applications, binary trees, search trees, heaps, and small warm-up and timing utilities."""

__version__ = "0.1.0"
"""Classic data structures and algorithms: stacks, queues, trees, lists, maps and sorting."""

__version__ = "0.1.0"

__all__ = [
    "binarytree",
    "bst",
    "circular_queue",
    "expressions",
    "linkedlist",
    "mapping",
    "sorting",
    "stack",
]
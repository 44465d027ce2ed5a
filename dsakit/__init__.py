"""Classic data structures and algorithms: arrays, sorts, strings, recursion, lists, queues, stacks, graphs and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "binary_tree",
    "circular_list",
    "graphs",
    "linked_list",
    "queues",
    "recursion",
    "sorting",
    "stacks",
    "strings",
]
"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "array_algos",
    "backtracking",
    "containers",
    "doubly_linked_list",
    "linked_list",
    "list_algorithms",
    "matrix",
    "numbers",
    "search",
    "sorting",
    "stacks",
    "strings",
    "tree",
]
"""Classic data structures and algorithms: trees, linked lists, containers,
graphs, arrays, searching, number theory and strings."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "containers",
    "graphs",
    "linked_lists",
    "number_theory",
    "searching",
    "strings",
    "trees",
]
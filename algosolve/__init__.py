"""Solutions to classic algorithm and data-structure problems, with a small command line."""

__version__ = "0.1.0"

__all__ = [
    "structures",
    "trees",
    "linked_lists",
    "heaps",
    "windows",
    "greedy",
    "counting",
    "cli",
]
"""A compact hash table with a sparse index over dense entries, and the structures it is built from."""

__version__ = "0.1.0"
__all__ = ["djbx33a", "entry", "linked_list", "quicksort", "table", "util"]
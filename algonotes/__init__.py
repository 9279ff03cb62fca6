"""Solutions to classic algorithm problems: lists, trees, sequences, strings, numbers, an LRU cache and a max-heap."""

__version__ = "0.1.0"

__all__ = ["caches", "heap", "linked_lists", "numeric", "sequences", "strings", "trees"]
"""A red-black tree with duplicate keys, ordered iteration and node-based erase."""

__version__ = "0.1.0"
__all__ = ["rbtree"]
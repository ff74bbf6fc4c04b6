"""Linked data structures: integer and generic stacks, a persistent list and a deque."""

__version__ = "0.1.0"
__all__ = ["first", "second", "third", "fourth"]
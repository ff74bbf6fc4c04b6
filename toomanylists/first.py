"""A singly linked stack of 32-bit signed integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["IntStack", "Node"]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(eq=False)
class Node:
    """One cell of the stack: an integer and the node below it."""

    elem: int
    next: Node | None = None


class IntStack:
    """Last-in, first-out stack of 32-bit signed integers."""

    def __init__(self) -> None:
        self._head: Node | None = None

    def push(self, elem: int) -> None:
        """Put ``elem`` on top after checking that it is a 32-bit integer."""
        if isinstance(elem, bool) or not isinstance(elem, int):
            raise TypeError(f"IntStack holds integers, not {type(elem).__name__}")
        if not _I32_MIN <= elem <= _I32_MAX:
            raise OverflowError(f"{elem} does not fit in a 32-bit signed integer")
        self._head = Node(elem, self._head)

    def pop(self) -> int | None:
        """Remove the top element and return it, or ``None`` when empty."""
        node = self.pop_node()
        return None if node is None else node.elem

    def pop_node(self) -> Node | None:
        """Remove the top node, detached from the rest, or ``None`` when empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        return node

    def _detach_all(self) -> Iterator[Node]:
        while (node := self.pop_node()) is not None:
            yield node

    def clear(self) -> None:
        """Drop every node from the top down, reporting each one."""
        for node in self._detach_all():
            print(f"Dropping {node.elem}")

    def __bool__(self) -> bool:
        return self._head is not None

    def __del__(self) -> None:
        self.clear()
"""A generic singly linked stack with iteration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """One link of a chain: a value and the node that follows it."""

    elem: T
    next: Optional["Node[T]"] = None


def _walk(node: Optional[Node[T]]) -> Iterator[Node[T]]:
    """Yield ``node`` and every node after it, reading each link before yielding."""
    while node is not None:
        following = node.next
        yield node
        node = following


class Stack(Generic[T]):
    """Last-in, first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, elem: T) -> None:
        """Put ``elem`` on top: 1 -> 2 -> 3 becomes elem -> 1 -> 2 -> 3."""
        self._head = Node(elem, self._head)
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove the top element and return it, or None when empty."""
        node = self.pop_node()
        return None if node is None else node.elem

    def pop_node(self) -> Optional[Node[T]]:
        """Detach the top node and return it with its link cleared."""
        node = self._head
        if node is None:
            return None
        self._head, node.next = node.next, None
        self._size -= 1
        return node

    def peek(self) -> Optional[T]:
        """Return the top element without removing it, or None when empty."""
        return None if self._head is None else self._head.elem

    def peek_node(self) -> Optional[Node[T]]:
        """Return the top node itself so its value can be changed in place."""
        return self._head

    def __iter__(self) -> Iterator[T]:
        """Yield the elements from top to bottom."""
        return (node.elem for node in self.nodes())

    def nodes(self) -> Iterator[Node[T]]:
        """Yield the nodes from top to bottom; their values may be changed."""
        return _walk(self._head)

    def drain(self) -> Iterator[T]:
        """Pop and yield elements until the stack is empty."""
        while self._head is not None:
            yield self.pop()

    def clear(self) -> None:
        """Remove every element, unlinking the nodes one by one."""
        for _ in self._detach_all():
            pass

    def _detach_all(self) -> Iterator[Node[T]]:
        node, self._head, self._size = self._head, None, 0
        while node is not None:
            following, node.next = node.next, None
            yield node
            node = following
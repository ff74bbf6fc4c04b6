"""An immutable singly linked list whose versions share their tails."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from .second import Node, _walk

T = TypeVar("T")


class PersistentList(Generic[T]):
    """A list that is never changed in place.

    ``prepend`` and ``tail`` return new lists that share their nodes with
    the list they were made from.
    """

    __slots__ = ("_head",)

    def __init__(self, _head: Optional[Node[T]] = None) -> None:
        self._head = _head

    def __repr__(self) -> str:
        return f"PersistentList({list(self)!r})"

    def __bool__(self) -> bool:
        return self._head is not None

    def prepend(self, elem: T) -> PersistentList[T]:
        """Return a new list with ``elem`` in front of this one."""
        return PersistentList(Node(elem, self._head))

    def tail(self) -> PersistentList[T]:
        """Return the list without its first element; empty stays empty."""
        return PersistentList(None if self._head is None else self._head.next)

    def head(self) -> Optional[T]:
        """Return the first element, or None when the list is empty."""
        return None if self._head is None else self._head.elem

    def __iter__(self) -> Iterator[T]:
        """Yield the elements from front to back."""
        return (node.elem for node in _walk(self._head))
"""A doubly linked deque with access at both ends."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_FRONT = 0
_BACK = 1


class _Node(Generic[T]):
    """A value with links to its neighbours: ``link[_FRONT]`` and ``link[_BACK]``."""

    __slots__ = ("elem", "link")

    def __init__(self, elem: T) -> None:
        self.elem = elem
        self.link: List[Optional[_Node[T]]] = [None, None]


class Deque(Generic[T]):
    """Double-ended queue built from doubly linked nodes."""

    def __init__(self) -> None:
        self._ends: List[Optional[_Node[T]]] = [None, None]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"

    def _push(self, side: int, elem: T) -> None:
        node = _Node(elem)
        old = self._ends[side]
        if old is None:
            self._ends[1 - side] = node
        else:
            old.link[side] = node
            node.link[1 - side] = old
        self._ends[side] = node
        self._size += 1

    def _pop(self, side: int) -> Optional[T]:
        old = self._ends[side]
        if old is None:
            return None
        new = old.link[1 - side]
        if new is None:
            self._ends[1 - side] = None
        else:
            new.link[side] = None
        self._ends[side] = new
        old.link[1 - side] = None
        self._size -= 1
        return old.elem

    def _peek(self, side: int) -> Optional[T]:
        node = self._ends[side]
        return None if node is None else node.elem

    def _set(self, side: int, value: T) -> None:
        node = self._ends[side]
        if node is None:
            end = "front" if side == _FRONT else "back"
            raise IndexError(f"set_{end} on an empty deque")
        node.elem = value

    def push_front(self, elem: T) -> None:
        """Insert ``elem`` before the first element."""
        self._push(_FRONT, elem)

    def pop_front(self) -> Optional[T]:
        """Remove and return the first element, or None when empty."""
        return self._pop(_FRONT)

    def peek_front(self) -> Optional[T]:
        """Return the first element without removing it, or None."""
        return self._peek(_FRONT)

    def set_front(self, value: T) -> None:
        """Replace the first element; raise IndexError when empty."""
        self._set(_FRONT, value)

    def push_back(self, elem: T) -> None:
        """Insert ``elem`` after the last element."""
        self._push(_BACK, elem)

    def pop_back(self) -> Optional[T]:
        """Remove and return the last element, or None when empty."""
        return self._pop(_BACK)

    def peek_back(self) -> Optional[T]:
        """Return the last element without removing it, or None."""
        return self._peek(_BACK)

    def set_back(self, value: T) -> None:
        """Replace the last element; raise IndexError when empty."""
        self._set(_BACK, value)

    def __iter__(self) -> Iterator[T]:
        """Yield the elements from front to back."""
        node = self._ends[_FRONT]
        while node is not None:
            yield node.elem
            node = node.link[_BACK]

    def drain(self) -> Drain[T]:
        """Return an iterator that removes elements from either end."""
        return Drain(self)

    def clear(self) -> None:
        """Remove every element."""
        while self:
            self.pop_front()


class Drain(Generic[T]):
    """Consuming iterator over a deque, usable from both ends."""

    def __init__(self, deque: Deque[T]) -> None:
        self._deque = deque

    def __iter__(self) -> Drain[T]:
        return self

    def __next__(self) -> T:
        if not self._deque:
            raise StopIteration
        return self._deque.pop_front()  # type: ignore[return-value]

    def next_back(self) -> Optional[T]:
        """Remove and return the last remaining element, or None."""
        return self._deque.pop_back()
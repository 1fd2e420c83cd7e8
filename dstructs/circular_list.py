"""A circular doubly linked list with a sentinel node."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.prev: _Node = self
        self.next: _Node = self


class CircularList(Generic[T]):
    """Doubly linked ring; the sentinel joins the back to the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head = _Node()
        self._size = 0
        for item in items:
            self.push_back(item)

    def is_empty(self) -> bool:
        return self._head.next is self._head

    def front(self) -> T:
        if self.is_empty():
            raise IndexError("front of empty list")
        return self._head.next.data

    def back(self) -> T:
        if self.is_empty():
            raise IndexError("back of empty list")
        return self._head.prev.data

    def _link_after(self, anchor: _Node, data: T) -> None:
        node = _Node(data)
        node.prev = anchor
        node.next = anchor.next
        anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        if node is self._head:
            raise IndexError("pop from empty list")
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def push_front(self, data: T) -> None:
        self._link_after(self._head, data)

    def push_back(self, data: T) -> None:
        self._link_after(self._head.prev, data)

    def pop_front(self) -> T:
        return self._unlink(self._head.next)

    def pop_back(self) -> T:
        return self._unlink(self._head.prev)

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._head:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"
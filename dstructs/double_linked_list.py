"""A doubly linked list."""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoubleLinkedList(Generic[T]):
    """Doubly linked list with head and tail references."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.data

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back of empty list")
        return self._tail.data

    def push_front(self, data: T) -> None:
        node = _Node(data)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def push_back(self, data: T) -> None:
        node = _Node(data)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        node = self._tail
        if node is None:
            raise IndexError("pop from empty list")
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return node.data

    def _node_at(self, index: int) -> _Node:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).data

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        values = sorted(node.data for node in self._nodes())
        for node, value in zip(self._nodes(), values):
            node.data = value

    def reverse(self) -> None:
        for node in list(self._nodes()):
            node.prev, node.next = node.next, node.prev
        self._head, self._tail = self._tail, self._head

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DoubleLinkedList({list(self)!r})"
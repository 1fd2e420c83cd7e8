"""A singly linked list."""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next_node


class ForwardList(Generic[T]):
    """Singly linked list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> _Node:
        if self._head is None:
            raise IndexError("empty list")
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.data

    def back(self) -> T:
        return self._last().data

    def push_front(self, data: T) -> None:
        self._head = _Node(data, self._head)
        self._size += 1

    def push_back(self, data: T) -> None:
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            self._last().next = node
        self._size += 1

    def pop_front(self) -> T:
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        if self._head is None:
            raise IndexError("pop from empty list")
        if self._head.next is None:
            node = self._head
            self._head = None
        else:
            prev = self._head
            while prev.next.next is not None:
                prev = prev.next
            node = prev.next
            prev.next = None
        self._size -= 1
        return node.data

    def __getitem__(self, index: int) -> T:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node.data
        raise IndexError("list index out of range")

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        values = sorted(node.data for node in self._nodes())
        for node, value in zip(self._nodes(), values):
            node.data = value

    def reverse(self) -> None:
        prev = None
        node = self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"
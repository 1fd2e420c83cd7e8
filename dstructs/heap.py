"""Binary min-heap and max-heap kept as complete binary trees."""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Complete binary tree where every parent is no greater than its children.

    New values fill the first free slot in level order and sift up; popping
    moves the last value to the root and sifts it down.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.push(value)

    @staticmethod
    def _higher(a: Any, b: Any) -> bool:
        """True when ``a`` belongs above ``b``."""
        return a < b

    def push(self, value: T) -> None:
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> T:
        """Remove and return the root value."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._higher(items[child], items[best]):
                    best = child
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def breadth_first(self) -> list[T]:
        """Values in level order."""
        return list(self._items)

    def in_order(self) -> list[T]:
        """Values in in-order traversal of the tree."""
        result = []
        stack: list[int] = []
        index = 0
        size = len(self._items)
        while stack or index < size:
            while index < size:
                stack.append(index)
                index = 2 * index + 1
            index = stack.pop()
            result.append(self._items[index])
            index = 2 * index + 2
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MaxHeap(MinHeap[T]):
    """Complete binary tree where every parent is no less than its children."""

    @staticmethod
    def _higher(a: Any, b: Any) -> bool:
        return a > b
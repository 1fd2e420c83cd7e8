"""A bounded first-in, first-out queue backed by a ring buffer."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class RingQueue(Generic[T]):
    """Ring-buffer queue with ``capacity`` slots.

    One slot is always kept free, so at most ``capacity - 1`` items are
    held. Enqueueing onto a full queue is silently ignored.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity - 1

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the rear; does nothing when the queue is full."""
        if self.is_full():
            return
        self._items.append(item)

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"RingQueue({list(self)!r}, capacity={self.capacity})"
"""A chained hash table keyed by single characters."""

from __future__ import annotations

from typing import Iterator

MAX_SIZE = 100


class HashTable:
    """Separate-chaining table mapping one-character keys to integers.

    The bucket count is clamped to ``MAX_SIZE``; a key hashes to its
    offset from ``'a'`` modulo the bucket count.
    """

    def __init__(self, size: int) -> None:
        size = max(0, min(size, MAX_SIZE))
        if size == 0:
            raise ValueError("hash table needs at least one bucket")
        self.size = size
        self._buckets: list[list[list]] = [[] for _ in range(size)]

    @staticmethod
    def _hash(key: str) -> int:
        if not isinstance(key, str) or len(key) != 1:
            raise TypeError("key must be a single character")
        return ord(key) - ord("a")

    def _bucket(self, key: str) -> list[list]:
        return self._buckets[self._hash(key) % self.size]

    def insert(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: str) -> int:
        """Return the value for ``key``, or 0 when it is absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return 0

    def remove(self, key: str) -> None:
        """Remove ``key``; absent keys are ignored."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                return

    def update(self, key: str, value: int) -> None:
        """Change the value for ``key``, inserting it if absent."""
        self.insert(key, value)

    def clear(self) -> None:
        for bucket in self._buckets:
            bucket.clear()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or len(key) != 1:
            return False
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys in bucket order."""
        for bucket in self._buckets:
            for stored_key, _ in bucket:
                yield stored_key
"""A B+ tree supporting insertion and lookup."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import deque
from typing import Any, Optional

DEFAULT_BUCKET_SIZE = 3


class _Node:
    __slots__ = ("keys", "children", "leaf", "next")

    def __init__(self, leaf: bool) -> None:
        self.keys: list[Any] = []
        self.children: list[_Node] = []
        self.leaf = leaf
        self.next: Optional[_Node] = None


class BPlusTree:
    """B+ tree with at most ``bucket_size`` keys in any node.

    All keys live in the leaves, which are chained left to right; internal
    nodes hold copies of separator keys only.
    """

    def __init__(self, bucket_size: int = DEFAULT_BUCKET_SIZE) -> None:
        if bucket_size < 2:
            raise ValueError("bucket size must be at least 2")
        self.bucket_size = bucket_size
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        if self._root is None:
            root = _Node(leaf=True)
            root.keys.append(key)
            self._root = root
            return

        path: list[_Node] = []
        node = self._root
        while not node.leaf:
            path.append(node)
            node = node.children[bisect_right(node.keys, key)]

        node.keys.insert(bisect_left(node.keys, key), key)
        if len(node.keys) <= self.bucket_size:
            return

        split = (self.bucket_size + 1) // 2
        new_leaf = _Node(leaf=True)
        new_leaf.keys = node.keys[split:]
        node.keys = node.keys[:split]
        new_leaf.next = node.next
        node.next = new_leaf
        self._attach(path, node, new_leaf.keys[0], new_leaf)

    def _attach(self, path: list[_Node], left: _Node, key: Any, right: _Node) -> None:
        """Hook ``right`` in beside ``left`` under separator ``key``."""
        while path:
            parent = path.pop()
            index = bisect_left(parent.keys, key)
            parent.keys.insert(index, key)
            parent.children.insert(index + 1, right)
            if len(parent.keys) <= self.bucket_size:
                return
            middle = (self.bucket_size + 1) // 2
            sibling = _Node(leaf=False)
            key = parent.keys[middle]
            sibling.keys = parent.keys[middle + 1 :]
            sibling.children = parent.children[middle + 1 :]
            parent.keys = parent.keys[:middle]
            parent.children = parent.children[: middle + 1]
            left, right = parent, sibling

        new_root = _Node(leaf=False)
        new_root.keys = [key]
        new_root.children = [left, right]
        self._root = new_root

    def search(self, key: Any) -> bool:
        node = self._root
        if node is None:
            return False
        while not node.leaf:
            node = node.children[bisect_right(node.keys, key)]
        return key in node.keys

    def __contains__(self, key: object) -> bool:
        try:
            return self.search(key)
        except TypeError:
            return False

    def levels(self) -> list[list[list[Any]]]:
        """Keys of every node, grouped by depth, each level left to right."""
        result: list[list[list[Any]]] = []
        queue = deque([self._root]) if self._root is not None else deque()
        while queue:
            level = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(list(node.keys))
                queue.extend(node.children)
            result.append(level)
        return result

    def leaf_keys(self) -> list[Any]:
        """All keys in ascending order, read along the leaf chain."""
        node = self._root
        if node is None:
            return []
        while not node.leaf:
            node = node.children[0]
        keys: list[Any] = []
        while node is not None:
            keys.extend(node.keys)
            node = node.next
        return keys

    def __repr__(self) -> str:
        return f"BPlusTree({self.leaf_keys()!r}, bucket_size={self.bucket_size})"
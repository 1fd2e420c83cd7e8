"""A B-tree of minimum degree ``t`` with insertion and deletion."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("keys", "children", "leaf")

    def __init__(self, leaf: bool) -> None:
        self.keys: list[Any] = []
        self.children: list[_Node] = []
        self.leaf = leaf


class BTree:
    """B-tree in which every node but the root holds ``t - 1`` to ``2t - 1`` keys.

    Equal keys may be inserted more than once. Removing a key that is not
    present leaves the tree unchanged.
    """

    def __init__(self, t: int = 2) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self.t = t
        self._root: Optional[_Node] = None

    @property
    def _max_keys(self) -> int:
        return 2 * self.t - 1

    # Insertion

    def insert(self, key: Any) -> None:
        root = self._root
        if root is None:
            root = _Node(leaf=True)
            root.keys.append(key)
            self._root = root
            return
        if len(root.keys) == self._max_keys:
            new_root = _Node(leaf=False)
            new_root.children.append(root)
            self._split_child(new_root, 0)
            index = 1 if new_root.keys[0] < key else 0
            self._insert_non_full(new_root.children[index], key)
            self._root = new_root
        else:
            self._insert_non_full(root, key)

    def _split_child(self, parent: _Node, index: int) -> None:
        t = self.t
        full = parent.children[index]
        sibling = _Node(leaf=full.leaf)
        sibling.keys = full.keys[t:]
        if not full.leaf:
            sibling.children = full.children[t:]
            full.children = full.children[:t]
        middle = full.keys[t - 1]
        full.keys = full.keys[: t - 1]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, middle)

    def _insert_non_full(self, node: _Node, key: Any) -> None:
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if len(node.children[index].keys) == self._max_keys:
                self._split_child(node, index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]
        insort_right(node.keys, key)

    # Deletion

    def remove(self, key: Any) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        root = self._root
        if root is None:
            return
        self._remove(root, key)
        if not root.keys:
            self._root = None if root.leaf else root.children[0]

    def _remove(self, node: _Node, key: Any) -> None:
        index = bisect_left(node.keys, key)
        if index < len(node.keys) and node.keys[index] == key:
            if node.leaf:
                del node.keys[index]
            else:
                self._remove_from_internal(node, index)
            return
        if node.leaf:
            return
        was_last = index == len(node.keys)
        if len(node.children[index].keys) < self.t:
            self._fill(node, index)
        if was_last and index > len(node.keys):
            self._remove(node.children[index - 1], key)
        else:
            self._remove(node.children[index], key)

    def _remove_from_internal(self, node: _Node, index: int) -> None:
        key = node.keys[index]
        left = node.children[index]
        right = node.children[index + 1]
        if len(left.keys) >= self.t:
            predecessor = self._last_key(left)
            node.keys[index] = predecessor
            self._remove(left, predecessor)
        elif len(right.keys) >= self.t:
            successor = self._first_key(right)
            node.keys[index] = successor
            self._remove(right, successor)
        else:
            self._merge(node, index)
            self._remove(left, key)

    @staticmethod
    def _last_key(node: _Node) -> Any:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _first_key(node: _Node) -> Any:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _fill(self, node: _Node, index: int) -> None:
        last = len(node.keys)
        if index != 0 and len(node.children[index - 1].keys) >= self.t:
            self._borrow_from_prev(node, index)
        elif index != last and len(node.children[index + 1].keys) >= self.t:
            self._borrow_from_next(node, index)
        elif index != last:
            self._merge(node, index)
        else:
            self._merge(node, index - 1)

    @staticmethod
    def _borrow_from_prev(node: _Node, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index - 1]
        child.keys.insert(0, node.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[index - 1] = sibling.keys.pop()

    @staticmethod
    def _borrow_from_next(node: _Node, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[index] = sibling.keys.pop(0)

    @staticmethod
    def _merge(node: _Node, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys.pop(index))
        child.keys.extend(sibling.keys)
        child.children.extend(sibling.children)
        del node.children[index + 1]

    # Lookup and traversal

    def search(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return True
            if node.leaf:
                return False
            node = node.children[index]
        return False

    def __contains__(self, key: object) -> bool:
        try:
            return self.search(key)
        except TypeError:
            return False

    def _walk(self, node: _Node) -> Iterator[Any]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in ascending order."""
        if self._root is not None:
            yield from self._walk(self._root)

    def traverse(self) -> list[Any]:
        """All keys in ascending order."""
        return list(self)

    def __repr__(self) -> str:
        return f"BTree({self.traverse()!r}, t={self.t})"
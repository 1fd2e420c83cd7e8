"""An unbalanced binary search tree with several traversal orders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class TreeNode:
    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BST:
    """Binary search tree; inserting an existing value does nothing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def search(self, value: int) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __contains__(self, value: object) -> bool:
        try:
            return self.search(value)
        except TypeError:
            return False

    def _in_order(self) -> Iterator[int]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __iter__(self) -> Iterator[int]:
        return self._in_order()

    def in_order(self) -> list[int]:
        return list(self._in_order())

    def pre_order(self) -> list[int]:
        return self.depth_first()

    def post_order(self) -> list[int]:
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def breadth_first_stack(self) -> list[int]:
        """Level order computed with two stacks, one level at a time."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            next_level: list[TreeNode] = []
            while stack:
                node = stack.pop()
                result.append(node.value)
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            while next_level:
                stack.append(next_level.pop())
        return result

    def breadth_first(self) -> list[int]:
        return [value for level in self.levels() for value in level]

    def depth_first(self) -> list[int]:
        """Pre-order: node, then left subtree, then right subtree."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def levels(self) -> list[list[int]]:
        """Values grouped by depth, each level left to right."""
        result = []
        queue = deque([self.root]) if self.root is not None else deque()
        while queue:
            level = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            result.append(level)
        return result

    def __repr__(self) -> str:
        return f"BST({self.in_order()!r})"
"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 0


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor == -2:
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor == 2:
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: Optional[_Node], value: Any) -> Optional[_Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is None:
            return None
        node = child
    else:
        successor = _min_node(node.right)
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    return _rebalance(node)


class AVLTree(Generic[T]):
    """Height-balanced search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        if value in self:
            return
        self._root = _insert(self._root, value)
        self._size += 1

    def remove(self, value: T) -> None:
        """Remove ``value``; absent values are ignored."""
        if value not in self:
            return
        self._root = _remove(self._root, value)
        self._size -= 1

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self._root)

    def min_value(self) -> T:
        if self._root is None:
            raise ValueError("min_value of empty tree")
        return _min_node(self._root).value

    def balance_factors(self) -> list[tuple[T, int]]:
        """Pairs of (value, right height minus left height), in order."""
        return [(node.value, _balance_factor(node)) for node in self._in_order_nodes()]

    def __contains__(self, value: object) -> bool:
        node = self._root
        try:
            while node is not None:
                if value < node.value:
                    node = node.left
                elif value > node.value:
                    node = node.right
                else:
                    return True
        except TypeError:
            return False
        return False

    def __len__(self) -> int:
        return self._size

    def _in_order_nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[T]:
        for node in self._in_order_nodes():
            yield node.value

    def in_order(self) -> list[T]:
        return list(self)

    def pre_order(self) -> list[T]:
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> list[T]:
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()!r})"
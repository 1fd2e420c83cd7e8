"""A prefix tree over lowercase ASCII words."""

from __future__ import annotations

from typing import Optional


class _TrieNode:
    __slots__ = ("children", "word_end")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.word_end = False


def _check_word(word: str) -> None:
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"unsupported character {char!r}: only a-z allowed")


class Trie:
    """Trie over the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, word: str) -> Optional[_TrieNode]:
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        _check_word(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.word_end = True

    def search(self, word: str) -> bool:
        _check_word(word)
        node = self._find(word)
        return node is not None and node.word_end

    def remove(self, word: str) -> None:
        """Unmark ``word`` and prune branches that no longer lead to words."""
        _check_word(word)
        self._remove(self._root, word, 0)

    def _remove(self, node: _TrieNode, word: str, depth: int) -> bool:
        """Return True when ``node`` is left holding nothing and can be dropped."""
        if depth == len(word):
            node.word_end = False
            return not node.children
        char = word[depth]
        child = node.children.get(char)
        if child is not None and self._remove(child, word, depth + 1):
            del node.children[char]
        return not node.children and not node.word_end

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        try:
            return self.search(word)
        except ValueError:
            return False

    def is_empty(self) -> bool:
        return not self._root.children and not self._root.word_end
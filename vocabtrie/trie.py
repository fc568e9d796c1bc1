"""Prefix trie mapping words to integer positions."""

from __future__ import annotations


class Node:
    """Single vertex in the trie.

    ``position`` is ``None`` unless some word ends exactly here.
    """

    __slots__ = ("children", "position")

    def __init__(self):
        self.children: dict[str, Node] = {}
        self.position: int | None = None

    def insert(self, suffix: str, position: int) -> None:
        node = self
        for ch in suffix:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Node()
            node = child
        node.position = position

    def lookup(self, suffix: str) -> int | None:
        node = self
        for ch in suffix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node.position

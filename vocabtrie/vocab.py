"""Vocabulary: words to insertion-order positions."""

from __future__ import annotations

import logging
from typing import Iterable

from vocabtrie.constants import LOGGER_NAME
from vocabtrie.trie import Node

log = logging.getLogger(LOGGER_NAME)


class Vocab:
    """Trie-backed vocabulary assigning each word its insertion position.

    Positions count every word passed to the constructor or ``extend``,
    duplicates included. Re-adding a word moves it to the new position and
    the old one is left unused.
    """

    __slots__ = ("root", "_next_position")

    def __init__(self, words: Iterable[str] = ()):
        self.root = Node()
        self._next_position = 0
        self.extend(words)

    @property
    def next_position(self) -> int:
        return self._next_position

    def extend(self, words: Iterable[str]) -> None:
        words = list(words)
        start = self._next_position
        for i, word in enumerate(words):
            self.root.insert(word, start + i)
        self._next_position = start + len(words)
        if words:
            log.debug("Inserted %d words at positions %d..%d", len(words), start, self._next_position - 1)

    def lookup(self, word: str) -> int | None:
        return self.root.lookup(word)

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) is not None

    def __repr__(self) -> str:
        return f"Vocab(next_position={self._next_position})"


def construct(words: Iterable[str]) -> Vocab:
    return Vocab(words)


def extend(vocab: Vocab, words: Iterable[str]) -> None:
    vocab.extend(words)


def lookup(vocab: Vocab, word: str) -> int | None:
    return vocab.lookup(word)

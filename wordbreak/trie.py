"""Prefix trie answering word and prefix membership in one walk."""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie.

    *children* maps a lower-cased character to the next node. Keys are kept
    in insertion order; lookups never depend on it.
    """

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class PrefixDictionary:
    """Case-insensitive word list stored as a character trie.

    Built once with :meth:`insert`, then read-only. :meth:`query` has no
    side effects, so any number of threads may read a finished dictionary.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            key = ch.lower()
            child = node.children.get(key)
            if child is None:
                child = node.children[key] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def query(self, text: str, start: int = 0, end: int | None = None) -> tuple[bool, bool]:
        """Classify ``text[start:end]`` against the dictionary.

        Returns ``(is_word, is_prefix)`` where *is_prefix* means some longer
        word extends the range, whether or not the range is itself a word.
        ``(False, False)`` means no word starts with the range at all.
        """
        if end is None:
            end = len(text)
        node = self.root
        for i in range(start, end):
            node = node.children.get(text[i].lower())
            if node is None:
                return False, False
        return node.is_word, bool(node.children)

    def is_word(self, word: str) -> bool:
        return self.query(word)[0]

    def is_prefix(self, prefix: str) -> bool:
        """True if *prefix* is a strict prefix of at least one word."""
        return self.query(prefix)[1]

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size


def build_dictionary(words: Iterable[str]) -> PrefixDictionary:
    """Insert every non-empty word of *words* into a fresh dictionary."""
    dictionary = PrefixDictionary()
    for word in words:
        if word:
            dictionary.insert(word)
    return dictionary

# guarded.py - one-lock wrapper for sharing a PrefixTree between threads.
# The engine has no locking of its own; every call here holds the same
# RLock for its whole duration.

from __future__ import annotations

import threading
from typing import List, Optional

from .trie import DEFAULT_LIMIT, PrefixTree, TrieStats


class GuardedPrefixTree:
    """
    PrefixTree API serialized behind one lock.
    `root` is not exposed: a live node reference would escape the lock.
    """

    def __init__(self, tree: Optional[PrefixTree] = None) -> None:
        self._tree = tree if tree is not None else PrefixTree()
        self._lock = threading.RLock()

    def insert(self, word: object) -> bool:
        with self._lock:
            return self._tree.insert(word)

    def search(self, word: object) -> bool:
        with self._lock:
            return self._tree.search(word)

    def starts_with(self, prefix: object) -> bool:
        with self._lock:
            return self._tree.starts_with(prefix)

    def insert_count(self, word: object) -> int:
        with self._lock:
            return self._tree.insert_count(word)

    def words_with_prefix(self, prefix: object, limit: Optional[int] = DEFAULT_LIMIT) -> List[str]:
        with self._lock:
            return self._tree.words_with_prefix(prefix, limit)

    def delete_word(self, word: object) -> bool:
        with self._lock:
            return self._tree.delete_word(word)

    def all_words(self) -> List[str]:
        with self._lock:
            return self._tree.all_words()

    def word_count(self) -> int:
        with self._lock:
            return self._tree.word_count()

    def clear(self) -> None:
        with self._lock:
            self._tree.clear()

    def statistics(self) -> TrieStats:
        with self._lock:
            return self._tree.statistics()

    def __len__(self) -> int:
        return self.word_count()

    def __contains__(self, word: object) -> bool:
        return self.search(word)

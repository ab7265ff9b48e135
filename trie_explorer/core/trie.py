# trie.py
# Prefix tree (trie) engine behind the explorer.
# Stores lowercase a-z words, answers membership/prefix queries and
# reports structural statistics. Invalid input never raises: booleans
# come back False and sequences come back empty.

from __future__ import annotations

import logging
import string
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Tuple

from typing_extensions import TypedDict

logger = logging.getLogger(__name__)

ALPHABET = frozenset(string.ascii_lowercase)
DEFAULT_LIMIT = 10


class TrieStats(TypedDict):
    """Snapshot of the tree shape, recomputed on every call."""
    total_words: int
    total_nodes: int
    max_depth: int
    average_word_length: float


class TrieNode:
    """
    A single node in the trie.
    children: char -> TrieNode (no stored order, sorted at read time)
    is_terminal: some inserted word ends exactly here
    terminal_count: how many insertions ended here
    """

    __slots__ = ("children", "is_terminal", "terminal_count")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.terminal_count = 0

    def __repr__(self) -> str:
        return (f"TrieNode(children={sorted(self.children)}, "
                f"is_terminal={self.is_terminal}, terminal_count={self.terminal_count})")


def normalize(word: object) -> Optional[str]:
    """Trim + lowercase. None for non-strings and blank input."""
    if not isinstance(word, str):
        return None
    word = word.strip().lower()
    return word or None


class PrefixTree:
    """
    Trie holding distinct words for prefix lookup, used by the CLI and TUI for:
     - adding/deleting words
     - membership and prefix checks
     - alphabetical autocomplete suggestions
     - enumeration and shape statistics
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._word_count = 0

    @property
    def root(self) -> TrieNode:
        """Root node, exposed for read-only structure rendering."""
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: object) -> bool:
        """
        Insert a word. Rejects non-strings, blank input and anything
        outside a-z (checked before a single node is created, so a
        rejected word leaves the tree untouched).
        Re-inserting a stored word succeeds and bumps its terminal_count.
        """
        norm = normalize(word)
        if norm is None or not ALPHABET.issuperset(norm):
            logger.debug("insert rejected: %r", word)
            return False

        node = self._root
        for ch in norm:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt

        if not node.is_terminal:
            node.is_terminal = True
            self._word_count += 1
        node.terminal_count += 1
        logger.debug("inserted %r (count=%d)", norm, node.terminal_count)
        return True

    # search/traversal ---------------------------------------------------------
    def _walk(self, text: object) -> Optional[TrieNode]:
        norm = normalize(text)
        if norm is None:
            return None
        node = self._root
        for ch in norm:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: object) -> bool:
        """True only if the word itself was inserted (not just a prefix)."""
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: object) -> bool:
        """True if the whole prefix path exists, terminal or not."""
        return self._walk(prefix) is not None

    def insert_count(self, word: object) -> int:
        """How many times a stored word was inserted, 0 if absent."""
        node = self._walk(word)
        if node is None or not node.is_terminal:
            return 0
        return node.terminal_count

    def words_with_prefix(self, prefix: object, limit: Optional[int] = DEFAULT_LIMIT) -> List[str]:
        """
        Return up to `limit` stored words starting with `prefix`, sorted.
        The prefix itself is included when it is a stored word.
        limit=None means no limit.
        """
        if limit is not None and limit <= 0:
            return []
        node = self._walk(prefix)
        if node is None:
            return []

        out: List[str] = []
        self._collect(node, normalize(prefix), out, limit)
        out.sort()
        return out

    def all_words(self) -> List[str]:
        """Every stored word, sorted."""
        out: List[str] = []
        self._collect(self._root, "", out, None)
        out.sort()
        return out

    # internal collector ---------------------------------------------------------
    def _collect(self, node: TrieNode, prefix: str, results: List[str], limit: Optional[int]) -> None:
        """
        DFS in alphabetical order, stops as soon as `limit` words are in.
        Iterative: stored words may be longer than the recursion limit.
        """
        stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            if limit is not None and len(results) >= limit:
                return
            node, prefix = stack.pop()
            if node.is_terminal:
                results.append(prefix)
            # reversed so the smallest letter is popped first
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], prefix + ch))

    # deletion -----------------------------------------------------
    def delete_word(self, word: object) -> bool:
        """
        Remove a stored word and prune the nodes only it was using.
        False (and no change) if the word is invalid or not stored.
        """
        norm = normalize(word)
        if norm is None:
            return False
        if not self._delete(norm):
            return False
        self._word_count -= 1
        logger.debug("deleted %r", norm)
        return True

    def _delete(self, word: str) -> bool:
        """
        Clear the word's terminal flag, then walk the recorded path back up
        dropping childless non-terminal nodes. Root is never dropped.
        """
        path: List[Tuple[TrieNode, str]] = []  # (parent, char) per edge
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_terminal:
            return False
        node.is_terminal = False
        node.terminal_count = 0

        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.children or child.is_terminal:
                break
            del parent.children[ch]
        return True

    # bookkeeping -----------------------------------------------------
    def word_count(self) -> int:
        return self._word_count

    def clear(self) -> None:
        """Drop every word by swapping in a fresh root."""
        self._root = TrieNode()
        self._word_count = 0
        logger.debug("tree cleared")

    def statistics(self) -> TrieStats:
        """
        Walk the current tree and report its shape.
        Not cached: every mutation changes the answer.
        """
        acc = self._calculate_stats()
        avg = 0.0
        if acc["words"]:
            # half-up to 2 places (round() would send 1.125 to 1.12)
            avg = float((Decimal(acc["letters"]) / Decimal(acc["words"]))
                        .quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
        return TrieStats(
            total_words=self._word_count,
            total_nodes=acc["nodes"],
            max_depth=acc["max_depth"],
            average_word_length=avg,
        )

    def _calculate_stats(self) -> Dict[str, int]:
        acc = {"nodes": 0, "max_depth": 0, "words": 0, "letters": 0}
        stack: List[Tuple[TrieNode, int]] = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            acc["nodes"] += 1
            acc["max_depth"] = max(acc["max_depth"], depth)
            if node.is_terminal:
                # a terminal at depth d spells a word of length d
                acc["words"] += 1
                acc["letters"] += depth
            stack.extend((child, depth + 1) for child in node.children.values())
        return acc

    # convenience -----------------------------------------------------
    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        """Simple membership check."""
        return self.search(word)

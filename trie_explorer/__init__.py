"""Trie Explorer - interactive prefix tree explorer (CLI + TUI)."""

from trie_explorer.core.trie import PrefixTree, TrieNode

__all__ = ["PrefixTree", "TrieNode"]

__version__ = "0.1.0"

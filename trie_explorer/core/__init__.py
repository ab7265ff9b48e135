"""
trie_explorer.core

The engine behind the Trie Explorer.
Contains:
 - the prefix tree itself (PrefixTree, TrieNode)
 - read-only structure snapshots for tree diagrams
 - word management outcomes and word list filtering
 - a single-lock wrapper for threaded hosts
"""

from .trie import PrefixTree, TrieNode, TrieStats
from .structure import StructureNode, build_structure
from .word_manager import Outcome, OutcomeKind, WordManager
from .word_list import WordListView, filter_words
from .guarded import GuardedPrefixTree

__all__ = [
    "PrefixTree",
    "TrieNode",
    "TrieStats",
    "StructureNode",
    "build_structure",
    "Outcome",
    "OutcomeKind",
    "WordManager",
    "WordListView",
    "filter_words",
    "GuardedPrefixTree",
]

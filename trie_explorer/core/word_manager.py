# word_manager.py
# Add/delete/sample/clear use cases shared by the CLI and the TUI.
# The engine only answers True/False; this layer says *why* and carries
# the message shown to the user.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .samples import SAMPLE_WORDS
from .trie import ALPHABET, PrefixTree

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    ADDED = "added"
    DELETED = "deleted"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    INVALID = "invalid"
    SAMPLES_ADDED = "samples_added"
    NOTHING_ADDED = "nothing_added"
    CLEARED = "cleared"


_SUCCESS = {
    OutcomeKind.ADDED,
    OutcomeKind.DELETED,
    OutcomeKind.SAMPLES_ADDED,
    OutcomeKind.CLEARED,
}


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str
    count: int = 0

    @property
    def ok(self) -> bool:
        """True when the tree changed (callers should refresh)."""
        return self.kind in _SUCCESS


class WordManager:
    """
    Validating front for a PrefixTree.
    Unlike the raw engine, adding a word that is already stored is
    reported as a duplicate and not re-inserted.
    """

    def __init__(self, tree: PrefixTree) -> None:
        self.tree = tree

    def add_word(self, raw: str) -> Outcome:
        word = (raw or "").strip()
        if not word:
            return Outcome(OutcomeKind.EMPTY, "Please enter a word to add.")
        if not ALPHABET.issuperset(word.lower()):
            return Outcome(OutcomeKind.INVALID, "Word can only contain letters.")
        if self.tree.search(word):
            return Outcome(OutcomeKind.DUPLICATE, f'"{word}" already exists in the trie.')
        if not self.tree.insert(word):
            return Outcome(OutcomeKind.INVALID, "Failed to add word. Please try again.")
        logger.info("added word %r", word)
        return Outcome(OutcomeKind.ADDED, f'"{word}" successfully added to the trie!', 1)

    def delete_word(self, raw: str) -> Outcome:
        word = (raw or "").strip()
        if not word:
            return Outcome(OutcomeKind.EMPTY, "Please enter a word to delete.")
        if not self.tree.delete_word(word):
            return Outcome(OutcomeKind.NOT_FOUND, f'"{word}" does not exist in the trie.')
        logger.info("deleted word %r", word)
        return Outcome(OutcomeKind.DELETED, f'"{word}" successfully deleted from the trie!', 1)

    def load_words(self, words: Iterable[str] = SAMPLE_WORDS, label: str = "sample") -> Outcome:
        """Insert the words not stored yet; count only those. `label` names the list in messages."""
        added = sum(1 for w in words if not self.tree.search(w) and self.tree.insert(w))
        if not added:
            return Outcome(OutcomeKind.NOTHING_ADDED, f"All {label} words are already in the trie.")
        logger.info("loaded %d %s words", added, label)
        return Outcome(OutcomeKind.SAMPLES_ADDED, f"Added {added} {label} words to the trie!", added)

    def clear_all(self) -> Outcome:
        removed = self.tree.word_count()
        self.tree.clear()
        logger.info("cleared %d words", removed)
        return Outcome(OutcomeKind.CLEARED, "All words have been cleared from the trie.", removed)

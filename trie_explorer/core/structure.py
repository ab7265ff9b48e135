# structure.py - depth-capped snapshot of the trie for tree diagrams

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .trie import PrefixTree, TrieNode

DEFAULT_DEPTH = 7


@dataclass
class StructureNode:
    """
    Read-only copy of one trie node.
    truncated is set when the depth cap hid existing children.
    """
    prefix: str
    is_terminal: bool
    terminal_count: int
    children: List["StructureNode"] = field(default_factory=list)
    truncated: bool = False

    @property
    def label(self) -> str:
        return self.prefix or "(root)"

    def walk(self) -> Iterator["StructureNode"]:
        """Pre-order iteration, root first."""
        yield self
        for child in self.children:
            yield from child.walk()


def build_structure(tree: PrefixTree, max_depth: int = DEFAULT_DEPTH) -> StructureNode:
    """Copy the tree down to `max_depth` edges below the root."""
    return _snapshot(tree.root, "", 0, max(0, max_depth))


def _snapshot(node: TrieNode, prefix: str, depth: int, max_depth: int) -> StructureNode:
    snap = StructureNode(prefix, node.is_terminal, node.terminal_count)
    if depth >= max_depth:
        snap.truncated = bool(node.children)
        return snap
    for ch in sorted(node.children):
        snap.children.append(_snapshot(node.children[ch], prefix + ch, depth + 1, max_depth))
    return snap

# render.py - Rich renderables shared by the CLI and the TUI

from __future__ import annotations

from typing import List

from rich import box
from rich.columns import Columns
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from trie_explorer.core.structure import StructureNode
from trie_explorer.core.trie import TrieStats
from trie_explorer.core.word_list import WordListView

TERMINAL_MARK = "✓"


def highlight_match(word: str, query: str, style: str = "bold yellow") -> Text:
    """Style every case-insensitive occurrence of `query` inside `word`."""
    text = Text(word)
    needle = query.strip().lower()
    if not needle:
        return text
    hay = word.lower()
    start = hay.find(needle)
    while start != -1:
        text.stylize(style, start, start + len(needle))
        start = hay.find(needle, start + len(needle))
    return text


def suggestions_table(query: str, suggestions: List[str]) -> Table:
    table = Table(title=f"Suggestions ({len(suggestions)})", box=box.SIMPLE, show_header=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("word")
    for i, word in enumerate(suggestions, 1):
        table.add_row(str(i), highlight_match(word, query))
    return table


def stats_table(stats: TrieStats) -> Table:
    table = Table(title="Statistics", box=box.ROUNDED, show_header=False)
    table.add_column("stat", style="cyan")
    table.add_column("value", justify="right")
    table.add_row("Total Words", str(stats["total_words"]))
    table.add_row("Total Nodes", str(stats["total_nodes"]))
    table.add_row("Max Depth", str(stats["max_depth"]))
    table.add_row("Avg Word Length", str(stats["average_word_length"]))
    return table


def words_panel(view: WordListView) -> Panel:
    if not view.total:
        body = Text("No words in the trie yet. Add some words to get started!", style="dim")
    elif not view.words:
        body = Text("No words match the filter.", style="dim")
    else:
        body = Columns(view.words, padding=(0, 2))
    return Panel(body, title="All Words in Trie", subtitle=view.summary)


def node_label(node: StructureNode) -> Text:
    label = Text(node.label, style="bold" if node.is_terminal else "")
    if node.is_terminal:
        label.append(f" {TERMINAL_MARK}", style="green")
        if node.terminal_count > 1:
            label.append(f" x{node.terminal_count}", style="dim")
    return label


def structure_tree(root: StructureNode) -> Tree:
    """Nested Rich tree; '...' marks branches cut by the depth cap."""
    tree = Tree(node_label(root), guide_style="dim")
    _add_children(tree, root)
    return tree


def _add_children(branch: Tree, node: StructureNode) -> None:
    for child in node.children:
        _add_children(branch.add(node_label(child)), child)
    if node.truncated:
        branch.add(Text("...", style="dim"))

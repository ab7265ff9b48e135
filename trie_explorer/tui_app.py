# tui_app.py — Trie Explorer TUI Application
# -------------------------------------------------------
# Text based terminal UI that wraps one PrefixTree into an interactive explorer.
# Features:
#  - Live autocomplete suggestions as you type
#  - Add / delete words, load the sample list, clear everything
#  - Statistics panel, filterable word list, tree diagram
#  - Status messages that fade after a few seconds
# The tree never tells the UI it changed: every successful mutation
# triggers refresh_views() here.
# -------------------------------------------------------

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Input, Static, Tree

from trie_explorer.cli.render import (
    highlight_match,
    node_label,
    stats_table,
    words_panel,
)
from trie_explorer.core.samples import INITIAL_WORDS
from trie_explorer.core.structure import StructureNode, build_structure
from trie_explorer.core.trie import PrefixTree
from trie_explorer.core.word_list import WordListView
from trie_explorer.core.word_manager import Outcome, WordManager
from trie_explorer.utils.config_manager import Config
from trie_explorer.utils.logger_utils import Log


class SuggestionPanel(Static):
    """
    Suggestion list under the search box.
    Shows up to `suggestion_limit` words with the typed prefix highlighted.
    """
    def update_suggestions(self, query: str, suggestions):
        if not query.strip():
            self.update("")
            return
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        body = Text(f"Suggestions ({len(suggestions)}):\n", style="dim")
        for i, word in enumerate(suggestions, 1):
            body.append(f"{i:>2} ")
            body.append_text(highlight_match(word, query))
            body.append("\n")
        self.update(body)


class StructureView(Tree):
    """Tree widget mirroring a depth-capped StructureNode snapshot."""

    def show(self, snapshot: StructureNode) -> None:
        self.clear()
        self.root.set_label(node_label(snapshot))
        self._fill(self.root, snapshot)
        self.root.expand_all()

    def _fill(self, branch, node: StructureNode) -> None:
        for child in node.children:
            if child.children or child.truncated:
                self._fill(branch.add(node_label(child)), child)
            else:
                branch.add_leaf(node_label(child))
        if node.truncated:
            branch.add_leaf(Text("...", style="dim"))


# Main Application -----------------------------------------------------------------
class TrieExplorerApp(App):
    """
    The main Textual app.
    Manages:
     - search input and suggestions
     - word management (add/delete/samples/clear)
     - analysis panels (stats, words, structure)
    Architecture:
     - UI events to WordManager / PrefixTree
     - successful mutations to refresh_views()
     - reactive state to widget updates
    """
    CSS_PATH = "tui_style.css"
    TITLE = "Interactive Trie Explorer"

    # keyboard shortcuts for user
    BINDINGS = [
        ("ctrl+l", "load_samples", "Load Samples"),
        ("ctrl+x", "clear_all", "Clear All"),
        ("ctrl+o", "toggle_order", "Sort A-Z/Z-A"),
        ("ctrl+q", "quit", "Quit"),
    ]

    # reactive values that automatically refresh widgets when changed
    search_text = reactive("")  # whats currently in the search box
    suggestions = reactive(list, always_update=True, init=False)
    word_order = reactive("asc", init=False)

    def __init__(self, tree: Optional[PrefixTree] = None, config: Optional[Config] = None,
                 log: Optional[Log] = None):
        super().__init__()
        self.cfg = config or Config()
        self.log_file = log or Log(self.cfg["log_path"])
        self.trie = tree if tree is not None else PrefixTree()
        self.manager = WordManager(self.trie)
        self._status_timer: Optional[Timer] = None
        self._confirm_clear = False
        self.set_reactive(TrieExplorerApp.word_order, self.cfg["word_order"])
        if self.cfg["load_initial_words"] and self.trie.word_count() == 0:
            self.manager.load_words(INITIAL_WORDS, label="initial")

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with VerticalScroll(id="left"):
                yield Input(placeholder="Type to search and see suggestions…", id="search_input")
                yield SuggestionPanel(id="suggestions")
                yield Static(id="search_result")
                yield Input(placeholder="Enter word to add…", id="add_input")
                yield Input(placeholder="Enter word to delete…", id="delete_input")
                with Horizontal(id="bulk"):
                    yield Button("Load Sample Words", id="samples_button", variant="primary")
                    yield Button("Clear All Words", id="clear_button", variant="error")
                yield Static(id="status")
            with Container(id="right"):
                yield Static(id="stats")
                yield Input(placeholder="Filter words…", id="filter_input")
                with VerticalScroll(id="words_box"):
                    yield Static(id="words")
                yield StructureView("(root)", id="structure")
        yield Footer()

    def on_mount(self):
        """Once UI is ready fill every panel from the current tree."""
        self.refresh_views()

    # Refresh -------------------------------------------------------------
    def refresh_views(self) -> None:
        """Re-read everything from the tree (it sends no change events)."""
        self.query_one("#stats", Static).update(stats_table(self.trie.statistics()))
        self._refresh_words()
        snapshot = build_structure(self.trie, self.cfg["structure_depth"])
        self.query_one(StructureView).show(snapshot)
        self.suggestions = self.trie.words_with_prefix(self.search_text, self.cfg["suggestion_limit"])

    def _refresh_words(self) -> None:
        text = self.query_one("#filter_input", Input).value
        view = WordListView.build(self.trie.all_words(), text, self.word_order)
        self.query_one("#words", Static).update(words_panel(view))

    def show_status(self, message: str, ok: bool = True) -> None:
        color = "green" if ok else "red"
        self.query_one("#status", Static).update(Text(message, style=color))
        if self._status_timer is not None:
            self._status_timer.stop()
        self._status_timer = self.set_timer(self.cfg["message_timeout"], self._clear_status)

    def _clear_status(self) -> None:
        self.query_one("#status", Static).update("")
        self._confirm_clear = False
        self._status_timer = None

    def _apply(self, outcome: Outcome) -> None:
        entry = f"{outcome.kind.value}: {outcome.message}"
        if outcome.ok:
            self.log_file.info(entry)
        else:
            self.log_file.warning(entry)
        self.show_status(outcome.message, outcome.ok)
        if outcome.ok:
            self.refresh_views()

    # Input handling ---------------------------------------------------------
    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search_input":
            self.search_text = event.value
            self.query_one("#search_result", Static).update("")
            self.suggestions = self.trie.words_with_prefix(event.value, self.cfg["suggestion_limit"])
        elif event.input.id == "filter_input":
            self._refresh_words()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search_input":
            self._check_word(event.value)
        elif event.input.id == "add_input":
            outcome = self.manager.add_word(event.value)
            if outcome.ok:
                event.input.value = ""
            self._apply(outcome)
        elif event.input.id == "delete_input":
            outcome = self.manager.delete_word(event.value)
            if outcome.ok:
                event.input.value = ""
            self._apply(outcome)

    def _check_word(self, raw: str) -> None:
        word = raw.strip()
        if not word:
            return
        result = self.query_one("#search_result", Static)
        if self.trie.search(word):
            result.update(Text(f'"{word}" found in the trie!', style="green"))
        else:
            result.update(Text(f'"{word}" not found in the trie.', style="red"))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "samples_button":
            self.action_load_samples()
        elif event.button.id == "clear_button":
            self.action_clear_all()

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        """Refresh the suggestion panel."""
        self.query_one(SuggestionPanel).update_suggestions(self.search_text, suggestions)

    def watch_word_order(self, order):
        self._refresh_words()

    # Actions ----------------------------------------------------------------------
    # triggered by keyboard shortcuts and buttons
    def action_load_samples(self):
        self._apply(self.manager.load_words())

    def action_clear_all(self):
        """First press asks, second press (before the message fades) clears."""
        if not self._confirm_clear:
            self.show_status("Press Clear again to remove all words. This cannot be undone.", ok=False)
            self._confirm_clear = True
            return
        self._confirm_clear = False
        self._apply(self.manager.clear_all())

    def action_toggle_order(self):
        self.word_order = "desc" if self.word_order == "asc" else "asc"


if __name__ == "__main__":
    TrieExplorerApp().run()

"""
cli.py - command line trie explorer
Features:
- Type any fragment to see alphabetical autocomplete suggestions
- Slash commands to add/delete/search words and inspect the tree
- Statistics table, filterable word list and a depth-capped tree diagram
- Session log written through Log, settings kept in a JSON Config
- Uses Rich for tables and formatting
"""

from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from trie_explorer.cli.render import (
    TERMINAL_MARK,
    stats_table,
    structure_tree,
    suggestions_table,
    words_panel,
)
from trie_explorer.core.samples import INITIAL_WORDS
from trie_explorer.core.structure import build_structure
from trie_explorer.core.trie import PrefixTree
from trie_explorer.core.word_list import ORDERS, WordListView
from trie_explorer.core.word_manager import Outcome, WordManager
from trie_explorer.utils.config_manager import Config
from trie_explorer.utils.logger_utils import Log

HELP = [
    ("<text>", "show autocomplete suggestions for <text>"),
    ("/add WORD", "add a word"),
    ("/delete WORD", "delete a word"),
    ("/search WORD", "check whether a word is stored"),
    ("/starts PREFIX", "check whether any word starts with PREFIX"),
    ("/prefix PREFIX [N]", "list up to N words starting with PREFIX"),
    ("/words [FILTER] [asc|desc]", "list all words"),
    ("/stats", "show tree statistics"),
    ("/tree [DEPTH]", "draw the tree structure"),
    ("/samples", "load the sample word list"),
    ("/clear [-y]", "remove every word"),
    ("/config [KEY VALUE]", "show or change a setting"),
    ("/help", "show this help"),
    ("/quit", "exit"),
]


class CLI:
    """Command-line interface (CLI) class to manage user interaction with one PrefixTree."""

    def __init__(self, tree: Optional[PrefixTree] = None, config: Optional[Config] = None,
                 console: Optional[Console] = None, log: Optional[Log] = None):
        """
        Initialize the CLI:
        - Uses the given tree or a fresh one
        - Loads settings (JSON config)
        - Opens the session log
        - Seeds the tree with the initial words when it is empty
        """
        self.cfg = config or Config()
        self.console = console or Console()
        self.log = log or Log(self.cfg["log_path"])
        self.tree = tree if tree is not None else PrefixTree()
        self.manager = WordManager(self.tree)
        self.running = True

        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "/add": self._cmd_add,
            "/delete": self._cmd_delete,
            "/search": self._cmd_search,
            "/starts": self._cmd_starts,
            "/prefix": self._cmd_prefix,
            "/words": self._cmd_words,
            "/stats": self._cmd_stats,
            "/tree": self._cmd_tree,
            "/samples": self._cmd_samples,
            "/clear": self._cmd_clear,
            "/config": self._cmd_config,
            "/help": self._cmd_help,
            "/quit": self._cmd_quit,
        }

        if self.cfg["load_initial_words"] and self.tree.word_count() == 0:
            self.log.info(self.manager.load_words(INITIAL_WORDS, label="initial").message)

    def run(self):
        """
        Main interactive loop of CLI:
        - Prompts the user for input.
        - Slash commands are dispatched, anything else is autocompleted.
        """
        self.console.rule("[bold magenta]Interactive Trie Explorer[/bold magenta]")
        self.console.print("[cyan]Type a prefix to see suggestions. /help lists the commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]trie[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._cmd_quit([])
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        """Process one line of input."""
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            cmd, *args = line.split()
            handler = self.commands.get(cmd.lower())
            if handler is None:
                self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")
                return
            handler(args)
            return
        self._suggest(line, self.cfg["suggestion_limit"])

    # OUTPUT HELPERS ---------------------------------------------------------------
    def _report(self, outcome: Outcome) -> None:
        color = "green" if outcome.ok else "red"
        self.console.print(f"[{color}]{escape(outcome.message)}[/{color}]", highlight=False)
        entry = f"{outcome.kind.value}: {outcome.message}"
        if outcome.ok:
            self.log.info(entry)
        else:
            self.log.warning(entry)

    def _suggest(self, prefix: str, limit: int) -> None:
        words = self.tree.words_with_prefix(prefix, limit)
        if not words:
            self.console.print(f"[yellow]No words start with[/yellow] {escape(repr(prefix))}")
            return
        self.console.print(suggestions_table(prefix, words))

    def _need_arg(self, args: List[str], usage: str) -> Optional[str]:
        if not args:
            self.console.print(f"[red]Usage:[/red] {usage}")
            return None
        return args[0]

    # COMMANDS -----------------------------------------------------------
    def _cmd_add(self, args: List[str]) -> None:
        self._report(self.manager.add_word(" ".join(args)))

    def _cmd_delete(self, args: List[str]) -> None:
        self._report(self.manager.delete_word(" ".join(args)))

    def _cmd_search(self, args: List[str]) -> None:
        word = self._need_arg(args, "/search WORD")
        if word is None:
            return
        if self.tree.search(word):
            self.console.print(f"[green]{escape(repr(word))} found in the trie![/green]")
        else:
            self.console.print(f"[red]{escape(repr(word))} not found in the trie.[/red]")

    def _cmd_starts(self, args: List[str]) -> None:
        prefix = self._need_arg(args, "/starts PREFIX")
        if prefix is None:
            return
        answer = "yes" if self.tree.starts_with(prefix) else "no"
        self.console.print(f"Words starting with {escape(repr(prefix))}: [bold]{answer}[/bold]")

    def _cmd_prefix(self, args: List[str]) -> None:
        prefix = self._need_arg(args, "/prefix PREFIX [N]")
        if prefix is None:
            return
        limit = self.cfg["suggestion_limit"]
        if len(args) > 1:
            try:
                limit = int(args[1])
            except ValueError:
                self.console.print(f"[red]Not a number:[/red] {args[1]}")
                return
        self._suggest(prefix, limit)

    def _cmd_words(self, args: List[str]) -> None:
        order = self.cfg["word_order"]
        text = ""
        for arg in args:
            if arg.lower() in ORDERS:
                order = arg.lower()
            else:
                text = arg
        view = WordListView.build(self.tree.all_words(), text, order)
        self.console.print(words_panel(view))

    def _cmd_stats(self, args: List[str]) -> None:
        self.console.print(stats_table(self.tree.statistics()))

    def _cmd_tree(self, args: List[str]) -> None:
        depth = self.cfg["structure_depth"]
        if args:
            try:
                depth = int(args[0])
            except ValueError:
                self.console.print(f"[red]Not a number:[/red] {args[0]}")
                return
        if not self.tree.word_count():
            self.console.print("[dim]Add words to see the trie structure.[/dim]")
            return
        self.console.print(f"[dim]Showing first {depth} levels. {TERMINAL_MARK} marks end-of-word nodes.[/dim]")
        self.console.print(structure_tree(build_structure(self.tree, depth)))

    def _cmd_samples(self, args: List[str]) -> None:
        self._report(self.manager.load_words())

    def _cmd_clear(self, args: List[str]) -> None:
        if "-y" not in args and not Confirm.ask(
            "Clear all words from the trie? This cannot be undone", console=self.console
        ):
            self.console.print("[yellow]Clear cancelled.[/yellow]")
            return
        self._report(self.manager.clear_all())

    def _cmd_config(self, args: List[str]) -> None:
        if not args:
            self.console.print(Panel("\n".join(f"{k:20} = {v}" for k, v in self.cfg.items()),
                                     title="Config"))
            return
        if len(args) != 2:
            self.console.print("[red]Usage:[/red] /config KEY VALUE")
            return
        key, value = args
        if not self.cfg.set(key, value):
            self.console.print(f"[red]Cannot set {key} to {value!r}[/red]")
            return
        self.log.info(f"config {key} = {self.cfg[key]}")
        self.console.print(f"[green]{key} = {self.cfg[key]}[/green]")

    def _cmd_help(self, args: List[str]) -> None:
        for usage, desc in HELP:
            self.console.print(f"  [bold]{usage:28}[/bold] {desc}", highlight=False)

    def _cmd_quit(self, args: List[str]) -> None:
        self.running = False
        self.log.info(f"session ended with {self.tree.word_count()} words")
        self.console.print("[dim]Bye.[/dim]")

# main.py - entry point: `trie-explorer` (CLI) or `trie-explorer --tui`

import argparse
import logging

from trie_explorer.utils.config_manager import DEFAULT_CONFIG_PATH, Config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-explorer",
        description="Explore a prefix tree: add, delete, search and autocomplete words.",
    )
    parser.add_argument("--tui", action="store_true", help="start the full-screen Textual UI")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to the JSON settings file")
    parser.add_argument("--no-initial", action="store_true", help="start with an empty tree")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(args.config)
    if args.no_initial:
        cfg.data["load_initial_words"] = False

    if args.tui:
        from trie_explorer.tui_app import TrieExplorerApp
        TrieExplorerApp(config=cfg).run()
    else:
        from trie_explorer.cli.cli import CLI
        CLI(config=cfg).run()


if __name__ == "__main__":
    main()

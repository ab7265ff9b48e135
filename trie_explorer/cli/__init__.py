from trie_explorer.cli.cli import CLI

__all__ = ["CLI"]

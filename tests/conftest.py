# conftest.py - shared fixtures

import pytest

from trie_explorer.core.trie import PrefixTree
from trie_explorer.utils.config_manager import Config
from trie_explorer.utils.logger_utils import Log


@pytest.fixture
def tree():
    return PrefixTree()


@pytest.fixture
def app_words(tree):
    for w in ("apple", "app", "application", "apply"):
        tree.insert(w)
    return tree


@pytest.fixture
def cfg(tmp_path):
    c = Config(str(tmp_path / "settings.json"))
    c.set("load_initial_words", False)
    c.set("log_path", str(tmp_path / "logs" / "session.log"))
    return c


@pytest.fixture
def log(tmp_path):
    return Log(str(tmp_path / "logs" / "session.log"))

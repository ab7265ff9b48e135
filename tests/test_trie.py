# tests/test_trie.py
# unit tests for PrefixTree

import pytest

from trie_explorer.core.trie import PrefixTree, TrieNode


def _count_terminals(node: TrieNode) -> int:
    return int(node.is_terminal) + sum(_count_terminals(c) for c in node.children.values())


def _dead_leaves(node: TrieNode, is_root=True) -> int:
    here = 0 if is_root or node.children or node.is_terminal else 1
    return here + sum(_dead_leaves(c, False) for c in node.children.values())


@pytest.mark.parametrize("word", ["a", "cat", "zebra", "supercalifragilistic"])
def test_insert_then_search(tree, word):
    assert tree.insert(word) is True
    assert tree.search(word) is True
    assert word in tree


def test_search_missing_and_prefix_only(tree):
    tree.insert("card")
    assert tree.search("dog") is False
    assert tree.search("car") is False  # only a prefix
    assert tree.search("cards") is False


def test_normalization_trim_and_case(tree):
    assert tree.insert("  HeLLo ")
    assert tree.search("hello")
    assert tree.search(" HELLO")
    assert tree.all_words() == ["hello"]


def test_reinsert_keeps_distinct_count(tree):
    assert tree.insert("echo")
    assert tree.insert("echo")
    assert tree.word_count() == 1
    assert len(tree) == 1
    assert tree.insert_count("echo") == 2
    assert tree.insert_count("ech") == 0


@pytest.mark.parametrize("bad", ["", "   ", None, 42, "abc123", "hello world", "naïve", "x-ray"])
def test_insert_rejects_invalid(tree, bad):
    tree.insert("keep")
    before = tree.statistics()
    assert tree.insert(bad) is False
    assert tree.word_count() == 1
    assert tree.statistics() == before


def test_invalid_insert_creates_no_nodes(tree):
    assert tree.insert("abc1") is False
    assert tree.root.children == {}
    assert tree.statistics()["total_nodes"] == 1


def test_search_and_starts_with_invalid_input(tree):
    tree.insert("abc")
    for bad in ("", "  ", None, 7):
        assert tree.search(bad) is False
        assert tree.starts_with(bad) is False
        assert tree.words_with_prefix(bad) == []
        assert tree.delete_word(bad) is False


def test_starts_with(tree):
    tree.insert("card")
    assert tree.starts_with("c")
    assert tree.starts_with("CAR")
    assert tree.starts_with("card")
    assert not tree.starts_with("cards")
    assert not tree.starts_with("d")


def test_words_with_prefix_sorted(app_words):
    assert app_words.words_with_prefix("app", 10) == ["app", "apple", "application", "apply"]


def test_words_with_prefix_limit(app_words):
    assert app_words.words_with_prefix("app", 2) == ["app", "apple"]
    assert app_words.words_with_prefix("app", 0) == []
    assert app_words.words_with_prefix("app", None) == app_words.all_words()


def test_words_with_prefix_default_limit(tree):
    for ch in "abcdefghijkl":
        tree.insert("x" + ch)
    out = tree.words_with_prefix("x")
    assert len(out) == 10
    assert out == sorted(out)
    assert out[0] == "xa" and out[-1] == "xj"


def test_words_with_prefix_missing_path(app_words):
    assert app_words.words_with_prefix("apx") == []
    assert app_words.words_with_prefix("b") == []


def test_prefix_query_includes_anchor_word(tree):
    tree.insert("car")
    tree.insert("cart")
    assert tree.words_with_prefix("car") == ["car", "cart"]


def test_delete_singleton_restores_count(tree):
    tree.insert("other")
    before = tree.word_count()
    tree.insert("lonely")
    assert tree.delete_word("lonely") is True
    assert tree.search("lonely") is False
    assert tree.word_count() == before
    assert not tree.starts_with("l")


def test_delete_prefix_word_keeps_longer_word(tree):
    tree.insert("car")
    tree.insert("card")
    assert tree.delete_word("car") is True
    assert tree.search("card") is True
    assert tree.search("car") is False
    assert tree.word_count() == 1
    assert tree.insert_count("car") == 0


def test_delete_longer_word_keeps_prefix_word(tree):
    tree.insert("car")
    tree.insert("card")
    assert tree.delete_word("card") is True
    assert tree.search("car") is True
    assert tree.root.children["c"].children["a"].children["r"].children == {}


def test_delete_prunes_only_unshared_branch(tree):
    tree.insert("band")
    tree.insert("bank")
    nodes_before = tree.statistics()["total_nodes"]
    assert tree.delete_word("bank")
    assert tree.statistics()["total_nodes"] == nodes_before - 1
    assert tree.search("band")
    assert _dead_leaves(tree.root) == 0


def test_delete_missing_is_noop(tree):
    tree.insert("card")
    before = tree.statistics()
    assert tree.delete_word("car") is False  # prefix only
    assert tree.delete_word("cards") is False
    assert tree.delete_word("dog") is False
    assert tree.statistics() == before


def test_delete_twice(tree):
    tree.insert("solo")
    assert tree.delete_word("solo")
    assert not tree.delete_word("solo")
    assert tree.word_count() == 0
    assert tree.root.children == {}


def test_word_count_matches_terminal_nodes(tree):
    words = ["a", "ab", "abc", "b", "bcd", "bce", "zz"]
    for w in words:
        tree.insert(w)
    tree.delete_word("ab")
    tree.delete_word("zz")
    tree.insert("a")
    assert tree.word_count() == _count_terminals(tree.root) == 5
    assert _dead_leaves(tree.root) == 0


def test_all_words_sorted(tree):
    for w in ("pear", "apple", "peach", "a", "banana"):
        tree.insert(w)
    assert tree.all_words() == ["a", "apple", "banana", "peach", "pear"]


def test_statistics_small_tree(tree):
    tree.insert("a")
    tree.insert("ab")
    stats = tree.statistics()
    assert stats["total_words"] == 2
    assert stats["total_nodes"] == 3
    assert stats["max_depth"] == 2
    assert stats["average_word_length"] == pytest.approx(1.5)


def test_statistics_empty(tree):
    assert tree.statistics() == {
        "total_words": 0,
        "total_nodes": 1,
        "max_depth": 0,
        "average_word_length": 0,
    }


def test_statistics_rounding_and_recompute(tree):
    for w in ("ab", "abc", "abcd"):
        tree.insert(w)
    assert tree.statistics()["average_word_length"] == 3.0
    tree.insert("x")
    # (2 + 3 + 4 + 1) / 4
    assert tree.statistics()["average_word_length"] == 2.5
    tree.insert("xyzzy")
    # 15 / 5
    assert tree.statistics()["average_word_length"] == 3.0
    tree.insert("q")
    # 16 / 6 = 2.666..
    assert tree.statistics()["average_word_length"] == 2.67


def test_clear(app_words):
    app_words.clear()
    assert app_words.word_count() == 0
    assert app_words.all_words() == []
    assert app_words.statistics()["total_nodes"] == 1
    assert app_words.insert("again")
    assert app_words.all_words() == ["again"]


def test_clear_empty_tree():
    tree = PrefixTree()
    tree.clear()
    assert tree.word_count() == 0


def test_statistics_rounds_half_up(tree):
    # 9 letters over 8 words = 1.125
    for w in ("ab", "a", "b", "c", "d", "e", "f", "g"):
        tree.insert(w)
    assert tree.statistics()["average_word_length"] == 1.13


def test_very_long_word(tree):
    long_word = "ab" * 1500
    assert tree.insert(long_word)
    tree.insert("abc")
    assert tree.all_words() == ["ab" * 1500, "abc"]
    assert tree.words_with_prefix("abab", 5) == [long_word]
    stats = tree.statistics()
    assert stats["max_depth"] == 3000
    assert stats["total_nodes"] == 3002
    assert tree.delete_word(long_word)
    assert tree.all_words() == ["abc"]
    assert tree.statistics()["total_nodes"] == 4

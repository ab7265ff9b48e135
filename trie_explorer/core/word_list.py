# word_list.py - filter/sort helpers for the "all words" view

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal

Order = Literal["asc", "desc"]
ORDERS = ("asc", "desc")


def filter_words(words: Iterable[str], text: str = "", order: Order = "asc") -> List[str]:
    """
    Keep words containing `text` (case-insensitive) and sort them.
    Unknown orders fall back to ascending.
    """
    needle = text.strip().lower()
    kept = [w for w in words if needle in w.lower()]
    kept.sort(reverse=(order == "desc"))
    return kept


@dataclass
class WordListView:
    """Filtered view over a full word list, as shown by the UIs."""
    words: List[str]
    total: int

    @classmethod
    def build(cls, all_words: List[str], text: str = "", order: Order = "asc") -> "WordListView":
        return cls(filter_words(all_words, text, order), len(all_words))

    @property
    def summary(self) -> str:
        return f"Showing {len(self.words)} of {self.total} words"

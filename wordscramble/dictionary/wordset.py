from __future__ import annotations
from pathlib import Path
from typing import Iterable, Set

from wordscramble.datasets.io import read_lines
from .base import BaseChecker, register


@register
class WordSetChecker(BaseChecker):
    """Fixed in-memory dictionary. Used by tests and for offline word lists."""
    id = "wordset"
    name = "Word set"

    def __init__(self, words: Iterable[str] = ()):
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str) -> "WordSetChecker":
        """One word per line; blank lines are skipped."""
        return cls(read_lines(path))

    def __len__(self) -> int:
        return len(self._words)

    def is_real(self, word: str) -> bool:
        return word in self._words

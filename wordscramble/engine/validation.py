"""
Candidate validation.

This module answers the question: "Can this candidate be accepted right now?"
A candidate is acceptable iff:
  - it is at least MIN_WORD_LENGTH letters long
  - it has not been accepted before in this round
  - it is not the root word itself
  - its letters are a sub-multiset of the root word's letters
  - the dictionary recognizes it

Each rule is a separate predicate so the game can report WHICH rule failed;
GameState decides the order they run in. All predicates expect an already
normalized candidate (see normalize_candidate).
"""

from __future__ import annotations

from typing import Iterable, List

from wordscramble.config import MIN_WORD_LENGTH


def normalize_candidate(text: str) -> str:
    """
    Lowercase and trim surrounding whitespace.

    "  Eel \\n" -> "eel"
    """
    return text.strip().lower()


def is_long_enough(candidate: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(candidate) >= min_length


def is_original(candidate: str, used_words: Iterable[str]) -> bool:
    """True iff `candidate` is not already in `used_words` (exact match)."""
    return candidate not in used_words


def is_possible(candidate: str, root: str) -> bool:
    """
    True iff `candidate` can be spelled from the letters of `root`, each root
    letter used at most once.

    Works on a scratch copy of the root's letters: every candidate letter
    consumes one matching occurrence, and a letter with nothing left to
    consume fails immediately.

    Examples:
      is_possible("eel", "sleet")  -> True
      is_possible("tell", "sleet") -> False  (only one 'l')
    """
    remaining: List[str] = list(root)
    for ch in candidate:
        try:
            remaining.remove(ch)
        except ValueError:
            return False
    return True


def is_real(candidate: str, checker) -> bool:
    """
    Ask the dictionary `checker` (anything with is_real(word) -> bool).

    May raise DictionaryUnavailable if the checker cannot answer.
    """
    return bool(checker.is_real(candidate))

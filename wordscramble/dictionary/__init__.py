from __future__ import annotations
from typing import List
from .base import BaseChecker, DictionaryUnavailable, REGISTRY, register

from . import wordfreq_checker  # noqa: F401
from . import wordset  # noqa: F401
from .wordfreq_checker import WordfreqChecker
from .wordset import WordSetChecker

# Anything with is_real(word) -> bool can stand in for a checker.
WordIsRealChecker = BaseChecker


def create_checker(checker_id: str, **kwargs) -> BaseChecker:
    """
    Factory: instantiate a registered checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseChecker",
    "DictionaryUnavailable",
    "WordIsRealChecker",
    "WordfreqChecker",
    "WordSetChecker",
    "create_checker",
    "get_checker_ids",
    "register",
]

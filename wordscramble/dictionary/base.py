from __future__ import annotations
from typing import Dict, Type

# ---- Global checker registry ----
REGISTRY: Dict[str, Type["BaseChecker"]] = {}


class DictionaryUnavailable(RuntimeError):
    """The dictionary could not answer (as opposed to answering "not a word")."""


def register(cls: Type["BaseChecker"]) -> Type["BaseChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that checkers inherit ----
class BaseChecker:
    """
    The "is this word real?" capability the game depends on.

    Implementations get a normalized (lowercase, trimmed) word and treat it as
    one token. They return False for "not a word" and raise
    DictionaryUnavailable when they cannot tell.
    """
    id = "base"
    name = "Base"

    def is_real(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def __call__(self, word: str) -> bool:
        return self.is_real(word)

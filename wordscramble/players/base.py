from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that players inherit ----
class BasePlayer:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.root: str = ""
        self.pool: List[str] = []
        self.rng = random.Random()

    def reset(self, *, root: str, pool: List[str], seed: int | None = None) -> None:
        self.root = root
        self.pool = list(pool)
        if seed is not None:
            self.rng.seed(seed)

    def next_candidate(self, state: dict) -> Optional[str]:
        """Return the next word to submit, or None to end the round."""
        raise NotImplementedError("Override in subclass")

from __future__ import annotations
from typing import List
from .base import BasePlayer, REGISTRY, register

from . import pool_scan  # noqa: F401
from . import random_letters  # noqa: F401


def create_player(player_id: str) -> BasePlayer:
    """
    Factory: instantiate a registered player by id.
    """
    try:
        cls = REGISTRY[player_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown player id: {player_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_player_ids() -> List[str]:
    """
    Return all registered player ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

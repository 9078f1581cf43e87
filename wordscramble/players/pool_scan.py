"""
Pool Scan player.

Strategy:
  - At reset, keep the pool words that can be spelled from the root
    (letter multiset check only; the game still asks the dictionary).
  - Submit them one by one in pool order, then stop.

Notes:
  - With a pool drawn from the same dictionary the game uses, every
    submission should be accepted except the root itself and words shorter
    than the minimum length.
"""

from __future__ import annotations

from typing import List, Optional
from wordscramble.engine import is_possible, normalize_candidate
from .base import BasePlayer, register


@register
class PoolScanPlayer(BasePlayer):
    id = "pool_scan"
    name = "Pool Scan"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._queue: List[str] = []
        self._pos = 0

    def reset(self, *, root: str, pool: List[str], seed: int | None = None) -> None:
        super().reset(root=root, pool=pool, seed=seed)
        seen = set()
        self._queue = []
        for w in self.pool:
            w = normalize_candidate(w)
            if w and w not in seen and is_possible(w, root):
                seen.add(w)
                self._queue.append(w)
        self._pos = 0

    def next_candidate(self, state: dict) -> Optional[str]:
        if self._pos >= len(self._queue):
            return None
        w = self._queue[self._pos]
        self._pos += 1
        return w

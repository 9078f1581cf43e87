"""
Random Letters player.

Strategy:
  - Draw a random length between 3 and len(root), sample that many of the
    root's letters without replacement, and submit them in random order.
  - Never stops on its own; the harness attempt budget ends the round.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - A baseline: every submission is "possible", so rejections come only from
    the dictionary, the duplicate check, or hitting the root itself.
"""

from __future__ import annotations

from typing import Optional
from wordscramble.config import MIN_WORD_LENGTH
from .base import BasePlayer, register


@register
class RandomLettersPlayer(BasePlayer):
    id = "random_letters"
    name = "Random Letters"
    version = "1.0.0"

    def next_candidate(self, state: dict) -> Optional[str]:
        letters = list(state.get("root") or self.root)
        if len(letters) < MIN_WORD_LENGTH:
            return None
        k = self.rng.randint(MIN_WORD_LENGTH, len(letters))
        return "".join(self.rng.sample(letters, k))

"""
Round state for the word scramble game.

GameState owns one round at a time: the root word, the words accepted so far
(newest first) and the score. It is mutated only by start_round() and by a
successful submit(); every rejected submission leaves it untouched.

The dictionary and the random source are injected so a caller can run the
game against a fixed word set and a seeded RNG.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from wordscramble.config import FALLBACK_ROOT_WORD, MIN_WORD_LENGTH
from wordscramble.dictionary.base import DictionaryUnavailable
from wordscramble.engine.validation import (
    is_long_enough,
    is_original,
    is_possible,
    is_real,
    normalize_candidate,
)
from .messages import Reason, alert_for

logger = logging.getLogger(__name__)

Outcome = Literal["accepted", "rejected", "ignored"]


@dataclass(frozen=True)
class SubmitResult:
    """
    What happened to one submission.

    outcome : "accepted", "rejected", or "ignored" (empty input)
    word    : the normalized candidate
    reason  : set only when rejected
    title, message : alert text for the UI (empty unless rejected)
    """
    outcome: Outcome
    word: str
    reason: Optional[Reason] = None
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome == "accepted"

    @property
    def alert(self) -> Optional[Tuple[str, str]]:
        return (self.title, self.message) if self.outcome == "rejected" else None


class GameState:
    """
    Mutable state of the current round.

    Attributes:
        checker: dictionary with is_real(word) -> bool
        rng: random source used to pick root words
        min_length: shortest acceptable candidate
        fallback_root: root word used when the word list has no usable entry
    """

    def __init__(
        self,
        checker,
        *,
        rng: Optional[random.Random] = None,
        min_length: int = MIN_WORD_LENGTH,
        fallback_root: str = FALLBACK_ROOT_WORD,
    ):
        self.checker = checker
        self.rng = rng if rng is not None else random.Random()
        self.min_length = int(min_length)
        self.fallback_root = fallback_root

        # round state
        self._root = ""
        self._used: List[str] = []
        self._score = 0

    # ---- read-only views for the UI ----

    @property
    def root_word(self) -> str:
        return self._root

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used)

    @property
    def score(self) -> int:
        return self._score

    @property
    def started(self) -> bool:
        return bool(self._root)

    def snapshot(self) -> Dict:
        return {
            "root": self._root,
            "used": list(self._used),
            "score": self._score,
        }

    # ---- round lifecycle ----

    def start_round(self, word_list: Optional[Iterable[str]]) -> str:
        """
        Begin a new round with a root word drawn uniformly from `word_list`.

        Blank entries are skipped; if nothing usable is left (or the list is
        None) the fallback root is used. Score and used words are reset.
        Returns the new root word.
        """
        pool = [w.strip().lower() for w in (word_list or []) if w and w.strip()]
        if pool:
            root = self.rng.choice(pool)
        else:
            logger.warning("empty start-word list, using fallback root %r", self.fallback_root)
            root = self.fallback_root

        self._root = root
        self._used = []
        self._score = 0
        logger.info("new round: root=%s (pool=%d)", root, len(pool))
        return root

    def submit(self, candidate: str) -> SubmitResult:
        """
        Try to add `candidate` to this round's words.

        Checks run in a fixed order and stop at the first failure:
        too short, already used, same as root, not possible, not real.
        Empty input (after trimming) is ignored without a message.

        Raises:
            RuntimeError: no round has been started yet.
        """
        if not self.started:
            raise RuntimeError("No round in progress; call start_round() first")

        word = normalize_candidate(candidate)
        if not word:
            return SubmitResult(outcome="ignored", word=word)

        reason = self._rejection_reason(word)
        if reason is not None:
            title, message = alert_for(reason, root=self._root, min_length=self.min_length)
            logger.debug("rejected %r: %s", word, reason)
            return SubmitResult(outcome="rejected", word=word, reason=reason,
                                title=title, message=message)

        self._used.insert(0, word)
        self._score += 1
        logger.debug("accepted %r (score=%d)", word, self._score)
        return SubmitResult(outcome="accepted", word=word)

    def _rejection_reason(self, word: str) -> Optional[Reason]:
        if not is_long_enough(word, self.min_length):
            return "too_short"
        if not is_original(word, self._used):
            return "already_used"
        if word == self._root:
            return "same_as_root"
        if not is_possible(word, self._root):
            return "not_possible"
        try:
            real = is_real(word, self.checker)
        except DictionaryUnavailable:
            logger.exception("dictionary lookup failed for %r", word)
            return "dictionary_unavailable"
        if not real:
            return "not_real"
        return None

"""
Player-facing alert text for each rejection reason.

Each entry is a (title, message) pair; "{root}" and "{min_length}" are
filled in by GameState when the alert is built.
"""

from __future__ import annotations
from typing import Dict, Literal, Tuple

Reason = Literal[
    "too_short",
    "already_used",
    "same_as_root",
    "not_possible",
    "not_real",
    "dictionary_unavailable",
]

REASONS: Tuple[Reason, ...] = (
    "too_short",
    "already_used",
    "same_as_root",
    "not_possible",
    "not_real",
    "dictionary_unavailable",
)

ALERTS: Dict[str, Tuple[str, str]] = {
    "too_short": ("Really, {min_length} letters?", "You can do better"),
    "already_used": ("Word already used", "Be more original"),
    "same_as_root": ("Word is the root", "Find your own words from '{root}'"),
    "not_possible": ("Word not possible", "You can't spell that word from '{root}'"),
    "not_real": ("Word not recognized", "You can't make them up, you know"),
    "dictionary_unavailable": ("Dictionary unavailable", "Could not check that word right now"),
}


def alert_for(reason: Reason, *, root: str, min_length: int) -> Tuple[str, str]:
    title, message = ALERTS[reason]
    return (title.format(root=root, min_length=min_length),
            message.format(root=root, min_length=min_length))

"""
Game configuration constants.

Values here are the defaults; the CLI flags override them, and a couple can
be overridden from the environment:
  - WORDSCRAMBLE_START_WORDS : path to a newline-delimited start-word file
  - WORDSCRAMBLE_MIN_ZIPF    : minimum wordfreq Zipf value for a "real" word
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Mapping, Optional

logger = logging.getLogger(__name__)

START_WORDS_ENV: Final[str] = "WORDSCRAMBLE_START_WORDS"
MIN_ZIPF_ENV: Final[str] = "WORDSCRAMBLE_MIN_ZIPF"

# Candidates shorter than this are rejected before any other check.
MIN_WORD_LENGTH: Final[int] = 3

# Used when the start-word list is empty.
FALLBACK_ROOT_WORD: Final[str] = "silkworm"

DICTIONARY_LANGUAGE: Final[str] = "en"

# Zipf scale: 0 = never seen, ~3 = "eel", ~7 = "the".
BUILTIN_MIN_ZIPF: Final[float] = 1.5

BUNDLED_START_WORDS: Final[Path] = Path(__file__).parent / "datasets" / "data" / "start.txt"

# Harness budget per simulated round.
DEFAULT_MAX_ATTEMPTS: Final[int] = 200


def min_zipf_from_env(environ: Optional[Mapping[str, str]] = None) -> float:
    """
    $WORDSCRAMBLE_MIN_ZIPF as a float, or BUILTIN_MIN_ZIPF when unset.

    A value that is not a number is logged and ignored, so a bad environment
    never stops the game from importing.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(MIN_ZIPF_ENV, "").strip()
    if not raw:
        return BUILTIN_MIN_ZIPF
    try:
        return float(raw)
    except ValueError:
        logger.warning("ignoring %s=%r (not a number), using %s", MIN_ZIPF_ENV, raw, BUILTIN_MIN_ZIPF)
        return BUILTIN_MIN_ZIPF


def start_words_from_env(environ: Optional[Mapping[str, str]] = None) -> Path:
    """$WORDSCRAMBLE_START_WORDS as a path, or the bundled start.txt when unset."""
    environ = os.environ if environ is None else environ
    raw = environ.get(START_WORDS_ENV, "").strip()
    return Path(raw) if raw else BUNDLED_START_WORDS


DEFAULT_MIN_ZIPF: Final[float] = min_zipf_from_env()

DEFAULT_START_WORDS: Final[Path] = start_words_from_env()

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from wordscramble.config import DEFAULT_START_WORDS

logger = logging.getLogger(__name__)


class WordListUnavailable(RuntimeError):
    """The start-word file is missing or unreadable; the game cannot run."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_start_words(p: Path | str | None = None) -> List[str]:
    """
    Load the root-word candidates: one word per line, lowercased, blanks dropped.

    Defaults to the bundled start.txt (or $WORDSCRAMBLE_START_WORDS).
    An empty result is allowed; GameState falls back to its default word.

    Raises:
        WordListUnavailable: the file is missing or cannot be decoded/read.
    """
    p = Path(p) if p is not None else DEFAULT_START_WORDS
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailable(f"Could not load start words from {p}") from e
    words = [w.strip().lower() for w in lines if w.strip()]
    logger.info("loaded %d start words from %s", len(words), p)
    return words

"""
Start-word list validator.

What this module does:
- Validate a start-word file (start.txt): the pool root words are drawn from.
- Enforce formatting rules (lowercase, a–z only, one per line, and either an
  exact length or at least MIN_WORD_LENGTH letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("wordscramble/datasets/data/start.txt", length=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordscramble.config import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for a start-word file."""
    length: Optional[int]   # required word length, or None for "any >= MIN_WORD_LENGTH"
    start_words: FileReport
    passed: bool
    issues: List[str]       # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_valid_word(w: str, length: Optional[int]) -> bool:
    if w != w.lower() or not w.isalpha() or not w.isascii():
        return False
    if length is None:
        return len(w) >= MIN_WORD_LENGTH
    return len(w) == length


def _load_and_check(path: Path, length: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - exact `length` if given, else at least MIN_WORD_LENGTH
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and _is_valid_word(w, length):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(path: str, length: Optional[int] = None) -> Dict:
    """
    Validate a start-word file.

    Parameters
    ----------
    path : str
        Path to the start-word file (one word per line).
    length : int, optional
        Required word length (the bundled list uses 8). When omitted, any
        word of at least MIN_WORD_LENGTH letters is accepted.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid flags, a strict `passed` boolean
        (non-empty, no invalid lines, no duplicates) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"start-word file not found: {path}")
        rep = ValidationReport(
            length=length,
            start_words=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p, length)
    unique = set(words)

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("start-word file contains duplicate lines")

    passed = report.count > 0 and invalid == 0 and report.count == report.unique_count

    rep = ValidationReport(length=length, start_words=report, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        length=8 | start=412 (uniq=412, sha=abc123...) | OK
    """
    length = report["length"] if report["length"] is not None else "any"
    s = report["start_words"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (s.get("sha256") or "")[:12]
    return f"length={length} | start={s['count']} (uniq={s['unique_count']}, sha={sha}) | {status}"

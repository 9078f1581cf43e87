"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordscramble.game import REASONS


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      player, root, score, attempts, ignored, <one column per rejection reason>,
      time_ms, words

    `words` holds the accepted words (newest first), space separated.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "root", "score", "attempts", "ignored", *REASONS, "time_ms", "words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "player": r.get("player_id", "?"),
                "root": r["root"],
                "score": r["score"],
                "attempts": r["attempts"],
                "ignored": r.get("ignored", 0),
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(r["words"]),
            }
            rejections = r.get("rejections", {})
            for reason in REASONS:
                row[reason] = rejections.get(reason, 0)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (players, start words, seed, sample, outdir)
      - start_words: output of datasets.validate_start_words(...)
      - num_rounds, summary
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

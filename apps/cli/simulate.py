# apps/cli/simulate.py
"""
Play many automatic rounds with one or more players, sharing the root words.

This script:
  1) Validates the start-word list (prints counts + SHA).
  2) Samples root words deterministically from a seeded numpy generator.
  3) Builds the candidate pool players draw from (a word file, or the most
     frequent English words from wordfreq).
  4) Plays every root word with every requested player, with a progress bar.

Writes per-player outputs to: <outdir>/<player_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse
import random
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
from tqdm import tqdm
from wordfreq import top_n_list

from wordscramble.config import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MIN_ZIPF,
    DEFAULT_START_WORDS,
    DICTIONARY_LANGUAGE,
    MIN_WORD_LENGTH,
)
from wordscramble.datasets import (
    WordListUnavailable,
    load_start_words,
    pretty_summary,
    read_lines,
    validate_start_words,
)
from wordscramble.dictionary import create_checker
from wordscramble.game import GameState
from wordscramble.harness import play_round
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordscramble.players import create_player, get_player_ids

# "wordset" uses the candidate pool as a closed-world dictionary.
DICTIONARIES = ["wordfreq", "wordset"]


def _load_pool(path: str | None, size: int) -> List[str]:
    """Candidate words for the players: a file if given, else wordfreq's top list."""
    if path:
        words = read_lines(path)
    else:
        words = top_n_list(DICTIONARY_LANGUAGE, size)
    return [w.strip().lower() for w in words
            if w.strip().isalpha() and len(w.strip()) >= MIN_WORD_LENGTH]


def _summarize(results: List[Dict]) -> Dict:
    scores = np.array([r["score"] for r in results], dtype=float)
    if scores.size == 0:
        return {"rounds": 0}
    return {
        "rounds": int(scores.size),
        "mean_score": float(scores.mean()),
        "median_score": float(np.median(scores)),
        "max_score": int(scores.max()),
        "zero_score_rounds": int((scores == 0).sum()),
    }


def _run_one_player(player_id: str, roots: List[str], *, game: GameState, pool: List[str],
                    base_seed: int, max_attempts: int, outdir: Path,
                    progress: bool) -> Tuple[str, str, Dict]:
    player = create_player(player_id)
    results = []
    iterator = tqdm(roots, ncols=80, desc=player_id, unit="round", disable=not progress)

    for idx, root in enumerate(iterator, 1):
        r = play_round(game, player, root_words=[root], pool=pool,
                       max_attempts=max_attempts, seed=base_seed + idx)
        r["player_id"] = player.id
        results.append(r)

    # write outputs under <outdir>/<player_id>/
    run_id = timestamp_id()
    pdir = outdir / player_id
    pdir.mkdir(parents=True, exist_ok=True)
    csv_path = pdir / f"run_{run_id}.csv"
    manifest_path = pdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    summary = _summarize(results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"player": player_id, "seed": base_seed, "max_attempts": max_attempts,
                   "num_roots": len(roots), "pool_size": len(pool)},
        "num_rounds": len(results),
        "player_id": player.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main(argv: List[str] | None = None) -> int:
    registered = get_player_ids()
    ap = argparse.ArgumentParser(description="wordscramble: simulate rounds with automatic players")
    ap.add_argument("--players", nargs="+", default=["ALL"],
                    help=f"list of player ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS))
    ap.add_argument("--length", type=int, default=8,
                    help="expected start-word length for validation (0 = any)")
    ap.add_argument("--pool", help="word file players draw candidates from (default: wordfreq top list)")
    ap.add_argument("--pool-size", type=int, default=50000)
    ap.add_argument("--dictionary", choices=DICTIONARIES, default="wordfreq",
                    help="wordset treats the pool itself as the dictionary")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF)
    ap.add_argument("--sample", type=int, default=100, help="number of root words to play")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports/simulate")
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args(argv)

    # 1) validate once
    rep = validate_start_words(args.start_words, length=args.length or None)
    print(pretty_summary(rep))

    # 2) shared roots (deterministic by seed)
    try:
        start_words = load_start_words(args.start_words)
    except WordListUnavailable as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    rng = np.random.default_rng(args.seed)
    if args.sample and args.sample < len(start_words):
        roots = [str(w) for w in rng.choice(start_words, size=args.sample, replace=False)]
    else:
        roots = list(start_words)

    # 3) expand players
    if len(args.players) == 1 and args.players[0].lower() == "all":
        todo = registered
    else:
        todo = args.players
        missing = [p for p in todo if p not in registered]
        if missing:
            raise SystemExit(f"Unknown player ids: {missing}. Registered: {registered}")

    try:
        pool = _load_pool(args.pool, args.pool_size)
    except (OSError, UnicodeDecodeError) as e:
        print(f"fatal: could not load candidate pool {args.pool}: {e}", file=sys.stderr)
        return 1
    if args.dictionary == "wordfreq":
        checker = create_checker("wordfreq", min_zipf=args.min_zipf)
    else:
        # closed world: the pool doubles as the dictionary
        checker = create_checker("wordset", words=pool)
    game = GameState(checker, rng=random.Random(args.seed))

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) run each player sequentially (shared roots)
    for pid in todo:
        print(f"\n=== Running {pid} on {len(roots)} roots ===")
        csv_path, manifest_path, summary = _run_one_player(
            pid, roots, game=game, pool=pool, base_seed=args.seed,
            max_attempts=args.max_attempts, outdir=outdir, progress=not args.no_progress,
        )
        print(f"mean score {summary.get('mean_score', 0.0):.2f} over {summary['rounds']} rounds")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

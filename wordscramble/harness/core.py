"""
Simulation harness core primitives.

- play_round: play one round (one root word) with a given player.
- run_batch:  play many rounds in sequence (optionally a sample prefix).
- Caps each round at `max_attempts` submissions at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes. They drive the same
GameState the interactive UI uses.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple

from wordscramble.config import DEFAULT_MAX_ATTEMPTS
from wordscramble.game import GameState, REASONS


def _assert_attempts(max_attempts: int) -> None:
    """Guardrail: a round needs a positive attempt budget."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1; got {max_attempts}")


def play_round(
        game: GameState,
        player,
        *,
        root_words: Iterable[str],
        pool: Iterable[str] = (),
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Start a round and let the player submit until it stops or runs out of attempts.

    Args:
        game:         GameState to play on (its current round is replaced)
        player:       an object implementing BasePlayer with next_candidate(state)
        root_words:   list the root word is drawn from (pass [word] to fix it)
        pool:         words the player may draw candidates from
        max_attempts: submission budget for this round
        seed:         RNG seed for the player's choices

    Returns:
        dict with keys:
            root (str), score (int), words (list, newest first),
            attempts (int), ignored (int), rejections ({reason: count}),
            time_ms (float), history (list[(word, outcome-or-reason)])
    """
    _assert_attempts(max_attempts)

    root = game.start_round(list(root_words))
    player.reset(root=root, pool=list(pool), seed=seed)

    history: List[Tuple[str, str]] = []
    rejections = {r: 0 for r in REASONS}
    ignored = 0

    t0 = time.perf_counter_ns()
    for attempt in range(1, max_attempts + 1):
        state = {"attempt": attempt, "history": list(history), **game.snapshot()}
        candidate = player.next_candidate(state)
        if candidate is None:
            break

        res = game.submit(candidate)
        if res.outcome == "rejected":
            rejections[res.reason] += 1
            history.append((res.word, res.reason))
        elif res.outcome == "ignored":
            ignored += 1
            history.append((res.word, "ignored"))
        else:
            history.append((res.word, "accepted"))
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "root": root,
        "score": game.score,
        "words": list(game.used_words),
        "attempts": len(history),
        "ignored": ignored,
        "rejections": rejections,
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        game: GameState,
        player,
        roots: List[str],
        *,
        pool: Iterable[str] = (),
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play one round per root word. If 'sample' is provided, only the first K
    roots are used to speed up quick experiments.

    Each round's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across rounds.
    """
    _assert_attempts(max_attempts)

    todo = roots[:sample] if sample is not None else list(roots)
    pool = list(pool)

    out: List[Dict] = []
    for idx, root in enumerate(todo, start=1):
        round_seed = None if seed is None else (seed + idx)
        r = play_round(game, player, root_words=[root], pool=pool,
                       max_attempts=max_attempts, seed=round_seed)
        r["player_id"] = getattr(player, "id", "?")
        out.append(r)
    return out

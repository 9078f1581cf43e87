import csv
import json
import random
from pathlib import Path

import pytest

from wordscramble.dictionary import WordSetChecker
from wordscramble.game import GameState
from wordscramble.harness import play_round, run_batch, write_csv, write_manifest
from wordscramble.harness.io import timestamp_id
from wordscramble.players import create_player

DICT = ["eel", "lees", "tee", "let", "steel", "sleet"]
POOL = ["eel", "lees", "sleet", "tee", "xyz", "let", "le", "steel"]


def _game():
    return GameState(WordSetChecker(DICT), rng=random.Random(0))


def test_play_round_pool_scan():
    r = play_round(_game(), create_player("pool_scan"), root_words=["sleet"], pool=POOL, seed=42)
    assert r["root"] == "sleet"
    # 'xyz' is filtered out by the player; 'sleet' and 'le' are rejected by the game
    assert r["attempts"] == 7
    assert r["score"] == 5
    assert r["words"] == ["steel", "let", "tee", "lees", "eel"]
    assert r["rejections"]["same_as_root"] == 1
    assert r["rejections"]["too_short"] == 1
    assert ("sleet", "same_as_root") in r["history"]


def test_play_round_respects_attempt_budget():
    r = play_round(_game(), create_player("pool_scan"), root_words=["sleet"], pool=POOL,
                   max_attempts=3)
    assert r["attempts"] == 3
    assert r["score"] == 2


def test_play_round_rejects_bad_budget():
    with pytest.raises(ValueError):
        play_round(_game(), create_player("pool_scan"), root_words=["sleet"], max_attempts=0)


def test_random_letters_smoke():
    game = _game()
    r1 = play_round(game, create_player("random_letters"), root_words=["sleet"], max_attempts=30, seed=7)
    r2 = play_round(game, create_player("random_letters"), root_words=["sleet"], max_attempts=30, seed=7)
    assert r1["attempts"] == 30
    assert r1["rejections"]["not_possible"] == 0
    assert r1["score"] == len(r1["words"]) == len(set(r1["words"]))
    assert r1["history"] == r2["history"]


def test_run_batch_and_outputs(tmp_path: Path):
    results = run_batch(_game(), create_player("pool_scan"), ["sleet", "steel"], pool=POOL, seed=1)
    assert [r["root"] for r in results] == ["sleet", "steel"]
    assert all(r["player_id"] == "pool_scan" for r in results)

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["player"] == "pool_scan"
    assert rows[0]["score"] == "5"
    assert rows[0]["words"].split() == results[0]["words"]

    man_path = write_manifest({"run_id": timestamp_id(), "num_rounds": 2}, str(tmp_path / "m.json"))
    assert json.loads(Path(man_path).read_text(encoding="utf-8"))["num_rounds"] == 2


def test_run_batch_sample():
    results = run_batch(_game(), create_player("pool_scan"), ["sleet", "steel"], pool=POOL, sample=1)
    assert len(results) == 1


def test_unknown_player():
    with pytest.raises(ValueError):
        create_player("nope")


def test_pool_scan_before_reset_has_nothing_to_say():
    player = create_player("pool_scan")
    assert player.next_candidate({}) is None

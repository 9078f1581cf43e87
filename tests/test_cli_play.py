import io
import random
import sys
from pathlib import Path

from apps.cli.play import main, run_loop
from wordscramble.dictionary import WordSetChecker
from wordscramble.game import GameState


def _game():
    return GameState(WordSetChecker(["eel", "tee", "lees"]), rng=random.Random(0))


def test_run_loop_alerts_and_score():
    out = io.StringIO()
    inp = io.StringIO("eel\nEEL\nxx\n\nxyz\nlet\n:quit\nlees\n")
    score = run_loop(_game(), ["sleet"], inp=inp, out=out)
    text = out.getvalue()

    assert score == 1  # 'lees' comes after :quit
    assert "== sleet ==" in text
    assert "Word already used: Be more original" in text
    assert "Really, 3 letters?: You can do better" in text
    assert "Word not possible: You can't spell that word from 'sleet'" in text
    assert "Word not recognized" in text  # 'let' is not in the word set
    assert "  (3) eel" in text


def test_run_loop_new_round_resets():
    out = io.StringIO()
    game = _game()
    run_loop(game, ["sleet"], inp=io.StringIO("eel\ntee\n:new\n"), out=out)
    assert game.score == 0
    assert game.used_words == ()
    assert out.getvalue().count("== sleet ==") >= 3


def test_main_missing_start_words(tmp_path: Path, capsys):
    rc = main(["--start-words", str(tmp_path / "missing.txt")])
    assert rc == 1
    assert "fatal" in capsys.readouterr().err


def test_main_with_word_set(tmp_path: Path, monkeypatch, capsys):
    start = tmp_path / "start.txt"
    start.write_text("sleet\n", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_text("eel\ntee\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("eel\n tee \n"))

    rc = main(["--start-words", str(start), "--dictionary", "wordset",
               "--words-file", str(words), "--seed", "1"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Score : 2" in out
    assert "(3) tee" in out


def test_main_undecodable_words_file(tmp_path: Path, capsys):
    start = tmp_path / "start.txt"
    start.write_text("sleet\n", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_bytes(b"\xff\xfe\xfa\x00bad")

    rc = main(["--start-words", str(start), "--dictionary", "wordset", "--words-file", str(words)])
    assert rc == 1
    assert "could not set up dictionary" in capsys.readouterr().err


def test_main_missing_words_file(tmp_path: Path, capsys):
    start = tmp_path / "start.txt"
    start.write_text("sleet\n", encoding="utf-8")
    rc = main(["--start-words", str(start), "--dictionary", "wordset",
               "--words-file", str(tmp_path / "missing.txt")])
    assert rc == 1
    assert "fatal" in capsys.readouterr().err

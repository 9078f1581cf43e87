"""
Tests for wordscramble.game.state.
"""

import random

import pytest

from wordscramble.config import FALLBACK_ROOT_WORD
from wordscramble.dictionary import DictionaryUnavailable, WordSetChecker
from wordscramble.game import GameState

SLEET_WORDS = ["eel", "eels", "lees", "tee", "tees", "let", "lets", "set", "steel", "sleet"]


def _game(words=SLEET_WORDS, seed=0):
    return GameState(WordSetChecker(words), rng=random.Random(seed))


def _state(game):
    return game.root_word, game.used_words, game.score


def test_start_round_single_word():
    game = _game()
    assert game.start_round(["silkworm"]) == "silkworm"
    assert game.root_word == "silkworm"
    assert game.score == 0
    assert game.used_words == ()


def test_start_round_picks_from_list():
    pool = ["sleet", "silkworm", "absolute"]
    game = _game()
    for _ in range(20):
        assert game.start_round(pool) in pool


def test_start_round_is_reproducible_with_seed():
    pool = ["sleet", "silkworm", "absolute", "abstract", "academic"]
    a, b = _game(seed=7), _game(seed=7)
    assert [a.start_round(pool) for _ in range(10)] == [b.start_round(pool) for _ in range(10)]


@pytest.mark.parametrize("word_list", [[], None, ["", "  ", "\n"]])
def test_start_round_falls_back(word_list):
    game = _game()
    assert game.start_round(word_list) == FALLBACK_ROOT_WORD


def test_start_round_normalizes_entries():
    game = _game()
    assert game.start_round(["  Silkworm \r"]) == "silkworm"


def test_start_round_resets_previous_round():
    game = _game()
    game.start_round(["sleet"])
    game.submit("eel")
    game.submit("tee")
    assert game.score == 2

    game.start_round(["sleet"])
    assert game.score == 0
    assert game.used_words == ()
    assert game.submit("eel").accepted


def test_submit_before_round_raises():
    with pytest.raises(RuntimeError):
        _game().submit("eel")


def test_end_to_end_sleet():
    game = _game()
    game.start_round(["sleet"])

    res = game.submit("eel")
    assert res.accepted and res.outcome == "accepted"
    assert game.used_words == ("eel",)
    assert game.score == 1

    res = game.submit("EEL")
    assert res.outcome == "rejected" and res.reason == "already_used"

    # letters are checked before the dictionary
    res = game.submit("xyz")
    assert res.reason == "not_possible"
    assert "sleet" in res.message

    res = game.submit("xx")
    assert res.reason == "too_short"

    assert game.used_words == ("eel",)
    assert game.score == 1


def test_used_words_newest_first():
    game = _game()
    game.start_round(["sleet"])
    for w in ["eel", "tee", "lets"]:
        assert game.submit(w).accepted
    assert game.used_words == ("lets", "tee", "eel")
    assert game.score == len(game.used_words)


@pytest.mark.parametrize("candidate", ["x", "xx", "EE", " ee ", "ab"])
def test_too_short_leaves_state_unchanged(candidate):
    game = _game()
    game.start_round(["sleet"])
    game.submit("eel")
    before = _state(game)

    res = game.submit(candidate)
    assert res.reason == "too_short"
    assert res.title == "Really, 3 letters?"
    assert res.message == "You can do better"
    assert _state(game) == before


def test_not_real_when_dictionary_lacks_word():
    game = _game(words=["eel"])
    game.start_round(["sleet"])
    res = game.submit("lees")
    assert res.reason == "not_real"
    assert res.alert == ("Word not recognized", "You can't make them up, you know")
    assert game.score == 0


def test_root_word_is_rejected():
    game = _game()
    game.start_round(["sleet"])
    res = game.submit("Sleet")
    assert res.reason == "same_as_root"
    assert game.used_words == ()


def test_check_order_short_before_duplicate():
    game = _game(words=["eel"])
    game.start_round(["sleet"])
    game.submit("eel")
    # "ee" is both too short and not possible; length wins
    assert game.submit("ee").reason == "too_short"
    # duplicate wins over the dictionary
    assert game.submit(" EEL ").reason == "already_used"


def test_normalization_is_idempotent():
    a, b = _game(), _game()
    a.start_round(["sleet"])
    b.start_round(["sleet"])
    ra, rb = a.submit("  Eel  "), b.submit("eel")
    assert (ra.outcome, ra.word, ra.reason) == (rb.outcome, rb.word, rb.reason)
    assert a.snapshot() == b.snapshot()


@pytest.mark.parametrize("candidate", ["", "   ", "\t\n"])
def test_empty_input_is_ignored(candidate):
    game = _game()
    game.start_round(["sleet"])
    res = game.submit(candidate)
    assert res.outcome == "ignored"
    assert res.alert is None and res.title == "" and res.message == ""
    assert game.score == 0


def test_dictionary_failure_is_not_fatal():
    class BrokenChecker:
        def is_real(self, word):
            raise DictionaryUnavailable("offline")

    game = GameState(BrokenChecker(), rng=random.Random(0))
    game.start_round(["sleet"])
    res = game.submit("eel")
    assert res.outcome == "rejected"
    assert res.reason == "dictionary_unavailable"
    assert game.score == 0 and game.used_words == ()


def test_used_words_view_is_a_copy():
    game = _game()
    game.start_round(["sleet"])
    game.submit("eel")
    snap = game.snapshot()
    snap["used"].append("bogus")
    assert game.used_words == ("eel",)

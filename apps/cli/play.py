# apps/cli/play.py
"""
Terminal front end for the word scramble game.

This script:
  1) Loads the start-word list (fatal if the file is missing or unreadable).
  2) Builds the dictionary checker and a GameState.
  3) Runs an input loop: each line is a candidate word; rejections are shown
     as "title: message" alerts; accepted words are listed newest first.

Commands inside the loop:
  :new   start a new round with a fresh root word
  :quit  leave (end of input works too)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, TextIO

from wordscramble.config import DEFAULT_MIN_ZIPF, DEFAULT_START_WORDS
from wordscramble.datasets import WordListUnavailable, load_start_words
from wordscramble.dictionary import DictionaryUnavailable, WordSetChecker, create_checker, get_checker_ids
from wordscramble.game import GameState, SubmitResult

NEW_ROUND = ":new"
QUIT = ":quit"


def render(game: GameState) -> str:
    """Root word, score, and the used-word list with letter counts."""
    lines = [f"== {game.root_word} ==", f"Score : {game.score}"]
    for w in game.used_words:
        lines.append(f"  ({len(w)}) {w}")
    return "\n".join(lines)


def render_result(res: SubmitResult) -> str | None:
    if res.outcome == "rejected":
        return f"{res.title}: {res.message}"
    return None


def run_loop(game: GameState, start_words: List[str], *, inp: TextIO, out: TextIO) -> int:
    """
    Play rounds until QUIT or end of input. Returns the last round's score.
    """
    game.start_round(start_words)
    print(render(game), file=out)
    print(f"Enter a word ({NEW_ROUND} for a new word, {QUIT} to leave)", file=out)

    for raw in inp:
        line = raw.strip()
        if line.lower() == QUIT:
            break
        if line.lower() == NEW_ROUND:
            game.start_round(start_words)
            print(render(game), file=out)
            continue

        res = game.submit(line)
        if res.outcome == "ignored":
            continue
        alert = render_result(res)
        if alert is not None:
            print(alert, file=out)
        else:
            print(render(game), file=out)

    return game.score


def _build_checker(args):
    if args.dictionary == "wordset":
        if not args.words_file:
            raise SystemExit("--dictionary wordset needs --words-file")
        return WordSetChecker.from_file(args.words_file)
    return create_checker(args.dictionary, min_zipf=args.min_zipf)


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load the start words, and run the interactive loop.
    """
    ap = argparse.ArgumentParser(description="wordscramble: spell words from the root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="newline-delimited list root words are drawn from")
    ap.add_argument("--dictionary", choices=get_checker_ids(), default="wordfreq",
                    help="which dictionary decides whether a word is real")
    ap.add_argument("--words-file", help="word list for --dictionary wordset")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="minimum wordfreq Zipf frequency for a real word")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        start_words = load_start_words(args.start_words)
    except WordListUnavailable as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    try:
        checker = _build_checker(args)
    except (DictionaryUnavailable, OSError, UnicodeDecodeError) as e:
        print(f"fatal: could not set up dictionary: {e}", file=sys.stderr)
        return 1

    game = GameState(checker, rng=random.Random(args.seed))
    run_loop(game, start_words, inp=sys.stdin, out=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

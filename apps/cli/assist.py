# apps/cli/assist.py
"""
Interactive Wordle assistant.

Each round:
  1) asks for the word you played ("q" quits) and the tiles you got back
     (x = absent, y = present, g = correct),
  2) narrows the word pool,
  3) reports how many words remain, optionally lists them and suggests one.

Stops when the tiles are all green or no word in the dictionary fits.

Usage:
    python -m apps.cli.assist --words wordsieve/datasets/data/words_5.txt
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from wordsieve.datasets import load_words, DEFAULT_WORDS_PATH
from wordsieve.engine import (
    WordPool, WordPoolError, is_solved, render_glyphs,
    validate_guess, validate_feedback_text,
)
from wordsieve.engine.validation import QUIT_CODE


def _ask(prompt: str, check=None, default: str | None = None) -> str:
    """Prompt until `check` (returns an error message or None) accepts the answer."""
    suffix = f" ({default})" if default else ""
    while True:
        text = input(f"{prompt}{suffix}: ").strip()
        if not text and default is not None:
            text = default
        err = check(text) if check else None
        if err is None:
            return text
        print(f">> {err}")


def _confirm(prompt: str) -> bool:
    return _ask(prompt + " [y/N]", default="n").lower().startswith("y")


def main():
    ap = argparse.ArgumentParser(description="wordsieve — interactive Wordle assistant")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="dictionary file (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--seed", type=int, help="RNG seed for suggestions")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG shows pool narrowing)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        pool = WordPool(load_words(args.words, N=args.N), rng=random.Random(args.seed))
    except WordPoolError as e:
        sys.exit(f"No usable {args.N}-letter words in {args.words}: {e}")
    print(f"Loaded {pool.size} words of length {pool.length}.")

    results = ""
    while pool.size > 0 and not (results and is_solved(results)):
        guess = _ask(f'Enter a guess or "{QUIT_CODE}" to quit', lambda s: validate_guess(s, args.N),
                     default=QUIT_CODE).lower()
        if guess == QUIT_CODE:
            break

        results = _ask("Enter the results of this guess", lambda s: validate_feedback_text(s, args.N))
        print(f"{guess}  {render_glyphs(results)}")

        try:
            pool.process_external_result(guess, results)
        except WordPoolError as e:
            # Rejected rounds leave the pool untouched; just ask again.
            print(f">> {e}")
            results = ""
            continue

        if is_solved(results):
            break
        if pool.size == 0:
            print("No word in the dictionary fits that feedback.")
            break

        if _confirm(f"There are now {pool.size} words remaining in the list. Show them?"):
            print(" ".join(pool.words))
        print(f"Try: {pool.get_random_word()}")

    print("App finished.")


if __name__ == "__main__":
    main()

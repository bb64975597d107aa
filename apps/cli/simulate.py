# apps/cli/simulate.py
"""
CLI entry point for self-play runs.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Plays one game per answer, each guess a random draw from the narrowed pool.
  3) Prints a summary (win rate, guess distribution) and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordsieve.datasets import validate_wordlist, pretty_summary, load_words, DEFAULT_WORDS_PATH
from wordsieve.harness import run_case, summarize, WORDLE_MAX_TURNS
from wordsieve.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    ap = argparse.ArgumentParser(description="wordsieve — random-guess self-play over a dictionary")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH), help="dictionary file (one word per line)")
    ap.add_argument("--answers", help="answers to play (default: the dictionary itself)")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--sample", type=int, help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and load
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    words = load_words(args.words, N=args.N)
    answers = load_words(args.answers, N=args.N) if args.answers else list(words)

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        cases = list(answers)
        rng.shuffle(cases)
        cases = cases[: args.sample]
    else:
        cases = list(answers)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 3) Play
    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, words=words, N=args.N, seed=args.seed + idx))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    print(f"won {summary['wins']}/{summary['games']} ({summary['win_rate']:.1%}) | "
          f"mean guesses {summary['mean_guesses']} | p90 {summary['p90_guesses']}")
    for turns, count in summary["histogram"].items():
        print(f"  {turns}: {count}")

    # 4) Write outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"selfplay_{run_id}.csv"
    manifest_path = outdir / f"selfplay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
        "num_cases": len(results),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

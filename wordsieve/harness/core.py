"""
Self-play harness.

- run_case:  play one puzzle (one hidden answer) by drawing random guesses
             from a WordPool and feeding back the scored result.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- summarize: aggregate a batch into win rate and guess-count statistics.
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are UI-agnostic so a CLI, a notebook or a test can drive them.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Iterable, Tuple

import numpy as np

from wordsieve.engine import WordPool, score, is_solved

logger = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a non-Wordle turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        words: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until solved, the pool is exhausted, or turns run out.

    Args:
        answer:    the hidden word for this case
        words:     dictionary seeding the pool (words of other lengths are ignored)
        N:         word length
        max_turns: must be 6 (Wordle rule; enforced)
        seed:      RNG seed so the guess sequence is reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), remaining (int),
            history (list[(guess, pattern)]), answer (str)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().lower()
    if len(answer) != N:
        raise ValueError(f"answer {answer!r} is not {N} letters long")

    pool = WordPool([w for w in words if len(w) == N], rng=random.Random(seed))
    history: List[Tuple[str, str]] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        guess = pool.get_random_word()
        patt = score(guess, answer)
        history.append((guess, patt))

        if is_solved(patt):
            success = True
            break

        pool.process_external_result(guess, patt)
        if pool.size == 0:
            # Only happens when the answer was never in the dictionary.
            logger.warning("pool exhausted while solving %r", answer)
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success, "guesses": len(history), "time_ms": dt,
        "remaining": pool.size, "history": history, "answer": answer,
    }


def run_batch(
        answers: List[str],
        *,
        words: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to length N) are used.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but cases don't share a guess sequence.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(ans, words=words, N=N, max_turns=max_turns, seed=case_seed))
    return out


def summarize(results: List[Dict], max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Aggregate per-game results.

    Returns:
        games, wins, win_rate, and over winning games only: mean/median/p90
        guess counts plus a histogram {turns: games} for 1..max_turns.
    """
    games = len(results)
    won = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    hist = np.bincount(won, minlength=max_turns + 1) if won.size else np.zeros(max_turns + 1, dtype=int)

    def _stat(fn) -> float | None:
        return round(float(fn(won)), 3) if won.size else None

    return {
        "games": games,
        "wins": int(won.size),
        "win_rate": round(won.size / games, 4) if games else 0.0,
        "mean_guesses": _stat(np.mean),
        "median_guesses": _stat(np.median),
        "p90_guesses": _stat(lambda a: np.percentile(a, 90)),
        "histogram": {t: int(hist[t]) for t in range(1, max_turns + 1)},
    }

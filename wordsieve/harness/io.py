"""
Persisting self-play runs.

A run produces two files side by side: a CSV with one row per game (the guess
and tile string for every turn played) and a JSON manifest describing how the
run was configured. Tile strings are written with a leading apostrophe so a
spreadsheet keeps "gxyxx" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["N", "answer", "success", "guesses", "remaining", "time_ms"]


def _as_text(patt: str) -> str:
    return "'" + patt if patt else patt


def _turn_columns(history, max_turns: int) -> Dict[str, str]:
    cols: Dict[str, str] = {}
    for turn in range(1, max_turns + 1):
        played = turn <= len(history)
        guess, patt = history[turn - 1] if played else ("", "")
        cols[f"guess_{turn}"] = guess
        cols[f"patt_{turn}"] = _as_text(patt)
    return cols


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    One row per game: the BASE_FIELDS, then guess_k/patt_k for k = 1..max_turns
    (blank past the last turn played). Parent directories are created.
    Returns the written path.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    turn_fields = [f"{kind}_{k}" for k in range(1, max_turns + 1) for kind in ("guess", "patt")]
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=BASE_FIELDS + turn_fields)
        writer.writeheader()
        for game in results:
            writer.writerow({
                "N": N,
                "answer": game["answer"],
                "success": game["success"],
                "guesses": game["guesses"],
                "remaining": game.get("remaining", ""),
                "time_ms": round(float(game["time_ms"]), 3),
                **_turn_columns(game.get("history", []), max_turns),
            })

    return str(out)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run description (config, dictionary report, summary) as indented JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(out)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash of the working tree, or 'unknown' outside a git checkout."""
    try:
        head = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                       stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return head.decode().strip()

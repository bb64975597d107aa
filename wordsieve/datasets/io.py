from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str = DEFAULT_WORDS_PATH, N: int | None = None) -> List[str]:
    """
    Load a dictionary: one word per line, lowercased, blanks dropped,
    duplicates removed (first occurrence wins).

    If N is given, words of any other length are skipped so the result can
    seed a WordPool directly.
    """
    seen = set()
    out: List[str] = []
    skipped = 0
    for ln in read_lines(p):
        w = ln.strip().lower()
        if not w:
            continue
        if N is not None and len(w) != N:
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)

    logger.info("Loaded %d words from %s (%d skipped for length)", len(out), p, skipped)
    return out

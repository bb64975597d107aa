"""
Dictionary validator.

What this module does:
- Validate one dictionary file (words_N.txt) before it seeds a word pool.
- Enforce formatting rules (lowercase, a-z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordsieve.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordsieve/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    N: int
    words: FileReport
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count). A line is valid iff it is already
    lowercase, alphabetic a-z and exactly N long; blank lines are invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary for word length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: the file exists, is non-empty, and has no invalid or duplicate lines.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"words file not found: {path}")
        rep = ValidationReport(N=N, words=FileReport(path, False, 0, "", 0, 0),
                               passed=False, issues=issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("words file contains 0 valid words")
    if invalid:
        issues.append(f"words file has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("words file contains duplicate lines")

    rep = ValidationReport(N=N, words=report, passed=not issues, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | words=2315 (uniq=2315, sha=abc123def456) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return f"N={report['N']} | words={w['count']} (uniq={w['unique_count']}, sha={sha}) | {status}"

"""
Feedback alphabet for one guess.

Canonical symbols (one per letter of the guess):
  - 'x' : absent  = letter not in the target (or not that many times)
  - 'y' : present = letter in the target, wrong position
  - 'g' : correct = letter in the target, right position

The parser also accepts upper-case forms, the '-' pattern character and the
full words, so patterns typed by a person or produced elsewhere map cleanly.
"""

from __future__ import annotations

from typing import Iterable, Literal, Tuple, Union

from .errors import InvalidSymbol

Symbol = Literal["x", "y", "g"]

ABSENT: Symbol = "x"
PRESENT: Symbol = "y"
CORRECT: Symbol = "g"
SYMBOLS = (ABSENT, PRESENT, CORRECT)

_ALIASES = {
    "x": ABSENT, "-": ABSENT, "absent": ABSENT,
    "y": PRESENT, "present": PRESENT,
    "g": CORRECT, "correct": CORRECT,
}

# Console tiles: white square, yellow square, green square; cross for garbage.
GLYPHS = {
    ABSENT: "⬜",
    PRESENT: "\U0001f7e8",
    CORRECT: "\U0001f7e9",
}
UNKNOWN_GLYPH = "❌"

FeedbackLike = Union[str, Iterable[str]]


def parse_feedback(feedback: FeedbackLike) -> Tuple[Symbol, ...]:
    """
    Normalize `feedback` into a tuple of canonical symbols.

    A plain string is read one character per position ("gxyxx"); any other
    iterable is read one element per position (["correct", "absent", ...]).

    Raises:
      InvalidSymbol if any element is not a recognised symbol.
    """
    out = []
    for i, raw in enumerate(feedback):
        sym = _ALIASES.get(raw.strip().lower()) if isinstance(raw, str) else None
        if sym is None:
            raise InvalidSymbol(raw, i)
        out.append(sym)
    return tuple(out)


def is_solved(feedback: FeedbackLike) -> bool:
    """True if every position is correct."""
    syms = parse_feedback(feedback)
    return bool(syms) and all(s == CORRECT for s in syms)


def render_glyphs(feedback: FeedbackLike) -> str:
    """
    Render feedback as colored tiles, e.g. "gyx" -> green, yellow, white.
    Unrecognised symbols render as a cross instead of failing, so partially
    typed input can be echoed back.
    """
    tiles = []
    for raw in feedback:
        sym = _ALIASES.get(raw.strip().lower()) if isinstance(raw, str) else None
        tiles.append(GLYPHS.get(sym, UNKNOWN_GLYPH))
    return "".join(tiles)

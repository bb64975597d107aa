"""
Validation of typed input for the interactive assistant.

Each check returns None when the input is acceptable, or a short message to
show the user before asking again.
"""

from __future__ import annotations

from typing import Optional

from .feedback import SYMBOLS

QUIT_CODE = "q"


def validate_guess(text: str, N: int) -> Optional[str]:
    """
    A guess must be N letters a-z (any case). The quit code always passes.
    """
    w = text.strip()
    if w.lower() == QUIT_CODE:
        return None
    if len(w) != N:
        return f"Guess must be {N} characters."
    if not w.isalpha() or not w.isascii():
        return "Guess must contain only the letters A-Z."
    return None


def validate_feedback_text(text: str, N: int) -> Optional[str]:
    """
    Feedback must be N characters, each one of x / y / g (any case).
    """
    r = text.strip()
    if len(r) != N:
        return f"Result must be {N} characters."
    if any(ch not in SYMBOLS for ch in r.lower()):
        return 'Result must be made up of "x", "y", or "g" only.'
    return None

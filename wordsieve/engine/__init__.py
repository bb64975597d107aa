from .errors import WordPoolError, LengthMismatch, InvalidSymbol, EmptyPool, OutOfRange
from .feedback import ABSENT, PRESENT, CORRECT, parse_feedback, is_solved, render_glyphs
from .scoring import score
from .setops import union, intersect, difference
from .validation import validate_guess, validate_feedback_text
from .word_pool import WordPool

__all__ = [
    "WordPool",
    "union", "intersect", "difference",
    "ABSENT", "PRESENT", "CORRECT", "parse_feedback", "is_solved", "render_glyphs",
    "score", "validate_guess", "validate_feedback_text",
    "WordPoolError", "LengthMismatch", "InvalidSymbol", "EmptyPool", "OutOfRange",
]

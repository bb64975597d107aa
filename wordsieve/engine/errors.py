"""
Error kinds raised by the word pool.

All of them are validation failures: they are raised before the pool is
touched, so a rejected call leaves the pool exactly as it was.
"""

from __future__ import annotations


class WordPoolError(ValueError):
    """Base class for every word pool failure."""


class LengthMismatch(WordPoolError):
    """Initial words differ in length, or a guess/feedback has the wrong length."""


class InvalidSymbol(WordPoolError):
    """A feedback symbol outside the absent/present/correct alphabet."""

    def __init__(self, symbol, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Invalid feedback symbol {symbol!r} at position {position}; "
            f"expected one of 'x' (absent), 'y' (present), 'g' (correct)")


class EmptyPool(WordPoolError):
    """The pool (or a restricted candidate set) has no words left."""


class OutOfRange(WordPoolError, IndexError):
    """A position outside [0, word length)."""

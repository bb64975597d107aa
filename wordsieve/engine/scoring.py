"""
Feedback for a single (guess, answer) pair.

Used by the self-play harness to stand in for a human reading tiles off the
game board. Emits the canonical symbols from `feedback`:
  - 'g' : correct letter in the correct position
  - 'y' : correct letter in the wrong position
  - 'x' : letter not present (or present fewer times than guessed)

Two passes, so duplicate letters respect the answer's real multiplicities:
  1) mark every correct position and count the answer's unmatched letters
  2) mark present only while that letter still has unmatched copies
"""

from collections import Counter

from .errors import LengthMismatch
from .feedback import ABSENT, CORRECT, PRESENT


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "xgyyy"
      score("lemon", "level") -> "ggxxx"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise LengthMismatch(f"Guess {guess!r} and answer {answer!r} differ in length")

    pattern = [ABSENT] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1  # consume one copy

    return "".join(pattern)

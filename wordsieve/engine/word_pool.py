"""
Indexed pool of candidate words.

The pool holds every word still consistent with the feedback seen so far,
plus two indices derived from it:
  - position index: for each position i, letter -> words with that letter at i
  - letter index:   letter -> words containing that letter anywhere

Both indices are rebuilt from scratch whenever the pool changes, so they can
never drift from the pool itself. The pool only ever shrinks.
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from .errors import EmptyPool, LengthMismatch, OutOfRange
from .feedback import ABSENT, CORRECT, PRESENT, FeedbackLike, parse_feedback
from .setops import difference, intersect, union

logger = logging.getLogger(__name__)

_NOTHING: FrozenSet[str] = frozenset()


class WordPool:
    """
    A set of same-length words narrowed round by round from guess feedback.

    Typical use:
        pool = WordPool(words)
        pool.process_external_result("crane", "xyxxg")
        guess = pool.get_random_word()
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        ordered = list(words)
        if not ordered:
            raise EmptyPool("Cannot build a word pool from an empty word list")

        self._length = len(ordered[0])
        for w in ordered:
            if len(w) != self._length:
                raise LengthMismatch(
                    f"All words must be the same length: {w!r} is not {self._length} long")

        self.rng = rng or random.Random()
        self._pool: FrozenSet[str] = frozenset(ordered)
        self._protected: Set[str] = set()
        self._positions: Tuple[Mapping[str, FrozenSet[str]], ...] = ()
        self._letters: Mapping[str, FrozenSet[str]] = MappingProxyType({})
        self._size = 0
        self._rebuild()

    # ---- read accessors ----

    @property
    def size(self) -> int:
        """Number of words left; recomputed on every rebuild."""
        return self._size

    @property
    def length(self) -> int:
        return self._length

    @property
    def words(self) -> Tuple[str, ...]:
        """Snapshot of the pool (sorted); mutating it cannot touch the pool."""
        return tuple(sorted(self._pool))

    @property
    def protected_letters(self) -> FrozenSet[str]:
        return frozenset(self._protected)

    @property
    def position_index(self) -> Tuple[Mapping[str, FrozenSet[str]], ...]:
        return self._positions

    @property
    def letter_index(self) -> Mapping[str, FrozenSet[str]]:
        return self._letters

    def __len__(self) -> int:
        return self.size

    def __contains__(self, word: object) -> bool:
        return word in self._pool

    def __repr__(self) -> str:
        return f"WordPool(length={self._length}, size={self.size})"

    # ---- queries ----

    def _require_words(self) -> None:
        if not self._pool:
            raise EmptyPool("Word pool is empty")

    def contains_any(self, letter: str) -> FrozenSet[str]:
        """Words containing `letter` at any position (empty set if none)."""
        self._require_words()
        return self._letters.get(letter, _NOTHING)

    def contains_at_index(self, letter: str, position: int) -> FrozenSet[str]:
        """Words having `letter` exactly at `position`."""
        self._require_words()
        if not 0 <= position < self._length:
            raise OutOfRange(f"Position {position} is outside [0, {self._length})")
        return self._positions[position].get(letter, _NOTHING)

    def get_random_word(self, *must_contain: str) -> str:
        """
        Uniformly random word from the pool, restricted to words containing
        every letter in `must_contain` when any are given.

        Raises:
          EmptyPool if the pool, or the restricted candidate set, is empty.
        """
        self._require_words()
        if must_contain:
            candidates = intersect([self.contains_any(c) for c in must_contain])
        else:
            candidates = self._pool
        if not candidates:
            raise EmptyPool(
                f"No word in the pool contains all of {sorted(set(must_contain))}")
        # sorted so a seeded rng gives the same draw across runs
        return self.rng.choice(sorted(candidates))

    # ---- mutation ----

    def remove_letter(self, letter: str) -> None:
        """Drop every word containing `letter` anywhere."""
        self._pool = difference([self._pool, self.contains_any(letter)])
        self._rebuild()

    def process_external_result(self, guess: str, feedback: FeedbackLike) -> None:
        """
        Narrow the pool using one round of feedback for `guess`.

        Stages run in a fixed order, absent -> correct -> present, since the
        absent stage must respect letters protected by this same round.

        Raises (before anything changes):
          EmptyPool      the pool is already exhausted
          LengthMismatch guess or feedback length differs from the word length
          InvalidSymbol  feedback holds something other than absent/present/correct
        """
        self._require_words()
        symbols = parse_feedback(feedback)
        if len(symbols) != self._length:
            raise LengthMismatch(
                f"Feedback has {len(symbols)} symbols; words are {self._length} long")
        if len(guess) != self._length:
            raise LengthMismatch(
                f"Guess {guess!r} is not the same length as the words in the pool "
                f"({self._length})")

        groups: Dict[str, List[int]] = {ABSENT: [], PRESENT: [], CORRECT: []}
        for i, sym in enumerate(symbols):
            groups[sym].append(i)
            if sym != ABSENT:
                self._protected.add(guess[i])

        if groups[ABSENT]:
            self._apply_absent(guess, groups[ABSENT])
        if groups[CORRECT]:
            self._apply_correct(guess, groups[CORRECT])
        if groups[PRESENT]:
            self._apply_present(guess, groups[PRESENT])

    def _apply_absent(self, guess: str, positions: List[int]) -> None:
        dead = difference([{guess[i] for i in positions}, self._protected])
        to_remove = [self._letters.get(c, _NOTHING) for c in sorted(dead)]
        # A protected letter still can't sit where it was reported absent.
        to_remove += [self._positions[i].get(guess[i], _NOTHING) for i in positions]

        before = len(self._pool)
        self._pool = difference([self._pool, union(to_remove)])
        if len(self._pool) != before:
            self._rebuild()
        logger.debug("absent %s: %d -> %d words", sorted(dead), before, self.size)

    def _apply_correct(self, guess: str, positions: List[int]) -> None:
        must_have = intersect(
            [self._positions[i].get(guess[i], _NOTHING) for i in positions])
        if must_have:
            before = len(self._pool)
            self._pool = intersect([self._pool, must_have])
            self._rebuild()
            logger.debug("correct %s: %d -> %d words", positions, before, self.size)

    def _apply_present(self, guess: str, positions: List[int]) -> None:
        must_have = intersect([
            difference([self._letters.get(guess[i], _NOTHING),
                        self._positions[i].get(guess[i], _NOTHING)])
            for i in positions
        ])
        if must_have:
            before = len(self._pool)
            self._pool = intersect([self._pool, must_have])
            self._rebuild()
            logger.debug("present %s: %d -> %d words", positions, before, self.size)

    def _rebuild(self) -> None:
        """Recompute both indices and `size` from the pool."""
        positions: List[Dict[str, Set[str]]] = [defaultdict(set) for _ in range(self._length)]
        letters: Dict[str, Set[str]] = defaultdict(set)
        for word in self._pool:
            for i, ch in enumerate(word):
                positions[i][ch].add(word)
                letters[ch].add(word)

        self._positions = tuple(
            MappingProxyType({ch: frozenset(ws) for ch, ws in slot.items()})
            for slot in positions
        )
        self._letters = MappingProxyType({ch: frozenset(ws) for ch, ws in letters.items()})
        self._size = len(self._pool)

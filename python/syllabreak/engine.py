"""Break computation over a PatternStore (Liang's algorithm).

The word is lowercased and padded with boundary markers; every pattern
matching at every offset overlays its weights on the gaps it covers, and
the strongest weight wins each gap. A gap whose final weight is odd is a
valid break point.

For the Dutch word "lettergrepen" the break points are [3, 6, 9]:
"let", "ter", "gre", "pen".
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .normalizer import is_hyphenatable, normalize_word, pad
from .patterns import Pattern, PatternStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """A valid break point inside a word.

    ``offset`` counts the characters before the break. For nonstandard
    hyphenation, ``change`` replaces ``word[start:start + cut]``.
    """

    offset: int
    change: Optional[str] = None
    start: int = 0
    cut: int = 0

    def split(self, word: str, upper: bool = False) -> tuple[str, str]:
        """Cut ``word`` at this position, without adding a hyphen."""
        if self.change is None:
            return word[:self.offset], word[self.offset:]
        change = self.change.upper() if upper else self.change
        before, _, after = change.partition("=")
        return (
            word[:self.start] + before,
            after + word[self.start + self.cut:],
        )

    def insert(self, word: str, hyphen: str, upper: bool = False) -> str:
        """Return ``word`` with ``hyphen`` inserted at this position."""
        if self.change is None:
            return word[:self.offset] + hyphen + word[self.offset:]
        change = self.change.upper() if upper else self.change
        return (
            word[:self.start]
            + change.replace("=", hyphen)
            + word[self.start + self.cut:]
        )


class HyphenationEngine:
    """Computes break points for words using one PatternStore."""

    def __init__(self, store: PatternStore):
        self.store = store

    def _merge(self, word: str) -> tuple[list[int], list[Optional[tuple[Pattern, int]]]]:
        """Overlay all matching patterns on the padded word.

        Returns per-slot weights and the (pattern, gap) that set each one;
        slot ``s`` is the gap before character ``s`` of the padded word.
        """
        padded = pad(word)
        values = [0] * (len(padded) + 1)
        origins: list[Optional[tuple[Pattern, int]]] = [None] * len(values)

        for i in range(len(padded) - 1):
            for pattern in self.store.matches_at(padded, i):
                for k, weight in enumerate(pattern.weights):
                    slot = i + k
                    current = values[slot]
                    # equal weight: the first pattern keeps the slot
                    if abs(weight) > abs(current) or (
                        abs(weight) == abs(current) and weight != current
                    ):
                        values[slot] = weight
                        origins[slot] = (pattern, k)

        return values, origins

    def break_vector(self, word: str) -> list[int]:
        """Return one merged weight per gap of ``word``.

        Index ``g`` is the gap before character ``g``; the vector has
        ``len(word) + 1`` entries. Exception words yield 1 at their
        literal segment boundaries and 0 elsewhere. Non-alphabetic words
        yield all zeros.
        """
        normalized = normalize_word(word)
        if not is_hyphenatable(normalized):
            return [0] * (len(word) + 1)

        segments = self.store.exception_for(normalized)
        if segments is not None:
            vector = [0] * (len(word) + 1)
            for offset in _segment_offsets(segments):
                vector[offset] = 1
            return vector

        values, _ = self._merge(normalized)
        return values[1:len(word) + 2]

    def positions(self, word: str) -> list[Position]:
        """Return every valid break point of ``word``, left to right.

        Breaks at the very start or end of the word are never reported.
        """
        normalized = normalize_word(word)
        if not is_hyphenatable(normalized):
            return []

        segments = self.store.exception_for(normalized)
        if segments is not None:
            return [Position(offset) for offset in _segment_offsets(segments)]

        values, origins = self._merge(normalized)
        points = []
        for offset in range(1, len(word)):
            slot = offset + 1
            if values[slot] % 2 == 0:
                continue
            pattern, gap = origins[slot]
            relative = pattern.alternative_offset(gap)
            if relative is None:
                points.append(Position(offset))
            else:
                alternative = pattern.alternative
                points.append(Position(
                    offset,
                    change=alternative.change,
                    start=max(offset + relative, 0),
                    cut=alternative.cut,
                ))
        return points


def _segment_offsets(segments: tuple[str, ...]) -> list[int]:
    """Inner boundaries of a segmented word, e.g. ("ta", "ble") -> [2]."""
    length = sum(len(segment) for segment in segments)
    offsets = []
    total = 0
    for segment in segments:
        total += len(segment)
        if 0 < total < length and total not in offsets:
            offsets.append(total)
    return offsets

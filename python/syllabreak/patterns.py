"""Pattern store: weighted substring patterns plus exception words.

A pattern is a short lowercase substring, optionally anchored to the start
or end of a word with the boundary marker ``.``, and one weight per gap it
covers (``len(key) + 1`` weights, including the gaps just before and after
the substring). Odd weights allow a break, even weights forbid it; the
highest overlapping weight wins.

Example:
    "1ba" -> Pattern(key="ba", weights=(1, 0, 0))
    ".am1s" -> Pattern(key=".ams", weights=(0, 0, 0, 1, 0))

Usage:
    store = PatternStore.load(
        patterns=[("ba", (1, 0, 0)), ("t1t", ...)],
        exceptions=[("table", ("ta", "ble"))],
    )
    store.longest_match_at(".table.", 1)
    store.exception_for("Table")
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence, Union

from .errors import MalformedExceptionRecord, MalformedPatternRecord
from .normalizer import BOUNDARY, normalize_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Alternative:
    """Nonstandard hyphenation attached to a pattern.

    ``change`` replaces ``cut`` characters starting at ``index`` (1-based
    position inside the pattern, leading boundary marker not counted);
    ``=`` in ``change`` stands for the hyphen.
    """

    change: str     # e.g. "sz=sz"
    index: int
    cut: int


@dataclass(frozen=True)
class Pattern:
    """A substring and its per-gap weights."""

    key: str
    weights: tuple[int, ...]
    alternative: Optional[Alternative] = None

    def __post_init__(self):
        if len(self.weights) != len(self.key) + 1:
            raise MalformedPatternRecord(self.key, self.weights)
        if not self.key:
            raise MalformedPatternRecord(self.key, self.weights, "empty pattern")

    @property
    def anchored(self) -> bool:
        """True if the pattern includes a word-boundary marker."""
        return self.key.startswith(BOUNDARY) or self.key.endswith(BOUNDARY)

    def alternative_offset(self, gap: int) -> Optional[int]:
        """Offset of the alternative's replacement relative to pattern gap ``gap``.

        Returns None when the pattern has no alternative.
        """
        if self.alternative is None:
            return None
        index = self.alternative.index
        if self.key.startswith(BOUNDARY):
            index += 1
        return index - 1 - gap


PatternRecord = Union[
    Pattern,
    tuple[str, Sequence[int]],
    tuple[str, Sequence[int], Optional[Alternative]],
]
ExceptionRecord = tuple[str, Sequence[str]]


@dataclass
class PatternStore:
    """All patterns and exceptions for one language.

    Patterns are kept in a flat dict keyed by substring; ``maxlen`` bounds
    the candidate lengths tried at each offset. The store is not modified
    after ``load`` returns.
    """

    patterns: dict[str, Pattern] = field(default_factory=dict)
    exceptions: dict[str, tuple[str, ...]] = field(default_factory=dict)
    maxlen: int = 0
    rejected: list[Exception] = field(default_factory=list)

    @classmethod
    def load(
        cls,
        patterns: Iterable[PatternRecord] = (),
        exceptions: Iterable[ExceptionRecord] = (),
        strict: bool = False,
    ) -> "PatternStore":
        """Build a store from already-parsed records.

        A malformed record is skipped and kept in ``rejected``; with
        ``strict=True`` the first malformed record aborts the load instead.
        A later pattern with the same key overwrites an earlier one.

        Args:
            patterns: Pattern objects or ``(key, weights[, alternative])`` tuples.
            exceptions: ``(word, segments)`` pairs.
            strict: Raise on the first malformed record.

        Returns:
            A new PatternStore.

        Raises:
            MalformedPatternRecord: In strict mode, for a bad pattern.
            MalformedExceptionRecord: In strict mode, for a bad exception.
        """
        store = cls()

        for record in patterns:
            try:
                pattern = _to_pattern(record)
            except MalformedPatternRecord as e:
                if strict:
                    raise
                logger.warning("Skipping pattern: %s", e)
                store.rejected.append(e)
                continue
            store.patterns[pattern.key] = pattern

        for record in exceptions:
            try:
                word, segments = _to_exception(record)
            except MalformedExceptionRecord as e:
                if strict:
                    raise
                logger.warning("Skipping exception: %s", e)
                store.rejected.append(e)
                continue
            store.exceptions[word] = segments

        store.maxlen = max((len(key) for key in store.patterns), default=0)
        logger.debug(
            "Loaded %d patterns, %d exceptions (%d rejected)",
            len(store.patterns), len(store.exceptions), len(store.rejected),
        )
        return store

    def __len__(self) -> int:
        return len(self.patterns)

    def matches_at(self, padded_word: str, start: int) -> Iterator[Pattern]:
        """Yield every pattern matching ``padded_word`` at ``start``, longest first."""
        longest = min(self.maxlen, len(padded_word) - start)
        for length in range(longest, 0, -1):
            pattern = self.patterns.get(padded_word[start:start + length])
            if pattern is not None:
                yield pattern

    def longest_match_at(self, padded_word: str, start: int) -> Optional[Pattern]:
        """Return the longest pattern matching ``padded_word`` at ``start``.

        Keys are unique, so two matches at one offset always differ in
        length; an anchored pattern is longer than its unanchored
        counterpart and therefore wins.
        """
        return next(self.matches_at(padded_word, start), None)

    def exception_for(self, word: str) -> Optional[tuple[str, ...]]:
        """Exact, case-insensitive exception lookup."""
        return self.exceptions.get(normalize_word(word))


def _to_pattern(record: PatternRecord) -> Pattern:
    if isinstance(record, Pattern):
        return record
    try:
        key, weights, *rest = record
        key = normalize_word(key)
        weights = tuple(int(w) for w in weights)
    except (TypeError, ValueError) as e:
        raise MalformedPatternRecord(str(record), (), str(e)) from e
    alternative = rest[0] if rest else None
    return Pattern(key=key, weights=weights, alternative=alternative)


def _to_exception(record: ExceptionRecord) -> tuple[str, tuple[str, ...]]:
    try:
        word, segments = record
        segments = tuple(segments)
        joined = "".join(segments)
    except (TypeError, ValueError):
        raise MalformedExceptionRecord(str(record), ()) from None
    if not isinstance(word, str) or not word or joined.lower() != word.lower():
        raise MalformedExceptionRecord(word, segments)
    return normalize_word(word), segments

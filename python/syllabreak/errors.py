"""Exception types for syllabreak.

Empty results (a word without break points, ``wrap`` returning None) are
not errors and never raise.
"""

from typing import Optional, Sequence


class HyphenationError(Exception):
    """Base class for all syllabreak errors."""


class MalformedPatternRecord(HyphenationError, ValueError):
    """A pattern whose weight vector does not fit its substring."""

    def __init__(self, key: str, weights: Sequence[int], reason: str = ""):
        self.key = key
        self.weights = tuple(weights)
        reason = reason or (
            f"expected {len(key) + 1} weights, got {len(self.weights)}"
        )
        super().__init__(f"Malformed pattern {key!r}: {reason}")


class MalformedExceptionRecord(HyphenationError, ValueError):
    """An exception word whose segments do not spell the word."""

    def __init__(self, word: str, segments: Sequence[str]):
        self.word = word
        self.segments = tuple(segments)
        super().__init__(
            f"Malformed exception {word!r}: segments {list(self.segments)!r}"
        )


class UnknownLanguage(HyphenationError, LookupError):
    """No tag in the fallback chain has dictionary data."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No hyphenation dictionary for language: {tag}")


class DictionaryLoadError(HyphenationError):
    """The dictionary source failed to supply data for a resolved tag."""

    def __init__(self, tag: str, reason: Optional[str] = None):
        self.tag = tag
        message = f"Could not load hyphenation dictionary: {tag}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

"""Language registry: tag fallback and per-language dictionary cache.

Usage:
    registry = LanguageRegistry(DirectorySource("dictionaries/"))
    registry.resolve("nl_NL_variant1")   # "nl_NL"
    dic = registry.get_or_build("nl-NL")
    dic.inserted("lettergrepen")         # "let-ter-gre-pen"

Dictionaries are built once per resolved tag and kept for the life of the
registry. Built dictionaries are never modified, so they can be shared
between threads.
"""

import logging
import threading
from typing import Iterable, Optional

from . import config
from .dictionary import Dictionary
from .engine import HyphenationEngine
from .errors import DictionaryLoadError, UnknownLanguage
from .patterns import PatternStore
from .sources import DictionarySource

logger = logging.getLogger(__name__)


def language_fallback(tag: str, available: Iterable[str]) -> Optional[str]:
    """Get a fallback language available in ``available``.

    Uses truncation inheritance: trailing ``_`` separated parts are dropped
    until a known tag remains. ``-`` is accepted as a separator.

    >>> language_fallback("en-US_variant1-x", {"en", "en_US"})
    'en_US'
    """
    available = set(available)
    parts = tag.replace("-", "_").split("_")
    while parts:
        candidate = "_".join(parts)
        if candidate in available:
            return candidate
        parts.pop()
    return None


class LanguageRegistry:
    """Caches one Dictionary per resolved language tag."""

    def __init__(
        self,
        source: DictionarySource,
        left: Optional[int] = None,
        right: Optional[int] = None,
        strict: bool = False,
    ):
        """Initialize registry.

        Args:
            source: Where pattern data comes from.
            left: Default left margin for built dictionaries.
            right: Default right margin for built dictionaries.
            strict: Fail a build on the first malformed record.
        """
        self.source = source
        self.left = config.default_left() if left is None else left
        self.right = config.default_right() if right is None else right
        self.strict = strict
        self._dictionaries: dict[str, Dictionary] = {}
        self._lock = threading.Lock()
        self._build_locks: dict[str, threading.Lock] = {}

    def languages(self) -> set[str]:
        """Tags with dictionary data."""
        return self.source.languages()

    def cached(self) -> list[str]:
        """Tags whose dictionaries have been built."""
        return sorted(self._dictionaries)

    def resolve(self, tag: str) -> Optional[str]:
        """Return the most specific available tag for ``tag``, or None."""
        return language_fallback(tag, self.languages())

    def get_or_build(self, tag: str) -> Dictionary:
        """Return the dictionary for ``tag``, building it on first use.

        Raises:
            UnknownLanguage: If no tag in the fallback chain has data.
            DictionaryLoadError: If the source fails to supply the data.
        """
        canonical = self.resolve(tag)
        if canonical is None:
            raise UnknownLanguage(tag)

        dictionary = self._dictionaries.get(canonical)
        if dictionary is not None:
            return dictionary

        # one build per tag; later callers for that tag wait and reuse it
        with self._lock:
            build_lock = self._build_locks.setdefault(canonical, threading.Lock())
        with build_lock:
            dictionary = self._dictionaries.get(canonical)
            if dictionary is None:
                dictionary = self._build(canonical)
                self._dictionaries[canonical] = dictionary
        return dictionary

    def get(
        self, tag: str, left: Optional[int] = None, right: Optional[int] = None
    ) -> Dictionary:
        """Like get_or_build(), with optional margins for this caller."""
        dictionary = self.get_or_build(tag)
        if left is None and right is None:
            return dictionary
        return dictionary.with_margins(left, right)

    def _build(self, tag: str) -> Dictionary:
        try:
            result = self.source.load(tag)
            store = PatternStore.load(result.patterns, result.exceptions, strict=self.strict)
        except (OSError, ValueError, LookupError) as e:
            raise DictionaryLoadError(tag, str(e)) from e

        logger.info(
            "Built %s dictionary: %d patterns, %d exceptions",
            tag, len(store.patterns), len(store.exceptions),
        )
        return Dictionary(
            HyphenationEngine(store), left=self.left, right=self.right, language=tag
        )

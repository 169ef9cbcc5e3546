"""Hyphenation dictionary for one language.

Wraps a HyphenationEngine with margins (minimum characters kept before
and after any break) and offers three views of the break points:

    dic = Dictionary(engine, left=2, right=2)
    dic.inserted("lettergrepen")          # "let-ter-gre-pen"
    dic.wrap("autobandventieldopje", 11)  # ("autoband-", "ventieldopje")
    list(dic.iterate("Amsterdam"))        # [("Amster", "dam"), ("Am", "sterdam")]
"""

from typing import Optional

from .engine import HyphenationEngine, Position
from .normalizer import is_all_upper

DEFAULT_HYPHEN = "-"


class BreakIterator:
    """Splits of one word, rightmost break first.

    Backed by a precomputed position list and a cursor; ``reset()`` starts
    over without recomputing anything.
    """

    def __init__(self, word: str, positions: list[Position]):
        self.word = word
        self._positions = list(reversed(positions))
        self._upper = is_all_upper(word)
        self._cursor = 0

    def __iter__(self) -> "BreakIterator":
        return self

    def __next__(self) -> tuple[str, str]:
        if self._cursor >= len(self._positions):
            raise StopIteration
        position = self._positions[self._cursor]
        self._cursor += 1
        return position.split(self.word, upper=self._upper)

    def __len__(self) -> int:
        return len(self._positions) - self._cursor

    def reset(self) -> None:
        """Rewind to the rightmost break."""
        self._cursor = 0


class Dictionary:
    """Hyphenation operations for one language."""

    def __init__(
        self,
        engine: HyphenationEngine,
        left: int = 2,
        right: int = 2,
        language: Optional[str] = None,
    ):
        """Initialize dictionary.

        Args:
            engine: Engine holding the language's patterns.
            left: Minimum characters before any break.
            right: Minimum characters after any break.
            language: Resolved language tag, informational.
        """
        if left < 1 or right < 1:
            raise ValueError(f"Margins must be at least 1, got left={left}, right={right}")
        self.engine = engine
        self.left = left
        self.right = right
        self.language = language

    def __repr__(self) -> str:
        return f"Dictionary({self.language or '?'}, left={self.left}, right={self.right})"

    def with_margins(
        self, left: Optional[int] = None, right: Optional[int] = None
    ) -> "Dictionary":
        """Return a dictionary sharing this engine with other margins."""
        return Dictionary(
            self.engine,
            left=self.left if left is None else left,
            right=self.right if right is None else right,
            language=self.language,
        )

    def positions(self, word: str) -> list[Position]:
        """Break points of ``word`` that respect both margins, left to right."""
        last = len(word) - self.right
        return [
            position for position in self.engine.positions(word)
            if self.left <= position.offset <= last
        ]

    def inserted(self, word: str, hyphen: str = DEFAULT_HYPHEN) -> str:
        """Get the word with all possible hyphens inserted.

        Args:
            word: Word to hyphenate.
            hyphen: String inserted at each break.

        Returns:
            The word with hyphens, e.g. "let-ter-gre-pen".
        """
        upper = is_all_upper(word)
        result = word
        # right to left so earlier offsets stay valid
        for position in reversed(self.positions(word)):
            result = position.insert(result, hyphen, upper=upper)
        return result

    def wrap(
        self, word: str, width: int, hyphen: str = DEFAULT_HYPHEN
    ) -> Optional[tuple[str, str]]:
        """Get the longest possible first part and the last part of a word.

        The first part has the hyphen already attached and is at most
        ``width`` characters long.

        Returns:
            ``(first, last)``, or None if no break fits within ``width``.
        """
        width -= len(hyphen)
        for first, last in self.iterate(word):
            if len(first) <= width:
                return first + hyphen, last
        return None

    def iterate(self, word: str) -> BreakIterator:
        """Iterate over all splits of ``word``, the longest first part first."""
        return BreakIterator(word, self.positions(word))

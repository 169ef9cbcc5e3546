"""syllabreak - Pattern-based hyphenation.

Computes where a word may be broken with a hyphen, using TeX-style
hyphenation patterns (Liang's algorithm) and exception words.

Core concepts:
    - Patterns weight the gaps between letters; odd weights allow a break
    - Exception words override the patterns for that exact word
    - Language tags fall back to less specific ones (nl_NL_variant1 -> nl_NL)

Example:
    "lettergrepen" (nl_NL) -> "let-ter-gre-pen"

Usage:
    from syllabreak import LanguageRegistry, DirectorySource

    registry = LanguageRegistry(DirectorySource("dictionaries/"))
    dic = registry.get_or_build("nl_NL")

    dic.inserted("lettergrepen")          # "let-ter-gre-pen"
    dic.wrap("autobandventieldopje", 11)  # ("autoband-", "ventieldopje")
    for first, last in dic.iterate("Amsterdam"):
        print(first, last)                # "Amster dam", then "Am sterdam"
"""

from .dictionary import BreakIterator, Dictionary
from .engine import HyphenationEngine, Position
from .errors import (
    DictionaryLoadError,
    HyphenationError,
    MalformedExceptionRecord,
    MalformedPatternRecord,
    UnknownLanguage,
)
from .patterns import Alternative, Pattern, PatternStore
from .registry import LanguageRegistry, language_fallback
from .sources import DictionarySource, DirectorySource, DownloadSource, MemorySource

__version__ = "0.1.0"

__all__ = [
    "Alternative",
    "BreakIterator",
    "Dictionary",
    "DictionaryLoadError",
    "DictionarySource",
    "DirectorySource",
    "DownloadSource",
    "HyphenationEngine",
    "HyphenationError",
    "LanguageRegistry",
    "MalformedExceptionRecord",
    "MalformedPatternRecord",
    "MemorySource",
    "Pattern",
    "PatternStore",
    "Position",
    "UnknownLanguage",
    "language_fallback",
]

"""Base ingestor interface for hyphenation pattern files.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading patterns from any source format.
"""

import logging
import re
import urllib.request
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ..normalizer import normalize_word
from ..patterns import Alternative, Pattern

logger = logging.getLogger(__name__)

PATTERN_TOKEN = re.compile(r"(\d?)(\D?)")

# Kinds of token yielded by Ingestor.parse()
PATTERN = "pattern"
EXCEPTION = "exception"


@dataclass
class IngestResult:
    """Result of ingesting a pattern file."""

    patterns: list[Pattern]
    exceptions: list[tuple[str, tuple[str, ...]]]
    source_path: str
    dict_name: str
    language: str
    total_raw: int = 0          # Total tokens in source
    total_valid: int = 0        # Patterns and exceptions kept
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{len(self.errors)} errors)"
        )


def parse_pattern(token: str, alternative: Optional[Alternative] = None) -> Optional[Pattern]:
    """Parse a pattern token like ``".am1s"`` or ``"a2nd"``.

    Args:
        token: Letters interleaved with single-digit weights.
        alternative: Nonstandard hyphenation for this pattern.

    Returns:
        The Pattern, or None if every weight is zero.

    Raises:
        ValueError: If the token has no letters.
    """
    chars = []
    weights = []
    for digit, char in PATTERN_TOKEN.findall(token):
        weights.append(int(digit or 0))
        if char:
            chars.append(char)
    # findall ends with an empty match, so weights has one entry per gap
    weights = weights[:len(chars) + 1]
    weights += [0] * (len(chars) + 1 - len(weights))

    if not chars:
        raise ValueError(f"pattern without letters: {token!r}")
    if max(weights) == 0:
        return None
    return Pattern(
        key=normalize_word("".join(chars)),
        weights=tuple(weights),
        alternative=alternative,
    )


def parse_exception(token: str) -> tuple[str, tuple[str, ...]]:
    """Parse an exception token like ``"as-so-ciate"``."""
    segments = tuple(token.split("-"))
    if not all(segments):
        raise ValueError(f"empty segment in exception: {token!r}")
    return normalize_word("".join(segments)), segments


class Ingestor(ABC):
    """Base class for pattern file ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (kind, token, line_number) tuples
        - file_extensions: list of supported extensions

    The ingest() method handles record parsing and error collection.
    """

    file_extensions: list[str] = []

    def __init__(self, language: str):
        """Initialize ingestor.

        Args:
            language: Language tag (e.g., "nl_NL", "hu").
        """
        self.language = language

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, str, Optional[int]]]:
        """Parse source file and yield (kind, token, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (PATTERN or EXCEPTION, raw_token, line_number).
        """
        pass

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def make_pattern(self, token: str) -> Optional[Pattern]:
        """Turn a raw pattern token into a Pattern."""
        return parse_pattern(token)

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest patterns and exceptions from file.

        A token that fails to parse is reported in ``errors`` and skipped.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with records and statistics.
        """
        filepath = Path(filepath)
        filepath_str = str(filepath.resolve())

        patterns: list[Pattern] = []
        exceptions: list[tuple[str, tuple[str, ...]]] = []
        total_raw = 0
        errors: list[str] = []

        for kind, token, line_num in self.parse(filepath):
            total_raw += 1
            try:
                if kind == EXCEPTION:
                    exceptions.append(parse_exception(token))
                else:
                    pattern = self.make_pattern(token)
                    if pattern is not None:
                        patterns.append(pattern)
            except ValueError as e:
                errors.append(f"line {line_num}: {e}")

        if errors:
            logger.warning(
                "[%s] %d malformed entries in %s", self.language, len(errors), filepath
            )

        return IngestResult(
            patterns=patterns,
            exceptions=exceptions,
            source_path=filepath_str,
            dict_name=self.get_dict_name(filepath),
            language=self.language,
            total_raw=total_raw,
            total_valid=len(patterns) + len(exceptions),
            errors=errors,
        )


class DownloadableIngestor(Ingestor):
    """Ingestor that can download source files."""

    download_urls: dict[str, str] = {}  # language -> URL

    def __init__(self, language: str, cache_dir: Path | str):
        super().__init__(language)
        self.cache_dir = Path(cache_dir)

    def get_cached_path(self) -> Path:
        """Get path where downloaded file should be cached."""
        if self.language not in self.download_urls:
            raise ValueError(f"No download URL for language: {self.language}")
        url = self.download_urls[self.language]
        filename = url.split("/")[-1]
        return self.cache_dir / filename

    def download(self, force: bool = False) -> Path:
        """Download source file if not cached.

        Args:
            force: Force re-download even if cached.

        Returns:
            Path to cached file.
        """
        cached_path = self.get_cached_path()
        url = self.download_urls[self.language]

        if cached_path.exists() and not force:
            logger.info("[%s] Using cached: %s", self.language, cached_path)
            return cached_path

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info("[%s] Downloading from: %s", self.language, url)
        urllib.request.urlretrieve(url, cached_path)
        logger.info("[%s] Saved to: %s", self.language, cached_path)

        return cached_path

    def download_and_ingest(self, force: bool = False) -> IngestResult:
        """Download and ingest in one step."""
        filepath = self.download(force=force)
        return self.ingest(filepath)

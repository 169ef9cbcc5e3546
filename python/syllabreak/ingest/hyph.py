"""Hyphen (LibreOffice) pattern file ingestor.

Parses hyph_*.dic files used by LibreOffice, Firefox, Pyphen, etc.

Format:
    UTF-8               # Charset (first line)
    LEFTHYPHENMIN 2     # Directives, ignored
    % comment
    .am1s               # Pattern: letters with weights between them
    s1sz/sz=sz,1,3      # Pattern with nonstandard hyphenation
    ^^e9                # Escaped character (hex code)

Downloads from LibreOffice/dictionaries (MPL/LGPL, per-language licenses).
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional

from ..patterns import Alternative, Pattern
from .base import PATTERN, DownloadableIngestor, parse_pattern

logger = logging.getLogger(__name__)

HEX_ESCAPE = re.compile(r"\^{2}([0-9a-f]{2})")

DIRECTIVES = (
    "LEFTHYPHENMIN",
    "RIGHTHYPHENMIN",
    "COMPOUNDLEFTHYPHENMIN",
    "COMPOUNDRIGHTHYPHENMIN",
    "NEXTLEVEL",
    "NOHYPHEN",
)

_BASE = "https://raw.githubusercontent.com/LibreOffice/dictionaries/master"

# LibreOffice/dictionaries
HYPH_URLS = {
    "de_DE": f"{_BASE}/de/hyph_de_DE.dic",
    "en_US": f"{_BASE}/en/hyph_en_US.dic",
    "fr": f"{_BASE}/fr_FR/hyph_fr.dic",
    "hu_HU": f"{_BASE}/hu_HU/hyph_hu_HU.dic",
    "nl_NL": f"{_BASE}/nl_NL/hyph_nl_NL.dic",
}


def decode_escapes(line: str) -> str:
    """Replace ``^^hh`` escapes with the character they encode."""
    return HEX_ESCAPE.sub(lambda match: chr(int(match.group(1), 16)), line)


def parse_alternative(text: str) -> Alternative:
    """Parse the ``change,index,cut`` part of a nonstandard pattern.

    Raises:
        ValueError: If the text does not have three fields.
    """
    fields = text.split(",")
    if len(fields) != 3 or "=" not in fields[0]:
        raise ValueError(f"invalid nonstandard hyphenation: {text!r}")
    change, index, cut = fields
    return Alternative(change=change, index=int(index), cut=int(cut))


def charset(first_line: bytes) -> str:
    """Python codec name for the charset named on a file's first line."""
    name = first_line.decode("ascii", errors="ignore").strip()
    if name.lower().startswith("microsoft-"):
        name = name[len("microsoft-"):]
    return name or "utf-8"


class HyphIngestor(DownloadableIngestor):
    """Ingestor for hyph_*.dic files."""

    file_extensions = [".dic"]
    download_urls = HYPH_URLS

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name."""
        return f"hyph_{self.language}"

    def parse(self, filepath: Path) -> Iterator[tuple[str, str, Optional[int]]]:
        """Parse hyph_*.dic file.

        Args:
            filepath: Path to .dic file.

        Yields:
            Tuples of (PATTERN, token, line_number).
        """
        with open(filepath, "rb") as f:
            encoding = charset(f.readline())
            raw = f.read()

        try:
            content = raw.decode(encoding, errors="ignore")
        except LookupError:
            logger.warning(
                "[%s] Unknown charset %r in %s, reading as UTF-8",
                self.language, encoding, filepath,
            )
            content = raw.decode("utf-8", errors="ignore")

        for line_num, line in enumerate(content.splitlines(), start=2):
            line = line.strip()
            if not line or line.startswith(("%", "#")):
                continue
            if line.split()[0] in DIRECTIVES:
                continue

            yield PATTERN, decode_escapes(line), line_num

    def make_pattern(self, token: str) -> Optional[Pattern]:
        """Parse a pattern, with its nonstandard hyphenation if any."""
        if "/" in token:
            token, alternative = token.split("/", 1)
            return parse_pattern(token, parse_alternative(alternative))
        return parse_pattern(token)


def ingest(filepath: Path | str, language: str):
    """Convenience function to ingest a hyph_*.dic file.

    Args:
        filepath: Path to .dic file.
        language: Language tag.

    Returns:
        IngestResult with patterns.
    """
    ingestor = HyphIngestor(language=language, cache_dir=Path(filepath).parent)
    return ingestor.ingest(filepath)


def download_and_ingest(language: str, cache_dir: Path | str, force: bool = False):
    """Download and ingest a LibreOffice hyphenation dictionary.

    Args:
        language: Language tag (nl_NL, de_DE, etc.).
        cache_dir: Directory to cache downloaded files.
        force: Force re-download.

    Returns:
        IngestResult with patterns.
    """
    ingestor = HyphIngestor(language=language, cache_dir=cache_dir)
    return ingestor.download_and_ingest(force=force)


def get_supported_languages() -> list[str]:
    """Return list of languages with available downloads."""
    return list(HYPH_URLS.keys())

"""Pattern file ingestion module.

Provides pluggable ingestors for hyphenation pattern formats:
- Hyphen/LibreOffice hyph_*.dic files
- TeX \\patterns / \\hyphenation files

Usage:
    from syllabreak.ingest import hyph, tex

    result = hyph.ingest("path/to/hyph_nl_NL.dic", language="nl_NL")
    result = tex.ingest("path/to/hyph-en-us.tex", language="en_US")
"""

from pathlib import Path
from typing import Optional

from .base import Ingestor, IngestResult
from . import hyph
from . import tex

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "hyph": hyph.HyphIngestor,
    "tex": tex.TexIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


def ingestor_for(filepath: Path | str) -> Optional[type[Ingestor]]:
    """Get the ingestor class handling ``filepath``'s extension, or None."""
    suffix = Path(filepath).suffix.lower()
    for ingestor_cls in INGESTORS.values():
        if suffix in ingestor_cls.file_extensions:
            return ingestor_cls
    return None


__all__ = [
    "Ingestor",
    "IngestResult",
    "hyph",
    "tex",
    "get_ingestor",
    "register_ingestor",
    "ingestor_for",
    "INGESTORS",
]

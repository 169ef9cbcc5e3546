"""Dictionary sources: where a registry gets pattern data from.

A source knows which language tags it has data for and turns a tag into
an IngestResult. The registry never reads files itself.

Usage:
    source = DirectorySource("dictionaries/")      # hyph_*.dic, hyph-*.tex, hyph-*.pat
    source = DownloadSource(cache_dir="sources/")  # LibreOffice downloads
    source = MemorySource({"nl": (patterns, exceptions)})
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Mapping

from .ingest import hyph, ingestor_for
from .ingest.base import DownloadableIngestor, Ingestor, IngestResult

logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Use ``_`` separators and uppercase two-letter regions: en-us -> en_US."""
    parts = tag.replace("-", "_").split("_")
    return "_".join(
        [parts[0]] + [p.upper() if len(p) == 2 and p.isalpha() else p for p in parts[1:]]
    )


class DictionarySource(ABC):
    """Base class for dictionary sources."""

    @abstractmethod
    def languages(self) -> set[str]:
        """Tags this source has data for (``_`` separated)."""
        pass

    @abstractmethod
    def load(self, tag: str) -> IngestResult:
        """Return parsed patterns and exceptions for ``tag``.

        Raises:
            OSError: If the underlying storage fails.
            LookupError: If the source has no data for ``tag``.
        """
        pass

    def __contains__(self, tag: str) -> bool:
        return tag in self.languages()


class MemorySource(DictionarySource):
    """Source backed by already-parsed records."""

    def __init__(self, data: Mapping[str, tuple[Iterable, Iterable]]):
        """Initialize source.

        Args:
            data: tag -> (pattern records, exception records).
        """
        self._data = {tag: (list(p), list(e)) for tag, (p, e) in data.items()}

    def languages(self) -> set[str]:
        return set(self._data)

    def load(self, tag: str) -> IngestResult:
        if tag not in self._data:
            raise LookupError(f"No data for language: {tag}")
        patterns, exceptions = self._data[tag]
        return IngestResult(
            patterns=patterns,
            exceptions=exceptions,
            source_path="<memory>",
            dict_name=f"memory_{tag}",
            language=tag,
            total_raw=len(patterns) + len(exceptions),
            total_valid=len(patterns) + len(exceptions),
        )


class DirectorySource(DictionarySource):
    """Source reading pattern files from a directory.

    Files are named ``hyph_<tag>`` or ``hyph-<tag>`` plus an extension
    claimed by a registered ingestor:
        hyph_nl_NL.dic  -> "nl_NL" (hyph format)
        hyph-en-us.tex  -> "en_US" (TeX format)
        hyph-de.pat     -> "de"    (TeX format)
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)
        self._files = self._scan()
        logger.debug("Found %d dictionaries in %s", len(self._files), self.directory)

    def _scan(self) -> dict[str, tuple[Path, type[Ingestor]]]:
        files: dict[str, tuple[Path, type[Ingestor]]] = {}
        if not self.directory.is_dir():
            logger.warning("Dictionary directory not found: %s", self.directory)
            return files

        for path in sorted(self.directory.iterdir()):
            stem = path.stem
            if not stem.startswith(("hyph_", "hyph-")) or len(stem) == len("hyph_"):
                continue
            ingestor_cls = ingestor_for(path)
            if ingestor_cls is None:
                continue
            files[normalize_tag(stem[len("hyph_"):])] = (path, ingestor_cls)
        return files

    def languages(self) -> set[str]:
        return set(self._files)

    def path_for(self, tag: str) -> Path:
        """Path of the file holding ``tag``'s patterns."""
        if tag not in self._files:
            raise LookupError(f"No dictionary file for language: {tag}")
        return self._files[tag][0]

    def load(self, tag: str) -> IngestResult:
        path = self.path_for(tag)
        ingestor_cls = self._files[tag][1]
        ingestor: Ingestor
        if issubclass(ingestor_cls, DownloadableIngestor):
            ingestor = ingestor_cls(language=tag, cache_dir=self.directory)
        else:
            ingestor = ingestor_cls(language=tag)
        return ingestor.ingest(path)


class DownloadSource(DictionarySource):
    """Source downloading LibreOffice dictionaries into a cache directory."""

    def __init__(self, cache_dir: Path | str, force: bool = False):
        self.cache_dir = Path(cache_dir)
        self.force = force

    def languages(self) -> set[str]:
        return set(hyph.get_supported_languages())

    def load(self, tag: str) -> IngestResult:
        if tag not in self.languages():
            raise LookupError(f"No download URL for language: {tag}")
        return hyph.download_and_ingest(tag, cache_dir=self.cache_dir / tag, force=self.force)

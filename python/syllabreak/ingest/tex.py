"""TeX hyphenation pattern ingestor.

Simple format, as in hyph-*.tex files:
    % comment
    \\patterns{
    .am1s a2nd
    }
    \\hyphenation{
    as-so-ciate ta-ble
    }

Tokens inside \\patterns are patterns, tokens inside \\hyphenation are
exception words. A file with neither block is read as bare patterns.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import EXCEPTION, PATTERN, Ingestor
from .hyph import decode_escapes

BLOCKS = {
    "\\patterns": PATTERN,
    "\\hyphenation": EXCEPTION,
}

# Braced arguments of any other macro
SKIP = "skip"


class TexIngestor(Ingestor):
    """Ingestor for TeX pattern files."""

    file_extensions = [".tex", ".pat"]

    def __init__(self, language: str, comment_char: str = "%"):
        super().__init__(language)
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[str, str, Optional[int]]]:
        """Parse TeX pattern file.

        Args:
            filepath: Path to .tex file.

        Yields:
            Tuples of (PATTERN or EXCEPTION, token, line_number).
        """
        mode = None
        pending = None
        seen_block = False
        bare: list[tuple[str, int]] = []

        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.split(self.comment_char)[0]
                line = line.replace("{", " { ").replace("}", " } ")

                for token in line.split():
                    if token in BLOCKS:
                        pending = BLOCKS[token]
                        seen_block = True
                    elif token == "{":
                        mode, pending = pending, None
                    elif token == "}":
                        mode = None
                    elif token.startswith("\\"):
                        # \message{...}, \endinput, ...
                        pending = SKIP
                    elif mode == SKIP:
                        continue
                    elif mode is not None:
                        yield mode, decode_escapes(token), line_num
                    elif not seen_block:
                        bare.append((decode_escapes(token), line_num))

        if not seen_block:
            for token, line_num in bare:
                yield PATTERN, token, line_num


def ingest(filepath: Path | str, language: str, comment_char: str = "%"):
    """Convenience function to ingest a TeX pattern file.

    Args:
        filepath: Path to .tex file.
        language: Language tag.
        comment_char: Character that starts a comment.

    Returns:
        IngestResult with patterns and exceptions.
    """
    ingestor = TexIngestor(language=language, comment_char=comment_char)
    return ingestor.ingest(filepath)

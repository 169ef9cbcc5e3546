"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from syllabreak.dictionary import Dictionary
from syllabreak.engine import HyphenationEngine
from syllabreak.ingest.hyph import HyphIngestor
from syllabreak.patterns import PatternStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    """Directory holding the small test dictionaries."""
    return DATA_DIR


@pytest.fixture
def nl_store():
    """PatternStore loaded from the Dutch test dictionary."""
    result = HyphIngestor(language="nl_NL", cache_dir=DATA_DIR).ingest(
        DATA_DIR / "hyph_nl_NL.dic"
    )
    return PatternStore.load(result.patterns, result.exceptions)


@pytest.fixture
def nl_engine(nl_store):
    """HyphenationEngine over the Dutch test patterns."""
    return HyphenationEngine(nl_store)


@pytest.fixture
def nl(nl_engine):
    """Dutch dictionary with default margins."""
    return Dictionary(nl_engine, left=2, right=2, language="nl_NL")


@pytest.fixture
def hu():
    """Hungarian dictionary with margins of 1."""
    result = HyphIngestor(language="hu_HU", cache_dir=DATA_DIR).ingest(
        DATA_DIR / "hyph_hu_HU.dic"
    )
    store = PatternStore.load(result.patterns, result.exceptions)
    return Dictionary(HyphenationEngine(store), left=1, right=1, language="hu_HU")


@pytest.fixture
def sample_words():
    """Words for cross-checking the three dictionary views."""
    return [
        "lettergrepen",
        "LETTERGREPEN",
        "autobandventieldopje",
        "Amsterdam",
        "band",
        "a",
        "",
        "e-mail",
        "tt",
        "ventiel",
    ]

"""Tests for the registry and sources modules."""

import threading

import pytest

from syllabreak.dictionary import Dictionary
from syllabreak.errors import DictionaryLoadError, UnknownLanguage
from syllabreak.ingest.base import IngestResult
from syllabreak.registry import LanguageRegistry, language_fallback
from syllabreak.sources import DictionarySource, DirectorySource, MemorySource

NL_PATTERNS = [("tt", (0, 1, 0)), ("rg", (0, 1, 0)), ("epe", (0, 1, 0, 0))]


class CountingSource(DictionarySource):
    """MemorySource wrapper that counts loads."""

    def __init__(self, data):
        self.inner = MemorySource(data)
        self.loads: list[str] = []
        self._lock = threading.Lock()

    def languages(self):
        return self.inner.languages()

    def load(self, tag):
        with self._lock:
            self.loads.append(tag)
        return self.inner.load(tag)


class FailingSource(DictionarySource):
    """Source whose storage is broken."""

    def languages(self):
        return {"nl"}

    def load(self, tag):
        raise OSError("disk on fire")


class TestLanguageFallback:
    """Tests for the language fallback algorithm."""

    @pytest.fixture
    def available(self):
        return {"en", "en_US", "en_Latn_US", "fr"}

    @pytest.mark.parametrize("tag,expected", [
        ("en", "en"),
        ("en_US", "en_US"),
        ("en_FR", "en"),
        ("en-Latn-US", "en_Latn_US"),
        ("en-Cyrl-US", "en"),
        ("fr-Latn-FR", "fr"),
        ("en-US_variant1-x", "en_US"),
    ])
    def test_fallback(self, available, tag, expected):
        assert language_fallback(tag, available) == expected

    def test_no_fallback(self, available):
        assert language_fallback("xx_YY", available) is None
        assert language_fallback("", available) is None


class TestResolve:
    """Tests for LanguageRegistry.resolve."""

    def test_resolve_variant(self):
        registry = LanguageRegistry(MemorySource({"nl_NL": (NL_PATTERNS, [])}))
        assert registry.resolve("nl_NL_variant1") == "nl_NL"
        assert registry.resolve("nl_NL-variant") == "nl_NL"

    def test_resolve_unknown(self):
        registry = LanguageRegistry(MemorySource({"nl_NL": (NL_PATTERNS, [])}))
        assert registry.resolve("xx_YY") is None
        assert registry.resolve("nl") is None


class TestGetOrBuild:
    """Tests for LanguageRegistry.get_or_build."""

    def test_build(self):
        registry = LanguageRegistry(MemorySource({"nl": (NL_PATTERNS, [])}))
        dictionary = registry.get_or_build("nl_NL")
        assert isinstance(dictionary, Dictionary)
        assert dictionary.language == "nl"
        assert dictionary.inserted("lettergrepen") == "let-ter-gre-pen"

    def test_built_once(self):
        """Test that repeated and fallback requests share one dictionary."""
        source = CountingSource({"nl": (NL_PATTERNS, [])})
        registry = LanguageRegistry(source)

        first = registry.get_or_build("nl")
        second = registry.get_or_build("nl")
        third = registry.get_or_build("nl_BE_variant")

        assert first is second is third
        assert source.loads == ["nl"]
        assert registry.cached() == ["nl"]

    def test_unknown_language(self):
        registry = LanguageRegistry(MemorySource({"nl": (NL_PATTERNS, [])}))
        with pytest.raises(UnknownLanguage) as exc_info:
            registry.get_or_build("mi_SS")
        assert exc_info.value.tag == "mi_SS"
        assert isinstance(exc_info.value, LookupError)

    def test_load_error(self):
        registry = LanguageRegistry(FailingSource())
        with pytest.raises(DictionaryLoadError) as exc_info:
            registry.get_or_build("nl")
        assert exc_info.value.tag == "nl"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert registry.cached() == []

    def test_strict_load_error(self):
        """Test that strict registries turn malformed records into load errors."""
        source = MemorySource({"nl": ([("tt", (0, 1))], [])})
        with pytest.raises(DictionaryLoadError):
            LanguageRegistry(source, strict=True).get_or_build("nl")

        dictionary = LanguageRegistry(source).get_or_build("nl")
        assert len(dictionary.engine.store.rejected) == 1

    def test_margins(self):
        registry = LanguageRegistry(MemorySource({"nl": (NL_PATTERNS, [])}), left=4, right=4)
        assert registry.get_or_build("nl").inserted("lettergrepen") == "letter-grepen"
        assert registry.get("nl", left=2, right=2).inserted("lettergrepen") == "let-ter-gre-pen"
        assert registry.get("nl") is registry.get_or_build("nl")

    def test_concurrent_builds(self):
        """Test that concurrent callers get one shared instance."""
        source = CountingSource({"nl": (NL_PATTERNS, [])})
        registry = LanguageRegistry(source)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(registry.get_or_build("nl_NL"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
        assert source.loads == ["nl"]

    def test_slow_build_does_not_block_other_tags(self):
        """Test that one language's build does not hold up another's."""
        started = threading.Event()
        release = threading.Event()

        class SlowSource(MemorySource):
            def load(self, tag):
                if tag == "hu":
                    started.set()
                    release.wait(timeout=5)
                return super().load(tag)

        source = SlowSource({"nl": (NL_PATTERNS, []), "hu": (NL_PATTERNS, [])})
        registry = LanguageRegistry(source)
        slow = threading.Thread(target=registry.get_or_build, args=("hu",))
        slow.start()
        try:
            assert started.wait(timeout=5)
            assert registry.get_or_build("nl").language == "nl"
            assert slow.is_alive()
        finally:
            release.set()
            slow.join()
        assert registry.cached() == ["hu", "nl"]

    def test_independent_registries(self):
        source = MemorySource({"nl": (NL_PATTERNS, [])})
        assert LanguageRegistry(source).get_or_build("nl") is not LanguageRegistry(
            source
        ).get_or_build("nl")


class TestSources:
    """Tests for dictionary sources."""

    def test_memory_source(self):
        source = MemorySource({"nl": (NL_PATTERNS, [("band", ("band",))])})
        assert source.languages() == {"nl"}
        assert "nl" in source
        result = source.load("nl")
        assert isinstance(result, IngestResult)
        assert result.total_valid == 4
        with pytest.raises(LookupError):
            source.load("fr")

    def test_directory_source(self, data_dir):
        source = DirectorySource(data_dir)
        assert source.languages() == {"nl_NL", "hu_HU", "en_US"}
        assert source.path_for("nl_NL").name == "hyph_nl_NL.dic"
        assert source.path_for("en_US").name == "hyph-en-us.tex"
        with pytest.raises(LookupError):
            source.path_for("fr")

    def test_directory_source_missing_dir(self, tmp_path):
        assert DirectorySource(tmp_path / "nope").languages() == set()

    def test_directory_registry(self, data_dir):
        """Test the Dutch scenario end to end from files."""
        registry = LanguageRegistry(DirectorySource(data_dir))
        dic = registry.get_or_build("nl_NL_variant1")
        assert dic.language == "nl_NL"
        assert dic.inserted("lettergrepen") == "let-ter-gre-pen"
        assert dic.wrap("autobandventieldopje", 11) == ("autoband-", "ventieldopje")
        assert list(dic.iterate("Amsterdam")) == [("Amster", "dam"), ("Am", "sterdam")]

    def test_directory_registry_tex(self, data_dir):
        registry = LanguageRegistry(DirectorySource(data_dir))
        dic = registry.get_or_build("en-US")
        assert dic.inserted("hyphenation") == "hy-phen-ation"
        assert dic.inserted("project") == "pro-ject"

    def test_directory_registry_hungarian(self, data_dir):
        registry = LanguageRegistry(DirectorySource(data_dir), left=1, right=1)
        dic = registry.get_or_build("hu_HU")
        assert list(dic.iterate("kulissza")) == [("kulisz", "sza"), ("ku", "lissza")]
        assert dic.inserted("kulissza") == "ku-lisz-sza"

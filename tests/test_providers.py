"""Tests for library-backed tokenizers, filters and normalizers."""

import ssl

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from analysis import FrequencyAnalyzer, WordFrequency
from core.languages import UnsupportedLanguageError
from providers.filters.zipf_filter import ZipfFilter
from providers.tokenizers.wordfreq_tokenizer import WordfreqTokenizer


def _nltk_punkt_available() -> bool:
    import nltk

    try:
        nltk.data.find("tokenizers/punkt_tab")
        return True
    except LookupError:
        return False


class TestWordfreqTokenizer:
    """Test wordfreq-backed tokenization."""

    def test_drops_punctuation_and_casefolds(self):
        assert WordfreqTokenizer("en").tokenize("Hello, World!") == ["hello", "world"]

    def test_empty(self):
        assert WordfreqTokenizer("en").tokenize("") == []

    def test_regional_code(self):
        tokenizer = WordfreqTokenizer("es-AR")
        assert tokenizer.language == "es-latam"
        assert tokenizer.name() == "wordfreq (es)"

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            WordfreqTokenizer("xx")

    def test_in_analyzer(self):
        analyzer = FrequencyAnalyzer()
        analyzer.set_word_tokenizer(WordfreqTokenizer("en"))
        analyzer.set_stop_words({"the"})
        result = analyzer.load(["The cat; the CAT.", "cat!"])
        assert result == [WordFrequency("cat", 3)]


class TestZipfFilter:
    """Test common-word filtering."""

    def test_common_word_rejected(self):
        assert not ZipfFilter("en", max_zipf=6.0).test("the")

    def test_rare_word_kept(self):
        assert ZipfFilter("en", max_zipf=6.0).test("sesquipedalian")

    def test_unknown_word_kept(self):
        token_filter = ZipfFilter("en")
        assert token_filter.get_zipf_score("qzxvbnmw") == 0
        assert token_filter.test("qzxvbnmw")

    def test_score_uses_lowercase(self):
        token_filter = ZipfFilter("en")
        assert token_filter.get_zipf_score("The") == token_filter.get_zipf_score("the")


class TestSpacyLemmaNormalizer:
    """Test spaCy lemmatization."""

    def test_unsupported_language_checked_first(self):
        from providers.normalizers.spacy_lemmatizer import SpacyLemmaNormalizer

        with pytest.raises(UnsupportedLanguageError):
            SpacyLemmaNormalizer("xx")

    def test_lemmas(self):
        spacy = pytest.importorskip("spacy")
        if not spacy.util.is_package("en_core_web_sm"):
            pytest.skip("en_core_web_sm not installed")
        from providers.normalizers.spacy_lemmatizer import SpacyLemmaNormalizer

        normalizer = SpacyLemmaNormalizer("en")
        assert normalizer.normalize("mice") == "mouse"
        assert normalizer.normalize("") == ""


class TestNltkDataDownload:
    """Test the on-demand punkt_tab download (no network)."""

    def test_downloads_when_missing(self, monkeypatch):
        import nltk
        from providers.tokenizers import nltk_tokenizer

        downloads = []

        def missing(resource):
            raise LookupError(resource)

        monkeypatch.setattr(ssl, "_create_default_https_context", ssl._create_default_https_context)
        monkeypatch.setattr(nltk.data, "find", missing)
        monkeypatch.setattr(nltk, "download", lambda name, quiet=False: downloads.append(name))

        nltk_tokenizer._ensure_nltk_data()

        assert downloads == ["punkt_tab"]
        assert ssl._create_default_https_context().verify_mode == ssl.CERT_REQUIRED

    def test_no_download_when_present(self, monkeypatch):
        import nltk
        from providers.tokenizers import nltk_tokenizer

        downloads = []
        monkeypatch.setattr(nltk.data, "find", lambda resource: resource)
        monkeypatch.setattr(nltk, "download", lambda name, quiet=False: downloads.append(name))

        nltk_tokenizer._ensure_nltk_data()
        assert downloads == []

    def test_unsupported_language_checked_first(self, monkeypatch):
        import nltk
        from providers.tokenizers.nltk_tokenizer import NltkWordTokenizer

        monkeypatch.setattr(nltk, "download", lambda name, quiet=False: pytest.fail("download attempted"))
        with pytest.raises(UnsupportedLanguageError):
            NltkWordTokenizer("xx")


@pytest.mark.skipif(not _nltk_punkt_available(), reason="NLTK punkt_tab model not downloaded")
class TestNltkWordTokenizer:
    """Test NLTK tokenization (needs punkt_tab data)."""

    def test_splits_punctuation(self):
        from providers.tokenizers.nltk_tokenizer import NltkWordTokenizer

        assert NltkWordTokenizer("en").tokenize("Clouds drift, slowly.") == ["Clouds", "drift", ",", "slowly", "."]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""NLTK word tokenizer (Treebank-style, splits punctuation off words)."""

import logging
import ssl

import certifi
import nltk
from nltk.tokenize import word_tokenize

from core.languages import ENGLISH, require_language
from core.tokenizer import BaseWordTokenizer

logger = logging.getLogger(__name__)


def _ensure_nltk_data() -> None:
    """Download the punkt_tab model if not present."""
    try:
        nltk.data.find("tokenizers/punkt_tab")
    except LookupError:
        # Fix SSL certificate verification for NLTK downloads
        ssl._create_default_https_context = lambda: ssl.create_default_context(cafile=certifi.where())
        logger.info("Downloading NLTK punkt tokenizer...")
        nltk.download("punkt_tab", quiet=True)


class NltkWordTokenizer(BaseWordTokenizer):
    """
    Word tokenizer backed by nltk.word_tokenize.

    Punctuation becomes separate tokens ("cat." -> "cat", "."), which the
    word size filter or the default normalizers then drop.
    """

    def __init__(self, language: str = ENGLISH.code):
        """
        Args:
            language: Language code (en, ru, es, ...)

        Raises:
            UnsupportedLanguageError: If language is not supported
        """
        lang = require_language(language, "NltkWordTokenizer")
        self.language = lang.code
        self._nltk_language = lang.nltk_name
        _ensure_nltk_data()

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return word_tokenize(text, language=self._nltk_language)

    def name(self) -> str:
        return f"NLTK ({self._nltk_language})"

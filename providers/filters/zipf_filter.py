"""Zipf frequency filter: drops words that are too common to be interesting."""

from wordfreq import zipf_frequency

from core.filters import BaseFilter
from core.languages import ENGLISH, require_language


class ZipfFilter(BaseFilter):
    """
    Rejects tokens whose Zipf frequency is above max_zipf.

    Zipf scale: 1-7 (7 = most common like "the", 1 = very rare).
    Unknown words score 0 and are kept.
    """

    def __init__(self, language: str = ENGLISH.code, max_zipf: float = 6.0):
        """
        Args:
            language: Language code (en, ru, es, ...)
            max_zipf: Highest Zipf score still kept

        Raises:
            UnsupportedLanguageError: If language is not supported
        """
        lang = require_language(language, "ZipfFilter")
        self.language = lang.code
        self._wordfreq_code = lang.wordfreq_code
        self.max_zipf = max_zipf

    def get_zipf_score(self, token: str) -> float:
        """Zipf score of the lowercased token, 0 if not found."""
        return zipf_frequency(token.lower(), self._wordfreq_code)

    def test(self, token: str) -> bool:
        return self.get_zipf_score(token) <= self.max_zipf

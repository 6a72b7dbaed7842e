"""wordfreq tokenizer: Unicode-aware word segmentation."""

from wordfreq import tokenize

from core.languages import ENGLISH, require_language
from core.tokenizer import BaseWordTokenizer


class WordfreqTokenizer(BaseWordTokenizer):
    """
    Word tokenizer backed by wordfreq.tokenize.

    Handles scripts written without spaces and drops punctuation. Tokens come
    back case-folded, so the stop word filter sees lowercase tokens.
    """

    def __init__(self, language: str = ENGLISH.code, include_punctuation: bool = False):
        lang = require_language(language, "WordfreqTokenizer")
        self.language = lang.code
        self._wordfreq_code = lang.wordfreq_code  # e.g. "es" for both "es" and "es-latam"
        self.include_punctuation = include_punctuation

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return tokenize(text, self._wordfreq_code, include_punctuation=self.include_punctuation)

    def name(self) -> str:
        return f"wordfreq ({self._wordfreq_code})"

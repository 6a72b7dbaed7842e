"""Word tokenizer abstraction layer."""

import re
from abc import ABC, abstractmethod

from core.languages import ENGLISH


class BaseWordTokenizer(ABC):
    """Abstract base class for word tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """
        Split text into raw word tokens.

        Args:
            text: Text blob to split

        Returns:
            List of tokens, in text order, without empty fragments
        """
        pass

    def name(self) -> str:
        """Return tokenizer name."""
        return type(self).__name__


class WhiteSpaceWordTokenizer(BaseWordTokenizer):
    """Splits on runs of whitespace."""

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return text.split()


class RegexWordTokenizer(BaseWordTokenizer):
    """Extracts every match of a word pattern."""

    DEFAULT_PATTERN = r"\b\w+\b"

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        self.pattern = re.compile(pattern, re.UNICODE)

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return [token for token in self.pattern.findall(text) if token]


def create_tokenizer(name: str, language: str = ENGLISH.code) -> BaseWordTokenizer:
    """Create tokenizer by name (whitespace, regex, nltk, wordfreq)."""
    if name == "whitespace":
        return WhiteSpaceWordTokenizer()
    elif name == "regex":
        return RegexWordTokenizer()
    elif name == "nltk":
        from providers.tokenizers.nltk_tokenizer import NltkWordTokenizer

        return NltkWordTokenizer(language)
    elif name == "wordfreq":
        from providers.tokenizers.wordfreq_tokenizer import WordfreqTokenizer

        return WordfreqTokenizer(language)
    else:
        raise ValueError(f"Unknown tokenizer: {name}")

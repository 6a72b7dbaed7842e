"""Default configuration for word frequency analysis."""

import codecs
from dataclasses import dataclass, field


DEFAULT_ENCODING = "UTF-8"
DEFAULT_WORD_MAX_LENGTH = 32
DEFAULT_WORD_MIN_LENGTH = 3
DEFAULT_WORD_FREQUENCIES_TO_RETURN = 50
DEFAULT_URL_LOAD_TIMEOUT = 3000  # milliseconds


class InvalidConfigurationError(ValueError):
    """Raised when an analyzer setting is out of range or unusable."""

    def __init__(self, setting: str, value, reason: str):
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid {setting}={value!r}: {reason}")


@dataclass
class AnalyzerConfig:
    """Analyzer configuration.

    Held by a single FrequencyAnalyzer; changes apply to the next load call.
    """

    stop_words: set[str] = field(default_factory=set)
    word_frequencies_to_return: int = DEFAULT_WORD_FREQUENCIES_TO_RETURN
    min_word_length: int = DEFAULT_WORD_MIN_LENGTH
    max_word_length: int = DEFAULT_WORD_MAX_LENGTH
    character_encoding: str = DEFAULT_ENCODING
    url_load_timeout: int = DEFAULT_URL_LOAD_TIMEOUT

    def validate(self) -> "AnalyzerConfig":
        """Check every setting, raising InvalidConfigurationError on the first bad one."""
        if self.word_frequencies_to_return < 0:
            raise InvalidConfigurationError(
                "word_frequencies_to_return", self.word_frequencies_to_return, "must be >= 0"
            )
        if self.min_word_length < 0:
            raise InvalidConfigurationError("min_word_length", self.min_word_length, "must be >= 0")
        if self.max_word_length < 1:
            raise InvalidConfigurationError("max_word_length", self.max_word_length, "must be >= 1")
        if self.min_word_length > self.max_word_length:
            raise InvalidConfigurationError(
                "min_word_length",
                self.min_word_length,
                f"greater than max_word_length={self.max_word_length}",
            )
        try:
            codecs.lookup(self.character_encoding)
        except LookupError:
            raise InvalidConfigurationError(
                "character_encoding", self.character_encoding, "unknown encoding"
            ) from None
        if self.url_load_timeout <= 0:
            raise InvalidConfigurationError("url_load_timeout", self.url_load_timeout, "must be > 0")
        return self


# Supported tokenizers (see core.tokenizer.create_tokenizer)
TOKENIZERS = ["whitespace", "regex", "nltk", "wordfreq"]

"""Word frequency analysis for word clouds.

FrequencyAnalyzer runs the pipeline:
    tokenize -> filter -> normalize -> count -> rank

Configuration is changed through the set_*/add_*/clear_* methods and takes
effect on the next load call. An analyzer is meant for one caller at a time.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Sequence, TextIO, Union

from config import AnalyzerConfig, InvalidConfigurationError
from core import text_loader
from core.filters import BaseFilter, CompositeFilter, StopWordFilter, WordSizeFilter, as_filter
from core.normalizers import BaseNormalizer, as_normalizer, default_normalizers
from core.tokenizer import BaseWordTokenizer, WhiteSpaceWordTokenizer

from .stopwords import get_stop_words
from .word_frequency import WordFrequency, aggregate, rank

logger = logging.getLogger(__name__)

FilterLike = Union[BaseFilter, Callable[[str], bool]]
NormalizerLike = Union[BaseNormalizer, Callable[[str], str]]


class FrequencyAnalyzer:
    """Counts and ranks words in text."""

    def __init__(self, config: AnalyzerConfig = None):
        """
        Initialize analyzer.

        Args:
            config: Starting configuration (defaults if None). The analyzer
                    keeps and mutates this object.

        Raises:
            InvalidConfigurationError: If config holds an invalid setting
        """
        self.config = (config or AnalyzerConfig()).validate()
        self.word_tokenizer: BaseWordTokenizer = WhiteSpaceWordTokenizer()
        self.filters: list[BaseFilter] = []
        self.normalizers: list[BaseNormalizer] = default_normalizers()

    # === Loading ===

    def load(self, texts: Sequence[Union[str, WordFrequency]]) -> list[WordFrequency]:
        """
        Run the full pipeline over texts and return the top words.

        A sequence of WordFrequency items skips straight to ranking
        (see load_word_frequencies).

        Raises:
            TypeError: If texts is a single str or bytes instead of a sequence
        """
        if isinstance(texts, (str, bytes)):
            raise TypeError(
                "load() takes a sequence of texts, not a single string; "
                "wrap it in a list, or use load_file() for a path"
            )
        texts = list(texts)
        if texts and isinstance(texts[0], WordFrequency):
            return self.load_word_frequencies(texts)

        counts = aggregate(texts, self.word_tokenizer, self._build_filter(), self.normalizers)
        result = rank(counts, self.config.word_frequencies_to_return)
        logger.debug("Loaded %d texts: %d distinct words, returning %d", len(texts), len(counts), len(result))
        return result

    def load_word_frequencies(self, word_frequencies: Iterable[WordFrequency]) -> list[WordFrequency]:
        """Rank already-counted words, keeping the configured top N."""
        return rank(word_frequencies, self.config.word_frequencies_to_return)

    def load_stream(self, stream: Union[BinaryIO, TextIO]) -> list[WordFrequency]:
        """Analyze every line of a stream (bytes decoded with the configured encoding)."""
        return self.load(text_loader.read_lines(stream, self.config.character_encoding))

    def load_file(self, path: Union[str, Path]) -> list[WordFrequency]:
        """Analyze a text file."""
        return self.load(text_loader.read_file(path, self.config.character_encoding))

    def load_url(self, url: str) -> list[WordFrequency]:
        """Analyze the visible body text of a web page."""
        texts = text_loader.fetch_url_text(
            url,
            timeout_ms=self.config.url_load_timeout,
            encoding=self.config.character_encoding,
        )
        return self.load(texts)

    def _build_filter(self) -> CompositeFilter:
        """Built-in filters from current config, then user filters."""
        built_in = [
            StopWordFilter(self.config.stop_words),
            WordSizeFilter(self.config.min_word_length, self.config.max_word_length),
        ]
        return CompositeFilter(built_in + self.filters)

    # === Configuration ===

    def _update(self, **changes) -> None:
        """Apply config changes only if the result is valid."""
        candidate = AnalyzerConfig(**{**vars(self.config), **changes})
        candidate.validate()
        for key, value in changes.items():
            setattr(self.config, key, value)

    def set_stop_words(self, stop_words: Iterable[str]) -> None:
        """Replace all stop words."""
        self.config.stop_words = set(stop_words)

    def set_stop_words_for_language(self, language: str, case_variants: bool = False) -> None:
        """Replace stop words with the built-in table for a language."""
        self.config.stop_words = get_stop_words(language, case_variants=case_variants)

    def set_word_frequencies_to_return(self, word_frequencies_to_return: int) -> None:
        self._update(word_frequencies_to_return=word_frequencies_to_return)

    def set_min_word_length(self, min_word_length: int) -> None:
        self._update(min_word_length=min_word_length)

    def set_max_word_length(self, max_word_length: int) -> None:
        self._update(max_word_length=max_word_length)

    def set_character_encoding(self, character_encoding: str) -> None:
        self._update(character_encoding=character_encoding)

    def set_url_load_timeout(self, url_load_timeout: int) -> None:
        """Set URL fetch timeout in milliseconds."""
        self._update(url_load_timeout=url_load_timeout)

    def set_word_tokenizer(self, word_tokenizer: BaseWordTokenizer) -> None:
        if not isinstance(word_tokenizer, BaseWordTokenizer):
            raise InvalidConfigurationError(
                "word_tokenizer", word_tokenizer, "must be a BaseWordTokenizer"
            )
        self.word_tokenizer = word_tokenizer

    # Filters (built-in stop word and size filters are not part of this list)

    def add_filter(self, token_filter: FilterLike) -> None:
        self.filters.append(self._as_filter(token_filter))

    def set_filter(self, token_filter: FilterLike) -> None:
        """Replace all user filters with a single one."""
        self.filters = [self._as_filter(token_filter)]

    def clear_filters(self) -> None:
        self.filters = []

    # Normalizers

    def add_normalizer(self, normalizer: NormalizerLike) -> None:
        self.normalizers.append(self._as_normalizer(normalizer))

    def set_normalizer(self, normalizer: NormalizerLike) -> None:
        """Replace the whole normalizer chain with a single normalizer."""
        self.normalizers = [self._as_normalizer(normalizer)]

    def set_normalizers(self, normalizers: Iterable[NormalizerLike]) -> None:
        """Replace the whole normalizer chain, keeping the given order."""
        self.normalizers = [self._as_normalizer(n) for n in normalizers]

    def clear_normalizers(self) -> None:
        self.normalizers = []

    @staticmethod
    def _as_filter(token_filter: FilterLike) -> BaseFilter:
        try:
            return as_filter(token_filter)
        except TypeError as e:
            raise InvalidConfigurationError("filter", token_filter, str(e)) from e

    @staticmethod
    def _as_normalizer(normalizer: NormalizerLike) -> BaseNormalizer:
        try:
            return as_normalizer(normalizer)
        except TypeError as e:
            raise InvalidConfigurationError("normalizer", normalizer, str(e)) from e

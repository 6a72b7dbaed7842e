"""Analysis modules for word counting and ranking."""

from .frequency_analyzer import FrequencyAnalyzer
from .stopwords import get_stop_words
from .word_frequency import WordFrequency, aggregate, rank

__all__ = ["FrequencyAnalyzer", "WordFrequency", "aggregate", "rank", "get_stop_words"]

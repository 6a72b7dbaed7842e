"""Word counting and ranking."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Union

from core.normalizers import apply_normalizers
from core.tokenizer import BaseWordTokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordFrequency:
    """A word and how many times it was counted."""

    word: str
    count: int

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"WordFrequency count must be >= 1, got {self.count} for '{self.word}'")

    def as_tuple(self) -> tuple[str, int]:
        return (self.word, self.count)


def aggregate(
    texts: Iterable[str],
    tokenizer: BaseWordTokenizer,
    token_filter: Callable[[str], bool],
    normalizers: Iterable[Callable[[str], str]],
) -> dict[str, int]:
    """
    Count normalized words across all texts.

    Each text is tokenized; tokens rejected by token_filter are dropped
    BEFORE normalization; survivors go through the normalizer chain and
    words that end up empty are not counted.

    Args:
        texts: Text blobs, counted together as one corpus
        tokenizer: Splits a text into raw tokens
        token_filter: Returns True for tokens to keep
        normalizers: Ordered normalizer chain

    Returns:
        Dict mapping normalized word -> count, in first-seen order
    """
    normalizers = list(normalizers)
    counts: dict[str, int] = {}
    tokens_seen = 0
    tokens_kept = 0

    for text in texts:
        for token in tokenizer.tokenize(text):
            tokens_seen += 1
            if not token_filter(token):
                continue

            word = apply_normalizers(token, normalizers)
            if not word:
                continue

            tokens_kept += 1
            counts[word] = counts.get(word, 0) + 1

    logger.debug(
        "Aggregated %d/%d tokens into %d distinct words", tokens_kept, tokens_seen, len(counts)
    )
    return counts


def rank(
    frequencies: Union[Mapping[str, int], Iterable[WordFrequency]],
    top_n: int,
) -> list[WordFrequency]:
    """
    Sort by count (highest first) and keep the top_n entries.

    Equal counts keep their input order.

    Args:
        frequencies: Word -> count mapping, or WordFrequency items
        top_n: Maximum number of entries to return

    Returns:
        List of WordFrequency, at most top_n long
    """
    if isinstance(frequencies, Mapping):
        entries = [WordFrequency(word, count) for word, count in frequencies.items()]
    else:
        entries = list(frequencies)

    if not entries or top_n <= 0:
        return []

    entries.sort(key=lambda wf: wf.count, reverse=True)
    return entries[:top_n]

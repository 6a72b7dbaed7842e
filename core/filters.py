"""Token filters.

A filter decides whether a raw token (before normalization) is kept.
Filters are combined with CompositeFilter, which keeps a token only when
every member accepts it.
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, Iterable


class BaseFilter(ABC):
    """Abstract base class for token filters."""

    @abstractmethod
    def test(self, token: str) -> bool:
        """Return True to keep the token, False to drop it."""
        pass

    def __call__(self, token: str) -> bool:
        return self.test(token)


class PredicateFilter(BaseFilter):
    """Wraps a plain callable as a filter."""

    def __init__(self, predicate: Callable[[str], bool]):
        self.predicate = predicate

    def test(self, token: str) -> bool:
        return bool(self.predicate(token))


class StopWordFilter(BaseFilter):
    """Rejects tokens that exactly match a stop word (case-sensitive)."""

    def __init__(self, stop_words: Iterable[str]):
        self.stop_words = frozenset(stop_words)

    def test(self, token: str) -> bool:
        return token not in self.stop_words


class WordSizeFilter(BaseFilter):
    """Keeps tokens whose length is within [min_length, max_length]."""

    def __init__(self, min_length: int, max_length: int):
        self.min_length = min_length
        self.max_length = max_length

    def test(self, token: str) -> bool:
        return self.min_length <= len(token) <= self.max_length


# http://..., https://..., www.example.com
URL_PATTERN = re.compile(r"^(?:https?://|www\.)\S+$", re.IGNORECASE)


class UrlFilter(BaseFilter):
    """Rejects tokens that look like links."""

    def test(self, token: str) -> bool:
        return URL_PATTERN.match(token) is None


class CompositeFilter(BaseFilter):
    """Logical AND of filters, stopping at the first rejection."""

    def __init__(self, filters: Iterable[Callable[[str], bool]]):
        self.filters = list(filters)

    def test(self, token: str) -> bool:
        return all(f(token) for f in self.filters)


def as_filter(value) -> BaseFilter:
    """Return value as a BaseFilter, wrapping plain callables."""
    if isinstance(value, BaseFilter):
        return value
    if callable(value):
        return PredicateFilter(value)
    raise TypeError(f"Filter must be callable, got {type(value).__name__}")

"""Token normalizers.

Normalizers turn a raw token into the canonical word that gets counted.
They are applied as an ordered chain; the output of one feeds the next.
"""

import re
import unicodedata
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional


class BaseNormalizer(ABC):
    """Abstract base class for normalizers."""

    @abstractmethod
    def normalize(self, token: str) -> str:
        """Return the normalized form of token."""
        pass

    def __call__(self, token: str) -> str:
        return self.normalize(token)


class FunctionNormalizer(BaseNormalizer):
    """Wraps a plain str -> str callable."""

    def __init__(self, func: Callable[[str], str]):
        self.func = func

    def normalize(self, token: str) -> str:
        return self.func(token)


class TrimToEmptyNormalizer(BaseNormalizer):
    """Strips surrounding whitespace; None becomes an empty string."""

    def normalize(self, token: Optional[str]) -> str:
        if token is None:
            return ""
        return token.strip()


class CharacterStrippingNormalizer(BaseNormalizer):
    """Removes every match of a pattern.

    The default pattern removes anything that is not a letter or a digit.
    """

    DEFAULT_PATTERN = r"[\W_]+"

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        self.pattern = re.compile(pattern, re.UNICODE)

    def normalize(self, token: str) -> str:
        return self.pattern.sub("", token)


class LowerCaseNormalizer(BaseNormalizer):
    def normalize(self, token: str) -> str:
        return token.lower()


class UpperCaseNormalizer(BaseNormalizer):
    def normalize(self, token: str) -> str:
        return token.upper()


class DiacriticStrippingNormalizer(BaseNormalizer):
    """Drops accents: "café" -> "cafe", "ñandú" -> "nandu"."""

    def normalize(self, token: str) -> str:
        decomposed = unicodedata.normalize("NFKD", token)
        return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def default_normalizers() -> list[BaseNormalizer]:
    """Default chain: trim, strip non-alphanumerics, lowercase."""
    return [
        TrimToEmptyNormalizer(),
        CharacterStrippingNormalizer(),
        LowerCaseNormalizer(),
    ]


def apply_normalizers(token: str, normalizers: Iterable[Callable[[str], str]]) -> str:
    """Run token through every normalizer in order.

    An empty intermediate result is still passed on to the next normalizer.
    """
    normalized = token
    for normalizer in normalizers:
        normalized = normalizer(normalized)
    return normalized


def as_normalizer(value) -> BaseNormalizer:
    """Return value as a BaseNormalizer, wrapping plain callables."""
    if isinstance(value, BaseNormalizer):
        return value
    if callable(value):
        return FunctionNormalizer(value)
    raise TypeError(f"Normalizer must be callable, got {type(value).__name__}")

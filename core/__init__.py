"""Core pipeline building blocks: tokenizers, filters, normalizers, loaders."""

from .filters import BaseFilter, CompositeFilter, StopWordFilter, UrlFilter, WordSizeFilter
from .normalizers import (
    BaseNormalizer,
    CharacterStrippingNormalizer,
    LowerCaseNormalizer,
    TrimToEmptyNormalizer,
)
from .tokenizer import BaseWordTokenizer, WhiteSpaceWordTokenizer, create_tokenizer

__all__ = [
    "BaseFilter",
    "CompositeFilter",
    "StopWordFilter",
    "UrlFilter",
    "WordSizeFilter",
    "BaseNormalizer",
    "CharacterStrippingNormalizer",
    "LowerCaseNormalizer",
    "TrimToEmptyNormalizer",
    "BaseWordTokenizer",
    "WhiteSpaceWordTokenizer",
    "create_tokenizer",
]

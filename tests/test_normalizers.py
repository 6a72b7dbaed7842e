"""Tests for normalizers and the normalizer chain."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.normalizers import (
    CharacterStrippingNormalizer, DiacriticStrippingNormalizer, FunctionNormalizer,
    LowerCaseNormalizer, TrimToEmptyNormalizer, UpperCaseNormalizer,
    apply_normalizers, as_normalizer, default_normalizers,
)


class TestSingleNormalizers:
    """Test individual normalizers."""

    def test_trim_to_empty(self):
        normalizer = TrimToEmptyNormalizer()
        assert normalizer.normalize("  word \n") == "word"
        assert normalizer.normalize("   ") == ""
        assert normalizer.normalize(None) == ""

    def test_character_stripping_default(self):
        """Default pattern keeps letters and digits only."""
        normalizer = CharacterStrippingNormalizer()
        assert normalizer.normalize("(hello)!") == "hello"
        assert normalizer.normalize("it's") == "its"
        assert normalizer.normalize("snake_case") == "snakecase"
        assert normalizer.normalize("año2024") == "año2024"
        assert normalizer.normalize("...") == ""

    def test_character_stripping_custom_pattern(self):
        normalizer = CharacterStrippingNormalizer(r"[0-9]")
        assert normalizer.normalize("r2d2!") == "rd!"

    def test_case(self):
        assert LowerCaseNormalizer().normalize("MiXeD") == "mixed"
        assert UpperCaseNormalizer().normalize("MiXeD") == "MIXED"

    def test_diacritics(self):
        normalizer = DiacriticStrippingNormalizer()
        assert normalizer.normalize("café") == "cafe"
        assert normalizer.normalize("ñandú") == "nandu"
        assert normalizer.normalize("plain") == "plain"


class TestChain:
    """Test ordered chain application."""

    def test_default_chain(self):
        """trim -> strip -> lowercase."""
        chain = default_normalizers()
        assert [type(n) for n in chain] == [TrimToEmptyNormalizer, CharacterStrippingNormalizer, LowerCaseNormalizer]
        assert apply_normalizers("  Hello,  ", chain) == "hello"

    def test_order_is_honored(self):
        """Strip-then-lowercase differs from lowercase-then-strip for a case-sensitive pattern."""
        strip_lowercase_letters_only = CharacterStrippingNormalizer(r"[^a-z]")
        lower = LowerCaseNormalizer()

        assert apply_normalizers("Hello!", [strip_lowercase_letters_only, lower]) == "ello"
        assert apply_normalizers("Hello!", [lower, strip_lowercase_letters_only]) == "hello"

    def test_empty_result_still_passed_on(self):
        """A normalizer that returns '' does not stop the chain."""
        seen = []

        def spy(token):
            seen.append(token)
            return token + "x"

        assert apply_normalizers("!!!", [CharacterStrippingNormalizer(), spy]) == "x"
        assert seen == [""]

    def test_empty_chain_is_identity(self):
        assert apply_normalizers("Word!", []) == "Word!"


class TestAsNormalizer:
    """Test wrapping of plain callables."""

    def test_wraps_callable(self):
        wrapped = as_normalizer(str.title)
        assert isinstance(wrapped, FunctionNormalizer)
        assert wrapped("hello") == "Hello"

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            as_normalizer("lower")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

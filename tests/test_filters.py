"""Tests for token filters."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.filters import (
    BaseFilter, CompositeFilter, PredicateFilter, StopWordFilter, UrlFilter, WordSizeFilter, as_filter
)


class TestStopWordFilter:
    """Test exact-match stop word filtering."""

    def test_rejects_stop_words(self):
        token_filter = StopWordFilter({"the", "on"})
        assert not token_filter.test("the")
        assert not token_filter.test("on")
        assert token_filter.test("cat")

    def test_case_sensitive(self):
        """Matching is exact: 'The' is not 'the'."""
        token_filter = StopWordFilter({"the"})
        assert token_filter.test("The")

    def test_raw_token_match(self):
        """Punctuation is part of the raw token."""
        token_filter = StopWordFilter({"the"})
        assert token_filter.test("the,")

    def test_copy_of_stop_words(self):
        """Later changes to the source set do not affect the filter."""
        words = {"the"}
        token_filter = StopWordFilter(words)
        words.add("cat")
        assert token_filter.test("cat")


class TestWordSizeFilter:
    """Test inclusive length bounds."""

    def test_bounds_are_inclusive(self):
        token_filter = WordSizeFilter(3, 5)
        assert not token_filter.test("ab")
        assert token_filter.test("abc")
        assert token_filter.test("abcde")
        assert not token_filter.test("abcdef")

    def test_zero_minimum_keeps_empty(self):
        assert WordSizeFilter(0, 5).test("")


class TestUrlFilter:
    """Test link rejection."""

    @pytest.mark.parametrize("token", ["http://example.com", "https://a.b/c?d=1", "www.example.org", "HTTPS://X.IO"])
    def test_rejects_links(self, token):
        assert not UrlFilter().test(token)

    @pytest.mark.parametrize("token", ["example", "http", "www", "wwwhat"])
    def test_keeps_words(self, token):
        assert UrlFilter().test(token)


class TestCompositeFilter:
    """Test AND composition."""

    def test_all_must_pass(self):
        token_filter = CompositeFilter([StopWordFilter({"the"}), WordSizeFilter(3, 10)])
        assert token_filter.test("cat")
        assert not token_filter.test("the")
        assert not token_filter.test("on")

    def test_short_circuits(self):
        """Filters after the first rejection are not called."""
        calls = []

        def spy(token):
            calls.append(token)
            return True

        token_filter = CompositeFilter([lambda t: False, spy])
        assert not token_filter.test("anything")
        assert calls == []

    def test_empty_composite_accepts_everything(self):
        assert CompositeFilter([]).test("x")

    def test_callable(self):
        """Filters can be used directly as predicates."""
        token_filter = CompositeFilter([WordSizeFilter(2, 3)])
        assert list(filter(token_filter, ["a", "ab", "abcd"])) == ["ab"]


class TestAsFilter:
    """Test wrapping of plain callables."""

    def test_wraps_callable(self):
        wrapped = as_filter(str.isalpha)
        assert isinstance(wrapped, PredicateFilter)
        assert wrapped.test("abc")
        assert not wrapped.test("a1")

    def test_filter_returned_unchanged(self):
        token_filter = UrlFilter()
        assert as_filter(token_filter) is token_filter

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            as_filter(42)

    def test_abstract_base(self):
        with pytest.raises(TypeError):
            BaseFilter()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

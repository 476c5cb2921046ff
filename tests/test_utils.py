"""Tests for the markup utility functions."""

import pytest

from headmeta.utils import cut_text, html_attributes, uncamelize, validate_attribute_names


class TestHtmlAttributes:
    """Tests for html_attributes."""

    def test_single_attribute(self) -> None:
        assert html_attributes({"charset": "UTF-8"}) == ' charset="UTF-8"'

    def test_preserves_order(self) -> None:
        """Test that attributes keep the order of the mapping."""
        result = html_attributes({"href": "a.css", "rel": "stylesheet", "media": "print"})
        assert result == ' href="a.css" rel="stylesheet" media="print"'

    def test_escapes_values(self) -> None:
        result = html_attributes({"content": 'Tom & "Jerry" <3>'})
        assert result == ' content="Tom &amp; &quot;Jerry&quot; &lt;3&gt;"'
        assert "<" not in result

    def test_empty_value_is_kept(self) -> None:
        assert html_attributes({"content": ""}) == ' content=""'

    def test_boolean_attributes(self) -> None:
        """Test that True renders a bare attribute and False/None are omitted."""
        result = html_attributes({"rel": "preload", "crossorigin": True, "async": False, "as": None})
        assert result == ' rel="preload" crossorigin'

    def test_non_string_values(self) -> None:
        assert html_attributes({"sizes": 32}) == ' sizes="32"'

    def test_empty_mapping(self) -> None:
        assert html_attributes({}) == ""

    @pytest.mark.parametrize("name", ["", "a b", 'x"', "a>b", "a=b", "a/b"])
    def test_invalid_names_rejected(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid attribute name"):
            html_attributes({name: "value"})


class TestValidateAttributeNames:
    """Tests for validate_attribute_names."""

    def test_valid_names(self) -> None:
        validate_attribute_names({"content": "x", "data-source": "cms", "xml:lang": "en"})

    @pytest.mark.parametrize("name", ["", "a b", "a\tb", "a\x00b", 5])
    def test_invalid_names(self, name) -> None:
        with pytest.raises(ValueError, match="Invalid attribute name"):
            validate_attribute_names({name: "value"})


class TestCutText:
    """Tests for cut_text."""

    def test_short_text_unchanged(self) -> None:
        assert cut_text("Short description", 270) == "Short description"

    def test_text_at_limit_unchanged(self) -> None:
        text = "a" * 270
        assert cut_text(text, 270) == text

    def test_strips_surrounding_whitespace(self) -> None:
        assert cut_text("  padded  ", 270) == "padded"

    def test_cuts_at_word_boundary(self) -> None:
        """Test that long text is cut after a whole word."""
        result = cut_text("one two three four", 12)
        assert result == "one two..."
        assert len(result) <= 12

    def test_keeps_word_ending_exactly_at_limit(self) -> None:
        result = cut_text("one two three four", 10)
        assert result == "one two..."

    def test_single_long_word_cut_hard(self) -> None:
        result = cut_text("x" * 50, 10)
        assert result == "xxxxxxx..."

    def test_custom_ellipsis(self) -> None:
        result = cut_text("alpha beta gamma", 12, ellipsis="…")
        assert result == "alpha beta…"

    def test_limit_smaller_than_ellipsis(self) -> None:
        assert cut_text("abcdef", 2) == "ab"

    def test_long_description_within_limit(self) -> None:
        text = "word " * 100
        result = cut_text(text, 270)
        assert len(result) <= 270
        assert result.endswith("word...")


class TestUncamelize:
    """Tests for uncamelize."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Name", "name"),
            ("HttpEquiv", "http-equiv"),
            ("httpEquiv", "http-equiv"),
            ("http_equiv", "http-equiv"),
            ("Itemprop", "itemprop"),
            ("XMLHttpRequest", "xml-http-request"),
            ("property", "property"),
        ],
    )
    def test_conversion(self, token: str, expected: str) -> None:
        assert uncamelize(token) == expected

    def test_custom_separator(self) -> None:
        assert uncamelize("HttpEquiv", "_") == "http_equiv"

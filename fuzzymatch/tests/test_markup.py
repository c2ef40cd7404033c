"""Tests for markup escaping and rendering styles."""

import pytest
from rich.style import Style
from rich.text import Text

from fuzzymatch.services.config import MatchSettings
from fuzzymatch.services.fuzzy import Matcher
from fuzzymatch.services.markup import MarkupStyle, emphasise, escape_markup, html_escape


class TestHtmlEscape:
    """Tests for the default HTML escaping."""

    def test_escapes_special_characters(self):
        """&, < and > are replaced by entities."""
        assert escape_markup("a<b>&c") == "a&lt;b&gt;&amp;c"

    def test_no_unescaped_specials_remain(self):
        """Output never contains raw < or >."""
        escaped = escape_markup("<<>>&&<script>")
        assert "<" not in escaped
        assert ">" not in escaped

    def test_escapes_exactly_once(self):
        """Existing entities are treated as literal text."""
        assert escape_markup("&amp;") == "&amp;amp;"
        assert escape_markup("&lt;") == "&amp;lt;"

    def test_quotes_untouched(self):
        """Quotes are left alone (element content only)."""
        assert escape_markup("\"it's\"") == "\"it's\""

    def test_empty(self):
        assert escape_markup("") == ""

    def test_default_style_is_html(self):
        """escape_markup without a style is html_escape."""
        assert escape_markup("<&>") == html_escape("<&>")


class TestMarkupStyle:
    """Tests for MarkupStyle delimiters."""

    def test_html_tags(self):
        assert (MarkupStyle.HTML.open_tag, MarkupStyle.HTML.close_tag) == ("<b>", "</b>")

    def test_rich_tags(self):
        assert (MarkupStyle.RICH.open_tag, MarkupStyle.RICH.close_tag) == ("[b]", "[/b]")

    def test_plain_has_no_tags(self):
        assert emphasise("x", MarkupStyle.PLAIN) == "x"

    def test_emphasise_escapes(self):
        """Matched characters are escaped inside the delimiters."""
        assert emphasise("<") == "<b>&lt;</b>"


class TestRichMarkup:
    """Tests for Rich console markup output."""

    @pytest.mark.parametrize(
        ("string", "abbreviation"),
        [
            ("foo[bar]", "fb"),
            ("[red]x", "x"),
            ("path\\to\\file", "ptf"),
            ("a[b]c", "abc"),
            ("[", "["),
            ("a\\\\b", "b"),
            ("a\\\\\\b", "b"),
            ("x\\", "x"),
            ("x\\\\", "x"),
            ("\\\\", "\\"),
        ],
    )
    def test_plain_text_round_trips(self, rich_matcher, string, abbreviation):
        """Rendered markup shows exactly the original string."""
        result = rich_matcher.match(string, abbreviation)
        assert result.score > 0
        assert Text.from_markup(result.markup).plain == string

    def test_matched_characters_are_bold(self, rich_matcher):
        """Bold spans cover the matched characters."""
        text = Text.from_markup(rich_matcher.match("fooBar", "fb").markup)
        bold = sorted(
            (span.start, span.end) for span in text.spans if Style.parse(str(span.style)).bold
        )
        assert bold == [(0, 1), (3, 4)]

    def test_backslash_run_before_tag_is_doubled(self):
        """A trailing backslash run is doubled only when a tag follows it."""
        assert escape_markup("a\\\\", MarkupStyle.RICH, before_tag=True) == "a" + "\\" * 4
        assert escape_markup("a\\\\", MarkupStyle.RICH) == "a\\\\"

    def test_backslash_run_before_match(self, rich_matcher):
        """Backslashes ahead of a match survive rendering."""
        markup = rich_matcher.match("a\\\\b", "b").markup
        assert markup == "a" + "\\" * 4 + "[b]b[/b]"
        assert Text.from_markup(markup).plain == "a\\\\b"

    def test_tag_lookalikes_are_escaped(self, rich_matcher):
        """Text resembling Rich tags is escaped."""
        assert rich_matcher.match("[red]x", "x").markup == "\\[red][b]x[/b]"

    def test_no_match(self, rich_matcher):
        """No-match markup is the escaped string."""
        result = rich_matcher.match("[red]", "z")
        assert result.score == 0.0
        assert Text.from_markup(result.markup).plain == "[red]"


class TestPlainMarkup:
    """Tests for the PLAIN style."""

    def test_markup_is_original_string(self):
        matcher = Matcher(MatchSettings(markup_style=MarkupStyle.PLAIN))
        result = matcher.match("a<b>c", "ac")
        assert result.markup == "a<b>c"
        assert result.score > 0

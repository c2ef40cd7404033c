"""Markup rendering for matched characters.

The default HTML style escapes text for use as element content only.
Escaped output is NOT safe inside attribute values.
"""

from __future__ import annotations

from enum import Enum

from rich.markup import escape as rich_escape


class MarkupStyle(Enum):
    """Output format for MatchResult.markup."""

    HTML = "html"    # <b>x</b>, &amp; &lt; &gt; escaped
    RICH = "rich"    # [b]x[/b], Rich/Textual console markup
    PLAIN = "plain"  # no emphasis, no escaping

    @property
    def open_tag(self) -> str:
        return _DELIMITERS[self][0]

    @property
    def close_tag(self) -> str:
        return _DELIMITERS[self][1]


_DELIMITERS = {
    MarkupStyle.HTML: ("<b>", "</b>"),
    MarkupStyle.RICH: ("[b]", "[/b]"),
    MarkupStyle.PLAIN: ("", ""),
}


def html_escape(text: str) -> str:
    """Escape &, < and > for HTML node content.

    Ampersands go first so the entities introduced for < and > are not
    escaped twice.
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_markup(
    text: str,
    style: MarkupStyle = MarkupStyle.HTML,
    before_tag: bool = False,
) -> str:
    """Escape literal text for embedding in the given markup style.

    Set ``before_tag`` when a delimiter follows the text directly. Rich
    then needs the whole trailing backslash run doubled, otherwise the
    last backslash escapes the tag.
    """
    if style is MarkupStyle.HTML:
        return html_escape(text)
    if style is MarkupStyle.RICH:
        body = text.rstrip("\\")
        run = len(text) - len(body)
        return rich_escape(body) + "\\" * (run * 2 if before_tag else run)
    return text


def emphasise(char: str, style: MarkupStyle = MarkupStyle.HTML) -> str:
    """Wrap a single matched character in the style's bold delimiters."""
    return f"{style.open_tag}{escape_markup(char, style, before_tag=True)}{style.close_tag}"

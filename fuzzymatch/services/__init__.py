"""Services for fuzzymatch."""

from fuzzymatch.services.fuzzy import Matcher, Memo, match, split_on_char
from fuzzymatch.services.markup import MarkupStyle, escape_markup
from fuzzymatch.services.config import (
    ConfigManager,
    MatchSettings,
    DEFAULT_SETTINGS,
)
from fuzzymatch.services.ranking import RankedMatch, rank, rank_labels

__all__ = [
    "Matcher",
    "Memo",
    "match",
    "split_on_char",
    "MarkupStyle",
    "escape_markup",
    "ConfigManager",
    "MatchSettings",
    "DEFAULT_SETTINGS",
    "RankedMatch",
    "rank",
    "rank_labels",
]

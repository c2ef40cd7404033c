"""fuzzymatch: score and highlight abbreviations typed for autocompletion."""

__version__ = "0.3.0"

from fuzzymatch.models import (
    MatchResult,
    Split,
    FuzzyMatchError,
    ConfigError,
    ConfigValidationError,
    InputTooLargeError,
)
from fuzzymatch.services import (
    Matcher,
    Memo,
    match,
    split_on_char,
    MarkupStyle,
    escape_markup,
    ConfigManager,
    MatchSettings,
    DEFAULT_SETTINGS,
    RankedMatch,
    rank,
    rank_labels,
)

__all__ = [
    "MatchResult",
    "Split",
    "FuzzyMatchError",
    "ConfigError",
    "ConfigValidationError",
    "InputTooLargeError",
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

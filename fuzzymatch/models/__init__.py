"""Data models for fuzzymatch."""

from .match import MatchResult, Split
from .exceptions import (
    FuzzyMatchError,
    ConfigError,
    ConfigValidationError,
    InputTooLargeError,
)

__all__ = [
    "MatchResult",
    "Split",
    "FuzzyMatchError",
    "ConfigError",
    "ConfigValidationError",
    "InputTooLargeError",
]

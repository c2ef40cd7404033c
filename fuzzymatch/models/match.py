"""Value types produced by the matcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Score and rendered markup for one (string, abbreviation) pair."""

    score: float   # 0.0 = no match, 1.0 = exact match
    markup: str    # escaped string with matched characters emphasised

    @property
    def matched(self) -> bool:
        return self.score > 0.0

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {"score": self.score, "markup": self.markup}


@dataclass(frozen=True)
class Split:
    """One occurrence of a character inside a string."""

    before: str         # text preceding the occurrence
    matched_char: str   # the character as it appears in the string
    after: str          # text following the occurrence

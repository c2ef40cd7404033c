"""Fuzzy abbreviation matching.

Scores how likely it is that a user typing ``abbreviation`` meant
``string``, and renders ``string`` with the matched characters in bold:

- Exact, case-exact match of the whole string: 1.0
- Characters missing (in order, ignoring case): 0.0
- Everything else in between, ranked by where each character lands:
  continuing a match > start of a word > anywhere else, with small
  penalties for skipped characters, case mismatches and untyped tails.

Every occurrence of each abbreviation character is tried, so the best
alignment wins. A Memo collapses the repeated (suffix, abbreviation
suffix) subproblems this produces.
"""

from __future__ import annotations

from dataclasses import replace

from ..models.exceptions import InputTooLargeError
from ..models.match import MatchResult, Split
from .config import DEFAULT_SETTINGS, MatchSettings
from .markup import emphasise, escape_markup


class Memo:
    """Cache of MatchResults keyed by settings, string and abbreviation.

    Owned by one caller for one batch of calls. Matchers with different
    settings can share a Memo without seeing each other's results.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._results: dict[tuple[MatchSettings, str, str], MatchResult] = {}

    def get(
        self,
        string: str,
        abbreviation: str,
        settings: MatchSettings = DEFAULT_SETTINGS,
    ) -> MatchResult | None:
        """Return a copy of the cached result, or None."""
        cached = self._results.get((settings, string, abbreviation))
        if cached is None:
            return None
        return replace(cached)

    def store(
        self,
        string: str,
        abbreviation: str,
        result: MatchResult,
        settings: MatchSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._results[(settings, string, abbreviation)] = result

    def clear(self) -> None:
        self._results.clear()

    def __contains__(self, key: tuple[str, str]) -> bool:
        """True if any settings have a result for (string, abbreviation)."""
        return any(k[1:] == key for k in self._results)

    def __len__(self) -> int:
        return len(self._results)


def split_on_char(string: str, char: str) -> list[Split]:
    """Split ``string`` around every case-insensitive occurrence of ``char``.

    Splits are returned left to right. Each one keeps the character as
    it appears in ``string``, which may differ in case from ``char``.
    """
    target = char.lower()
    return [
        Split(before=string[:i], matched_char=c, after=string[i + 1:])
        for i, c in enumerate(string)
        if c.lower() == target
    ]


class Matcher:
    """Scores abbreviations against strings using one set of weights."""

    def __init__(self, settings: MatchSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def match(
        self,
        string: str,
        abbreviation: str,
        memo: Memo | None = None,
    ) -> MatchResult:
        """Match ``abbreviation`` against ``string``.

        Args:
            string: Canonical string to match against
            abbreviation: What the user typed
            memo: Optional cache shared across calls in one batch

        Returns:
            MatchResult with score in [0, 1] and the rendered markup.

        Raises:
            InputTooLargeError: Only when settings.max_input_length is set
                and either input exceeds it.
        """
        limit = self.settings.max_input_length
        if limit is not None:
            longest = max(len(string), len(abbreviation))
            if longest > limit:
                raise InputTooLargeError(longest, limit)
        return self._match(string, abbreviation, memo if memo is not None else Memo())

    def _match(self, string: str, abbreviation: str, memo: Memo) -> MatchResult:
        settings = self.settings
        style = settings.markup_style

        if not abbreviation:
            score = settings.score_continue_match if not string else settings.penalty_not_complete
            return MatchResult(score=score, markup=escape_markup(string, style))

        cached = memo.get(string, abbreviation, settings)
        if cached is not None:
            return cached

        best: MatchResult | None = None
        # Each character needs its own position, so a longer abbreviation can't complete
        if len(abbreviation) <= len(string):
            target = abbreviation[0]
            rest = abbreviation[1:]
            for split in split_on_char(string, target):
                sub = self._match(split.after, rest, memo)
                if sub.score == 0.0:
                    continue
                score = sub.score * self._position_weight(split)
                if split.matched_char != target:
                    score *= settings.penalty_case_mismatch
                score *= settings.penalty_skipped ** len(split.before)
                # Strictly greater keeps the leftmost split on ties
                if best is None or score > best.score:
                    markup = (
                        escape_markup(split.before, style, before_tag=True)
                        + emphasise(split.matched_char, style)
                        + sub.markup
                    )
                    best = MatchResult(score=score, markup=markup)

        if best is None or best.score == 0.0:
            best = MatchResult(score=0.0, markup=escape_markup(string, style))

        memo.store(string, abbreviation, best, settings)
        return replace(best)

    def _position_weight(self, split: Split) -> float:
        """Score tier for where the matched character sits in its word."""
        if not split.before:
            return self.settings.score_continue_match
        preceding = split.before[-1]
        if preceding in self.settings.word_separators or is_camel_boundary(
            preceding, split.matched_char
        ):
            return self.settings.score_start_word
        return self.settings.score_ok


def is_camel_boundary(preceding: str, char: str) -> bool:
    """True when ``char`` is uppercase and ``preceding`` is not (e.g. fooBar)."""
    return char.lower() != char and preceding.lower() == preceding


def match(
    string: str,
    abbreviation: str,
    memo: Memo | None = None,
    settings: MatchSettings | None = None,
) -> MatchResult:
    """Match ``abbreviation`` against ``string`` with a one-off Matcher."""
    return Matcher(settings).match(string, abbreviation, memo)

"""Rank candidate labels against an abbreviation."""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from .fuzzy import Matcher, Memo

logger = logging.getLogger(__name__)


class RankedMatch(NamedTuple):
    """A candidate that matched, with its score and rendered label."""

    id: str
    label: str
    score: float
    markup: str


def rank(
    abbreviation: str,
    items: Iterable[tuple[str, str]],
    matcher: Matcher | None = None,
    limit: int | None = None,
) -> list[RankedMatch]:
    """Rank items by fuzzy match quality.

    Args:
        abbreviation: What the user typed
        items: (id, label) pairs
        matcher: Matcher to score with (default weights if omitted)
        limit: Keep at most this many results

    Returns:
        Matching items sorted by score descending, then label
        alphabetically. Items scoring 0 are dropped.
    """
    matcher = matcher or Matcher()
    memo = Memo()
    results: list[RankedMatch] = []
    count = 0
    for id_, label in items:
        count += 1
        result = matcher.match(label, abbreviation, memo)
        if result.score > 0:
            results.append(RankedMatch(id_, label, result.score, result.markup))

    results.sort(key=lambda r: (-r.score, r.label.lower()))
    logger.debug(
        "Ranked %d/%d candidates for %r (memo entries: %d)",
        len(results), count, abbreviation, len(memo),
    )
    if limit is not None:
        return results[:limit]
    return results


def rank_labels(abbreviation: str, labels: Iterable[str], **kwargs) -> list[RankedMatch]:
    """Rank bare labels, using each label as its own id."""
    return rank(abbreviation, ((label, label) for label in labels), **kwargs)

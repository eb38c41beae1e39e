"""Group raw scan results by pattern"""

import logging
from typing import Iterable, Sequence

from phrasesearch.domain.config.pattern import PatternSpec
from phrasesearch.domain.matcher import PatternMatcher
from phrasesearch.domain.models.grouped_result import GroupedResult
from phrasesearch.domain.models.match import FileResult

logger = logging.getLogger(__name__)


def group_results(file_results: Iterable[FileResult], patterns: Sequence[PatternSpec]) -> GroupedResult:
    """Build the per-pattern file sets

    Every pattern gets a group, even when nothing matches it. The matched
    text of each result is re-tested against every pattern, regardless of
    the pattern whose scan pass produced it, so one file may land in
    several groups.

    Args:
        file_results: Results from all scan passes (duplicates allowed)
        patterns: Patterns in report order

    Returns:
        GroupedResult keyed by include phrase
    """
    grouped = GroupedResult(spec.include for spec in patterns)
    matchers = [PatternMatcher(spec) for spec in patterns]

    for result in file_results:
        text = result.matched_text
        for matcher in matchers:
            if matcher.matches(text):
                grouped.add_file(matcher.spec.include, result.path)

    logger.debug(f"Grouped results: {grouped.counts()}")
    return grouped

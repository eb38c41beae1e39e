"""Scan a single file for lines matching a pattern"""

import logging
from typing import List, Optional

from phrasesearch.domain.config.pattern import PatternSpec
from phrasesearch.domain.matcher import PatternMatcher
from phrasesearch.domain.models.match import FileResult, MatchLine
from phrasesearch.domain.models.scan_outcome import ItemKind, OutcomeStatus, ScanDiagnostics
from phrasesearch.infrastructure.file_filter import FileTypeFilter

logger = logging.getLogger(__name__)


def scan_text(content: str, matcher: PatternMatcher) -> List[MatchLine]:
    """Collect matching lines from text

    Args:
        content: Full file content
        matcher: Compiled pattern

    Returns:
        Matching lines, stripped, with 1-based line numbers
    """
    return [
        MatchLine(content=line.strip(), line_number=index)
        for index, line in enumerate(content.split("\n"), 1)
        if matcher.matches(line)
    ]


def scan_file(
    path: str,
    spec: PatternSpec,
    file_filter: Optional[FileTypeFilter] = None,
    diagnostics: Optional[ScanDiagnostics] = None,
) -> Optional[FileResult]:
    """Scan a file for lines matching a pattern

    Files rejected by the filter are not read. Unreadable files (permissions,
    broken links, undecodable content) are recorded and yield None.

    Args:
        path: File path
        spec: Pattern to search for
        file_filter: File-type filter (accepts everything if None)
        diagnostics: Optional collector for the item outcome

    Returns:
        FileResult if at least one line matched, otherwise None
    """
    if file_filter is not None and not file_filter.accepts(path):
        if diagnostics is not None:
            diagnostics.record(path, ItemKind.FILE, OutcomeStatus.FILTERED)
        return None

    try:
        # Only \n ends a line; a lone \r stays part of it
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        if diagnostics is not None:
            diagnostics.record(path, ItemKind.FILE, OutcomeStatus.ERROR, str(e))
        else:
            logger.debug(f"Error reading file {path}: {e}")
        return None

    if diagnostics is not None:
        diagnostics.record(path, ItemKind.FILE, OutcomeStatus.SCANNED)

    lines = scan_text(content, PatternMatcher(spec))
    if not lines:
        return None
    return FileResult(path=path, lines=tuple(lines))

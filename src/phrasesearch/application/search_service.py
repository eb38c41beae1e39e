"""Service running a full search: walk, scan, group, report"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from phrasesearch.application.aggregator import group_results
from phrasesearch.application.reporter import current_timestamp, format_report, persist_report
from phrasesearch.domain.config import PatternSpec, SearchConfig
from phrasesearch.domain.models.match import FileResult
from phrasesearch.domain.models.scan_outcome import ScanDiagnostics
from phrasesearch.domain.models.search_run import SearchRun
from phrasesearch.infrastructure.file_filter import DirectoryExcludeFilter, FileTypeFilter
from phrasesearch.infrastructure.file_scanner import scan_file
from phrasesearch.infrastructure.tree_walker import walk

logger = logging.getLogger(__name__)

ScanFn = Callable[..., Optional[FileResult]]
WalkFn = Callable[..., None]


class SearchService:
    """Runs searches described by a SearchConfig"""

    def __init__(self, scan: ScanFn = scan_file, walker: WalkFn = walk):
        """Initialize search service

        Args:
            scan: File scanner (``scan_file`` signature)
            walker: Tree walker (``walk`` signature)
        """
        self.scan = scan
        self.walker = walker

    def collect(
        self, config: SearchConfig, diagnostics: Optional[ScanDiagnostics] = None
    ) -> List[FileResult]:
        """Run every directory x pattern pass and return the raw results

        Passes run sequentially, directory by directory, pattern by pattern.

        Args:
            config: Search configuration
            diagnostics: Optional collector for item outcomes

        Returns:
            FileResults from all passes, in discovery order
        """
        if diagnostics is None:
            diagnostics = ScanDiagnostics()
        file_filter = FileTypeFilter(config.filters.file_types)
        dir_filter = DirectoryExcludeFilter(config.filters.exclude_dirs)

        all_results: List[FileResult] = []
        for directory in config.directories:
            for spec in config.patterns:
                results = self._scan_directory(directory, spec, file_filter, dir_filter, diagnostics)
                logger.debug(
                    f"Pass {directory!r} x {spec.include!r}: {len(results)} files with matches"
                )
                all_results.extend(results)
        return all_results

    def _scan_directory(
        self,
        directory: str,
        spec: PatternSpec,
        file_filter: FileTypeFilter,
        dir_filter: DirectoryExcludeFilter,
        diagnostics: ScanDiagnostics,
    ) -> List[FileResult]:
        results: List[FileResult] = []

        def on_file(path: str) -> None:
            result = self.scan(path, spec, file_filter, diagnostics)
            if result is not None:
                results.append(result)

        self.walker(directory, on_file, dir_filter, diagnostics)
        return results

    def run(self, config: SearchConfig, timestamp: Optional[int] = None) -> SearchRun:
        """Search, group and write the report

        The output folder and report file are only touched after all
        results are grouped and formatted.

        Args:
            config: Search configuration
            timestamp: Timestamp for the file name (current time in ms if None)

        Returns:
            SearchRun describing the written report

        Raises:
            OSError: If the report cannot be written
        """
        if timestamp is None:
            timestamp = current_timestamp()

        logger.info(
            f"Searching {len(config.directories)} directories for {len(config.patterns)} patterns"
        )
        diagnostics = ScanDiagnostics()
        raw_results = self.collect(config, diagnostics)
        grouped = group_results(raw_results, config.patterns)
        text = format_report(grouped)

        if diagnostics.has_errors:
            logger.warning(
                f"{len(diagnostics.errors)} items could not be read; "
                "run with --verbose for details"
            )
        logger.info(f"Search finished. Stats: {diagnostics.counts()}")

        path = persist_report(text, config.output.folder, config.output.file_name, timestamp)
        return SearchRun(
            report_path=path,
            grouped=grouped,
            report_text=text,
            raw_results=len(raw_results),
            diagnostics=diagnostics,
        )


def perform_search(config: SearchConfig, timestamp: Optional[int] = None) -> Path:
    """Run a search and return the path of the written report

    Raises:
        OSError: If the output folder cannot be created or the report written
    """
    return SearchService().run(config, timestamp).report_path

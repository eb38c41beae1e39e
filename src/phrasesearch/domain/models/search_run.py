"""SearchRun model - the result of one search pipeline run"""

from dataclasses import dataclass, field
from pathlib import Path

from phrasesearch.domain.models.grouped_result import GroupedResult
from phrasesearch.domain.models.scan_outcome import ScanDiagnostics


@dataclass
class SearchRun:
    """Result of a completed search"""

    report_path: Path
    grouped: GroupedResult
    report_text: str
    raw_results: int = 0  # FileResults produced across all passes
    diagnostics: ScanDiagnostics = field(default_factory=ScanDiagnostics)

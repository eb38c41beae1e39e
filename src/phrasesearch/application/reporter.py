"""Report formatting and persistence"""

import logging
import time
from pathlib import Path
from typing import Union

from phrasesearch.domain.models.grouped_result import GroupedResult

logger = logging.getLogger(__name__)


def current_timestamp() -> int:
    """Current time in milliseconds since the epoch"""
    return int(time.time() * 1000)


def format_report(grouped: GroupedResult) -> str:
    """Format grouped results as plain text

    Each group is its phrase, then its sorted file paths one per line, then
    a blank line. Groups keep pattern order.

    Args:
        grouped: Grouped results

    Returns:
        Report text
    """
    lines = []
    for phrase, paths in grouped.items():
        lines.append(phrase)
        lines.extend(paths)
        lines.append("")
    return "\n".join(lines)


def report_path(folder: Union[str, Path], file_name: str, timestamp: int) -> Path:
    """Path of the report file for a given timestamp"""
    return Path(folder) / f"{file_name}-{timestamp}.txt"


def persist_report(text: str, folder: Union[str, Path], file_name: str, timestamp: int) -> Path:
    """Write a report, creating the folder if needed

    Args:
        text: Report text
        folder: Output folder
        file_name: Base file name
        timestamp: Timestamp appended to the file name

    Returns:
        Path of the written file

    Raises:
        OSError: If the folder cannot be created or the file cannot be written
    """
    path = report_path(folder, file_name, timestamp)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Results written to: {path}")
    return path

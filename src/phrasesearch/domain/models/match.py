"""MatchLine and FileResult models - lines of a file that satisfied a pattern"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MatchLine:
    """A single matching line"""

    content: str  # Line text with surrounding whitespace stripped
    line_number: int  # 1-based

    def __post_init__(self):
        if self.line_number < 1:
            raise ValueError("Line number must be >= 1")


@dataclass(frozen=True)
class FileResult:
    """Matching lines found in one file during one scan pass"""

    path: str
    lines: Tuple[MatchLine, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("FileResult requires at least one matching line")

    @property
    def matched_text(self) -> str:
        """Contents of all matching lines joined by newlines"""
        return "\n".join(line.content for line in self.lines)

"""Per-item scan outcomes - what happened to each file and directory visited"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ItemKind(str, Enum):
    """Kind of filesystem item"""

    FILE = "file"
    DIRECTORY = "directory"


class OutcomeStatus(str, Enum):
    """What the scan did with an item"""

    SCANNED = "scanned"  # File read and tested
    FILTERED = "filtered"  # File rejected by file-type selectors
    EXCLUDED = "excluded"  # Directory pruned by name selectors
    ERROR = "error"  # Item could not be read


@dataclass(frozen=True)
class ItemOutcome:
    """Outcome of visiting one item"""

    path: str
    kind: ItemKind
    status: OutcomeStatus
    reason: Optional[str] = None  # Error message or matching selector


@dataclass
class ScanDiagnostics:
    """Collects item outcomes for a whole run

    Every outcome is counted. Only errors and excluded directories are kept,
    so memory does not grow with the number of files scanned.
    """

    errors: List[ItemOutcome] = field(default_factory=list)
    excluded: List[ItemOutcome] = field(default_factory=list)
    status_counts: Dict[OutcomeStatus, int] = field(
        default_factory=lambda: {status: 0 for status in OutcomeStatus}
    )

    def record(
        self,
        path: str,
        kind: ItemKind,
        status: OutcomeStatus,
        reason: Optional[str] = None,
    ) -> ItemOutcome:
        """Record an outcome and log errors and exclusions at DEBUG level"""
        outcome = ItemOutcome(path=path, kind=kind, status=status, reason=reason)
        self.status_counts[status] += 1
        if status == OutcomeStatus.ERROR:
            self.errors.append(outcome)
            logger.debug(f"Error reading {kind.value} {path}: {reason}")
        elif status == OutcomeStatus.EXCLUDED:
            self.excluded.append(outcome)
            logger.debug(f"Skipping excluded directory: {path}")
        return outcome

    @property
    def excluded_directories(self) -> List[str]:
        return [o.path for o in self.excluded]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def counts(self) -> Dict[str, int]:
        """Number of outcomes per status"""
        return {status.value: count for status, count in self.status_counts.items()}

"""Recursive directory traversal with directory-name exclusion"""

import os
from typing import Callable, List, Optional

from phrasesearch.domain.models.scan_outcome import ItemKind, OutcomeStatus, ScanDiagnostics


def walk(
    root: str,
    on_file: Callable[[str], None],
    should_skip_dir: Optional[Callable[[str], bool]] = None,
    diagnostics: Optional[ScanDiagnostics] = None,
) -> None:
    """Visit every regular file below root

    Directories whose name satisfies ``should_skip_dir`` are not entered.
    Symlinks are followed. A directory that cannot be listed, or an entry
    that cannot be stat-ed, is recorded and skipped; the walk continues with
    its siblings.

    Args:
        root: Directory to start from
        on_file: Called with the path of every regular file
        should_skip_dir: Predicate on a directory name
        diagnostics: Optional collector for item outcomes
    """
    if diagnostics is None:
        diagnostics = ScanDiagnostics()

    pending: List[str] = [root]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            diagnostics.record(current, ItemKind.DIRECTORY, OutcomeStatus.ERROR, str(e))
            continue

        subdirectories: List[str] = []
        for entry in entries:
            full_path = os.path.join(current, entry.name)
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
                if not is_dir and not is_file:
                    # Broken symlinks report neither; stat to surface the error
                    os.stat(full_path)
            except OSError as e:
                diagnostics.record(full_path, ItemKind.FILE, OutcomeStatus.ERROR, str(e))
                continue

            if is_dir:
                selector_hit = should_skip_dir is not None and should_skip_dir(entry.name)
                if selector_hit:
                    diagnostics.record(full_path, ItemKind.DIRECTORY, OutcomeStatus.EXCLUDED)
                else:
                    subdirectories.append(full_path)
            elif is_file:
                on_file(full_path)

        # Reversed so the stack pops subdirectories in name order
        pending.extend(reversed(subdirectories))

"""File and directory name selectors"""

import os
from typing import Iterable, List, Optional


class FileTypeFilter:
    """Accept files by extension, name suffix or name prefix.

    Selectors:
        ``.js``   - file extension equals ``.js``
        ``*.spec.js`` - file name ends with ``.spec.js``
        ``test*`` - file name starts with ``test``

    All comparisons are case-insensitive and apply to the file name only.
    An empty selector list accepts every file.
    """

    def __init__(self, selectors: Optional[Iterable[str]] = None):
        self.selectors: List[str] = [s.lower() for s in selectors or []]

    def matching_selector(self, file_path: str) -> Optional[str]:
        """Return the first selector that accepts the file, if any"""
        name = os.path.basename(file_path).lower()
        extension = os.path.splitext(name)[1]
        for selector in self.selectors:
            if selector.startswith("*"):
                if name.endswith(selector[1:]):
                    return selector
            elif selector.endswith("*"):
                if name.startswith(selector[:-1]):
                    return selector
            elif extension == selector:
                return selector
        return None

    def accepts(self, file_path: str) -> bool:
        if not self.selectors:
            return True
        return self.matching_selector(file_path) is not None

    def __call__(self, file_path: str) -> bool:
        return self.accepts(file_path)


class DirectoryExcludeFilter:
    """Decide which directories are never descended into.

    Selectors:
        ``node_modules`` - exact name
        ``*cache``       - name ends with ``cache``
        ``build*``       - name starts with ``build``

    Names are compared case-sensitively.
    """

    def __init__(self, selectors: Optional[Iterable[str]] = None):
        self.selectors: List[str] = list(selectors or [])

    def matching_selector(self, dir_name: str) -> Optional[str]:
        for selector in self.selectors:
            if selector.startswith("*"):
                if dir_name.endswith(selector[1:]):
                    return selector
            elif selector.endswith("*"):
                if dir_name.startswith(selector[:-1]):
                    return selector
            elif dir_name == selector:
                return selector
        return None

    def should_skip(self, dir_name: str) -> bool:
        return self.matching_selector(dir_name) is not None

    def __call__(self, dir_name: str) -> bool:
        return self.should_skip(dir_name)

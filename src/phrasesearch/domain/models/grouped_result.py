"""GroupedResult model - files that qualify for each pattern"""

from typing import Dict, Iterable, Iterator, List, Set, Tuple


class GroupedResult:
    """Ordered mapping of include phrase to the set of qualifying file paths.

    Groups keep the order in which their phrases were first added. Paths are
    stored as sets and only sorted when read.
    """

    def __init__(self, phrases: Iterable[str] = ()):
        self._groups: Dict[str, Set[str]] = {}
        for phrase in phrases:
            self.add_group(phrase)

    def add_group(self, phrase: str) -> None:
        self._groups.setdefault(phrase, set())

    def add_file(self, phrase: str, path: str) -> None:
        self._groups.setdefault(phrase, set()).add(path)

    @property
    def phrases(self) -> List[str]:
        return list(self._groups)

    def files(self, phrase: str) -> List[str]:
        """Sorted paths for a phrase

        Raises:
            KeyError: If the phrase has no group
        """
        return sorted(self._groups[phrase])

    def counts(self) -> Dict[str, int]:
        return {phrase: len(paths) for phrase, paths in self._groups.items()}

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for phrase, paths in self._groups.items():
            yield phrase, sorted(paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._groups

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupedResult):
            return NotImplemented
        return list(self._groups.items()) == list(other._groups.items())

    def __repr__(self) -> str:
        return f"GroupedResult({dict(self.items())!r})"

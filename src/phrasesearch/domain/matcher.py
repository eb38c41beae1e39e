"""Line matching against phrase rules"""

import re
from functools import lru_cache
from typing import Tuple

from phrasesearch.domain.config.pattern import PatternSpec

# Word characters are ASCII letters, digits and underscore, whatever the case flag
_WORD = r"(?-i:[A-Za-z0-9_])"
WORD_BOUNDARY = rf"(?:(?<={_WORD})(?!{_WORD})|(?<!{_WORD})(?={_WORD}))"


@lru_cache(maxsize=256)
def compile_phrase(phrase: str, whole_word: bool = False, case_sensitive: bool = False) -> re.Pattern:
    """Compile a literal phrase into a search regex

    Args:
        phrase: Literal phrase; regex metacharacters are escaped
        whole_word: Anchor the phrase on ASCII word boundaries
        case_sensitive: Disable case-insensitive matching

    Returns:
        Compiled pattern

    Raises:
        ValueError: If phrase is empty
    """
    if not phrase:
        raise ValueError("Cannot compile an empty phrase")
    expression = re.escape(phrase)
    if whole_word:
        expression = f"{WORD_BOUNDARY}{expression}{WORD_BOUNDARY}"
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(expression, flags)


class PatternMatcher:
    """Include/exclude test for a single PatternSpec"""

    def __init__(self, spec: PatternSpec):
        self.spec = spec
        self.include_regex = compile_phrase(spec.include, spec.whole_word, spec.case_sensitive)
        self.exclude_regexes: Tuple[re.Pattern, ...] = tuple(
            compile_phrase(phrase, spec.whole_word, spec.case_sensitive) for phrase in spec.exclude
        )

    def matches(self, text: str) -> bool:
        """Check that text contains the include phrase and none of the excludes"""
        if not self.include_regex.search(text):
            return False
        return not any(regex.search(text) for regex in self.exclude_regexes)

    def __repr__(self) -> str:
        return f"PatternMatcher(include={self.spec.include!r}, exclude={list(self.spec.exclude)!r})"


def matches(line: str, spec: PatternSpec) -> bool:
    """Check whether a line satisfies a pattern"""
    return PatternMatcher(spec).matches(line)

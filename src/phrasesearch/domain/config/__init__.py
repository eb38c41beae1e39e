"""Configuration models with Pydantic validation."""

from phrasesearch.domain.config.app import SearchConfig
from phrasesearch.domain.config.filters import FiltersConfig
from phrasesearch.domain.config.output import OutputConfig
from phrasesearch.domain.config.pattern import PatternSpec

__all__ = [
    "SearchConfig",
    "PatternSpec",
    "FiltersConfig",
    "OutputConfig",
]

"""Root search configuration model."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from phrasesearch.domain.config.filters import FiltersConfig
from phrasesearch.domain.config.output import OutputConfig
from phrasesearch.domain.config.pattern import PatternSpec


class SearchConfig(BaseModel):
    """Configuration for a single search run.

    This is the root configuration model. It is validated once when the run
    starts and never changes afterwards.

    Attributes:
        directories: Root directories to walk (duplicates dropped, order kept)
        patterns: Phrase rules, in report order
        filters: File and directory filters
        output: Report location
        verbose: Emit per-item diagnostics
    """

    directories: List[str] = Field(default_factory=list)
    patterns: List[PatternSpec] = Field(default_factory=list)
    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    verbose: bool = False

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "directories": ["../some-folder"],
                "patterns": [
                    {
                        "include": "phrase1",
                        "exclude": ["phrase1NotThis"],
                        "case_sensitive": False,
                        "whole_word": True,
                    },
                    "phrase2",
                ],
                "filters": {
                    "file_types": [".js", ".vue"],
                    "exclude_dirs": ["node_modules", "dist", "*cache"],
                },
                "output": {
                    "folder": "./reports/code-search",
                    "file_name": "search-results",
                },
                "verbose": True,
            }
        },
    )

    @field_validator("directories", mode="before")
    @classmethod
    def _unique_directories(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set)):
            return list(dict.fromkeys(str(item) for item in value))
        return value

"""File and directory filter configuration model."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FiltersConfig(BaseModel):
    """Configuration for selecting files and pruning directories.

    Selector syntax: ``.ext`` (file extension), ``*tail`` (name ends with
    tail), ``head*`` (name starts with head). Directory selectors also
    accept an exact name.

    Attributes:
        file_types: File selectors (empty = scan every file)
        exclude_dirs: Directory name selectors that are never descended into
    """

    file_types: List[str] = Field(default_factory=list)
    exclude_dirs: List[str] = Field(default_factory=lambda: ["node_modules", ".git"])

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("file_types", "exclude_dirs")
    @classmethod
    def _no_blank_selectors(cls, value: List[str]) -> List[str]:
        if any(not selector.strip() for selector in value):
            raise ValueError("selectors must be non-empty")
        return value

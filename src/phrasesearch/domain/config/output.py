"""Report output configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class OutputConfig(BaseModel):
    """Configuration for the written report.

    Attributes:
        folder: Folder the report is written to (created if missing)
        file_name: Base name; the report is ``<file_name>-<timestamp>.txt``
    """

    folder: str = Field("./search-results", min_length=1)
    file_name: str = Field("search-results", min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

"""Search pattern model."""

from typing import Any, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class PatternSpec(BaseModel):
    """A phrase rule used to select lines and files.

    A bare string is accepted anywhere a pattern is expected and becomes
    ``PatternSpec(include=<string>)``.

    Attributes:
        include: Phrase that must be present
        exclude: Phrases that must not be present
        whole_word: Match phrases only on word boundaries
        case_sensitive: Compare phrases case-sensitively
    """

    include: str = Field(..., min_length=1)
    exclude: Tuple[str, ...] = ()
    whole_word: bool = Field(False, validation_alias=AliasChoices("whole_word", "wholeWord"))
    case_sensitive: bool = Field(
        False, validation_alias=AliasChoices("case_sensitive", "caseSensitive")
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _from_phrase(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"include": data}
        return data

    @field_validator("exclude", mode="before")
    @classmethod
    def _exclude_as_tuple(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("exclude")
    @classmethod
    def _exclude_not_empty(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not phrase for phrase in value):
            raise ValueError("exclude phrases must be non-empty")
        return value

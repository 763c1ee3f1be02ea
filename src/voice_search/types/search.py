"""Search-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawResult(BaseModel):
    """Provider-native search result, read-only once received.

    Brave fills ``description`` and ``age``; Exa fills ``description`` (from
    its summary or text), ``score`` and ``published_date``.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Title of the search result")
    description: str = Field(default="", description="Description, summary or text excerpt")
    url: str = Field(..., min_length=1, description="URL of the search result")
    age: str | None = Field(default=None, description="Brave relative age (e.g. '2 days ago')")
    score: float | None = Field(default=None, description="Exa relevance score")
    published_date: str | None = Field(default=None, description="Exa publication date")
    rank: int = Field(..., ge=1, description="Rank position in provider results")


class FormattedResult(BaseModel):
    """TTS-safe result returned to callers."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="Cleaned title")
    snippet: str = Field(default="", description="Cleaned description")
    url: str = Field(..., description="Source URL (kept verbatim, never spoken)")
    score: float | None = Field(default=None)
    published_date: str | None = Field(default=None)

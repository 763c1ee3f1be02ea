"""Query analysis Pydantic schemas."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class SearchStrategy(StrEnum):
    """Downstream search category chosen for a query."""

    WEB = "web"
    NEWS = "news"
    CRYPTO = "crypto"
    RESTAURANTS = "restaurants"


class SearchEngine(StrEnum):
    """Provider family used to run a search."""

    KEYWORD = "keyword"
    SEMANTIC = "semantic"


class Query(BaseModel):
    """A single incoming search request.

    ``text`` is kept exactly as transcribed; the optional hints come from
    callers that already know the location, coin or cuisine (for example a
    UI form) and take precedence over anything extracted from the text.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Raw query text as transcribed")
    location: str | None = Field(default=None, description="Explicit location hint")
    symbol: str | None = Field(default=None, description="Explicit crypto symbol hint")
    cuisine: str | None = Field(default=None, description="Explicit cuisine hint")


class LocationResult(BaseModel):
    """Outcome of location extraction.

    At most one of ``location`` and ``is_near_me`` is set; both empty means
    the query mentioned no place at all.
    """

    model_config = ConfigDict(frozen=True)

    location: str | None = Field(default=None, description="Extracted place name (lowercase)")
    is_near_me: bool = Field(default=False, description="Query asked for 'near me' results")
    original_query: str = Field(default="", description="Query the location came from")

    @model_validator(mode="after")
    def check_exclusive(self) -> "LocationResult":
        """A result cannot carry a place and the near-me flag at once."""
        if self.location is not None and self.is_near_me:
            raise ValueError("LocationResult cannot have both a location and is_near_me=True")
        return self


class Classification(BaseModel):
    """Routing decision derived once per query."""

    model_config = ConfigDict(frozen=True)

    search_strategy: SearchStrategy = Field(..., description="Chosen search category")
    search_engine: SearchEngine = Field(..., description="Chosen provider family")
    extracted_location: LocationResult = Field(..., description="Location extraction outcome")
    matched_rule: str = Field(
        default="default_web",
        description="Name of the strategy rule that fired (for debugging)",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_complex(self) -> bool:
        """True when the query was routed to the semantic engine."""
        return self.search_engine == SearchEngine.SEMANTIC

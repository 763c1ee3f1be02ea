"""API request/response schemas for FastAPI endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from voice_search.types.query import SearchEngine, SearchStrategy
from voice_search.types.search import FormattedResult

# camelCase on the wire, snake_case in Python
_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchRequest(BaseModel):
    """Request schema for POST /api/search (automatic routing)."""

    model_config = _CAMEL_CONFIG

    query: str = Field(..., description="Free-form, voice-transcribed query")
    location: str | None = Field(default=None, description="Explicit location hint")
    symbol: str | None = Field(default=None, description="Explicit crypto symbol hint")
    cuisine: str | None = Field(default=None, description="Explicit cuisine hint")


class BraveSearchRequest(BaseModel):
    """Request schema for POST /api/search/brave."""

    model_config = _CAMEL_CONFIG

    query: str = Field(..., description="Keyword query")
    type: Literal["web", "news"] = Field(default="web", description="Search type")
    location: str | None = Field(default=None, description="Optional location")


class ExaSearchRequest(BaseModel):
    """Request schema for POST /api/search/exa."""

    model_config = _CAMEL_CONFIG

    query: str = Field(..., description="Natural-language query")
    include_domains: list[str] | None = Field(
        default=None, description="Restrict results to these domains"
    )


class CryptoSearchRequest(BaseModel):
    """Request schema for POST /api/search/crypto."""

    symbol: str = Field(..., description="Coin symbol or name (e.g. 'BTC', 'ethereum')")


class RestaurantSearchRequest(BaseModel):
    """Request schema for POST /api/search/restaurants."""

    location: str = Field(..., description="Where to look for restaurants")
    cuisine: str | None = Field(default=None, description="Cuisine filter (e.g. 'italian')")
    query: str = Field(default="restaurants", description="What kind of place to look for")


class SearchResponse(BaseModel):
    """Terminal artifact returned to every caller.

    ``tts_response`` is always present, on success and on failure, so a
    voice agent can read something back no matter what happened.
    """

    model_config = _CAMEL_CONFIG

    success: bool = Field(..., description="False only when a provider call failed")
    query: str = Field(default="", description="Query that was searched")
    results: list[FormattedResult] = Field(default_factory=list)
    tts_response: str = Field(..., min_length=1, description="Speech-ready answer")
    total_results: int = Field(default=0, ge=0, description="Results returned by the provider")
    error: str | None = Field(default=None, description="Short failure description")
    needs_location: bool | None = Field(
        default=None, description="True when a 'near me' query has no known location"
    )
    strategy: SearchStrategy | None = Field(default=None)
    engine: SearchEngine | None = Field(default=None)
    location: str | None = Field(default=None, description="Location that was searched")


class HealthResponse(BaseModel):
    """Response schema for GET /health endpoint."""

    model_config = _CAMEL_CONFIG

    status: str = Field(default="ok")
    keyword_search_configured: bool = Field(default=False)
    semantic_search_configured: bool = Field(default=False)
    version: str = Field(default="1.0.0")

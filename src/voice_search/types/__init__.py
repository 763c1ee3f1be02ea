"""Type definitions for voice-search.

This module re-exports all types from submodules for convenient imports.
"""

from voice_search.types.api import (
    BraveSearchRequest,
    CryptoSearchRequest,
    ExaSearchRequest,
    HealthResponse,
    RestaurantSearchRequest,
    SearchRequest,
    SearchResponse,
)
from voice_search.types.query import (
    Classification,
    LocationResult,
    Query,
    SearchEngine,
    SearchStrategy,
)
from voice_search.types.search import FormattedResult, RawResult

__all__ = [
    # Search
    "RawResult",
    "FormattedResult",
    # Query analysis
    "Query",
    "SearchStrategy",
    "SearchEngine",
    "LocationResult",
    "Classification",
    # API
    "SearchRequest",
    "BraveSearchRequest",
    "ExaSearchRequest",
    "CryptoSearchRequest",
    "RestaurantSearchRequest",
    "SearchResponse",
    "HealthResponse",
]

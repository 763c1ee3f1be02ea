"""Configuration module using pydantic-settings for type-safe env variable loading."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SafeSearchLevel = Literal["off", "moderate", "strict"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Uses pydantic-settings for type-safe configuration with validation.
    Automatically loads from .env file if present.

    Provider clients receive their values through constructor arguments or
    ``from_settings()``; only the transports (API server, CLI) build them
    from the module-level instance.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Brave Search (keyword engine)
    brave_api_key: str = Field(
        default="",
        description="Brave Search API subscription token",
    )
    brave_search_url: str = Field(
        default="https://api.search.brave.com/res/v1/web/search",
        description="Brave web search endpoint",
    )
    keyword_search_timeout: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout in seconds for keyword search requests",
    )

    # Exa (semantic engine)
    exa_api_key: str = Field(
        default="",
        description="Exa.ai API key",
    )
    exa_search_url: str = Field(
        default="https://api.exa.ai/search",
        description="Exa search endpoint",
    )
    semantic_search_timeout: float = Field(
        default=15.0,
        gt=0,
        le=120,
        description="Timeout in seconds for semantic search requests",
    )

    # Search Configuration
    provider_result_count: int = Field(
        default=10,
        ge=1,
        le=20,
        description="Number of results requested from a provider per call",
    )
    max_response_results: int = Field(
        default=5,
        ge=1,
        le=10,
        description="Maximum number of results spoken back in one response",
    )
    restaurant_max_attempts: int = Field(
        default=4,
        ge=1,
        le=4,
        description="How many progressively narrower restaurant queries to try",
    )
    search_country: str = Field(default="US", description="Brave 'country' parameter")
    search_lang: str = Field(default="en", description="Brave 'search_lang' parameter")
    safesearch: SafeSearchLevel = Field(
        default="moderate",
        description="Brave 'safesearch' parameter",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    router_debug: bool = False  # logs every classification decision at INFO

    # API Server Configuration
    api_host: str = Field(default="127.0.0.1", description="Host for the HTTP API")
    api_port: int = Field(default=3000, ge=1, le=65535, description="Port for the HTTP API")


# Global settings instance
settings = Settings()

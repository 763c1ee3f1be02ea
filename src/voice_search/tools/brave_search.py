"""Brave Search API client (keyword engine)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from voice_search.tools._http_utils import make_api_request, require_api_key
from voice_search.types.search import RawResult
from voice_search.utils.logging import setup_logger

if TYPE_CHECKING:
    from voice_search.config import Settings

logger = setup_logger(__name__)

BRAVE_SEARCH_API_URL = "https://api.search.brave.com/res/v1/web/search"
PROVIDER_NAME = "brave"


class BraveSearchClient:
    """Keyword web search backed by the Brave Search API.

    Configuration is passed in explicitly; nothing is read from the
    environment at call time.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BRAVE_SEARCH_API_URL,
        timeout: float = 10.0,
        country: str = "US",
        search_lang: str = "en",
        safesearch: str = "moderate",
        http_client: httpx.Client | None = None,
    ):
        """Initialize Brave Search client.

        Args:
            api_key: Brave subscription token
            base_url: Web search endpoint
            timeout: Per-request timeout in seconds
            country: Result country
            search_lang: Result language
            safesearch: off / moderate / strict
            http_client: Optional shared httpx.Client (caller closes it)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.country = country
        self.search_lang = search_lang
        self.safesearch = safesearch
        self.http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.Client | None = None
    ) -> BraveSearchClient:
        return cls(
            settings.brave_api_key,
            base_url=settings.brave_search_url,
            timeout=settings.keyword_search_timeout,
            country=settings.search_country,
            search_lang=settings.search_lang,
            safesearch=settings.safesearch,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def search(
        self,
        query: str,
        *,
        count: int = 10,
        freshness: str | None = None,
        result_filter: str | None = None,
        location: str | None = None,
    ) -> list[RawResult]:
        """Run a keyword search.

        Args:
            query: Search query string
            count: Number of results to request (1-20)
            freshness: Brave freshness filter (e.g. "pd" for past day)
            result_filter: Brave result_filter (e.g. "news")
            location: Free-text location forwarded to the provider

        Returns:
            RawResult list in provider rank order

        Raises:
            ValueError: If query is empty or count out of range
            ProviderError: On missing key, timeout or non-2xx response
        """
        if not query or not query.strip():
            raise ValueError("Search query cannot be empty")
        if not 1 <= count <= 20:
            raise ValueError("count must be between 1 and 20")

        api_key = require_api_key(self.api_key, PROVIDER_NAME, "BRAVE_API_KEY")
        query = query.strip()

        params: dict[str, Any] = {
            "q": query,
            "count": count,
            "search_lang": self.search_lang,
            "country": self.country,
            "safesearch": self.safesearch,
            "freshness": freshness,
            "result_filter": result_filter,
            "location": location,
        }
        headers = {
            "X-Subscription-Token": api_key,
            "Accept": "application/json",
        }

        logger.info(f"Fetching keyword results from Brave: {query}")
        data = make_api_request(
            "GET",
            self.base_url,
            provider=PROVIDER_NAME,
            timeout=self.timeout,
            headers=headers,
            params=params,
            client=self.http_client,
        )

        items = _extract_items(data)
        logger.info(
            f"Successfully fetched {len(items)} results from Brave",
            extra={"query": query},
        )
        return _parse_results(items)


def _extract_items(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Pull result items from a Brave payload.

    Web results live under ``web.results``; with ``result_filter=news`` Brave
    answers under ``news.results`` instead.
    """
    for section in ("web", "news"):
        block = data.get(section)
        if isinstance(block, dict):
            items = block.get("results")
            if isinstance(items, list) and items:
                return [item for item in items if isinstance(item, dict)]
    return []


def _parse_results(raw_results: list[dict[str, Any]]) -> list[RawResult]:
    """Parse raw Brave items into RawResult models, skipping invalid ones."""
    parsed_results = []

    for i, item in enumerate(raw_results, start=1):
        try:
            parsed_results.append(
                RawResult(
                    title=(item.get("title") or "").strip(),
                    description=item.get("description") or "",
                    url=item.get("url") or "",
                    age=item.get("age"),
                    rank=i,
                )
            )
        except ValidationError as e:
            logger.warning(
                f"Failed to parse Brave result at rank {i}",
                extra={"error": str(e)},
            )
            continue

    logger.debug(f"Parsed {len(parsed_results)} valid results out of {len(raw_results)} total")
    return parsed_results

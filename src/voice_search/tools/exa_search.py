"""Exa.ai neural search client (semantic engine)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from voice_search.tools._http_utils import make_api_request, require_api_key
from voice_search.types.search import RawResult
from voice_search.utils.logging import setup_logger
from voice_search.utils.text import truncate

if TYPE_CHECKING:
    from voice_search.config import Settings

logger = setup_logger(__name__)

EXA_SEARCH_API_URL = "https://api.exa.ai/search"
PROVIDER_NAME = "exa"

# Text excerpt length used when Exa returns no summary
TEXT_EXCERPT_CHARS = 200


class ExaSearchClient:
    """Semantic search backed by the Exa.ai API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = EXA_SEARCH_API_URL,
        timeout: float = 15.0,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.Client | None = None
    ) -> ExaSearchClient:
        return cls(
            settings.exa_api_key,
            base_url=settings.exa_search_url,
            timeout=settings.semantic_search_timeout,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def search(
        self,
        query: str,
        *,
        num_results: int = 10,
        include_domains: list[str] | None = None,
        search_type: str = "neural",
    ) -> list[RawResult]:
        """Run a semantic search.

        Args:
            query: Keyword or natural-language query
            num_results: Number of results to request (1-100)
            include_domains: Restrict results to these domains
            search_type: Exa search type ("neural", "keyword" or "auto")

        Returns:
            RawResult list in provider rank order

        Raises:
            ValueError: If query is empty or num_results out of range
            ProviderError: On missing key, auth failure (401/403), rate limit
                           (429), timeout or any other non-2xx response
        """
        if not query or not query.strip():
            raise ValueError("Search query cannot be empty")
        if not 1 <= num_results <= 100:
            raise ValueError("num_results must be between 1 and 100")

        api_key = require_api_key(self.api_key, PROVIDER_NAME, "EXA_API_KEY")
        query = query.strip()

        body: dict[str, Any] = {
            "query": query,
            "type": search_type,
            "numResults": num_results,
            "contents": {"text": True, "highlights": True, "summary": True},
        }
        if include_domains:
            body["includeDomains"] = include_domains

        logger.info(f"Fetching semantic results from Exa: {query}")
        data = make_api_request(
            "POST",
            self.base_url,
            provider=PROVIDER_NAME,
            timeout=self.timeout,
            headers={"x-api-key": api_key, "Content-Type": "application/json"},
            json_body=body,
            client=self.http_client,
        )

        items = data.get("results") or []
        logger.info(
            f"Successfully fetched {len(items)} results from Exa",
            extra={"query": query},
        )
        return _parse_results([item for item in items if isinstance(item, dict)])


def _description(item: dict[str, Any]) -> str:
    summary = item.get("summary")
    if isinstance(summary, str) and summary.strip():
        return summary
    text = item.get("text")
    if isinstance(text, str) and text.strip():
        return truncate(text.strip(), TEXT_EXCERPT_CHARS)
    return ""


def _parse_results(raw_results: list[dict[str, Any]]) -> list[RawResult]:
    """Parse raw Exa items into RawResult models, skipping invalid ones."""
    parsed_results = []

    for i, item in enumerate(raw_results, start=1):
        try:
            parsed_results.append(
                RawResult(
                    title=(item.get("title") or "").strip(),
                    description=_description(item),
                    url=item.get("url") or "",
                    score=item.get("score"),
                    published_date=item.get("publishedDate"),
                    rank=i,
                )
            )
        except ValidationError as e:
            logger.warning(
                f"Failed to parse Exa result at rank {i}",
                extra={"error": str(e)},
            )
            continue

    logger.debug(f"Parsed {len(parsed_results)} valid results out of {len(raw_results)} total")
    return parsed_results

"""Search service: classify a query, run the chosen strategy, speak the result.

This is the one operation every transport (HTTP API, CLI, direct call)
goes through:

1. Reject empty input (InputError)
2. Classify the query (strategy, engine, location)
3. Run the strategy against the keyword or semantic provider
4. Filter restaurant results and cap the list
5. Compose and normalize the spoken answer

Provider failures become ``success=False`` responses with a speakable
``tts_response``; they are never raised to the caller. Within the
restaurant strategy each fallback query fails independently.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from voice_search.errors import InputError, ProviderError
from voice_search.pipeline.classifier import classify
from voice_search.pipeline.classifier_patterns import extract_cuisine, extract_symbol
from voice_search.pipeline.composer import compose, compose_error, compose_location_prompt
from voice_search.pipeline.restaurant_filter import (
    build_restaurant_queries,
    extract_restaurants,
    to_formatted_result,
)
from voice_search.tools.brave_search import BraveSearchClient
from voice_search.tools.exa_search import ExaSearchClient
from voice_search.types.api import SearchResponse
from voice_search.types.query import Classification, Query, SearchEngine, SearchStrategy
from voice_search.types.search import RawResult
from voice_search.utils.logging import log_with_context, setup_logger

if TYPE_CHECKING:
    from voice_search.config import Settings

logger = setup_logger(__name__)

# Polled between provider calls; True means the caller has gone away
CancelCheck = Callable[[], bool]


class KeywordSearchProvider(Protocol):
    def search(
        self,
        query: str,
        *,
        count: int = 10,
        freshness: str | None = None,
        result_filter: str | None = None,
        location: str | None = None,
    ) -> list[RawResult]: ...


class SemanticSearchProvider(Protocol):
    def search(
        self,
        query: str,
        *,
        num_results: int = 10,
        include_domains: list[str] | None = None,
    ) -> list[RawResult]: ...


class SearchService:
    """Routes queries to strategies and turns provider results into answers."""

    def __init__(
        self,
        *,
        keyword_client: KeywordSearchProvider,
        semantic_client: SemanticSearchProvider,
        max_results: int = 5,
        provider_result_count: int = 10,
        restaurant_max_attempts: int = 4,
        router_debug: bool = False,
    ) -> None:
        self._keyword_client = keyword_client
        self._semantic_client = semantic_client
        self._max_results = max_results
        self._provider_result_count = provider_result_count
        self._restaurant_max_attempts = restaurant_max_attempts
        self._router_debug = router_debug

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchService:
        return cls(
            keyword_client=BraveSearchClient.from_settings(settings),
            semantic_client=ExaSearchClient.from_settings(settings),
            max_results=settings.max_response_results,
            provider_result_count=settings.provider_result_count,
            restaurant_max_attempts=settings.restaurant_max_attempts,
            router_debug=settings.router_debug,
        )

    # ------------------------------------------------------------------
    # Automatic routing
    # ------------------------------------------------------------------

    def search(
        self, query: str | Query, *, is_cancelled: CancelCheck | None = None
    ) -> SearchResponse:
        """Classify a free-form query and run the matching strategy.

        Args:
            query: Raw query text, or a Query carrying explicit hints
            is_cancelled: Optional check; once it returns True no further
                          provider call is started

        Returns:
            SearchResponse (always with a tts_response)

        Raises:
            InputError: If the query text is empty or whitespace
        """
        request = query if isinstance(query, Query) else Query(text=query or "")
        text = request.text.strip()
        if not text:
            raise InputError("Query cannot be empty")

        classification = classify(text, debug=self._router_debug)
        logger.info(
            f"Routing query to {classification.search_strategy.value}",
            extra={
                "engine": classification.search_engine.value,
                "rule": classification.matched_rule,
            },
        )

        strategy = classification.search_strategy
        if strategy == SearchStrategy.CRYPTO:
            symbol = request.symbol or extract_symbol(text)
            return self._run_crypto(text, symbol)

        if strategy == SearchStrategy.RESTAURANTS:
            return self._route_restaurants(request, text, classification, is_cancelled)

        if strategy == SearchStrategy.NEWS:
            return self._run_keyword(text, SearchStrategy.NEWS)

        if classification.search_engine == SearchEngine.SEMANTIC:
            return self._run_semantic(text)

        return self._run_keyword(text, SearchStrategy.WEB)

    def _route_restaurants(
        self,
        request: Query,
        text: str,
        classification: Classification,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResponse:
        extracted = classification.extracted_location
        location = request.location or extracted.location
        cuisine = request.cuisine or extract_cuisine(text)

        if location is None and extracted.is_near_me:
            logger.info("Near-me restaurant query without a location; asking for one")
            return SearchResponse(
                success=True,
                query=text,
                results=[],
                tts_response=compose_location_prompt(text),
                total_results=0,
                needs_location=True,
                strategy=SearchStrategy.RESTAURANTS,
                engine=SearchEngine.KEYWORD,
            )

        return self._run_restaurants(
            display_query=text,
            location=location,
            cuisine=cuisine,
            subject="restaurants",
            is_cancelled=is_cancelled,
        )

    # ------------------------------------------------------------------
    # Explicit operations (one per HTTP endpoint)
    # ------------------------------------------------------------------

    def search_keyword(
        self,
        query: str,
        search_type: str = "web",
        location: str | None = None,
    ) -> SearchResponse:
        """Keyword search without classification ("web" or "news")."""
        text = _require_text(query)
        strategy = SearchStrategy.NEWS if search_type == "news" else SearchStrategy.WEB
        return self._run_keyword(text, strategy, location=location)

    def search_semantic(
        self, query: str, include_domains: list[str] | None = None
    ) -> SearchResponse:
        """Semantic search without classification."""
        return self._run_semantic(_require_text(query), include_domains=include_domains)

    def search_crypto(self, symbol: str) -> SearchResponse:
        """Latest market information for one coin."""
        text = _require_text(symbol)
        return self._run_crypto(text, extract_symbol(text) or text.upper())

    def search_restaurants(
        self,
        location: str,
        cuisine: str | None = None,
        query: str = "restaurants",
        *,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResponse:
        """Restaurant search for an explicit location."""
        where = _require_text(location)
        subject = " ".join((query or "restaurants").split())
        display = " ".join(part for part in (cuisine, subject) if part)
        return self._run_restaurants(
            display_query=display,
            location=where,
            cuisine=cuisine,
            subject=subject,
            is_cancelled=is_cancelled,
        )

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _run_keyword(
        self,
        text: str,
        strategy: SearchStrategy,
        location: str | None = None,
    ) -> SearchResponse:
        is_news = strategy == SearchStrategy.NEWS
        try:
            raw = self._keyword_client.search(
                text,
                count=self._provider_result_count,
                freshness="pd" if is_news else None,
                result_filter="news" if is_news else None,
                location=location,
            )
        except ProviderError as e:
            return self._failure(text, strategy, SearchEngine.KEYWORD, e)

        return self._success(text, strategy, SearchEngine.KEYWORD, raw, location=location)

    def _run_semantic(
        self, text: str, include_domains: list[str] | None = None
    ) -> SearchResponse:
        try:
            raw = self._semantic_client.search(
                text,
                num_results=self._provider_result_count,
                include_domains=include_domains,
            )
        except ProviderError as e:
            return self._failure(text, SearchStrategy.WEB, SearchEngine.SEMANTIC, e)

        return self._success(text, SearchStrategy.WEB, SearchEngine.SEMANTIC, raw)

    def _run_crypto(self, text: str, symbol: str | None) -> SearchResponse:
        subject = symbol or text
        provider_query = f"{subject} cryptocurrency price current market cap"
        try:
            raw = self._keyword_client.search(
                provider_query,
                count=self._max_results,
                freshness="pd",
            )
        except ProviderError as e:
            return self._failure(text, SearchStrategy.CRYPTO, SearchEngine.KEYWORD, e)

        return self._success(text, SearchStrategy.CRYPTO, SearchEngine.KEYWORD, raw)

    def _run_restaurants(
        self,
        *,
        display_query: str,
        location: str | None,
        cuisine: str | None,
        subject: str,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResponse:
        attempts = build_restaurant_queries(location, cuisine, subject)[
            : self._restaurant_max_attempts
        ]

        collected: list[RawResult] = []
        restaurants = []
        failures: list[ProviderError] = []

        for attempt_number, provider_query in enumerate(attempts, start=1):
            if is_cancelled is not None and is_cancelled():
                logger.info(
                    f"Restaurant search cancelled before attempt {attempt_number}/{len(attempts)}",
                    extra={"location": location},
                )
                break

            try:
                batch = self._keyword_client.search(
                    provider_query,
                    count=self._provider_result_count,
                    location=location,
                )
            except ProviderError as e:
                failures.append(e)
                log_with_context(
                    logger,
                    "warning",
                    f"Restaurant attempt {attempt_number}/{len(attempts)} failed, skipping",
                    provider_query=provider_query,
                    error=str(e),
                )
                continue

            collected.extend(batch)
            restaurants = extract_restaurants(collected, limit=self._max_results)
            logger.info(
                f"Restaurant attempt {attempt_number}/{len(attempts)}: "
                f"{len(restaurants)} unique restaurants so far",
                extra={"provider_query": provider_query, "batch_size": len(batch)},
            )
            if len(restaurants) >= self._max_results:
                break

        # Every attempt failed: that is a provider failure, not an empty result
        if failures and len(failures) == len(attempts):
            return self._failure(
                display_query,
                SearchStrategy.RESTAURANTS,
                SearchEngine.KEYWORD,
                failures[-1],
                location=location,
            )

        return SearchResponse(
            success=True,
            query=display_query,
            results=restaurants,
            tts_response=compose(
                SearchStrategy.RESTAURANTS, restaurants, display_query, location=location
            ),
            total_results=len(restaurants),
            strategy=SearchStrategy.RESTAURANTS,
            engine=SearchEngine.KEYWORD,
            location=location,
        )

    # ------------------------------------------------------------------
    # Response builders
    # ------------------------------------------------------------------

    def _success(
        self,
        text: str,
        strategy: SearchStrategy,
        engine: SearchEngine,
        raw: list[RawResult],
        location: str | None = None,
    ) -> SearchResponse:
        results = [to_formatted_result(item) for item in raw[: self._max_results]]
        return SearchResponse(
            success=True,
            query=text,
            results=results,
            tts_response=compose(strategy, results, text, engine=engine),
            total_results=len(raw),
            strategy=strategy,
            engine=engine,
            location=location,
        )

    def _failure(
        self,
        text: str,
        strategy: SearchStrategy,
        engine: SearchEngine,
        error: ProviderError,
        location: str | None = None,
    ) -> SearchResponse:
        logger.error(
            f"{strategy.value} search failed",
            extra={"provider": error.provider, "kind": error.kind.value, "query": text},
        )
        return SearchResponse(
            success=False,
            query=text,
            results=[],
            tts_response=compose_error(error.kind),
            total_results=0,
            error=f"{strategy.value.capitalize()} search failed: {error.kind.value}",
            strategy=strategy,
            engine=engine,
            location=location,
        )


def _require_text(value: str | None) -> str:
    text = " ".join((value or "").split())
    if not text:
        raise InputError("Query cannot be empty")
    return text

"""Tests for SearchService routing and strategies (providers are faked)."""

from unittest.mock import patch

import pytest

from voice_search.errors import InputError, ProviderErrorKind
from voice_search.pipeline.composer import compose_error
from voice_search.pipeline.service import SearchService
from voice_search.types.query import Query, SearchEngine, SearchStrategy
from tests.mocks.mock_service import (
    FakeKeywordClient,
    FakeSemanticClient,
    create_raw_result,
    provider_error,
    restaurant_results,
)


def make_service(keyword=None, semantic=None, **kwargs) -> SearchService:
    return SearchService(
        keyword_client=keyword or FakeKeywordClient(),
        semantic_client=semantic or FakeSemanticClient(),
        **kwargs,
    )


def distinct_restaurants(count: int) -> list:
    return [create_raw_result(f"Spot {i} Kitchen", rank=i + 1) for i in range(count)]


class TestInputValidation:
    """Empty input is rejected before any provider call."""

    @pytest.mark.parametrize("query", ["", "   ", Query(text=" \t ")])
    def test_empty_query_raises(self, query):
        keyword = FakeKeywordClient()
        with pytest.raises(InputError):
            make_service(keyword=keyword).search(query)
        assert keyword.calls == []

    def test_explicit_operations_reject_empty_input(self):
        service = make_service()
        with pytest.raises(InputError):
            service.search_keyword(" ")
        with pytest.raises(InputError):
            service.search_semantic("")
        with pytest.raises(InputError):
            service.search_crypto("")
        with pytest.raises(InputError):
            service.search_restaurants("  ")


class TestRouting:
    """Test suite for SearchService.search() routing."""

    def test_crypto_route(self):
        keyword = FakeKeywordClient([[create_raw_result("BTC at $64,000", "Bitcoin price")]])
        response = make_service(keyword=keyword).search("bitcoin price today")

        assert response.success is True
        assert response.strategy == SearchStrategy.CRYPTO
        assert response.engine == SearchEngine.KEYWORD
        call = keyword.calls[0]
        assert call["query"] == "BTC cryptocurrency price current market cap"
        assert call["freshness"] == "pd"
        assert call["count"] == 5
        assert "latest market information" in response.tts_response

    def test_crypto_symbol_hint(self):
        keyword = FakeKeywordClient()
        make_service(keyword=keyword).search(Query(text="crypto prices", symbol="SOL"))
        assert keyword.calls[0]["query"].startswith("SOL ")

    def test_news_route(self):
        keyword = FakeKeywordClient([[create_raw_result("Election night")]])
        response = make_service(keyword=keyword).search("breaking news election results")

        assert response.strategy == SearchStrategy.NEWS
        assert keyword.calls[0]["freshness"] == "pd"
        assert keyword.calls[0]["result_filter"] == "news"

    def test_complex_route_uses_semantic_client(self):
        keyword = FakeKeywordClient()
        semantic = FakeSemanticClient([create_raw_result("Photosynthesis", "Light to energy")])
        response = make_service(keyword=keyword, semantic=semantic).search(
            "how does photosynthesis work"
        )

        assert response.engine == SearchEngine.SEMANTIC
        assert response.tts_response.startswith("Using advanced AI search")
        assert semantic.calls[0]["num_results"] == 10
        assert keyword.calls == []

    def test_simple_web_route(self):
        keyword = FakeKeywordClient([[create_raw_result("Forecast", "Sunny")]])
        response = make_service(keyword=keyword).search("weather tomorrow")

        assert response.strategy == SearchStrategy.WEB
        assert response.engine == SearchEngine.KEYWORD
        assert keyword.calls[0]["freshness"] is None
        assert keyword.calls[0]["count"] == 10

    def test_zero_results_is_success_with_apology(self):
        response = make_service().search("weather tomorrow")

        assert response.success is True
        assert response.results == []
        assert response.total_results == 0
        assert "couldn't find" in response.tts_response

    def test_results_capped_at_max(self):
        raw = [create_raw_result(f"Result {i}", rank=i + 1) for i in range(8)]
        response = make_service(keyword=FakeKeywordClient([raw])).search("weather tomorrow")

        assert len(response.results) == 5
        assert response.total_results == 8
        assert "I found 5 relevant results" in response.tts_response

    def test_router_debug_is_passed_to_classifier(self):
        with patch("voice_search.pipeline.classifier.logger") as mock_logger:
            make_service(router_debug=True).search("weather tomorrow")

        mock_logger.info.assert_called_once()

    def test_results_are_tts_clean(self):
        raw = [create_raw_result("<b>Forecast</b>", "See https://weather.example.com...")]
        response = make_service(keyword=FakeKeywordClient([raw])).search("weather tomorrow")

        result = response.results[0]
        assert result.title == "Forecast"
        assert "https" not in result.snippet
        assert "https" not in response.tts_response


class TestProviderFailures:
    """Provider errors become success=False responses, never exceptions."""

    def test_keyword_failure(self):
        keyword = FakeKeywordClient([provider_error(ProviderErrorKind.RATE_LIMIT)])
        response = make_service(keyword=keyword).search("weather tomorrow")

        assert response.success is False
        assert response.error == "Web search failed: rate_limit"
        assert response.tts_response == compose_error(ProviderErrorKind.RATE_LIMIT)
        assert response.results == []

    def test_semantic_failure(self):
        semantic = FakeSemanticClient(provider_error(ProviderErrorKind.AUTH, provider="exa"))
        response = make_service(semantic=semantic).search("explain quantum computing")

        assert response.success is False
        assert response.engine == SearchEngine.SEMANTIC
        assert response.tts_response

    def test_not_configured_provider(self):
        keyword = FakeKeywordClient([provider_error(ProviderErrorKind.NOT_CONFIGURED)])
        response = make_service(keyword=keyword).search("bitcoin price")

        assert response.success is False
        assert response.error == "Crypto search failed: not_configured"


class TestRestaurants:
    """Test suite for the restaurant strategy."""

    def test_near_me_without_location_asks_for_one(self):
        keyword = FakeKeywordClient()
        response = make_service(keyword=keyword).search("italian restaurants near me")

        assert response.success is True
        assert response.needs_location is True
        assert response.results == []
        assert response.strategy == SearchStrategy.RESTAURANTS
        assert "where you are" in response.tts_response
        assert keyword.calls == []

    def test_near_me_with_location_hint_searches(self):
        keyword = FakeKeywordClient([distinct_restaurants(5)])
        response = make_service(keyword=keyword).search(
            Query(text="italian restaurants near me", location="Boston")
        )

        assert response.needs_location is None
        assert response.location == "Boston"
        assert keyword.calls[0]["query"] == "italian restaurants in Boston"

    def test_location_from_query(self):
        keyword = FakeKeywordClient([restaurant_results()])
        response = make_service(keyword=keyword).search("best pizza in Austin")

        assert response.success is True
        assert response.location == "austin"
        assert keyword.calls[0]["query"] == "pizza restaurants in austin"
        assert keyword.calls[0]["location"] == "austin"
        assert [r.title for r in response.results] == ["Joe's Café", "Olive Trattoria"]
        assert "near austin" in response.tts_response

    def test_walks_all_attempts_until_enough(self):
        keyword = FakeKeywordClient([restaurant_results()])
        make_service(keyword=keyword).search("best pizza in Austin")

        # Only two unique restaurants exist, so every fallback query runs
        assert len(keyword.calls) == 4
        assert "-site:yelp.com" in keyword.calls[1]["query"]

    def test_stops_once_enough_restaurants(self):
        keyword = FakeKeywordClient([distinct_restaurants(6)])
        response = make_service(keyword=keyword).search("best pizza in Austin")

        assert len(keyword.calls) == 1
        assert len(response.results) == 5
        assert response.total_results == 5

    def test_accumulates_across_attempts(self):
        keyword = FakeKeywordClient(
            [distinct_restaurants(3), distinct_restaurants(3) + distinct_restaurants(6)[3:]]
        )
        response = make_service(keyword=keyword).search("best pizza in Austin")

        assert len(keyword.calls) == 2
        assert len(response.results) == 5

    def test_failed_attempt_is_skipped(self):
        keyword = FakeKeywordClient([provider_error(), restaurant_results()])
        response = make_service(keyword=keyword).search("best pizza in Austin")

        assert response.success is True
        assert len(response.results) == 2
        assert len(keyword.calls) == 4

    def test_all_attempts_failing_is_a_failure(self):
        keyword = FakeKeywordClient([provider_error(ProviderErrorKind.TIMEOUT)])
        response = make_service(keyword=keyword).search("best pizza in Austin")

        assert response.success is False
        assert response.error == "Restaurants search failed: timeout"
        assert response.tts_response == compose_error(ProviderErrorKind.TIMEOUT)
        assert len(keyword.calls) == 4

    def test_max_attempts_setting(self):
        keyword = FakeKeywordClient([[]])
        make_service(keyword=keyword, restaurant_max_attempts=2).search("best pizza in Austin")
        assert len(keyword.calls) == 2

    def test_cancelled_ladder_stops_issuing_calls(self):
        keyword = FakeKeywordClient([restaurant_results()])
        # The caller goes away while the first attempt is in flight
        response = make_service(keyword=keyword).search(
            "best pizza in Austin", is_cancelled=lambda: len(keyword.calls) >= 1
        )

        assert len(keyword.calls) == 1
        assert response.success is True
        assert [r.title for r in response.results] == ["Joe's Café", "Olive Trattoria"]

    def test_cancelled_before_first_attempt(self):
        keyword = FakeKeywordClient([restaurant_results()])
        response = make_service(keyword=keyword).search_restaurants(
            "Austin", is_cancelled=lambda: True
        )

        assert keyword.calls == []
        assert response.results == []

    def test_no_restaurants_found(self):
        response = make_service().search("best pizza in Austin")

        assert response.success is True
        assert response.results == []
        assert "couldn't find specific restaurants" in response.tts_response


class TestExplicitOperations:
    """Tests for the operations that skip classification."""

    def test_search_keyword_news(self):
        keyword = FakeKeywordClient()
        response = make_service(keyword=keyword).search_keyword("pizza", search_type="news")

        assert response.strategy == SearchStrategy.NEWS
        assert keyword.calls[0]["result_filter"] == "news"

    def test_search_keyword_location_forwarded(self):
        keyword = FakeKeywordClient()
        response = make_service(keyword=keyword).search_keyword("parks", location="denver")

        assert keyword.calls[0]["location"] == "denver"
        assert response.location == "denver"

    def test_search_semantic_include_domains(self):
        semantic = FakeSemanticClient()
        make_service(semantic=semantic).search_semantic("ai papers", include_domains=["arxiv.org"])
        assert semantic.calls[0]["include_domains"] == ["arxiv.org"]

    def test_search_crypto_by_name(self):
        keyword = FakeKeywordClient()
        response = make_service(keyword=keyword).search_crypto("ethereum")

        assert response.strategy == SearchStrategy.CRYPTO
        assert keyword.calls[0]["query"].startswith("ETH ")

    def test_search_crypto_by_unknown_ticker(self):
        keyword = FakeKeywordClient()
        make_service(keyword=keyword).search_crypto("pepe")
        assert keyword.calls[0]["query"].startswith("PEPE ")

    def test_search_restaurants(self):
        keyword = FakeKeywordClient([restaurant_results()])
        response = make_service(keyword=keyword).search_restaurants("Austin", cuisine="italian")

        assert keyword.calls[0]["query"] == "italian restaurants in Austin"
        assert response.query == "italian restaurants"
        assert response.location == "Austin"
        assert len(response.results) == 2

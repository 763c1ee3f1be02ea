"""Integration tests for real search APIs (not mocked).

These tests make actual API calls and should only be run when:
1. API credentials are configured in .env
2. You want to verify the APIs work end-to-end
3. You're okay with using API quota

Run with: pytest tests/integration/test_real_search_apis.py -v -s

Skip with: pytest tests/ --ignore=tests/integration/
"""

import pytest

from voice_search.config import settings
from voice_search.pipeline.service import SearchService
from voice_search.tools.brave_search import BraveSearchClient
from voice_search.tools.exa_search import ExaSearchClient
from voice_search.types.search import RawResult


@pytest.mark.integration
class TestRealBraveSearch:
    """Integration tests for the Brave Search API."""

    @pytest.fixture(autouse=True)
    def require_key(self):
        if not settings.brave_api_key:
            pytest.skip("BRAVE_API_KEY not configured")

    def test_brave_search_real_api(self):
        """Test Brave Search with a real API call."""
        client = BraveSearchClient.from_settings(settings)
        results = client.search("Python programming language", count=5)

        assert isinstance(results, list)
        assert 0 < len(results) <= 5
        first_result = results[0]
        assert isinstance(first_result, RawResult)
        assert first_result.title
        assert first_result.url.startswith("http")
        assert first_result.rank == 1

        print("\n✅ Brave results:")
        for result in results:
            print(f"  [{result.rank}] {result.title}")
            print(f"      {result.url}")

    def test_restaurant_search_real_api(self):
        """Test the full restaurant strategy against Brave."""
        service = SearchService.from_settings(settings)
        response = service.search("italian restaurants in Austin")

        assert response.success is True
        assert response.location == "austin"
        assert len(response.results) <= 5
        print(f"\n✅ {response.tts_response}")


@pytest.mark.integration
class TestRealExaSearch:
    """Integration tests for the Exa API."""

    def test_exa_search_real_api(self):
        """Test Exa search with a real API call."""
        if not settings.exa_api_key:
            pytest.skip("EXA_API_KEY not configured")

        client = ExaSearchClient.from_settings(settings)
        results = client.search("how does photosynthesis work", num_results=3)

        assert 0 < len(results) <= 3
        assert all(r.url.startswith("http") for r in results)

        print("\n✅ Exa results:")
        for result in results:
            print(f"  [{result.rank}] {result.title} (score={result.score})")

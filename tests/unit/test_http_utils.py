"""Tests for the shared HTTP helper and provider errors."""

import httpx
import pytest

from voice_search.errors import ProviderError, ProviderErrorKind
from voice_search.tools._http_utils import make_api_request, require_api_key


def _request(handler, **kwargs):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return make_api_request(
        "GET",
        "https://api.example.com/search",
        provider="test",
        timeout=1.0,
        client=client,
        **kwargs,
    )


class TestMakeApiRequest:
    """Test suite for make_api_request()."""

    def test_returns_json_object(self):
        data = _request(lambda request: httpx.Response(200, json={"ok": True}))
        assert data == {"ok": True}

    def test_none_params_are_dropped(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _request(handler, params={"q": "pizza", "freshness": None})

        assert seen[0].url.params["q"] == "pizza"
        assert "freshness" not in seen[0].url.params

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(ProviderError) as exc_info:
            _request(handler)
        assert exc_info.value.kind == ProviderErrorKind.TIMEOUT
        assert exc_info.value.status_code is None

    def test_invalid_json_body(self):
        with pytest.raises(ProviderError) as exc_info:
            _request(lambda request: httpx.Response(200, text="<html>not json</html>"))
        assert exc_info.value.kind == ProviderErrorKind.HTTP

    def test_non_object_json_body(self):
        with pytest.raises(ProviderError) as exc_info:
            _request(lambda request: httpx.Response(200, json=[1, 2, 3]))
        assert exc_info.value.kind == ProviderErrorKind.HTTP

    def test_status_code_is_kept(self):
        with pytest.raises(ProviderError) as exc_info:
            _request(lambda request: httpx.Response(502, text="bad gateway"))
        assert exc_info.value.status_code == 502
        assert "status: 502" in str(exc_info.value)


class TestRequireApiKey:
    """Test suite for require_api_key()."""

    def test_returns_key(self):
        assert require_api_key("secret", "brave", "BRAVE_API_KEY") == "secret"

    def test_missing_key(self):
        with pytest.raises(ProviderError) as exc_info:
            require_api_key("", "brave", "BRAVE_API_KEY")
        assert exc_info.value.kind == ProviderErrorKind.NOT_CONFIGURED
        assert "BRAVE_API_KEY" in str(exc_info.value)


class TestProviderError:
    """Tests for the ProviderError message format."""

    def test_str_without_status(self):
        error = ProviderError("boom", kind=ProviderErrorKind.NETWORK, provider="exa")
        assert str(error) == "exa network error: boom"

    def test_str_with_status(self):
        error = ProviderError(
            "denied", kind=ProviderErrorKind.AUTH, provider="brave", status_code=401
        )
        assert str(error) == "brave auth error: denied, status: 401"

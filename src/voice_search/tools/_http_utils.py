"""Shared HTTP utilities for search tools to reduce code duplication."""

from typing import Any

import httpx

from voice_search.errors import ProviderError, ProviderErrorKind
from voice_search.utils.logging import setup_logger

logger = setup_logger(__name__)

AUTH_STATUSES = (401, 403)
RATE_LIMIT_STATUSES = (429,)


def make_api_request(
    method: str,
    url: str,
    *,
    provider: str,
    timeout: float,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    json_body: dict[str, Any] | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Make an HTTP request with standardized provider error handling.

    Every failure mode is translated into a ProviderError whose ``kind``
    identifies it, so the search service never sees raw httpx exceptions.

    Args:
        method: HTTP method ("GET" or "POST")
        url: API endpoint URL
        provider: Provider name used in errors and logs (e.g. "brave")
        timeout: Request timeout in seconds
        headers: Request headers
        params: Query parameters
        json_body: JSON request body
        client: Optional shared httpx.Client. When None a short-lived client
                is opened and closed around the request.

    Returns:
        Parsed JSON response as dictionary

    Raises:
        ProviderError: On timeout, transport failure, non-2xx status or a
                       body that is not a JSON object
    """
    # Drop unset params so providers never see "None" strings
    if params is not None:
        params = {key: value for key, value in params.items() if value is not None}

    try:
        if client is not None:
            response = client.request(
                method, url, headers=headers, params=params, json=json_body, timeout=timeout
            )
        else:
            with httpx.Client(timeout=timeout) as owned_client:
                response = owned_client.request(
                    method, url, headers=headers, params=params, json=json_body
                )
    except httpx.TimeoutException as e:
        logger.error(f"Request timeout for {provider}", extra={"url": url, "timeout": timeout})
        raise ProviderError(
            f"request timed out after {timeout}s",
            kind=ProviderErrorKind.TIMEOUT,
            provider=provider,
        ) from e
    except httpx.HTTPError as e:
        logger.error(
            "Transport error during API request",
            extra={"provider": provider, "url": url, "error": str(e)},
        )
        raise ProviderError(
            str(e) or e.__class__.__name__,
            kind=ProviderErrorKind.NETWORK,
            provider=provider,
        ) from e

    status = response.status_code
    if status in AUTH_STATUSES:
        raise ProviderError(
            "authentication failed",
            kind=ProviderErrorKind.AUTH,
            provider=provider,
            status_code=status,
        )
    if status in RATE_LIMIT_STATUSES:
        raise ProviderError(
            "rate limit exceeded",
            kind=ProviderErrorKind.RATE_LIMIT,
            provider=provider,
            status_code=status,
        )
    if not response.is_success:
        logger.error(
            "HTTP error during API request",
            extra={"provider": provider, "url": url, "status": status},
        )
        raise ProviderError(
            f"unexpected response {response.reason_phrase or status}",
            kind=ProviderErrorKind.HTTP,
            provider=provider,
            status_code=status,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise ProviderError(
            "response body is not valid JSON",
            kind=ProviderErrorKind.HTTP,
            provider=provider,
            status_code=status,
        ) from e

    if not isinstance(data, dict):
        raise ProviderError(
            "response body is not a JSON object",
            kind=ProviderErrorKind.HTTP,
            provider=provider,
            status_code=status,
        )
    return data


def require_api_key(api_key: str, provider: str, env_var: str) -> str:
    """Return the API key or raise a NOT_CONFIGURED ProviderError."""
    if not api_key:
        logger.warning(f"{provider} API key not configured. Set {env_var} in .env file")
        raise ProviderError(
            f"{env_var} is not set",
            kind=ProviderErrorKind.NOT_CONFIGURED,
            provider=provider,
        )
    return api_key

"""Exceptions shared by the provider clients and the search service."""

from enum import StrEnum


class InputError(ValueError):
    """Raised when a request carries no usable query text."""


class ProviderErrorKind(StrEnum):
    """Why a call to a search provider failed."""

    TIMEOUT = "timeout"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    HTTP = "http"
    NETWORK = "network"
    NOT_CONFIGURED = "not_configured"


class ProviderError(Exception):
    """A downstream search call failed.

    Every failure of a provider (non-2xx status, timeout, transport error,
    missing credentials) is raised as this one type; ``kind`` tells them
    apart so callers can phrase the failure for the user.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ProviderErrorKind,
        provider: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.provider = provider
        self.status_code = status_code

    def __str__(self) -> str:
        status = f", status: {self.status_code}" if self.status_code is not None else ""
        return f"{self.provider} {self.kind.value} error: {self.args[0]}{status}"

"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


class ZendeskError(Exception):
    """Base class for every error raised by this package."""

    def __post_init__(self) -> None:
        # args mirror the dataclass fields in order so the error pickles.
        Exception.__init__(self, *(getattr(self, f.name) for f in fields(self)))


@dataclass(slots=True, eq=False)
class OptionsError(ZendeskError):
    """Raised when an options value cannot be encoded into a query string."""

    options: Any
    detail: str = "invalid options"

    def __str__(self) -> str:
        return f"{self.detail}: {self.options!r}"


@dataclass(slots=True, eq=False)
class ZendeskApiError(ZendeskError):
    """Raised when the Zendesk API returns a non-success response."""

    status_code: int
    method: str
    url: str
    response_text: str

    def __str__(self) -> str:
        return (
            f"Zendesk API error {self.status_code} for {self.method} {self.url}: "
            f"{self.response_text}"
        )


class UnauthorizedError(ZendeskApiError):
    """401/403: missing or rejected credentials."""


class NotFoundError(ZendeskApiError):
    """404: the addressed resource does not exist."""


class ValidationFailedError(ZendeskApiError):
    """400/422: the API rejected the request payload or parameters."""


class ServerError(ZendeskApiError):
    """5xx: the API failed to handle the request."""


@dataclass(slots=True, eq=False)
class RateLimitedError(ZendeskApiError):
    """429: the account hit its rate limit."""

    retry_after: float | None = None


@dataclass(slots=True, eq=False)
class TransportError(ZendeskError):
    """Raised when the request never produced an HTTP response."""

    method: str
    url: str
    detail: str

    def __str__(self) -> str:
        return f"{self.method} {self.url} failed: {self.detail}"


class TransportTimeoutError(TransportError):
    """The request did not complete before its deadline."""


@dataclass(slots=True, eq=False)
class DecodeError(ZendeskError):
    """Raised when a response body does not match the expected envelope."""

    envelope: str
    response_text: str
    detail: str

    def __str__(self) -> str:
        return f"cannot decode {self.envelope}: {self.detail}"


def _retry_after(headers: Any) -> float | None:
    raw = headers.get("retry-after") if headers is not None else None
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def error_for_response(
    *,
    status_code: int,
    method: str,
    url: str,
    response_text: str,
    headers: Any = None,
) -> ZendeskApiError:
    """Map a non-2xx response onto the matching error class."""
    if status_code == 429:
        return RateLimitedError(
            status_code=status_code,
            method=method,
            url=url,
            response_text=response_text,
            retry_after=_retry_after(headers),
        )
    if status_code in (401, 403):
        cls: type[ZendeskApiError] = UnauthorizedError
    elif status_code == 404:
        cls = NotFoundError
    elif status_code in (400, 422):
        cls = ValidationFailedError
    elif status_code >= 500:
        cls = ServerError
    else:
        cls = ZendeskApiError
    return cls(
        status_code=status_code,
        method=method,
        url=url,
        response_text=response_text,
    )

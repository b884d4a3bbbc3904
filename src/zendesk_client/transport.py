"""Async HTTP transport for the Zendesk API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel

from .errors import TransportError, TransportTimeoutError, error_for_response
from .settings import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """The four verbs endpoint methods are built on.

    Every verb returns the raw response body or raises.
    """

    async def get(self, url: str, *, timeout: float | None = None) -> bytes: ...

    async def post(self, url: str, body: Any = None, *, timeout: float | None = None) -> bytes: ...

    async def patch(
        self, url: str, body: Any = None, *, timeout: float | None = None
    ) -> bytes: ...

    async def delete(self, url: str, *, timeout: float | None = None) -> bytes: ...


def _json_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


class ZendeskTransport:
    """Thin wrapper around ``httpx.AsyncClient`` bound to one Zendesk account."""

    def __init__(
        self,
        *,
        base_url: str,
        email: str | None = None,
        api_token: str | None = None,
        oauth_token: str | None = None,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        auth: httpx.Auth | None = None
        headers = {"Accept": "application/json"}
        if oauth_token:
            headers["Authorization"] = f"Bearer {oauth_token}"
        elif email and api_token:
            auth = httpx.BasicAuth(f"{email}/token", api_token)

        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            auth=auth,
            headers=headers,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> ZendeskTransport:
        return cls(
            base_url=settings.base_url,
            email=settings.zendesk_email,
            api_token=settings.zendesk_api_token,
            oauth_token=settings.zendesk_oauth_token,
            timeout_seconds=settings.http_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> ZendeskTransport:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        timeout: float | None = None,
    ) -> bytes:
        """Send one request and return the response body unmodified.

        Relative URLs are joined to the base URL; absolute ones (such as a
        server supplied ``next_page``) are used verbatim. *timeout* bounds
        the whole exchange, on top of the client's per-phase timeouts.
        """
        method = method.upper()
        payload = _json_body(body)
        send = self._client.request(method, url, json=payload)
        try:
            if timeout is None:
                resp = await send
            else:
                resp = await asyncio.wait_for(send, timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise TransportTimeoutError(
                method=method, url=url, detail=str(exc) or "timed out"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(method=method, url=url, detail=str(exc)) from exc

        logger.debug("%s %s -> %s", method, resp.request.url, resp.status_code)
        if not resp.is_success:
            raise error_for_response(
                status_code=resp.status_code,
                method=method,
                url=str(resp.request.url),
                response_text=(resp.text or "").strip(),
                headers=resp.headers,
            )
        return resp.content

    async def get(self, url: str, *, timeout: float | None = None) -> bytes:
        return await self.request("GET", url, timeout=timeout)

    async def post(self, url: str, body: Any = None, *, timeout: float | None = None) -> bytes:
        return await self.request("POST", url, body=body, timeout=timeout)

    async def patch(self, url: str, body: Any = None, *, timeout: float | None = None) -> bytes:
        return await self.request("PATCH", url, body=body, timeout=timeout)

    async def delete(self, url: str, *, timeout: float | None = None) -> bytes:
        return await self.request("DELETE", url, timeout=timeout)

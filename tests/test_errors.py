from __future__ import annotations

import pickle
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager

import pytest

from zendesk_client.client import ZendeskClient
from zendesk_client.errors import (
    DecodeError,
    NotFoundError,
    OptionsError,
    RateLimitedError,
    TransportError,
    TransportTimeoutError,
    ZendeskApiError,
    error_for_response,
)

spans: list[str] = []


@contextmanager
def span(name: str) -> Iterator[None]:
    spans.append(name)
    try:
        yield
    finally:
        spans.pop()


@asynccontextmanager
async def async_span(name: str) -> AsyncIterator[None]:
    spans.append(name)
    try:
        yield
    finally:
        spans.pop()


async def test_decode_error_passes_through_context_managers(make_transport) -> None:
    client = ZendeskClient(make_transport(b"not json", b"not json"))

    with pytest.raises(DecodeError):
        with span("list"):
            await client.list_custom_object_records("book")

    with pytest.raises(DecodeError):
        async with async_span("list"):
            await client.list_custom_object_records("book")
    assert spans == []


@pytest.mark.parametrize(
    "error",
    [
        OptionsError(options={"query": "x"}, detail="bad"),
        DecodeError(envelope="ArticlesEnvelope", response_text="{}", detail="missing"),
        TransportError(method="GET", url="/x", detail="refused"),
        TransportTimeoutError(method="GET", url="/x", detail="timed out"),
        ZendeskApiError(status_code=409, method="PUT", url="/x", response_text="conflict"),
        NotFoundError(status_code=404, method="GET", url="/x", response_text="gone"),
        RateLimitedError(
            status_code=429, method="GET", url="/x", response_text="slow", retry_after=30.0
        ),
    ],
)
def test_errors_survive_context_managers_and_pickling(error: Exception) -> None:
    with pytest.raises(type(error)) as excinfo:
        with span("raise"):
            raise error
    assert excinfo.value is error
    assert excinfo.value.__traceback__ is not None

    restored = pickle.loads(pickle.dumps(error))
    assert type(restored) is type(error)
    assert str(restored) == str(error)
    assert restored.args == error.args


def test_error_args_follow_fields() -> None:
    err = error_for_response(
        status_code=429,
        method="GET",
        url="/x",
        response_text="slow",
        headers={"retry-after": "2"},
    )
    assert isinstance(err, RateLimitedError)
    assert err.args == (429, "GET", "/x", "slow", 2.0)
    assert pickle.loads(pickle.dumps(err)).retry_after == 2.0

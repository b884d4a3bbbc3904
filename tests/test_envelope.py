from __future__ import annotations

import pytest

from zendesk_client.envelope import decode, decode_cursor, decode_offset
from zendesk_client.errors import DecodeError
from zendesk_client.models import (
    ArticlesEnvelope,
    CustomObjectRecordEnvelope,
    CustomObjectRecordsEnvelope,
    SourcesByTarget,
)


def test_decode_offset_splits_items_and_page() -> None:
    body = (
        b'{"articles":[{"id":1,"title":"Hello"},{"id":2}],"count":2,'
        b'"next_page":"https://acme.zendesk.com/api/v2/help_center/articles.json?page=2",'
        b'"previous_page":null}'
    )
    articles, page = decode_offset(body, ArticlesEnvelope)
    assert [a.id for a in articles] == [1, 2]
    assert articles[0].title == "Hello"
    assert page.count == 2
    assert page.next_page == "https://acme.zendesk.com/api/v2/help_center/articles.json?page=2"
    assert page.previous_page is None


def test_decode_cursor_reads_nested_meta() -> None:
    body = (
        b'{"custom_object_records":[{"id":"1","custom_object_key":"book",'
        b'"custom_object_fields":{"title":"x","pages":310,"tags":["a"],"extra":null}}],'
        b'"meta":{"has_more":true,"after_cursor":"abc","before_cursor":"xyz"}}'
    )
    records, meta = decode_cursor(body, CustomObjectRecordsEnvelope)
    assert len(records) == 1
    assert records[0].custom_object_fields == {
        "title": "x",
        "pages": 310,
        "tags": ["a"],
        "extra": None,
    }
    assert list(records[0].custom_object_fields) == ["title", "pages", "tags", "extra"]
    assert meta.has_more is True
    assert meta.after_cursor == "abc"
    assert meta.before_cursor == "xyz"


def test_empty_list_without_meta_is_valid() -> None:
    records, meta = decode_cursor(b'{"custom_object_records":[]}', CustomObjectRecordsEnvelope)
    assert records == []
    assert meta.has_more is False
    assert meta.next_cursor is None


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b'{"articles": [',
        b"[]",
        b"{}",
        b'{"articles": {"id": 1}}',
        b'{"articles": [{"id": "not-a-number"}]}',
    ],
)
def test_bad_bodies_raise_decode_error(body: bytes) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_offset(body, ArticlesEnvelope)
    assert excinfo.value.envelope == "ArticlesEnvelope"


def test_decode_error_keeps_body_snippet() -> None:
    body = b'{"custom_object_record": 42}' + b" " * 1000
    with pytest.raises(DecodeError) as excinfo:
        decode(body, CustomObjectRecordEnvelope)
    assert excinfo.value.response_text.startswith('{"custom_object_record": 42}')
    assert excinfo.value.response_text.endswith("...")
    assert excinfo.value.__cause__ is not None


def test_sources_by_target_envelope() -> None:
    body = (
        b'{"users":[{"id":7,"name":"Ann"}],"count":1,"next_page":null,"previous_page":null}'
    )
    result = decode(body, SourcesByTarget)
    assert result.users == [{"id": 7, "name": "Ann"}]
    assert result.custom_object_records == []
    assert result.page.count == 1
    assert not result.page.has_next

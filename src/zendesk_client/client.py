"""Typed endpoint methods for the Zendesk API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

from .envelope import OffsetEnvelope, decode, decode_cursor, decode_offset
from .models import (
    Article,
    ArticlesEnvelope,
    AutocompleteSearchCustomObjectRecordsOptions,
    CustomObjectField,
    CustomObjectFieldsEnvelope,
    CustomObjectListOptions,
    CustomObjectRecord,
    CustomObjectRecordEnvelope,
    CustomObjectRecordsEnvelope,
    CustomObjectRecordsSearchEnvelope,
    CustomStatus,
    CustomStatusEnvelope,
    CustomStatusesEnvelope,
    CustomTicketStatusOptions,
    Requests,
    RequestsEnvelope,
    RequestsOptions,
    SearchCustomObjectRecordsOptions,
    SourcesByTarget,
    TicketListOptions,
)
from .options import PageOptions, add_options
from .pagination import CursorPaginationMeta, Page, iter_cursor, iter_offset
from .transport import Transport


@runtime_checkable
class ArticleAPI(Protocol):
    async def list_articles(
        self, opts: TicketListOptions | None = None
    ) -> tuple[list[Article], Page]: ...

    def iter_articles(self, opts: TicketListOptions | None = None) -> AsyncIterator[Article]: ...


@runtime_checkable
class SearchRequestsAPI(Protocol):
    async def search_requests(
        self, opts: RequestsOptions | None = None
    ) -> tuple[list[Requests], Page]: ...


@runtime_checkable
class CustomStatusAPI(Protocol):
    async def list_custom_ticket_statuses(
        self, opts: CustomTicketStatusOptions | None = None
    ) -> list[CustomStatus]: ...

    async def show_custom_ticket_status(self, custom_status_id: int) -> CustomStatus: ...


@runtime_checkable
class CustomObjectAPI(Protocol):
    async def create_custom_object_record(
        self, record: CustomObjectRecord, custom_object_key: str
    ) -> CustomObjectRecord: ...

    async def autocomplete_search_custom_object_records(
        self,
        custom_object_key: str,
        opts: AutocompleteSearchCustomObjectRecordsOptions | None = None,
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta]: ...

    async def search_custom_object_records(
        self,
        custom_object_key: str,
        opts: SearchCustomObjectRecordsOptions | None = None,
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta, int]: ...

    async def list_custom_object_records(
        self, custom_object_key: str, opts: CustomObjectListOptions | None = None
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta]: ...

    def iter_custom_object_records(
        self, custom_object_key: str, opts: CustomObjectListOptions | None = None
    ) -> AsyncIterator[CustomObjectRecord]: ...

    async def show_custom_object_record(
        self, custom_object_key: str, custom_object_record_id: str
    ) -> CustomObjectRecord: ...

    async def update_custom_object_record(
        self,
        custom_object_key: str,
        custom_object_record_id: str,
        record: CustomObjectRecord,
    ) -> CustomObjectRecord: ...

    async def get_sources_by_target(
        self,
        *,
        target_type: str,
        target_id: str,
        field_id: str,
        source_type: str,
        opts: PageOptions | None = None,
    ) -> tuple[SourcesByTarget, Page]: ...

    async def delete_custom_object_record(self, record: CustomObjectRecord) -> None: ...

    async def list_custom_object_fields(
        self, custom_object_key: str
    ) -> list[CustomObjectField]: ...


def _path_segment(value: str | None, name: str) -> str:
    """Return *value* escaped as a single path segment."""
    if not value:
        raise ValueError(f"{name!r} must be a non-empty string")
    return quote(value, safe="")


class ZendeskClient:
    """Implements every resource API on top of a single ``Transport``.

    The client keeps no state of its own, so one instance can be shared by
    concurrent tasks. Options passed in are never modified.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    # Help Center articles

    async def list_articles(
        self, opts: TicketListOptions | None = None
    ) -> tuple[list[Article], Page]:
        url = add_options("/help_center/articles.json", opts or TicketListOptions())
        return await self._get_offset(url, ArticlesEnvelope)

    def iter_articles(self, opts: TicketListOptions | None = None) -> AsyncIterator[Article]:
        """Iterate over every article, following ``next_page`` links."""
        url = add_options("/help_center/articles.json", opts or TicketListOptions())
        return iter_offset(lambda next_url: self._get_offset(next_url, ArticlesEnvelope), url)

    # Requests

    async def search_requests(
        self, opts: RequestsOptions | None = None
    ) -> tuple[list[Requests], Page]:
        url = add_options("/requests/search.json", opts or RequestsOptions())
        return await self._get_offset(url, RequestsEnvelope)

    # Custom ticket statuses

    async def list_custom_ticket_statuses(
        self, opts: CustomTicketStatusOptions | None = None
    ) -> list[CustomStatus]:
        url = add_options("/custom_statuses.json", opts or CustomTicketStatusOptions())
        body = await self._transport.get(url)
        return decode(body, CustomStatusesEnvelope).custom_statuses

    async def show_custom_ticket_status(self, custom_status_id: int) -> CustomStatus:
        body = await self._transport.get(f"/custom_statuses/{custom_status_id}")
        return decode(body, CustomStatusEnvelope).custom_status

    # Custom object records

    async def create_custom_object_record(
        self, record: CustomObjectRecord, custom_object_key: str
    ) -> CustomObjectRecord:
        key = _path_segment(custom_object_key, "custom_object_key")
        body = await self._transport.post(
            f"/custom_objects/{key}/records.json",
            CustomObjectRecordEnvelope(custom_object_record=record),
        )
        return decode(body, CustomObjectRecordEnvelope).custom_object_record

    async def list_custom_object_records(
        self, custom_object_key: str, opts: CustomObjectListOptions | None = None
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta]:
        key = _path_segment(custom_object_key, "custom_object_key")
        url = add_options(f"/custom_objects/{key}/records", opts or CustomObjectListOptions())
        body = await self._transport.get(url)
        return decode_cursor(body, CustomObjectRecordsEnvelope)

    def iter_custom_object_records(
        self, custom_object_key: str, opts: CustomObjectListOptions | None = None
    ) -> AsyncIterator[CustomObjectRecord]:
        """Iterate over every record, following ``after_cursor`` tokens."""
        base = opts or CustomObjectListOptions()

        async def fetch(
            cursor: str | None,
        ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta]:
            page_opts = base
            if cursor is not None:
                pagination = base.pagination.model_copy(
                    update={"page_after": cursor, "page_before": ""}
                )
                page_opts = base.model_copy(update={"pagination": pagination})
            return await self.list_custom_object_records(custom_object_key, page_opts)

        return iter_cursor(fetch)

    async def autocomplete_search_custom_object_records(
        self,
        custom_object_key: str,
        opts: AutocompleteSearchCustomObjectRecordsOptions | None = None,
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta]:
        key = _path_segment(custom_object_key, "custom_object_key")
        url = add_options(
            f"/custom_objects/{key}/records/autocomplete",
            opts or AutocompleteSearchCustomObjectRecordsOptions(),
        )
        body = await self._transport.get(url)
        return decode_cursor(body, CustomObjectRecordsEnvelope)

    async def search_custom_object_records(
        self,
        custom_object_key: str,
        opts: SearchCustomObjectRecordsOptions | None = None,
    ) -> tuple[list[CustomObjectRecord], CursorPaginationMeta, int]:
        """Search records; also returns the total ``count`` of matches."""
        key = _path_segment(custom_object_key, "custom_object_key")
        url = add_options(
            f"/custom_objects/{key}/records/search",
            opts or SearchCustomObjectRecordsOptions(),
        )
        body = await self._transport.get(url)
        result = decode(body, CustomObjectRecordsSearchEnvelope)
        return result.custom_object_records, result.meta, result.count

    async def show_custom_object_record(
        self, custom_object_key: str, custom_object_record_id: str
    ) -> CustomObjectRecord:
        key = _path_segment(custom_object_key, "custom_object_key")
        record_id = _path_segment(custom_object_record_id, "custom_object_record_id")
        body = await self._transport.get(f"/custom_objects/{key}/records/{record_id}")
        return decode(body, CustomObjectRecordEnvelope).custom_object_record

    async def update_custom_object_record(
        self,
        custom_object_key: str,
        custom_object_record_id: str,
        record: CustomObjectRecord,
    ) -> CustomObjectRecord:
        key = _path_segment(custom_object_key, "custom_object_key")
        record_id = _path_segment(custom_object_record_id, "custom_object_record_id")
        body = await self._transport.patch(
            f"/custom_objects/{key}/records/{record_id}",
            CustomObjectRecordEnvelope(custom_object_record=record),
        )
        return decode(body, CustomObjectRecordEnvelope).custom_object_record

    async def delete_custom_object_record(self, record: CustomObjectRecord) -> None:
        key = _path_segment(record.custom_object_key, "custom_object_key")
        record_id = _path_segment(record.id, "id")
        await self._transport.delete(f"/custom_objects/{key}/records/{record_id}")

    async def get_sources_by_target(
        self,
        *,
        target_type: str,
        target_id: str,
        field_id: str,
        source_type: str,
        opts: PageOptions | None = None,
    ) -> tuple[SourcesByTarget, Page]:
        """Return the source objects whose lookup field points at a target.

        The populated list of ``SourcesByTarget`` depends on *source_type*
        (``zen:user``, ``zen:ticket``, ``zen:organization`` or
        ``zen:custom_object:<key>``).
        """
        url = add_options(
            f"/{target_type}/{target_id}/relationship_fields/{field_id}/{source_type}",
            opts or PageOptions(),
        )
        body = await self._transport.get(url)
        result = decode(body, SourcesByTarget)
        return result, result.page

    # Custom object fields

    async def list_custom_object_fields(self, custom_object_key: str) -> list[CustomObjectField]:
        key = _path_segment(custom_object_key, "custom_object_key")
        body = await self._transport.get(f"/custom_objects/{key}/fields")
        return decode(body, CustomObjectFieldsEnvelope).custom_object_fields

    async def _get_offset(
        self, url: str, envelope: type[OffsetEnvelope]
    ) -> tuple[list[Any], Page]:
        body = await self._transport.get(url)
        return decode_offset(body, envelope)

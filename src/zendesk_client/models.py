"""Resource models, request options and response envelopes."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import BaseModel, Field, JsonValue

from .envelope import CursorEnvelope, OffsetEnvelope
from .options import KEEP_EMPTY, PageOptions, QueryOptions
from .pagination import CursorPagination


class Article(BaseModel):
    id: int | None = None
    url: str | None = None
    html_url: str | None = None
    title: str | None = None
    body: str | None = None
    locale: str | None = None
    source_locale: str | None = None
    author_id: int | None = None
    section_id: int | None = None
    permission_group_id: int | None = None
    user_segment_id: int | None = None
    position: int | None = None
    vote_count: int | None = None
    vote_sum: int | None = None
    comments_disabled: bool | None = None
    draft: bool | None = None
    outdated: bool | None = None
    promoted: bool | None = None
    outdated_locales: list[str] | None = None
    label_names: list[str] | None = None
    content_tag_ids: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    edited_at: datetime | None = None


class CustomField(BaseModel):
    id: int
    value: JsonValue = None


class RequestsViaSource(BaseModel):
    from_: JsonValue = Field(default=None, alias="from")
    to: JsonValue = None
    rel: str | None = None


class RequestsVia(BaseModel):
    channel: str | None = None
    source: RequestsViaSource | None = None


class RequestsField(BaseModel):
    id: int
    value: JsonValue = None


class Requests(BaseModel):
    """An end-user ticket request."""

    id: int | None = None
    url: str | None = None
    status: str | None = None
    priority: str | None = None
    type: str | None = None
    subject: str | None = None
    description: str | None = None
    organization_id: int | None = None
    via: RequestsVia | None = None
    custom_fields: list[CustomField] | None = None
    requester_id: int | None = None
    collaborator_ids: list[int] | None = None
    email_cc_ids: list[int] | None = None
    is_public: bool | None = None
    due_at: datetime | None = None
    can_be_solved_by_me: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    recipient: str | None = None
    followup_source_id: int | None = None
    assignee_id: int | None = None
    ticket_form_id: int | None = None
    custom_status_id: int | None = None
    fields: list[RequestsField] | None = None


class CustomStatus(BaseModel):
    id: int
    status_category: str | None = None
    agent_label: str | None = None
    raw_agent_label: str | None = None
    end_user_label: str | None = None
    raw_end_user_label: str | None = None
    description: str | None = None
    raw_description: str | None = None
    end_user_description: str | None = None
    raw_end_user_description: str | None = None
    active: bool = False
    default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomObjectField(BaseModel):
    id: int
    key: str
    type: str | None = None
    title: str | None = None
    raw_title: str | None = None
    description: str | None = None
    raw_description: str | None = None
    position: int | None = None
    active: bool = False
    system: bool = False
    regexp_for_validation: JsonValue = None
    url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomObjectRecord(BaseModel):
    """A record of an end-user defined custom object.

    ``custom_object_fields`` maps field keys to arbitrary JSON values and is
    required by the API when creating or updating a record.
    """

    id: str | None = None
    url: str | None = None
    name: str | None = None
    external_id: str | None = None
    custom_object_key: str = ""
    custom_object_fields: dict[str, JsonValue] = Field(default_factory=dict)
    created_by_user_id: str | None = None
    updated_by_user_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Options


class TicketListOptions(QueryOptions):
    page: PageOptions = Field(default_factory=PageOptions)
    sort_by: str = Field(default="", alias="sort_by")
    sort_order: str = Field(default="", alias="sort_order")


class SearchOptions(QueryOptions):
    page: PageOptions = Field(default_factory=PageOptions)
    query: Annotated[str, KEEP_EMPTY] = Field(default="", alias="query")
    sort_by: str = Field(default="", alias="sort_by")
    sort_order: str = Field(default="", alias="sort_order")


class RequestsOptions(QueryOptions):
    """Parameters of the requests search endpoint."""

    search: SearchOptions = Field(default_factory=SearchOptions)
    organization_id: Annotated[int, KEEP_EMPTY] = Field(default=0, alias="organization_id")


class CustomObjectListOptions(QueryOptions):
    pagination: CursorPagination = Field(default_factory=CursorPagination)
    ids: str = Field(default="", alias="filter[ids]")
    external_ids: str = Field(default="", alias="filter[external_ids]")


class AutocompleteSearchCustomObjectRecordsOptions(QueryOptions):
    name: str = Field(default="", alias="name")
    pagination: CursorPagination = Field(default_factory=CursorPagination)


class SearchCustomObjectRecordsOptions(QueryOptions):
    pagination: CursorPagination = Field(default_factory=CursorPagination)
    # One of name, created_at, updated_at, optionally prefixed with "-" for
    # descending order. Relevance when empty.
    sort: str = Field(default="", alias="sort")
    query: str = Field(default="", alias="query")
    external_id: str = Field(default="", alias="external_id")


class CustomTicketStatusOptions(QueryOptions):
    active: bool = Field(default=False, alias="active")
    default: bool = Field(default=False, alias="default")
    status_categories: str = Field(default="", alias="status_categories")


# Envelopes


class ArticlesEnvelope(OffsetEnvelope):
    items_field: ClassVar[str] = "articles"
    articles: list[Article]


class RequestsEnvelope(OffsetEnvelope):
    items_field: ClassVar[str] = "requests"
    requests: list[Requests]


class CustomObjectRecordsEnvelope(CursorEnvelope):
    items_field: ClassVar[str] = "custom_object_records"
    custom_object_records: list[CustomObjectRecord]


class CustomObjectRecordsSearchEnvelope(CustomObjectRecordsEnvelope):
    count: int = 0


class CustomObjectRecordEnvelope(BaseModel):
    custom_object_record: CustomObjectRecord


class CustomObjectFieldsEnvelope(BaseModel):
    custom_object_fields: list[CustomObjectField]


class CustomStatusesEnvelope(BaseModel):
    custom_statuses: list[CustomStatus]


class CustomStatusEnvelope(BaseModel):
    custom_status: CustomStatus


class SourcesByTarget(OffsetEnvelope):
    """Sources of a lookup relationship, keyed by source type.

    Only the list matching the requested source type is populated.
    """

    items_field: ClassVar[str] = "custom_object_records"
    custom_object_records: list[CustomObjectRecord] = Field(default_factory=list)
    users: list[dict[str, JsonValue]] = Field(default_factory=list)
    organizations: list[dict[str, JsonValue]] = Field(default_factory=list)
    tickets: list[dict[str, JsonValue]] = Field(default_factory=list)

"""Decoding of JSON response envelopes."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, Field, ValidationError

from .errors import DecodeError
from .pagination import CursorPaginationMeta, Page

E = TypeVar("E", bound=BaseModel)

_SNIPPET_LIMIT = 500


class OffsetEnvelope(BaseModel):
    """Item array with ``count``/``next_page``/``previous_page`` as siblings.

    Subclasses declare the array field and name it in ``items_field``.
    """

    items_field: ClassVar[str]

    count: int | None = None
    next_page: str | None = None
    previous_page: str | None = None

    @property
    def items(self) -> list[Any]:
        return getattr(self, self.items_field)

    @property
    def page(self) -> Page:
        return Page(
            count=self.count or 0,
            next_page=self.next_page,
            previous_page=self.previous_page,
        )


class CursorEnvelope(BaseModel):
    """Item array with cursor state nested under ``meta``."""

    items_field: ClassVar[str]

    meta: CursorPaginationMeta = Field(default_factory=CursorPaginationMeta)

    @property
    def items(self) -> list[Any]:
        return getattr(self, self.items_field)


def _snippet(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace")
    if len(text) > _SNIPPET_LIMIT:
        return text[:_SNIPPET_LIMIT] + "..."
    return text


def decode(body: bytes, envelope: type[E]) -> E:
    """Validate *body* against *envelope*.

    Malformed JSON and shape mismatches both raise ``DecodeError``.
    """
    try:
        return envelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            envelope=envelope.__name__,
            response_text=_snippet(body),
            detail=str(exc),
        ) from exc


def decode_offset(body: bytes, envelope: type[OffsetEnvelope]) -> tuple[list[Any], Page]:
    result = decode(body, envelope)
    return result.items, result.page


def decode_cursor(
    body: bytes, envelope: type[CursorEnvelope]
) -> tuple[list[Any], CursorPaginationMeta]:
    result = decode(body, envelope)
    return result.items, result.meta

"""Query options and their URL encoding."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from .errors import OptionsError


class _KeepEmpty:
    def __repr__(self) -> str:
        return "KEEP_EMPTY"


# Annotated marker: emit the field even when it holds its zero value.
KEEP_EMPTY = _KeepEmpty()


class QueryOptions(BaseModel):
    """Base for option bags translated into URL query parameters.

    The query key of each field is its alias (or its name when it has none).
    Fields whose type is another ``QueryOptions`` are option groups and are
    flattened into the parent's query string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class PageOptions(QueryOptions):
    """Offset pagination request parameters."""

    page: int = Field(default=0, ge=0, alias="page")
    per_page: int = Field(default=0, ge=0, alias="per_page")


def _is_zero(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return not value
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, Enum):
        return value == 0
    return False


def _encode_scalar(value: Any) -> str | None:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _walk(root: BaseModel, options: BaseModel, pairs: list[tuple[str, str]]) -> None:
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if isinstance(value, BaseModel):
            _walk(root, value, pairs)
            continue
        if _is_zero(value) and KEEP_EMPTY not in field.metadata:
            continue

        key = field.alias or name
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            encoded = _encode_scalar(item)
            if encoded is None:
                raise OptionsError(
                    options=root,
                    detail=f"cannot encode field {name!r} of type {type(item).__name__}",
                )
            pairs.append((key, encoded))


def encode_options(options: Any) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` query pairs for *options*, sorted by key."""
    if not isinstance(options, BaseModel):
        raise OptionsError(
            options=options,
            detail=f"options must be a model, got {type(options).__name__}",
        )
    pairs: list[tuple[str, str]] = []
    _walk(options, options, pairs)
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def add_options(path: str, options: Any) -> str:
    """Append the encoded *options* to *path*.

    ``None`` and options with every field at its zero value leave *path*
    untouched.
    """
    if options is None:
        return path
    pairs = encode_options(options)
    if not pairs:
        return path
    # Bracketed keys such as page[after] are sent literally.
    query = urlencode(pairs, safe="[]")
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{query}"

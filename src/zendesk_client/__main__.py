"""CLI entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import AsyncIterator, Sequence

import httpx
from pydantic import BaseModel, ValidationError

from .client import ZendeskClient
from .errors import ZendeskError
from .models import (
    CustomObjectListOptions,
    CustomTicketStatusOptions,
    SearchCustomObjectRecordsOptions,
)
from .pagination import CursorPagination
from .settings import Settings
from .transport import ZendeskTransport

logger = logging.getLogger("zendesk_client")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zendesk-client",
        description="Query a Zendesk account and print one JSON document per line.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    articles = sub.add_parser("articles", help="list Help Center articles")
    articles.add_argument("--all", action="store_true", help="follow every next_page link")

    records = sub.add_parser("records", help="list custom object records")
    records.add_argument("key", help="custom object key")
    records.add_argument("--page-size", type=int, default=0)
    records.add_argument("--all", action="store_true", help="follow every cursor")

    search = sub.add_parser("search-records", help="search custom object records")
    search.add_argument("key", help="custom object key")
    search.add_argument("--query", required=True)
    search.add_argument("--sort", default="")

    fields = sub.add_parser("fields", help="list custom object fields")
    fields.add_argument("key", help="custom object key")

    statuses = sub.add_parser("statuses", help="list custom ticket statuses")
    statuses.add_argument("--active", action="store_true")
    return parser


def _emit(item: BaseModel) -> None:
    sys.stdout.write(item.model_dump_json(exclude_none=True) + "\n")


async def _drain(items: AsyncIterator[BaseModel]) -> None:
    async for item in items:
        _emit(item)


async def _run(args: argparse.Namespace, client: ZendeskClient) -> None:
    if args.command == "articles":
        if args.all:
            await _drain(client.iter_articles())
            return
        articles, page = await client.list_articles()
        for article in articles:
            _emit(article)
        if page.has_next:
            logger.info("more articles at %s", page.next_page)

    elif args.command == "records":
        opts = CustomObjectListOptions(pagination=CursorPagination(page_size=args.page_size))
        if args.all:
            await _drain(client.iter_custom_object_records(args.key, opts))
            return
        records, meta = await client.list_custom_object_records(args.key, opts)
        for record in records:
            _emit(record)
        if meta.next_cursor:
            logger.info("more records after cursor %s", meta.next_cursor)

    elif args.command == "search-records":
        search_opts = SearchCustomObjectRecordsOptions(query=args.query, sort=args.sort)
        records, _meta, count = await client.search_custom_object_records(args.key, search_opts)
        logger.info("%d matching records", count)
        for record in records:
            _emit(record)

    elif args.command == "fields":
        for field in await client.list_custom_object_fields(args.key):
            _emit(field)

    elif args.command == "statuses":
        status_opts = CustomTicketStatusOptions(active=args.active)
        for status in await client.list_custom_ticket_statuses(status_opts):
            _emit(status)


async def _main(
    args: argparse.Namespace,
    settings: Settings,
    http_transport: httpx.AsyncBaseTransport | None,
) -> None:
    async with ZendeskTransport.from_settings(settings, transport=http_transport) as transport:
        await _run(args, ZendeskClient(transport))


def main(
    argv: Sequence[str] | None = None,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    args = _parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(_main(args, settings, http_transport))
    except ZendeskError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

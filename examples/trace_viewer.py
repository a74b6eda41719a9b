#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from tracewindow import (
    PAGE_SIZE_OPTIONS,
    EngineConfig,
    ODataPageFetcher,
    TraceFilters,
    TraceWindow,
    ViewSnapshot,
)
from tracewindow.core.messages import LOADING, NO_RECORDS_FOUND


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Browse plug-in trace logs page by page")
    p.add_argument("url", help="Organization URL, e.g. https://org.crm.dynamics.com")
    p.add_argument("--token", default=os.environ.get("TRACEWINDOW_ACCESS_TOKEN"))
    p.add_argument("--type-name", default="")
    p.add_argument("--message", default="")
    p.add_argument("--page-size", type=int, default=25, choices=PAGE_SIZE_OPTIONS)
    p.add_argument("--pages", type=int, default=3, help="Pages to step through")
    p.add_argument("--last", action="store_true", help="Jump to the last page at the end")
    p.add_argument("--live", type=int, default=0, help="Watch live refresh for N seconds")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


def render(snapshot: ViewSnapshot) -> None:
    if snapshot.placeholder:
        print(LOADING)
        return
    if snapshot.error:
        print(f"[error] {snapshot.error}")
        return
    if not snapshot.total_records:
        print(NO_RECORDS_FOUND)
        return
    print("=" * 65)
    print(f"Page {snapshot.current_page} {snapshot.page_label}  ({snapshot.range_label})")
    print("-" * 65)
    for record in snapshot.records:
        created = str(record.get("createdon") or "")
        type_name = str(record.get("typename") or "")
        message = str(record.get("messagename") or "")
        print(f"{created:25} | {message:12} | {type_name}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    filters = TraceFilters(type_name=args.type_name, message_content=args.message)
    config = EngineConfig(default_page_size=args.page_size)

    async with ODataPageFetcher(args.url, access_token=args.token) as fetcher:
        async with TraceWindow(fetcher, config=config, filters=filters, renderer=render) as view:
            for _ in range(args.pages - 1):
                if not await view.change_page(1):
                    break
            if args.last:
                await view.go_to_last_page()
            if args.live > 0:
                await view.set_live_enabled(True)
                await asyncio.sleep(args.live)
                await view.set_live_enabled(False)


if __name__ == "__main__":
    asyncio.run(main())

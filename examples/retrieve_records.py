#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from managed_records import RecordsAPI, get_settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Retrieve one page of managed records")
    p.add_argument("--page", type=int, default=1)
    p.add_argument(
        "--color", dest="colors", action="append", default=[], help="Repeat for several colors"
    )
    p.add_argument("--base-url", default=None, help="Defaults to MANAGED_RECORDS_BASE_URL")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    base_url = args.base_url or get_settings().base_url
    async with RecordsAPI(base_url=base_url) as api:
        result = await api.retrieve(page=args.page, colors=args.colors)

    print("=" * 65)
    print(f"Endpoint   : {base_url}")
    print(f"Page       : {args.page}  colors={args.colors or 'any'}")
    print(f"Status     : {result.status.value}")
    print("=" * 65)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    asyncio.run(main())

#!/usr/bin/env python3
"""
Query the ShopSavvy Data API from the terminal.

The API key is read from --api-key, SHOPSAVVY_API_KEY or a .env file:
  python scripts/shopsavvy_lookup.py search "iphone 15 pro" --limit 5
  python scripts/shopsavvy_lookup.py product 012345678901 B08N5WRWNW
  python scripts/shopsavvy_lookup.py offers 012345678901 --retailer amazon
  python scripts/shopsavvy_lookup.py history 012345678901 2024-01-01 2024-01-31
  python scripts/shopsavvy_lookup.py usage
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import BaseModel

from shopsavvy import Config, ShopSavvyClient, ShopSavvyError


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the ShopSavvy Data API")
    parser.add_argument("--api-key", help="API key (defaults to SHOPSAVVY_API_KEY)")
    parser.add_argument("--base-url", help="Override the API base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search products by keyword")
    search.add_argument("query")
    search.add_argument("--limit", type=int)
    search.add_argument("--offset", type=int)

    product = sub.add_parser("product", help="Product details for one or more identifiers")
    product.add_argument("identifiers", nargs="+")

    offers = sub.add_parser("offers", help="Current offers for one or more identifiers")
    offers.add_argument("identifiers", nargs="+")
    offers.add_argument("--retailer")

    history = sub.add_parser("history", help="Price history for an identifier")
    history.add_argument("identifier")
    history.add_argument("start_date", help="YYYY-MM-DD")
    history.add_argument("end_date", help="YYYY-MM-DD")
    history.add_argument("--retailer")

    sub.add_parser("scheduled", help="List products scheduled for monitoring")
    sub.add_parser("usage", help="Credit usage for the current billing period")
    return parser


def load_client_config(args: argparse.Namespace) -> Config:
    config = Config.from_env()
    if args.api_key:
        config = config.with_api_key(args.api_key)
    if args.base_url is not None:
        config = config.with_base_url(args.base_url)
    if args.timeout is not None:
        config = config.with_timeout(args.timeout)
    return config


async def run_command(client: ShopSavvyClient, args: argparse.Namespace) -> BaseModel:
    if args.command == "search":
        return await client.search_products(args.query, limit=args.limit, offset=args.offset)
    if args.command == "product":
        return await client.get_product_details_batch(args.identifiers)
    if args.command == "offers":
        return await client.get_current_offers_batch(args.identifiers, retailer=args.retailer)
    if args.command == "history":
        return await client.get_price_history(
            args.identifier, args.start_date, args.end_date, retailer=args.retailer
        )
    if args.command == "scheduled":
        return await client.get_scheduled_products()
    return await client.get_usage()


async def run(args: argparse.Namespace) -> int:
    try:
        async with ShopSavvyClient(load_client_config(args)) as client:
            result = await run_command(client, args)
    except ShopSavvyError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=2, by_alias=True))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())

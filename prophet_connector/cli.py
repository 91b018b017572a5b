"""Command-line interface for the Alpha Vantage and SEC EDGAR connectors."""

import argparse
import asyncio
import json
import logging
import sys

import httpx
from pydantic import ValidationError

from prophet_connector.alpha_vantage import DataType, OutputSize, generate_url
from prophet_connector.client import (
    DEFAULT_TAG,
    DEFAULT_TAXONOMY,
    DEFAULT_UNIT,
    SECClient,
)
from prophet_connector.models import MonthSelection, TimeSeriesQuery


def parse_month(value: str) -> MonthSelection:
    """Parse a YYYY-MM string into a MonthSelection."""
    year, sep, month = value.partition("-")
    if not sep or len(year) != 4 or len(month) != 2:
        raise argparse.ArgumentTypeError(f"Invalid month: {value} (expected YYYY-MM)")
    return MonthSelection(year=year, month=month)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build Alpha Vantage query URLs and fetch SEC EDGAR documents"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Print an Alpha Vantage query URL")
    url_parser.add_argument("--function", required=True, help="Function (e.g., TIME_SERIES_INTRADAY)")
    url_parser.add_argument("--symbol", required=True, help="Ticker symbol (e.g., IBM)")
    url_parser.add_argument("--interval", required=True, help="Interval (e.g., 5min)")
    url_parser.add_argument(
        "--outputsize",
        choices=[size.value for size in OutputSize],
        help="Output size"
    )
    url_parser.add_argument(
        "--datatype",
        choices=[data_type.value for data_type in DataType],
        help="Response format"
    )
    url_parser.add_argument("--month", type=parse_month, help="Month to query (YYYY-MM)")
    url_parser.add_argument(
        "--no-adjusted",
        dest="adjusted",
        action="store_false",
        default=None,
        help="Request raw (unadjusted) prices"
    )
    url_parser.add_argument(
        "--no-extend-hours",
        dest="extend_hours",
        action="store_false",
        default=None,
        help="Exclude pre- and post-market hours"
    )

    submission_parser = subparsers.add_parser("submission", help="Fetch an entity's filing history")
    submission_parser.add_argument("cik", help="CIK number (e.g., 0001018724)")

    concept_parser = subparsers.add_parser("concept", help="Fetch an entity's XBRL concept disclosures")
    concept_parser.add_argument("cik", help="CIK number")
    concept_parser.add_argument("--taxonomy", default=DEFAULT_TAXONOMY)
    concept_parser.add_argument("--tag", default=DEFAULT_TAG)

    facts_parser = subparsers.add_parser("facts", help="Fetch all of an entity's XBRL facts")
    facts_parser.add_argument("cik", help="CIK number")

    frames_parser = subparsers.add_parser("frames", help="Fetch aggregated XBRL frame data")
    frames_parser.add_argument("year", type=int, help="Calendar year")
    frames_parser.add_argument("quarter", type=int, choices=[1, 2, 3, 4], help="Calendar quarter")
    frames_parser.add_argument("--taxonomy", default=DEFAULT_TAXONOMY)
    frames_parser.add_argument("--tag", default=DEFAULT_TAG)
    frames_parser.add_argument("--unit", default=DEFAULT_UNIT)

    return parser


def run_url(args: argparse.Namespace) -> None:
    try:
        query = TimeSeriesQuery(
            function=args.function,
            symbol=args.symbol,
            interval=args.interval,
            adjusted=args.adjusted,
            extend_hours=args.extend_hours,
            month=args.month,
            outputsize=args.outputsize,
            datatype=args.datatype,
        )
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    url = generate_url(query.to_params())
    if not url:
        print("Error: Could not generate URL from the given parameters", file=sys.stderr)
        sys.exit(1)

    print(url)


async def fetch_document(args: argparse.Namespace, client: SECClient):
    """Dispatch a fetch subcommand to the matching SECClient call."""
    if args.command == "submission":
        return await client.fetch_submission(args.cik)
    if args.command == "concept":
        return await client.fetch_company_concept(args.cik, args.taxonomy, args.tag)
    if args.command == "facts":
        return await client.fetch_company_facts(args.cik)
    return await client.fetch_frames(args.year, args.quarter, args.taxonomy, args.tag, args.unit)


def main(argv: list[str] | None = None, client: SECClient | None = None) -> None:
    """
    Main CLI entry point.

    Usage:
        python -m prophet_connector.cli url --function TIME_SERIES_DAILY --symbol IBM --interval 5min
        python -m prophet_connector.cli submission 0001018724
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "url":
        run_url(args)
        return

    if client is None:
        client = SECClient()

    try:
        document = asyncio.run(fetch_document(args, client))
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code} from {e.request.url}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        # Non-JSON response body
        print(f"Error: Invalid JSON response: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(document, indent=2))


if __name__ == "__main__":
    main()

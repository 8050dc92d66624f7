"""WTR CLI entry points.
This module exposes commands for downloading, filtering, and inspecting
the licence register. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from cli.validate_command import add_validate_command, run_validate_command
from core.config import WtrConfig
from store.licence_filters import filter_companies, filter_point_to_point, filter_product_codes
from store.register_sdk import WtrClient

STDOUT_TARGET = "-"


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="wtr", description="Wireless Telegraphy Register CLI")
    parser.add_argument("--data-root", help="Override WTR_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_download_command(subparsers)
    _add_filter_command(subparsers)
    _add_companies_command(subparsers)
    add_validate_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the WTR CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.data_root)
    if args.command == "download":
        return _run_download_command(client, args)
    if args.command == "filter":
        return _run_filter_command(client, args)
    if args.command == "companies":
        return _run_companies_command(client, args)
    if args.command == "validate":
        return run_validate_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None) -> WtrClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    client = WtrClient(WtrConfig.from_env())
    if data_root:
        return client.with_data_root(data_root)
    return client


def _run_download_command(client: WtrClient, args: argparse.Namespace) -> int:
    """Handle download command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    register_path = client.download(force=args.force)
    print(register_path)
    return 0


def _run_filter_command(client: WtrClient, args: argparse.Namespace) -> int:
    """Handle filter command.

    Each requested predicate narrows the loaded collection in place,
    so combining options intersects them.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    collection = client.load(args.source)
    if args.product_codes:
        collection.filter_in_place(filter_product_codes(*args.product_codes))
    if args.companies:
        collection.filter_in_place(filter_companies(*args.companies))
    if args.point_to_point:
        collection.filter_in_place(filter_point_to_point)
    if args.output == STDOUT_TARGET:
        collection.write_csv(sys.stdout)
        print(f"row_count={len(collection)}", file=sys.stderr)
        return 0
    output_path = collection.save_csv(args.output)
    print(f"output_path={output_path}")
    print(f"row_count={len(collection)}")
    return 0


def _run_companies_command(client: WtrClient, args: argparse.Namespace) -> int:
    """Handle companies command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    collection = client.load(args.source)
    for company, row_count in collection.count_by_company().items():
        print(f"{company}\t{row_count}")
    return 0


def _add_download_command(subparsers: Any) -> None:
    """Register download subcommand."""
    parser = subparsers.add_parser("download", help="Download the published register CSV")
    parser.add_argument("--force", action="store_true", help="Replace an existing local copy")


def _add_filter_command(subparsers: Any) -> None:
    """Register filter subcommand."""
    parser = subparsers.add_parser("filter", help="Write a filtered register CSV")
    parser.add_argument("source", nargs="?", help="Register CSV path or s3://bucket/key")
    parser.add_argument(
        "--output",
        required=True,
        help="Output CSV path, or '-' for standard output",
    )
    parser.add_argument(
        "--product-code",
        dest="product_codes",
        action="append",
        default=[],
        help="Keep rows with this product code (repeatable)",
    )
    parser.add_argument(
        "--company",
        dest="companies",
        action="append",
        default=[],
        help="Keep rows licensed to this company (repeatable)",
    )
    parser.add_argument(
        "--point-to-point",
        action="store_true",
        help="Keep point-to-point fixed link rows only",
    )


def _add_companies_command(subparsers: Any) -> None:
    """Register companies subcommand."""
    parser = subparsers.add_parser("companies", help="List licencee companies with row counts")
    parser.add_argument("source", nargs="?", help="Register CSV path or s3://bucket/key")

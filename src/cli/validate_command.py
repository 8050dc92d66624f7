"""Validate command wiring for WTR CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.errors import WtrValidationError
from store.register_sdk import WtrClient


def add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser(
        "validate",
        help="Check register product codes against the code table",
    )
    parser.add_argument("source", nargs="?", help="Register CSV path or s3://bucket/key")
    parser.add_argument(
        "--require-all-codes",
        action="store_true",
        help="Fail when a known product code is not used by any licence",
    )


def run_validate_command(client: WtrClient, args: argparse.Namespace) -> int:
    """Execute product code validation and print the coverage report."""
    collection = client.load(args.source)
    try:
        report = client.validate(collection, require_all_known=args.require_all_codes)
    except WtrValidationError as error:
        print(f"validation_error={error}")
        return 1
    print(f"row_count={report.row_count}")
    for product_code, count in sorted(report.code_counts.items()):
        print(f"{product_code}\t{count}")
    print(f"unused_codes={','.join(report.unused_codes) or '-'}")
    return 0

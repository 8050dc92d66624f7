"""Known licence product codes.

This module holds the product code lookup table used to check register
integrity. A deployment can replace the bundled table with a CSV file
of ``code,description`` pairs through ``WTR_PRODUCT_CODES_PATH``.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Mapping

from core.config import WtrConfig
from core.constants import PRODUCT_CODE_LENGTH
from core.errors import WtrConfigError

DEFAULT_PRODUCT_CODES: Mapping[str, str] = {
    "301010": "Point to Point Fixed Links",
    "302010": "Scanning Telemetry",
    "303010": "Self Co-ordinated Links",
    "401010": "Business Radio Technically Assigned",
    "402010": "Business Radio Area Defined",
    "403010": "Business Radio Suppliers Light",
    "501010": "Maritime Coast Station",
    "601010": "Aeronautical Ground Station",
    "701010": "Satellite Permanent Earth Station",
    "801010": "Spectrum Access",
}


def get_product_codes(config: WtrConfig) -> dict[str, str]:
    """Return the product code table for this runtime.

    Args:
        config: Runtime config with an optional table override path.

    Returns:
        Mapping of product code to description.

    Raises:
        WtrConfigError: If the override file is missing or malformed.
    """
    if config.product_codes_path is None:
        return dict(DEFAULT_PRODUCT_CODES)
    return load_product_codes(config.product_codes_path)


def load_product_codes(path: Path) -> dict[str, str]:
    """Load a ``code,description`` table from CSV.

    Args:
        path: Table file path. A header row starting with ``code`` is skipped.

    Returns:
        Mapping of product code to description.

    Raises:
        WtrConfigError: If the file cannot be read or a row is invalid.
    """
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            table_rows = list(csv.reader(handle))
    except OSError as error:
        raise WtrConfigError(
            f"Failed to read product code table at {path}: {error}. "
            "Fix WTR_PRODUCT_CODES_PATH or unset it to use the bundled table."
        ) from error
    codes: dict[str, str] = {}
    for line_number, table_row in enumerate(table_rows, 1):
        if not table_row or (line_number == 1 and table_row[0].strip().lower() == "code"):
            continue
        codes[_parse_code(path, line_number, table_row)] = table_row[1].strip()
    if not codes:
        raise WtrConfigError(
            f"Product code table at {path} is empty. Add code,description rows."
        )
    return codes


def _parse_code(path: Path, line_number: int, table_row: list[str]) -> str:
    """Validate one product code table row and return its code."""
    code = table_row[0].strip()
    if len(table_row) != 2 or len(code) != PRODUCT_CODE_LENGTH or not table_row[1].strip():
        raise WtrConfigError(
            f"Invalid product code table row at {path}:{line_number}: "
            f"expected a {PRODUCT_CODE_LENGTH}-character code and a description."
        )
    return code

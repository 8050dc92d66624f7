"""Product code integrity checks.

This module verifies that every licence row carries a well-formed,
known product code with a description, and reports code coverage.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import PRODUCT_CODE_LENGTH
from core.errors import WtrValidationError
from core.logging_config import get_logger
from core.types import LicenceRow, ProductCodeReport
from store.licence_collection import LicenceCollection

_LOGGER = get_logger(__name__)


def validate_product_codes(
    collection: LicenceCollection,
    known_codes: Mapping[str, str],
    require_all_known: bool = False,
) -> ProductCodeReport:
    """Check product codes across a collection.

    Args:
        collection: Rows to check.
        known_codes: Product code lookup table.
        require_all_known: Fail when a known code never appears.

    Returns:
        Coverage report for the collection.

    Raises:
        WtrValidationError: On the first invalid row, or on unused known
            codes when ``require_all_known`` is set.
    """
    for row_number, row in enumerate(collection, 1):
        _check_row(row_number, row, known_codes)
    code_counts = collection.count_by_product_code()
    unused_codes = tuple(sorted(code for code in known_codes if code not in code_counts))
    if require_all_known and unused_codes:
        raise WtrValidationError(
            f"Known product codes not used by any licence: {', '.join(unused_codes)}. "
            "Update the product code table or check the register snapshot."
        )
    report = ProductCodeReport(
        row_count=len(collection),
        code_counts=code_counts,
        unused_codes=unused_codes,
    )
    _LOGGER.info(
        "product_codes_validated",
        row_count=report.row_count,
        distinct_codes=len(code_counts),
        unused_codes=list(unused_codes),
    )
    return report


def _check_row(row_number: int, row: LicenceRow, known_codes: Mapping[str, str]) -> None:
    """Raise when one row breaks a product code rule."""
    product_code = row.product_code
    if len(product_code) != PRODUCT_CODE_LENGTH:
        raise WtrValidationError(
            f"Incorrect product code length at row {row_number} "
            f"(licence {row.licence_number}): '{product_code}' is not "
            f"{PRODUCT_CODE_LENGTH} characters."
        )
    if product_code not in known_codes:
        raise WtrValidationError(
            f"Unknown product code at row {row_number} "
            f"(licence {row.licence_number}): '{product_code}'. "
            "Add it to the product code table if the register introduced it."
        )
    if not row.product_description:
        raise WtrValidationError(
            f"Missing product description at row {row_number} "
            f"(licence {row.licence_number})."
        )

"""Licence row predicate builders.

This module builds membership predicates used by collection filters.
Each builder freezes its arguments into a set once per call so
filtering cost stays linear in row count.
"""

from __future__ import annotations

from core.constants import POINT_TO_POINT_PRODUCT_CODES
from core.types import LicencePredicate, LicenceRow


def filter_product_codes(*codes: str) -> LicencePredicate:
    """Build a predicate matching rows with any of the given product codes.

    Args:
        codes: Exact, case-sensitive product codes.

    Returns:
        Predicate over licence rows.
    """
    wanted_codes = frozenset(codes)

    def _matches(row: LicenceRow) -> bool:
        return row.product_code in wanted_codes

    return _matches


def filter_companies(*names: str) -> LicencePredicate:
    """Build a predicate matching rows licensed to any of the given companies.

    Args:
        names: Exact licencee company names.

    Returns:
        Predicate over licence rows.
    """
    wanted_names = frozenset(names)

    def _matches(row: LicenceRow) -> bool:
        return row.licencee_company in wanted_names

    return _matches


_POINT_TO_POINT_PREDICATE = filter_product_codes(*POINT_TO_POINT_PRODUCT_CODES)


def filter_point_to_point(row: LicenceRow) -> bool:
    """Return whether a row belongs to the point-to-point fixed link category."""
    return _POINT_TO_POINT_PREDICATE(row)

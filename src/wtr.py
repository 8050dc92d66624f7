"""Public SDK surface for WTR tooling.

This module provides a stable import path for register users.
It re-exports the client, the collection, and the row predicates.
"""

from __future__ import annotations

from core.config import WtrConfig
from core.constants import LICENCE_HEADER, POINT_TO_POINT_PRODUCT_CODES
from core.errors import (
    WtrConfigError,
    WtrDependencyError,
    WtrDownloadError,
    WtrError,
    WtrIngestError,
    WtrStoreError,
    WtrValidationError,
)
from core.types import LicencePredicate, LicenceRow, ProductCodeReport
from ingest.register_reader import parse_register_text, read_register
from store.licence_collection import LicenceCollection
from store.licence_filters import filter_companies, filter_point_to_point, filter_product_codes
from store.register_sdk import WtrClient

__all__ = [
    "LICENCE_HEADER",
    "POINT_TO_POINT_PRODUCT_CODES",
    "LicenceCollection",
    "LicencePredicate",
    "LicenceRow",
    "ProductCodeReport",
    "WtrClient",
    "WtrConfig",
    "WtrConfigError",
    "WtrDependencyError",
    "WtrDownloadError",
    "WtrError",
    "WtrIngestError",
    "WtrStoreError",
    "WtrValidationError",
    "filter_companies",
    "filter_point_to_point",
    "filter_product_codes",
    "parse_register_text",
    "read_register",
]

"""Unit tests for the product code table."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from core.config import WtrConfig
from core.constants import POINT_TO_POINT_PRODUCT_CODES, PRODUCT_CODE_LENGTH
from core.errors import WtrConfigError
from core.product_codes import DEFAULT_PRODUCT_CODES, get_product_codes, load_product_codes


def test_default_table_has_well_formed_entries() -> None:
    """Bundled codes should be six characters with a description."""
    assert all(len(code) == PRODUCT_CODE_LENGTH for code in DEFAULT_PRODUCT_CODES)
    assert all(DEFAULT_PRODUCT_CODES.values())
    assert POINT_TO_POINT_PRODUCT_CODES <= set(DEFAULT_PRODUCT_CODES)


def test_get_product_codes_reads_override_file(tmp_path: Path) -> None:
    """Configured table path should replace the bundled table."""
    table_path = tmp_path / "codes.csv"
    table_path.write_text("code,description\n301010,Fixed Links\n", encoding="utf-8")
    config = replace(WtrConfig.from_env(), product_codes_path=table_path)

    codes = get_product_codes(config)

    assert codes == {"301010": "Fixed Links"}


def test_load_product_codes_raises_for_short_code(tmp_path: Path) -> None:
    """Table rows with malformed codes should be rejected."""
    table_path = tmp_path / "codes.csv"
    table_path.write_text("3010,Fixed Links\n", encoding="utf-8")

    with pytest.raises(WtrConfigError):
        load_product_codes(table_path)


def test_load_product_codes_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing override file should surface as a config error."""
    with pytest.raises(WtrConfigError):
        load_product_codes(tmp_path / "missing.csv")

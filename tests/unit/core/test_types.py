"""Unit tests for the licence row model."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, fields

import pytest

from core.constants import LICENCE_HEADER
from core.errors import WtrIngestError
from core.types import LicenceRow
from tests.fixture_rows import build_row


def test_licence_row_has_one_field_per_register_column() -> None:
    """Row attributes should map one-to-one onto the register header."""
    assert len(fields(LicenceRow)) == len(LICENCE_HEADER) == 46


def test_from_values_maps_columns_by_position() -> None:
    """Positional values should land on the matching named attributes."""
    values = [f"value-{index}" for index in range(len(LICENCE_HEADER))]

    row = LicenceRow.from_values(values)

    assert row.licence_number == "value-0"
    assert row.licencee_company == f"value-{LICENCE_HEADER.index('Licencee Company')}"
    assert row.product_code == f"value-{LICENCE_HEADER.index('Product Code')}"
    assert row.to_values() == tuple(values)


def test_from_values_raises_for_wrong_field_count() -> None:
    """Rows with missing columns should be rejected."""
    with pytest.raises(WtrIngestError):
        LicenceRow.from_values(["only", "three", "values"])


def test_as_dict_keys_by_column_name() -> None:
    """Mapping view should use published column names."""
    row = build_row("0100001/1", licencee_company="Vodafone Ltd")

    mapping = row.as_dict()

    assert list(mapping) == list(LICENCE_HEADER)
    assert mapping["Licencee Company"] == "Vodafone Ltd"


def test_licence_row_is_immutable() -> None:
    """Rows should not be editable after creation."""
    row = build_row("0100001/1")

    with pytest.raises(FrozenInstanceError):
        row.product_code = "999999"  # type: ignore[misc]

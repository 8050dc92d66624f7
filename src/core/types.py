"""Shared typed models.

This module defines the immutable licence row used by ingest,
filtering, validation, and CSV serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, Mapping, Sequence

from core.constants import LICENCE_HEADER
from core.errors import WtrIngestError


@dataclass(frozen=True)
class LicenceRow:
    """One radio-licence record from the Wireless Telegraphy Register.

    Attributes are declared in register column order so a row maps
    positionally onto ``LICENCE_HEADER``. All values are kept as the
    published strings, which makes CSV write-back lossless.
    """

    licence_number: str
    licence_issue_date: str
    sid_lat_n_s: str
    sid_lat_deg: str
    sid_lat_min: str
    sid_lat_sec: str
    sid_long_e_w: str
    sid_long_deg: str
    sid_long_min: str
    sid_long_sec: str
    ngr: str
    frequency: str
    frequency_type: str
    station_type: str
    channel_width: str
    channel_width_type: str
    height_above_sea_level: str
    antenna_erp: str
    antenna_erp_type: str
    antenna_type: str
    antenna_gain: str
    antenna_azimuth: str
    horizontal_elements: str
    vertical_elements: str
    antenna_height: str
    antenna_location: str
    efl_upper_lower: str
    antenna_direction: str
    antenna_elevation: str
    antenna_polarisation: str
    antenna_name: str
    feeding_loss: str
    fade_margin: str
    emission_code: str
    ap_comment_intern: str
    vector: str
    licencee_surname: str
    licencee_first_name: str
    licencee_company: str
    status: str
    tradeable: str
    publishable: str
    product_code: str
    product_description: str
    product_description_31: str
    product_description_32: str

    @classmethod
    def from_values(cls, values: Sequence[str]) -> "LicenceRow":
        """Build a row from positional register values.

        Args:
            values: Field strings in ``LICENCE_HEADER`` order.

        Returns:
            Parsed licence row.

        Raises:
            WtrIngestError: If the value count does not match the schema.
        """
        if len(values) != len(LICENCE_HEADER):
            raise WtrIngestError(
                f"Invalid licence row: expected {len(LICENCE_HEADER)} fields, "
                f"got {len(values)}. Check the register file for truncated lines."
            )
        return cls(*values)

    def to_values(self) -> tuple[str, ...]:
        """Return field strings in ``LICENCE_HEADER`` order."""
        return tuple(getattr(self, row_field.name) for row_field in fields(self))

    def as_dict(self) -> Mapping[str, str]:
        """Return values keyed by register column name."""
        return dict(zip(LICENCE_HEADER, self.to_values()))


LicencePredicate = Callable[[LicenceRow], bool]


@dataclass(frozen=True)
class ProductCodeReport:
    """Outcome of a product code integrity check.

    Attributes:
        row_count: Number of rows checked.
        code_counts: Row counts keyed by product code.
        unused_codes: Known codes that no row uses, sorted.
    """

    row_count: int
    code_counts: Mapping[str, int]
    unused_codes: tuple[str, ...]

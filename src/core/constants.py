"""Core constants used across WTR modules.

This module centralizes the register schema and other fixed values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".wtr")
DEFAULT_REGISTER_URL = "http://static.ofcom.org.uk/static/radiolicensing/html/register/WTR.csv"
REGISTER_FILE_NAME = "WTR.csv"
DEFAULT_CSV_ENCODING = "utf-8-sig"
DEFAULT_DOWNLOAD_TIMEOUT_SECONDS = 60.0
DOWNLOAD_CHUNK_SIZE = 64 * 1024
CSV_LINE_TERMINATOR = "\n"
PRODUCT_CODE_LENGTH = 6

LICENCE_HEADER: tuple[str, ...] = (
    "Licence Number",
    "Licence issue date",
    "SID_LAT_N_S",
    "SID_LAT_DEG",
    "SID_LAT_MIN",
    "SID_LAT_SEC",
    "SID_LONG_E_W",
    "SID_LONG_DEG",
    "SID_LONG_MIN",
    "SID_LONG_SEC",
    "NGR",
    "Frequency",
    "Frequency Type",
    "Station Type",
    "Channel Width",
    "Channel Width type",
    "Height above sea level",
    "Antenna ERP",
    "Antenna ERP type",
    "Antenna Type",
    "Antenna Gain",
    "Antenna AZIMUTH",
    "Horizontal Elements",
    "Vertical Elements",
    "Antenna Height",
    "Antenna Location",
    "EFL_UPPER_LOWER",
    "Antenna Direction",
    "Antenna Elevation",
    "Antenna Polarisation",
    "Antenna Name",
    "Feeding Loss",
    "Fade Margin",
    "Emission Code",
    "AP_COMMENT_INTERN",
    "Vector",
    "Licencee Surname",
    "Licencee First Name",
    "Licencee Company",
    "Status",
    "Tradeable",
    "Publishable",
    "Product Code",
    "Product Description",
    "Product Description 31",
    "Product Description 32",
)

# Product codes grouped under the point-to-point fixed link category.
POINT_TO_POINT_PRODUCT_CODES: frozenset[str] = frozenset({"301010"})

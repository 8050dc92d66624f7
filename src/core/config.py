"""Runtime configuration model for WTR tooling.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import codecs
import os
from pathlib import Path

from core.constants import (
    DEFAULT_CSV_ENCODING,
    DEFAULT_DATA_ROOT,
    DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    DEFAULT_REGISTER_URL,
    REGISTER_FILE_NAME,
)
from core.errors import WtrConfigError


@dataclass(frozen=True)
class WtrConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local directory holding the downloaded register.
        register_url: HTTP location of the published register CSV.
        csv_encoding: Text encoding used to decode register files.
        download_timeout: Socket timeout in seconds for register downloads.
        product_codes_path: Optional CSV overriding the bundled code table.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    data_root: Path
    register_url: str
    csv_encoding: str
    download_timeout: float
    product_codes_path: Path | None
    s3_region: str | None
    s3_profile: str | None

    @property
    def register_path(self) -> Path:
        """Return the local path of the downloaded register."""
        return self.data_root / REGISTER_FILE_NAME

    @classmethod
    def from_env(cls) -> "WtrConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            WtrConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("WTR_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        register_url = os.getenv("WTR_REGISTER_URL", DEFAULT_REGISTER_URL)
        csv_encoding = _parse_encoding(os.getenv("WTR_CSV_ENCODING", DEFAULT_CSV_ENCODING))
        download_timeout = _parse_timeout(
            os.getenv("WTR_DOWNLOAD_TIMEOUT", str(DEFAULT_DOWNLOAD_TIMEOUT_SECONDS))
        )
        product_codes_value = os.getenv("WTR_PRODUCT_CODES_PATH")
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            register_url=register_url,
            csv_encoding=csv_encoding,
            download_timeout=download_timeout,
            product_codes_path=(
                Path(product_codes_value).expanduser() if product_codes_value else None
            ),
            s3_region=os.getenv("WTR_S3_REGION"),
            s3_profile=os.getenv("WTR_S3_PROFILE"),
        )


def _parse_timeout(raw_value: str) -> float:
    """Parse the download timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        WtrConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise WtrConfigError(
            "Invalid WTR_DOWNLOAD_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set WTR_DOWNLOAD_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise WtrConfigError(
            f"Invalid WTR_DOWNLOAD_TIMEOUT value: {raw_value} is not positive. "
            "Set WTR_DOWNLOAD_TIMEOUT to a positive number."
        )
    return timeout


def _parse_encoding(raw_value: str) -> str:
    """Check that the CSV encoding names a known codec."""
    try:
        codecs.lookup(raw_value)
    except LookupError as error:
        raise WtrConfigError(
            f"Invalid WTR_CSV_ENCODING value: unknown codec '{raw_value}'. "
            "Use a Python codec name such as utf-8-sig or latin-1."
        ) from error
    return raw_value

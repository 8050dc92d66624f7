"""Register CSV readers for ingestion.

This module loads the published register from a local file or an S3
object and parses it into a typed licence collection.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, Iterable

from core.config import WtrConfig
from core.constants import LICENCE_HEADER
from core.errors import WtrDependencyError, WtrIngestError
from core.logging_config import get_logger
from core.s3_uri import parse_s3_uri
from core.types import LicenceRow
from store.licence_collection import LicenceCollection

_LOGGER = get_logger(__name__)


def read_register(source_uri: str, config: WtrConfig) -> LicenceCollection:
    """Load a register CSV from a local path or S3.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for encoding and S3 session defaults.

    Returns:
        Collection holding every licence row in file order.

    Raises:
        WtrIngestError: If the source cannot be read or parsed.
    """
    if source_uri.startswith("s3://"):
        collection = _read_s3_register(source_uri, config)
    else:
        collection = _read_local_register(Path(source_uri).expanduser(), config.csv_encoding)
    _LOGGER.info("register_loaded", source_uri=source_uri, row_count=len(collection))
    return collection


def parse_register_text(text: str, source_name: str) -> LicenceCollection:
    """Parse register CSV text into a collection.

    Args:
        text: Full CSV document.
        source_name: Source label used in error messages.

    Returns:
        Parsed collection.

    Raises:
        WtrIngestError: If header or any row is malformed.
    """
    return _parse_register_lines(io.StringIO(text, newline=""), source_name)


def _read_local_register(source_path: Path, encoding: str) -> LicenceCollection:
    """Read the register from the local file system.

    Raises:
        WtrIngestError: If path is missing, undecodable, or malformed.
    """
    if not source_path.is_file():
        raise WtrIngestError(
            f"Failed to read register at {source_path}: file does not exist. "
            "Run the download command or provide an existing CSV file."
        )
    try:
        with source_path.open(encoding=encoding, newline="") as handle:
            return _parse_register_lines(handle, str(source_path))
    except UnicodeDecodeError as error:
        raise WtrIngestError(
            f"Failed to decode register at {source_path} as {encoding}: {error.reason}. "
            "Set WTR_CSV_ENCODING to the file's encoding."
        ) from error
    except OSError as error:
        raise WtrIngestError(
            f"Failed to read register at {source_path}: {error}. "
            "Check file permissions and retry."
        ) from error


def _parse_register_lines(lines: Iterable[str], source_name: str) -> LicenceCollection:
    """Parse CSV lines, checking the header and every row width."""
    reader = csv.reader(lines)
    try:
        header = next(reader, None)
        _check_header(header, source_name)
        rows = [
            _parse_row(values, source_name, reader.line_num)
            for values in reader
            if values
        ]
    except csv.Error as error:
        raise WtrIngestError(
            f"Malformed CSV in {source_name} near line {reader.line_num}: {error}. "
            "Fix the file quoting and retry."
        ) from error
    return LicenceCollection(LICENCE_HEADER, rows)


def _check_header(header: list[str] | None, source_name: str) -> None:
    """Raise unless the header matches the register schema exactly."""
    if header is None:
        raise WtrIngestError(f"Register {source_name} is empty: expected a header line.")
    if tuple(header) != LICENCE_HEADER:
        unexpected = [
            f"{index}:{name!r}"
            for index, name in enumerate(header, 1)
            if index > len(LICENCE_HEADER) or LICENCE_HEADER[index - 1] != name
        ]
        raise WtrIngestError(
            f"Unexpected register header in {source_name}: got {len(header)} columns, "
            f"expected {len(LICENCE_HEADER)}; mismatched columns {unexpected[:5]}. "
            "The published schema may have changed."
        )


def _parse_row(values: list[str], source_name: str, line_number: int) -> LicenceRow:
    """Build one licence row, naming the source line on failure."""
    if len(values) != len(LICENCE_HEADER):
        raise WtrIngestError(
            f"Wrong column count at {source_name}:{line_number}: expected "
            f"{len(LICENCE_HEADER)} fields, got {len(values)}. "
            "Check the register file for truncated or unquoted lines."
        )
    return LicenceRow.from_values(values)


def _read_s3_register(source_uri: str, config: WtrConfig) -> LicenceCollection:
    """Read the register from one S3 object.

    Raises:
        WtrIngestError: If the object cannot be fetched or parsed.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"].read()
    except Exception as error:
        raise WtrIngestError(
            f"Failed to fetch register object {source_uri}: {error}. "
            "Check AWS credentials and the object key."
        ) from error
    try:
        text = body.decode(config.csv_encoding)
    except UnicodeDecodeError as error:
        raise WtrIngestError(
            f"Failed to decode register object {source_uri} as {config.csv_encoding}: "
            f"{error.reason}. Set WTR_CSV_ENCODING to the object's encoding."
        ) from error
    return parse_register_text(text, source_uri)


def _create_s3_client(config: WtrConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        WtrDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise WtrDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install the 's3' extra to read registers from s3:// sources."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")

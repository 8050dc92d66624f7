"""Register download from the publisher.

This module fetches the published register CSV over HTTP into the
local data root, skipping the request when a copy already exists.
"""

from __future__ import annotations

from pathlib import Path

import requests

from core.config import WtrConfig
from core.constants import DOWNLOAD_CHUNK_SIZE
from core.errors import WtrDownloadError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def download_register(config: WtrConfig, force: bool = False) -> Path:
    """Download the register CSV to ``config.register_path``.

    Args:
        config: Runtime config with URL, timeout, and data root.
        force: Download even when a local copy already exists.

    Returns:
        Local register path.

    Raises:
        WtrDownloadError: If the request fails or returns a non-200 status.
    """
    target_path = config.register_path
    if target_path.exists() and not force:
        _LOGGER.info("register_download_skipped", register_path=str(target_path))
        return target_path
    target_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = target_path.with_name(f"{target_path.name}.part")
    try:
        byte_count = _stream_to_file(config, partial_path)
    except BaseException:
        partial_path.unlink(missing_ok=True)
        raise
    partial_path.replace(target_path)
    _LOGGER.info(
        "register_downloaded",
        register_url=config.register_url,
        register_path=str(target_path),
        byte_count=byte_count,
    )
    return target_path


def _stream_to_file(config: WtrConfig, output_path: Path) -> int:
    """Stream the HTTP response body into ``output_path``.

    Returns:
        Number of bytes written.

    Raises:
        WtrDownloadError: On transport errors or bad HTTP status.
    """
    try:
        response = requests.get(config.register_url, stream=True, timeout=config.download_timeout)
    except requests.RequestException as error:
        raise WtrDownloadError(
            f"Failed to download register from {config.register_url}: {error}. "
            "Check network access or set WTR_REGISTER_URL."
        ) from error
    with response:
        if response.status_code != requests.codes.ok:
            raise WtrDownloadError(
                f"Bad HTTP status downloading register from {config.register_url}: "
                f"{response.status_code} {response.reason}."
            )
        byte_count = 0
        try:
            with output_path.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    handle.write(chunk)
                    byte_count += len(chunk)
        except requests.RequestException as error:
            raise WtrDownloadError(
                f"Register download from {config.register_url} was interrupted: {error}."
            ) from error
    return byte_count

"""Python SDK for register operations.

This module exposes high-level APIs for downloading, loading, and
validating the licence register under one runtime configuration.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import WtrConfig
from core.product_codes import get_product_codes
from core.types import ProductCodeReport
from ingest.register_download import download_register
from ingest.register_reader import read_register
from store.licence_collection import LicenceCollection
from store.product_code_validation import validate_product_codes


class WtrClient:
    """Primary SDK entry point for register workflows."""

    def __init__(self, config: WtrConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or WtrConfig.from_env()

    @property
    def config(self) -> WtrConfig:
        """Return the runtime configuration."""
        return self._config

    def download(self, force: bool = False) -> Path:
        """Fetch the published register into the data root.

        Args:
            force: Replace an existing local copy.

        Returns:
            Local register path.
        """
        return download_register(self._config, force=force)

    def load(self, source_uri: str | None = None) -> LicenceCollection:
        """Load a register CSV into a collection.

        Args:
            source_uri: Local path or ``s3://`` URI; the downloaded
                register in the data root when omitted.

        Returns:
            Loaded licence collection.
        """
        return read_register(source_uri or str(self._config.register_path), self._config)

    def product_codes(self) -> dict[str, str]:
        """Return the product code table for this configuration."""
        return get_product_codes(self._config)

    def validate(
        self,
        collection: LicenceCollection,
        require_all_known: bool = False,
    ) -> ProductCodeReport:
        """Check collection product codes against the code table.

        Args:
            collection: Rows to check.
            require_all_known: Fail when a known code is never used.

        Returns:
            Coverage report.
        """
        return validate_product_codes(collection, self.product_codes(), require_all_known)

    def with_data_root(self, data_root: str) -> "WtrClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return WtrClient(replace(self._config, data_root=resolved_root))

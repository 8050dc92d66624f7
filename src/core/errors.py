"""WTR exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class WtrError(Exception):
    """Base exception for all WTR tooling failures."""


class WtrConfigError(WtrError):
    """Raised for invalid runtime configuration."""


class WtrIngestError(WtrError):
    """Raised for register parsing and loading failures."""


class WtrDownloadError(WtrIngestError):
    """Raised when the published register cannot be fetched."""


class WtrValidationError(WtrError):
    """Raised when register data violates product-code integrity rules."""


class WtrStoreError(WtrError):
    """Raised when a collection cannot be written to disk."""


class WtrDependencyError(WtrError):
    """Raised when an optional runtime dependency is missing."""

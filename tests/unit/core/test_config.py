"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import WtrConfig
from core.constants import DEFAULT_REGISTER_URL
from core.errors import WtrConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("WTR_DATA_ROOT", "./.tmp-wtr")

    config = WtrConfig.from_env()

    assert config.data_root.name == ".tmp-wtr"
    assert config.register_path == config.data_root / "WTR.csv"


def test_from_env_uses_published_register_url_by_default(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Config should default to the publisher's register location."""
    monkeypatch.delenv("WTR_REGISTER_URL", raising=False)
    monkeypatch.delenv("WTR_PRODUCT_CODES_PATH", raising=False)

    config = WtrConfig.from_env()

    assert config.register_url == DEFAULT_REGISTER_URL
    assert config.product_codes_path is None


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric download timeout."""
    monkeypatch.setenv("WTR_DOWNLOAD_TIMEOUT", "soon")

    with pytest.raises(WtrConfigError):
        WtrConfig.from_env()

    assert os.getenv("WTR_DOWNLOAD_TIMEOUT") == "soon"


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject zero or negative timeouts."""
    monkeypatch.setenv("WTR_DOWNLOAD_TIMEOUT", "0")

    with pytest.raises(WtrConfigError):
        WtrConfig.from_env()


def test_from_env_raises_for_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject codec names Python does not know."""
    monkeypatch.setenv("WTR_CSV_ENCODING", "no-such-codec")

    with pytest.raises(WtrConfigError):
        WtrConfig.from_env()

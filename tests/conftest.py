"""Global pytest fixtures for helperkit."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from helperkit.adapters.json_db import JsonDB
from helperkit.config import Settings, get_settings

# pylint: disable=redefined-outer-name


def add_default_marker(root: Path, marker: str, items: list[pytest.Item]) -> None:
    """Mark every collected item below ``root`` with ``marker`` unless already marked."""
    for item in items:
        if root in item.path.resolve().parents and not any(
            existing.name == marker for existing in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and HELPERKIT_* variables around each test."""
    for name in ("HELPERKIT_DEFAULT_COUNTRY", "HELPERKIT_RECAPTCHA_SECRET", "HELPERKIT_DATA_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    JsonDB.reset_instance()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing the data directory at a temporary folder."""
    return Settings(
        data_dir=tmp_path / "data",
        http_timeout_seconds=2.0,
        recaptcha_site_key="site-key",
        recaptcha_secret="top-secret",
        vies_url="https://vies.test/check-vat-number",
    )

"""Shared ``httpx`` client construction for the HTTP adapters."""

from __future__ import annotations

import httpx

from helperkit import __version__
from helperkit.config import Settings, get_settings

USER_AGENT = f"helperkit/{__version__}"


def build_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` with the configured timeout and user agent.

    Args:
        settings: Settings to read the timeout from; the cached process
            settings by default.
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
    """
    settings = settings or get_settings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )

"""Clickable terminal links (OSC-8) with a plain-text fallback."""

import os
import sys
from typing import TextIO

OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess of whether ``stream`` renders OSC-8 hyperlinks.

    Piped or redirected streams never do; for terminals the decision is
    based on the usual identifying environment variables.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        program in OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """``label`` (the URL by default) linked to ``url`` when the terminal allows it."""
    text = label or url
    if not supports_osc8():
        return text if label is None else f"{label} ({url})"
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"

"""File helpers: base64 payloads, extensions, MIME types, sizes and HTTP headers."""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Iterable
from pathlib import Path

from .mime_types import EXTENSIONS_AND_MIME_TYPES, FILE_SIGNATURES, FormatEntry

logger = logging.getLogger(__name__)

BASE64_MARKER = "base64,"
DEFAULT_MIME_TYPE = "application/octet-stream"
DOUBLE_EXTENSIONS = (
    "tar.gz",
    "tar.bz2",
    "tar.xz",
    "tar.z",
    "tar.lz",
    "tar.zst",
    "tar.lzma",
    "tar.lzo",
    "tar.bz",
)
SIZE_UNITS = {
    "en": ("B", "KB", "MB", "GB", "TB"),
    "fr": ("o", "Ko", "Mo", "Go", "To"),
}


# ============================================================================
#                           Base64 payloads
# ============================================================================


def _split_data_url(data: str) -> tuple[str, str]:
    """Split ``data:<mime>;base64,<payload>`` into header and payload."""
    if BASE64_MARKER in data:
        header, _, payload = data.partition(BASE64_MARKER)
        return header, payload
    return "", data


def get_data_from_base64_data(data: str) -> bytes | None:
    """Decode a base64 payload, with or without a ``data:...;base64,`` header.

    Returns None for invalid or empty payloads, and for payloads that do not
    re-encode to the exact same text (non-canonical padding or whitespace).
    """
    _, payload = _split_data_url(data)
    try:
        decoded = base64.b64decode(payload, validate=True)
    except binascii.Error:
        return None
    if not decoded or base64.b64encode(decoded).decode("ascii") != payload:
        return None
    return decoded


def get_mime_type_from_base64_data(data: str) -> str | None:
    """Guess the MIME type of a base64 payload.

    A ``data:<mime>;base64,`` header is trusted when present; otherwise the
    leading bytes are matched against known file signatures.
    """
    if BASE64_MARKER in data:
        header, payload = _split_data_url(data)
        if not header:
            return None
        if header.startswith("data:") and header.endswith(";"):
            return header[5:-1]
        data = payload
        if not data:
            return None

    try:
        head = base64.b64decode(data[:64] + "=" * (-len(data[:64]) % 4))
    except binascii.Error:
        return None
    return get_mime_type_from_bytes(head)


def get_mime_type_from_bytes(content: bytes) -> str | None:
    """Match the first bytes of a file against known signatures."""
    for signatures, mime_type in FILE_SIGNATURES:
        for signature in signatures:
            if all(content.startswith(part, offset) for offset, part in signature):
                return mime_type
    return None


# ============================================================================
#                           Extensions
# ============================================================================


def get_extension(path: str) -> str:
    """Return the extension of ``path`` without the dot (``tar.gz`` aware)."""
    filename = Path(path).name
    lowered = filename.lower()
    for double_extension in DOUBLE_EXTENSIONS:
        if lowered.endswith("." + double_extension):
            return double_extension
    return Path(filename).suffix[1:]


def replace_extension(path: str, new_extension: str) -> str:
    """Swap the extension of ``path``, keeping its directory part."""
    if not new_extension.startswith("."):
        new_extension = "." + new_extension
    separator_index = max(path.rfind("/"), path.rfind("\\"))
    directory, filename = path[: separator_index + 1], path[separator_index + 1 :]
    stem = filename.rsplit(".", 1)[0] if "." in filename.lstrip(".") else filename
    return directory + stem + new_extension


def ensure_extension(name: str, extension: str) -> str:
    """Append ``extension`` to ``name`` unless it already ends with it."""
    if not extension.startswith("."):
        extension = "." + extension
    return name if name.lower().endswith(extension.lower()) else name + extension


def check(
    real_path: str,
    original_name: str,
    extensions_allowed: Iterable[str] | None = None,
    mime_types_allowed: Iterable[str] | None = None,
) -> bool:
    """Check an uploaded file against allowed extensions and MIME types.

    Args:
        real_path: Where the file lives on disk.
        original_name: Client-side file name, whose extension is checked.
        extensions_allowed: Allowed extensions, with the leading dot (``".pdf"``).
        mime_types_allowed: Allowed MIME types of the file on disk.
    """
    if not real_path or not Path(real_path).exists():
        return False

    suffix = Path(original_name).suffix.lower()
    if not suffix:
        return False
    if extensions_allowed and suffix not in list(extensions_allowed):
        return False

    if mime_types_allowed:
        mime_type = get_mime_type_for_file(real_path)
        if mime_type not in list(mime_types_allowed):
            logger.debug("Rejected %s: MIME type %s not allowed", original_name, mime_type)
            return False
    return True


def build_secure_path(base_dir: str | Path, filename: str) -> Path:
    """Join ``filename`` to ``base_dir``, refusing anything that escapes it.

    Raises:
        ValueError: If the name is empty or contains ``..`` or a separator.
    """
    if not filename or not filename.strip():
        raise ValueError("Filename cannot be empty")
    if ".." in filename or "/" in filename or "\\" in filename:
        raise ValueError(f"Invalid filename: {filename}")
    return Path(base_dir) / filename


# ============================================================================
#                           Sizes
# ============================================================================


def format_size(size: float, decimals: int = 2, locale: str = "en") -> str:
    """Human-readable size in powers of 1024: ``format_size(1536)`` -> ``"1.50 KB"``.

    ``locale="fr"`` uses octets (``o``, ``Ko``, ``Mo``...). Sizes of zero or
    below are reported as ``0``; terabytes are the largest unit.
    """
    units = SIZE_UNITS.get(locale[:2].lower(), SIZE_UNITS["en"])
    exponent, value = 0, max(size, 0)
    while value >= 1024 and exponent < len(units) - 1:
        value /= 1024
        exponent += 1
    return f"{value:.{decimals}f} {units[exponent]}"


# ============================================================================
#                           MIME types
# ============================================================================


def _normalize_entries(entries: Iterable[FormatEntry]) -> list[FormatEntry]:
    return [
        ([extension.lstrip(".").lower() for extension in extensions], mime_types)
        for extensions, mime_types in entries
    ]


def get_mime_type_from_extension(
    extension: str, entries: Iterable[FormatEntry] | None = None
) -> str | None:
    """``"pdf"`` or ``".pdf"`` -> ``"application/pdf"``."""
    extension = extension.lstrip(".").lower()
    table = _normalize_entries(entries) if entries is not None else EXTENSIONS_AND_MIME_TYPES
    for extensions, mime_types in table:
        if extension in extensions:
            return mime_types[0]
    return None


def get_extension_from_mime_type(
    mime_type: str, entries: Iterable[FormatEntry] | None = None
) -> str | None:
    mime_type = mime_type.lower()
    table = _normalize_entries(entries) if entries is not None else EXTENSIONS_AND_MIME_TYPES
    for extensions, mime_types in table:
        if mime_type in (known.lower() for known in mime_types):
            return extensions[0]
    return None


def get_mime_type_for_file(filename: str) -> str:
    """MIME type guessed from the extension; a URL query string is ignored."""
    filename = filename.split("?", 1)[0]
    return get_mime_type_from_extension(Path(filename).suffix) or DEFAULT_MIME_TYPE


# ============================================================================
#                           HTTP output
# ============================================================================


def get_http_headers(
    path: str | Path,
    file_name: str | None = None,
    force_download: bool = True,
    mime_type: str | None = None,
    transfer_encoding: str | None = None,
) -> dict[str, str] | None:
    """Build the response headers for sending a file to a browser.

    Returns None when the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        return None

    headers = {
        "Content-Disposition": f'attachment; filename="{file_name or path.name}"',
        "Content-Length": str(path.stat().st_size),
    }
    if force_download:
        headers.update(
            {
                "Content-Type": "application/force-download",
                "Content-Transfer-Encoding": transfer_encoding or "binary",
                "Content-Description": "File Transfer",
                "Pragma": "no-cache",
                "Cache-Control": "must-revalidate, post-check=0, pre-check=0, public",
                "Expires": "0",
            }
        )
    else:
        headers["Content-Type"] = mime_type or get_mime_type_for_file(str(path))
    return headers

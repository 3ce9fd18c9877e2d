"""vCard 3.0 builder and parser.

Build a card with the chainable ``add_*`` methods, then ``build()`` the text
or ``save()`` it as ``<filename>.vcf``::

    card = VCard().add_name("Doe", "John").add_email("john@example.com")
    path = card.save(tmp_dir)

``parse()`` goes the other way and returns one dict per ``BEGIN:VCARD``
block.
"""

from __future__ import annotations

import base64
import binascii
import logging
import quopri
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser

from helperkit.domain.files import file as file_helpers
from helperkit.domain.files.filesystem import initialize_file
from helperkit.domain.identifiers import IdGenerator, ULIDGenerator
from helperkit.domain.text import to_url_friendly

logger = logging.getLogger(__name__)

FILE_EXTENSION = ".vcf"
CONTENT_TYPE = "text/x-vcard"
LINE_ENDING = "\r\n"
MAX_LINE_LENGTH = 75
FOLD_CHUNK_LENGTH = MAX_LINE_LENGTH - len(LINE_ENDING)

# elements that may appear several times; any other element keeps its first value
MULTIPLE_ELEMENTS = frozenset({"email", "address", "phone_number", "url"})

NAME_FIELDS = ("lastname", "firstname", "additional", "prefix", "suffix")
ADDRESS_FIELDS = ("name", "extended", "street", "city", "region", "zip", "country")
DEFAULT_ADDRESS_TYPE = "WORK;POSTAL"
DEFAULT_TYPE = "default"

_WHITESPACE = re.compile(r"\s+")
_FOLDED_LINE = re.compile(r"\n[ \t]")


def _typed(key: str, type_: str) -> str:
    return f"{key};TYPE={type_}" if type_ else key


class VCard:  # pylint: disable=too-many-public-methods
    """Builder for a single vCard.

    Args:
        charset: Charset announced on text properties (``;CHARSET=utf-8``).
        id_generator: Source of UIDs for :meth:`add_unique_identifier`; ULIDs
            by default.
    """

    def __init__(self, charset: str = "utf-8", id_generator: IdGenerator | None = None) -> None:
        self.charset = charset
        self._id_generator = id_generator or ULIDGenerator()
        self._properties: list[tuple[str, str]] = []
        self._defined_elements: set[str] = set()
        self._filename: str | None = None

    # --- Identity ---

    def add_name(
        self,
        last_name: str = "",
        first_name: str = "",
        additional: str = "",
        prefix: str = "",
        suffix: str = "",
    ) -> VCard:
        values = [value for value in (prefix, first_name, additional, last_name, suffix) if value]
        self.set_filename(values)
        self._set_property(
            "name",
            "N" + self._charset_param(),
            ";".join((last_name, first_name, additional, prefix, suffix)),
        )
        if not self._has_property("FN"):
            self._set_property("fullname", "FN" + self._charset_param(), " ".join(values).strip())
        return self

    def add_nickname(self, nickname: str) -> VCard:
        self._set_property("nickname", "NICKNAME", nickname)
        return self

    def add_birthday(self, birthday: str | date) -> VCard:
        value = birthday.isoformat() if isinstance(birthday, date) else birthday
        self._set_property("birthday", "BDAY", value)
        return self

    def add_company(self, name: str, units: str = "") -> VCard:
        values = [value for value in (name, units) if value]
        if self._filename is None:
            self.set_filename(values)
        self._set_property("company", "ORG" + self._charset_param(), f"{name};{units}")
        if not self._has_property("FN"):
            self._set_property("fullname", "FN" + self._charset_param(), " ".join(values).strip())
        return self

    def add_role(self, role: str) -> VCard:
        self._set_property("role", "ROLE" + self._charset_param(), role)
        return self

    def add_job_title(self, job_title: str) -> VCard:
        self._set_property("job_title", "TITLE" + self._charset_param(), job_title)
        return self

    # --- Contact points ---

    def add_address(  # pylint: disable=too-many-arguments
        self,
        name: str = "",
        extended: str = "",
        street: str = "",
        city: str = "",
        region: str = "",
        zip_code: str = "",
        country: str = "",
        type_: str = DEFAULT_ADDRESS_TYPE,
    ) -> VCard:
        value = ";".join((name, extended, street, city, region, zip_code, country))
        self._set_property("address", _typed("ADR", type_) + self._charset_param(), value)
        return self

    def add_location(self, coordinates: str) -> VCard:
        """Set the GEO property, e.g. ``"48.8584;2.2945"``."""
        self._set_property("coordinates", "GEO", coordinates)
        return self

    def add_email(self, email: str, type_: str = "") -> VCard:
        self._set_property("email", _typed("EMAIL", type_), email)
        return self

    def add_phone_number(self, number: str, type_: str = "") -> VCard:
        self._set_property("phone_number", _typed("TEL", type_), number)
        return self

    def add_url(self, url: str, type_: str = "") -> VCard:
        self._set_property("url", _typed("URL", type_), url)
        return self

    # --- Media ---

    def add_logo(self, url: str, include: bool = False) -> VCard:
        self._add_media("LOGO", url, include)
        return self

    def add_photo(self, url: str, include: bool = False) -> VCard:
        self._add_media("PHOTO", url, include)
        return self

    def add_sound(self, url: str, include: bool = False) -> VCard:
        self._add_media("SOUND", url, include)
        return self

    def _add_media(self, key: str, location: str, include: bool) -> None:
        """Reference a media by URL, or embed a local file as base64.

        Embedded logos and photos must be images, sounds must be audio; the
        format is recognised from the first bytes of the file.

        Raises:
            ValueError: If the file cannot be read or has an unsupported format.
        """
        if not include:
            self._set_property(key.lower(), key, location)
            return

        try:
            content = Path(location).read_bytes()
        except OSError as exc:
            raise ValueError(f"Cannot read {location} for vCard {key}") from exc

        mime_type = file_helpers.get_mime_type_from_bytes(content) or ""
        family, _, subtype = mime_type.partition("/")
        if family != ("audio" if key == "SOUND" else "image"):
            raise ValueError(f"Unsupported media format for vCard {key}: {location}")

        self._set_property(
            key.lower(),
            f"{key};ENCODING=b;TYPE={subtype.removeprefix('x-').upper()}",
            base64.b64encode(content).decode("ascii"),
        )

    # --- Misc ---

    def add_time_zone(self, time_zone: str) -> VCard:
        self._set_property("time_zone", "TZ" + self._charset_param(), time_zone)
        return self

    def add_lang(self, lang: str) -> VCard:
        self._set_property("lang", "LANG" + self._charset_param(), lang)
        return self

    def add_note(self, note: str) -> VCard:
        self._set_property("note", "NOTE" + self._charset_param(), note)
        return self

    def add_unique_identifier(self, uid: str | None = None) -> VCard:
        """Set the UID, generating one when ``uid`` is None."""
        if uid is None:
            uid = self._id_generator.new_id()
        self._set_property("uid", "UID" + self._charset_param(), uid)
        return self

    def add_source(self, source: str) -> VCard:
        self._set_property("source", "SOURCE" + self._charset_param(), source)
        return self

    def add_public_key(self, key: str, type_: str = "") -> VCard:
        self._set_property("key", _typed("KEY", type_) + self._charset_param(), key)
        return self

    # --- Output ---

    @property
    def filename(self) -> str | None:
        return self._filename

    def set_filename(
        self, value: str | list[str], overwrite: bool = True, separator: str = "_"
    ) -> None:
        """Derive a URL-friendly file name (without extension) from ``value``."""
        if isinstance(value, list):
            value = separator.join(value)
        value = _WHITESPACE.sub(separator, value.strip(separator))
        if not value:
            return
        value = to_url_friendly(value)
        if overwrite or self._filename is None:
            self._filename = value
        else:
            self._filename = f"{self._filename}{separator}{value}"

    def get_content_type(self) -> str:
        return CONTENT_TYPE

    def get_file_extension(self) -> str:
        return FILE_EXTENSION

    def build(self) -> str:
        """Return the card text, CRLF-separated and folded at 75 octets."""
        lines = [
            "BEGIN:VCARD",
            "VERSION:3.0",
            "REV:" + datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        ]
        for key, value in self._properties:
            lines.extend(self._fold(f"{key}:{value}"))
        lines.append("END:VCARD")
        return LINE_ENDING.join(lines)

    def save(self, directory: str | Path) -> Path:
        """Write the card to ``<directory>/<filename>.vcf`` and return the path."""
        path = Path(directory) / ((self._filename or "vcard") + FILE_EXTENSION)
        initialize_file(path)
        path.write_text(self.build(), encoding=self.charset)
        logger.debug("vCard written to %s", path)
        return path

    def get_http_headers(self, filename: str | None = None) -> dict[str, str]:
        content = self.build()
        return {
            "Content-Type": f"{CONTENT_TYPE}; charset={self.charset}",
            "Content-Disposition": f"attachment; filename={filename or 'vcard' + FILE_EXTENSION}",
            "Content-Length": str(len(content.encode(self.charset))),
            "Connection": "close",
        }

    # --- Internal Helpers ---

    def _charset_param(self) -> str:
        return f";CHARSET={self.charset}" if self.charset == "utf-8" else ""

    def _has_property(self, key: str) -> bool:
        return any(prop_key == key and value != "" for prop_key, value in self._properties)

    def _set_property(self, element: str, key: str, value: str) -> None:
        if element in self._defined_elements and element not in MULTIPLE_ELEMENTS:
            return
        self._defined_elements.add(element)
        self._properties.append((key, value))

    def _fold(self, line: str) -> list[str]:
        """Split ``line`` into chunks of at most FOLD_CHUNK_LENGTH octets.

        Lengths are counted on the encoded text and a character is never cut
        in half, so continuation lines stay within MAX_LINE_LENGTH octets.
        """
        if len(line.encode(self.charset)) <= MAX_LINE_LENGTH:
            return [line]
        chunks = []
        current, size = "", 0
        for char in line:
            width = len(char.encode(self.charset))
            if size + width > FOLD_CHUNK_LENGTH:
                chunks.append(current)
                current, size = "", 0
            current += char
            size += width
        chunks.append(current)
        return [chunks[0]] + [" " + chunk for chunk in chunks[1:]]


# ============================================================================
#                           Parsing
# ============================================================================


def _decode(
    value: str, params: list[str], keep_bytes: bool = False
) -> tuple[str | bytes, list[str], bool]:
    """Apply ENCODING and CHARSET parameters; return value, leftover params, raw flag."""
    charset = "utf-8"
    raw: bytes | None = None
    remaining = []
    for param in params:
        lowered = param.lower()
        if "base64" in lowered or lowered == "encoding=b":
            try:
                raw = base64.b64decode(value)
            except binascii.Error:
                raw = b""
        elif "quoted-printable" in lowered:
            raw = quopri.decodestring(value.encode("ascii", errors="ignore"))
        elif lowered.startswith("charset="):
            charset = param[8:]
        else:
            remaining.append(param)

    if raw is None:
        return value, remaining, False
    if keep_bytes:
        return raw, remaining, True
    try:
        return raw.decode(charset), remaining, True
    except (LookupError, UnicodeDecodeError):
        return raw, remaining, True


def _parse_birthday(value: str) -> datetime | None:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _split_fields(value: str, fields: tuple[str, ...]) -> dict[str, str]:
    parts = value.split(";")
    parts += [""] * (len(fields) - len(parts))
    return dict(zip(fields, parts))


def _type_key(params: list[str], default: str) -> str:
    types = [param[5:] if param.upper().startswith("TYPE=") else param for param in params]
    return ";".join(types) if types else default


def parse(content: str) -> list[dict[str, Any]]:
    """Parse every card found in ``content``.

    Repeating properties (addresses, phones, emails, URLs) are grouped by
    their TYPE parameters: ``card["phone"]["CELL"] == ["+33600000000"]``.
    Embedded photos end up as bytes under ``raw_photo``, linked ones under
    ``photo``.
    """
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    content = _FOLDED_LINE.sub("", content)

    cards: list[dict[str, Any]] = []
    card: dict[str, Any] | None = None
    for line in content.split("\n"):
        line = line.strip()
        upper = line.upper()
        if upper == "BEGIN:VCARD":
            card = {}
            continue
        if upper == "END:VCARD":
            if card is not None:
                cards.append(card)
            card = None
            continue
        if not line or card is None:
            continue

        head, _, value = line.partition(":")
        params = head.split(";")
        element = params.pop(0).upper()
        decoded, params, is_raw = _decode(value, params, keep_bytes=element == "PHOTO")
        _store(card, element, decoded, params, is_raw)
    return cards


def _store(  # pylint: disable=too-many-branches
    card: dict[str, Any], element: str, value: Any, params: list[str], is_raw: bool
) -> None:
    if element == "FN":
        card["fullname"] = value
    elif element == "N":
        card.update(_split_fields(value, NAME_FIELDS))
    elif element == "BDAY":
        card["birthday"] = _parse_birthday(value)
    elif element == "ADR":
        key = _type_key(params, DEFAULT_ADDRESS_TYPE)
        card.setdefault("address", {}).setdefault(key, []).append(
            _split_fields(value, ADDRESS_FIELDS)
        )
    elif element in ("TEL", "EMAIL", "URL"):
        group = {"TEL": "phone", "EMAIL": "email", "URL": "url"}[element]
        key = _type_key(params, DEFAULT_TYPE)
        card.setdefault(group, {}).setdefault(key, []).append(value)
    elif element == "REV":
        card["revision"] = value
    elif element == "VERSION":
        card["version"] = value
    elif element == "ORG":
        card["organization"] = value
    elif element == "TITLE":
        card["title"] = value
    elif element == "PHOTO":
        card["raw_photo" if is_raw else "photo"] = value


def parse_file(path: str | Path) -> list[dict[str, Any]] | None:
    """Parse a ``.vcf`` file; None when it cannot be read."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read vCard file %s: %s", path, exc)
        return None
    return parse(content)

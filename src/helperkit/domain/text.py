"""Small text helpers shared by the other domain modules."""

import re
import unicodedata

_UPPER = re.compile(r"[A-Z]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# letters that do not decompose under NFKD
_SPECIAL_LATIN = str.maketrans(
    {"Æ": "AE", "æ": "ae", "Œ": "OE", "œ": "oe", "Ø": "O", "ø": "o", "ß": "ss", "Þ": "TH", "þ": "th", "Ð": "D", "ð": "d"}
)


def remove_accents(text: str) -> str:
    """``"Crème Brûlée"`` becomes ``"Creme Brulee"``."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_SPECIAL_LATIN))
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def to_snake_case(text: str) -> str:
    """Convert a camelCase or PascalCase name: ``"firstName"`` -> ``"first_name"``."""
    if not text:
        return text
    text = text[0].lower() + text[1:]
    return _UPPER.sub(lambda match: "_" + match.group(0).lower(), text)


def to_url_friendly(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters collapsed to ``-``."""
    slug = _NON_ALNUM.sub("-", remove_accents(text).lower())
    return slug.strip("-")

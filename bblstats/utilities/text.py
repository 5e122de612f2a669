"""Text helpers for WordPress-rendered strings."""

import html
import re

from unidecode import unidecode

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_html(value: str | None) -> str:
    """Drop tags and decode entities: '<b>Cibona &#8211; Zagreb</b>' -> 'Cibona – Zagreb'."""
    if not value:
        return ""
    text = html.unescape(_TAG_RE.sub("", value))
    return _WHITESPACE_RE.sub(" ", text).strip()


def rendered(field: dict | str | None) -> str:
    """Plain text of a WordPress {'rendered': ...} field."""
    if isinstance(field, dict):
        return strip_html(field.get("rendered"))
    return strip_html(field)


def normalize_for_search(text: str | None) -> str:
    """Accent-insensitive, case-insensitive form for substring search.

    normalize_for_search("Šarić") == normalize_for_search("saric")
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", unidecode(text)).strip().lower()

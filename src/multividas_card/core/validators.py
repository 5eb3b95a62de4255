"""Field validators shared by the card setters.

All helpers are total: they return ``False`` / ``None`` for bad input instead
of raising, so the setters built on top of them can stay silent.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlsplit

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Characters removed by trimming; other Unicode whitespace (NBSP, em-space) is kept.
TRIM_CHARS = " \t\n\r\0\x0b"

# urlsplit silently drops these, so a URL carrying them is not taken at face value.
_URL_FORBIDDEN = frozenset("\t\r\n")


def _effective_schemes(allowed_schemes: Iterable[str] | None) -> frozenset[str]:
    """Narrow the default scheme set; fall back to it when nothing survives."""
    if not allowed_schemes:
        return ALLOWED_SCHEMES
    narrowed = frozenset(s for s in allowed_schemes if s in ALLOWED_SCHEMES)
    return narrowed or ALLOWED_SCHEMES


def is_valid_url(url: Any, allowed_schemes: Iterable[str] | None = None) -> bool:
    """Return True if ``url`` parses and its scheme is allowed.

    Parameters
    ----------
    url:
        Candidate URL. Non-strings and empty strings are invalid.
    allowed_schemes:
        Optional subset of ``{"http", "https"}``. Unknown schemes are dropped;
        if nothing remains the full default set is used.
    """
    if not (isinstance(url, str) and url):
        return False

    # Leading controls or spaces would be stripped by urlsplit and still stored.
    if url[0] <= " " or url != url.strip(TRIM_CHARS) or _URL_FORBIDDEN.intersection(url):
        return False

    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        return False

    return bool(scheme) and scheme.lower() in _effective_schemes(allowed_schemes)


def is_valid_username(username: Any) -> bool:
    """A username is valid if it is a non-empty string."""
    return isinstance(username, str) and bool(username)


def adjust_username(username: Any) -> str | None:
    """Normalize a Multividas username.

    Surrounding whitespace is trimmed, then every leading ``@`` is removed.
    Returns ``None`` for invalid input. The result may be ``""`` (e.g. ``"@"``).
    """
    if not is_valid_username(username):
        return None
    return str(username).strip(TRIM_CHARS).lstrip("@")


def clean_text(value: Any) -> str | None:
    """Trim a text field; ``None`` for non-strings or blank results."""
    if not isinstance(value, str):
        return None
    return value.strip(TRIM_CHARS) or None


def clean_url(value: Any) -> str | None:
    """Return ``value`` unchanged if it is a valid URL, else ``None``."""
    return value if is_valid_url(value) else None


def clean_username(value: Any) -> str | None:
    """Normalized username, or ``None`` when nothing usable remains."""
    return adjust_username(value) or None


__all__ = [
    "ALLOWED_SCHEMES",
    "TRIM_CHARS",
    "adjust_username",
    "clean_text",
    "clean_url",
    "clean_username",
    "is_valid_url",
    "is_valid_username",
]

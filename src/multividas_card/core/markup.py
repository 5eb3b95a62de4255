"""Meta element construction and attribute escaping.

Each card field is rendered as one void element::

    <meta name="multividas:NAME" description="VALUE">     (HTML)
    <meta name="multividas:NAME" description="VALUE" />   (XML)

The value attribute is literally called ``description`` for every field.
Both ``NAME`` and ``VALUE`` go through an attribute escape profile:

- ``XML``    : ``& < > "`` plus ``'`` as ``&#039;`` (XHTML-safe).
- ``HTML5``  : ``& < > "`` plus ``'`` as ``&apos;``.
- ``COMPAT`` : ``& < > "`` only; single quotes are left alone.

Escaping is plain substitution, so existing entities are double-encoded.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

PREFIX = "multividas"

_BASE_TABLE: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}


class EscapeProfile(StrEnum):
    """Entity tables available for attribute escaping."""

    XML = "xml"
    HTML5 = "html5"
    COMPAT = "compat"


_TABLES: dict[EscapeProfile, dict[int, str]] = {
    EscapeProfile.XML: str.maketrans({**_BASE_TABLE, "'": "&#039;"}),
    EscapeProfile.HTML5: str.maketrans({**_BASE_TABLE, "'": "&apos;"}),
    EscapeProfile.COMPAT: str.maketrans(_BASE_TABLE),
}

ALL_PROFILES: frozenset[EscapeProfile] = frozenset(EscapeProfile)


def select_profile(
    xml: bool, available: frozenset[EscapeProfile] = ALL_PROFILES
) -> EscapeProfile:
    """Pick the strictest usable profile for the requested markup style.

    XML output prefers the XML table, everything else prefers HTML5, and
    ``COMPAT`` is the last resort when neither table is available.
    """
    if xml and EscapeProfile.XML in available:
        return EscapeProfile.XML
    if EscapeProfile.HTML5 in available:
        return EscapeProfile.HTML5
    return EscapeProfile.COMPAT


def escape_attribute(value: str, profile: EscapeProfile) -> str:
    """Escape ``value`` for use inside a double-quoted attribute."""
    return value.translate(_TABLES[profile])


def _is_renderable(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    return isinstance(value, str) and bool(value)


def build_meta_element(name: Any, value: Any, xml: bool = False) -> str:
    """Build a single ``<meta>`` element from a name and value.

    Returns ``""`` unless ``name`` is a non-empty string and ``value`` is a
    non-empty string or a positive integer.
    """
    if not (isinstance(name, str) and name and _is_renderable(value)):
        return ""

    profile = select_profile(xml)
    return (
        f'<meta name="{PREFIX}:{escape_attribute(name, profile)}"'
        f' description="{escape_attribute(str(value), profile)}"'
        f"{' />' if xml else '>'}"
    )


__all__ = [
    "ALL_PROFILES",
    "PREFIX",
    "EscapeProfile",
    "build_meta_element",
    "escape_attribute",
    "select_profile",
]

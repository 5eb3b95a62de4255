"""
CardRecord Contract

A Multividas card is the sharing metadata of a single page: the card type,
the publishing site's username, and a title / description / image triple.
It is filled through chained setters and rendered as ``<meta>`` elements.

Validation
----------
Setters never raise. Input that fails validation is dropped and the field
keeps its previous value; the rejection is logged at DEBUG level. Callers who
need an explicit verdict use :meth:`CardRecord.check`, which returns a
:class:`~multividas_card.core.result.Result`.

Keyword construction, ``model_validate`` and plain attribute assignment run
the same rules through field validators; there an invalid value becomes ``None``.

Required fields
---------------
Each card type lists its required fields in :data:`REQUIRED_FIELDS`. For
``summary`` both ``description`` and ``image`` are required; until both are
set, :meth:`CardRecord.to_array` returns ``{}`` and the renderers return ``""``.

Serialization
-------------
Keys are emitted in a fixed order: ``card``, ``site``, ``title``,
``description``, ``image``. ``card`` and ``site`` are always present on a
complete card; an unset site is represented as ``""`` and is skipped when
rendering markup. ``url`` is stored but not serialized.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from multividas_card.core.markup import build_meta_element
from multividas_card.core.result import Result, err, ok
from multividas_card.core.settings import get_logger
from multividas_card.core.validators import clean_text, clean_url, clean_username

logger = get_logger(__name__)


class CardType(StrEnum):
    """Card layouts a publisher may request."""

    SUMMARY = "summary"


DEFAULT_CARD_TYPE = CardType.SUMMARY

ALLOWED_CARD_TYPES: frozenset[str] = frozenset(t.value for t in CardType)

REQUIRED_FIELDS: MappingProxyType[CardType, tuple[str, ...]] = MappingProxyType(
    {
        CardType.SUMMARY: ("description", "image"),
    }
)

_OPTIONAL_ORDER: tuple[str, ...] = ("title", "description", "image")


class CardIncomplete(BaseModel):
    """Why a card cannot be rendered yet."""

    card: CardType
    missing: tuple[str, ...] = Field(description="Required fields that are still unset.")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.card.value} card is missing: {', '.join(self.missing)}"


class CardRecord(BaseModel):
    """Mutable builder for a single Multividas card."""

    card: CardType = Field(default=DEFAULT_CARD_TYPE, description="Card type.")
    url: str | None = Field(default=None, description="Canonical page URL.")
    site: str | None = Field(default=None, description="Publisher username without '@'.")
    title: str | None = Field(default=None, description="Page title.")
    description: str | None = Field(default=None, description="Page description.")
    image: str | None = Field(default=None, description="URL of an image for the page.")

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, card_type: Any = "", /, **data: Any) -> None:
        if "card" not in data:
            data["card"] = card_type
        super().__init__(**data)

    @field_validator("card", mode="before")
    @classmethod
    def _fallback_card_type(cls, v: Any) -> CardType:
        """Unknown or missing card types silently become ``summary``."""
        if isinstance(v, str) and v in ALLOWED_CARD_TYPES:
            return CardType(v)
        if v:
            logger.debug("Unsupported card type %r; using %s", v, DEFAULT_CARD_TYPE.value)
        return DEFAULT_CARD_TYPE

    @field_validator("url", "image", mode="before")
    @classmethod
    def _validate_url(cls, v: Any) -> str | None:
        """Only http(s) URLs survive; anything else is stored as ``None``."""
        return clean_url(v)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _validate_text(cls, v: Any) -> str | None:
        return clean_text(v)

    @field_validator("site", mode="before")
    @classmethod
    def _validate_site(cls, v: Any) -> str | None:
        return clean_username(v)

    # ----- Setters ---------------------------------------------------------
    def set_url(self, url: Any) -> CardRecord:
        """Canonical URL; stored only with an http(s) scheme."""
        cleaned = clean_url(url)
        if cleaned is not None:
            self.url = cleaned
        else:
            logger.debug("Ignoring invalid url %r", url)
        return self

    def set_title(self, title: Any) -> CardRecord:
        """Page title, trimmed. Multividas truncates titles over 200 characters."""
        cleaned = clean_text(title)
        if cleaned is not None:
            self.title = cleaned
        else:
            logger.debug("Ignoring blank title %r", title)
        return self

    def set_description(self, description: Any) -> CardRecord:
        """Page description, trimmed. Same rule as :meth:`set_title`."""
        cleaned = clean_text(description)
        if cleaned is not None:
            self.description = cleaned
        else:
            logger.debug("Ignoring blank description %r", description)
        return self

    def set_site(self, username: Any) -> CardRecord:
        """Publisher username; the ``@`` prefix is optional."""
        normalized = clean_username(username)
        if normalized is not None:
            self.site = normalized
        else:
            logger.debug("Ignoring invalid site username %r", username)
        return self

    def set_image(self, url: Any) -> CardRecord:
        """URL of an image representing the page; http(s) only."""
        cleaned = clean_url(url)
        if cleaned is not None:
            self.image = cleaned
        else:
            logger.debug("Ignoring invalid image url %r", url)
        return self

    # ----- Completeness ----------------------------------------------------
    def missing_fields(self) -> tuple[str, ...]:
        """Return the required fields for this card type that are still unset."""
        return tuple(name for name in REQUIRED_FIELDS[self.card] if getattr(self, name) is None)

    def is_complete(self) -> bool:
        """Return True if the card can be rendered."""
        return not self.missing_fields()

    def check(self) -> Result[dict[str, str], CardIncomplete]:
        """Strict counterpart of :meth:`to_array`.

        Returns ``Ok(mapping)`` for a complete card, otherwise an ``Err``
        carrying a :class:`CardIncomplete` that names the missing fields.
        """
        missing = self.missing_fields()
        if missing:
            return err(CardIncomplete(card=self.card, missing=missing))
        return ok(self.to_array())

    # ----- Serialization ---------------------------------------------------
    def to_array(self) -> dict[str, str]:
        """Translate the card into an ordered mapping of property name to value.

        Returns
        -------
        dict[str, str]
            ``{}`` when a required field is missing. Otherwise ``card`` and
            ``site`` first (``site`` is ``""`` when never set), followed by
            whichever of ``title``, ``description`` and ``image`` are set.
        """
        if not self.is_complete():
            return {}

        card: dict[str, str] = {
            "card": self.card.value,
            "site": self.site or "",
        }
        for name in _OPTIONAL_ORDER:
            value = getattr(self, name)
            if value is not None:
                card[name] = value
        return card

    def as_html(self) -> str:
        """Render HTML ``<meta>`` elements, or ``""`` if the card is incomplete."""
        return self._generate_markup(xml=False)

    def as_xml(self) -> str:
        """Render XHTML ``<meta ... />`` elements, or ``""`` if the card is incomplete."""
        return self._generate_markup(xml=True)

    def _generate_markup(self, xml: bool) -> str:
        return "".join(
            build_meta_element(name, value, xml=xml) for name, value in self.to_array().items()
        )


__all__ = [
    "ALLOWED_CARD_TYPES",
    "DEFAULT_CARD_TYPE",
    "REQUIRED_FIELDS",
    "CardIncomplete",
    "CardRecord",
    "CardType",
]

"""Pydantic contracts exposed by multividas-card."""

from __future__ import annotations

from .card import ALLOWED_CARD_TYPES, REQUIRED_FIELDS, CardIncomplete, CardRecord, CardType

__all__ = ["ALLOWED_CARD_TYPES", "REQUIRED_FIELDS", "CardIncomplete", "CardRecord", "CardType"]

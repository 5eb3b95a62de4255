"""multividas-card: build, validate and render Multividas sharing cards.

A card is a handful of page metadata fields (site, title, description, image)
rendered as ``<meta name="multividas:...">`` elements for HTML or XHTML pages.

Example
-------
>>> from multividas_card import CardRecord
>>> card = CardRecord().set_site("@multividas").set_description("d")
>>> card.set_image("https://example.com/i.png").as_html()[:36]
'<meta name="multividas:card" descrip'
"""

from __future__ import annotations

from multividas_card.core.contracts.card import CardIncomplete, CardRecord, CardType
from multividas_card.core.markup import PREFIX

__all__ = ["__version__", "PREFIX", "CardIncomplete", "CardRecord", "CardType"]
__version__ = "1.1.1"

"""Core package for multividas-card.

Holds configuration, the Result container, field validators, markup helpers
and the card contract itself.
"""

from __future__ import annotations

__all__ = ["__doc__"]

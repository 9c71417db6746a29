"""
Product: metadata for a tradable instrument, keyed by product id.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Product:
    """Product info as returned by the product search service."""

    id: str
    name: str
    isin: str
    symbol: str
    currency: str
    close_price: float
    close_price_date: date | None = None

"""
Position: one open position decoded from the portfolio update payload.

Immutable. The id doubles as the join key into the product catalog.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Open position: signed size, current price and break-even (cost basis) price."""

    id: str
    size: float
    price: float
    break_even_price: float

    @property
    def value(self) -> float:
        """Market value at the current price."""
        return self.size * self.price

    @property
    def cost_basis(self) -> float:
        return self.size * self.break_even_price

    @property
    def unrealized_pnl(self) -> float:
        """(price - break_even_price) * size."""
        return (self.price - self.break_even_price) * self.size

"""
Portfolio: positions joined with their product metadata, plus unrealized P&L.

Built fresh for each portfolio request; never cached. Entry order is the
server's row order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from degiro_core.errors import UnknownProduct
from degiro_core.position import Position
from degiro_core.product import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionProduct:
    """A position paired with its product. Ids must match."""

    product: Product
    position: Position

    def __post_init__(self) -> None:
        if self.product.id != self.position.id:
            raise ValueError(
                f"Product id {self.product.id!r} does not match position id {self.position.id!r}"
            )

    @property
    def unrealized_pnl(self) -> float:
        return self.position.unrealized_pnl


@dataclass
class Portfolio:
    """Ordered sequence of PositionProduct entries."""

    entries: list[PositionProduct] = field(default_factory=list)

    def __iter__(self) -> Iterator[PositionProduct]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def value(self) -> float:
        """Sum of market values across positions (mixed currencies are not converted)."""
        return sum(e.position.value for e in self.entries)

    @property
    def unrealized_pnl(self) -> float:
        """Aggregate unrealized P&L."""
        return sum(e.unrealized_pnl for e in self.entries)


def assemble(positions: Sequence[Position], products: Mapping[str, Product]) -> Portfolio:
    """
    Join positions with products in position order and return the Portfolio.

    Raises UnknownProduct if any position has no product; no partial
    portfolio is returned.
    """
    entries: list[PositionProduct] = []
    for position in positions:
        product = products.get(position.id)
        if product is None:
            raise UnknownProduct(position.id)
        entries.append(PositionProduct(product=product, position=position))
    portfolio = Portfolio(entries=entries)
    logger.info(
        "Portfolio assembled: %d positions, unrealized PnL %.2f",
        len(portfolio),
        portfolio.unrealized_pnl,
    )
    return portfolio

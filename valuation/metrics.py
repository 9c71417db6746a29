"""
Portfolio valuation metrics: market value, cost basis, unrealized PnL, return.

Amounts are summed across positions as-is; positions in different currencies
are not converted.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from degiro_core.portfolio import Portfolio


@dataclass
class PortfolioMetrics:
    """Aggregate valuation of a portfolio."""

    positions: int
    market_value: float
    cost_basis: float
    unrealized_pnl: float
    unrealized_return_pct: float
    winners: int
    losers: int
    largest_gain: float
    largest_loss: float


def compute_metrics(portfolio: Portfolio) -> PortfolioMetrics:
    """
    Compute valuation metrics from an assembled portfolio.

    Parameters
    ----------
    portfolio : Portfolio
        Output of degiro_core.assemble() or DegiroClient.fetch_portfolio().

    Returns
    -------
    PortfolioMetrics
        unrealized_return_pct is relative to the absolute cost basis and is 0
        when the cost basis is 0.
    """
    if len(portfolio) == 0:
        return PortfolioMetrics(
            positions=0,
            market_value=0.0,
            cost_basis=0.0,
            unrealized_pnl=0.0,
            unrealized_return_pct=0.0,
            winners=0,
            losers=0,
            largest_gain=0.0,
            largest_loss=0.0,
        )

    size = np.array([e.position.size for e in portfolio], dtype=float)
    price = np.array([e.position.price for e in portfolio], dtype=float)
    break_even = np.array([e.position.break_even_price for e in portfolio], dtype=float)

    pnl = (price - break_even) * size
    market_value = float(np.sum(size * price))
    cost_basis = float(np.sum(size * break_even))
    total_pnl = float(np.sum(pnl))
    abs_cost = float(np.sum(np.abs(size * break_even)))
    return_pct = (total_pnl / abs_cost * 100.0) if abs_cost > 1e-14 else 0.0

    return PortfolioMetrics(
        positions=len(portfolio),
        market_value=market_value,
        cost_basis=cost_basis,
        unrealized_pnl=total_pnl,
        unrealized_return_pct=return_pct,
        winners=int(np.count_nonzero(pnl > 0)),
        losers=int(np.count_nonzero(pnl < 0)),
        largest_gain=float(max(np.max(pnl), 0.0)),
        largest_loss=float(min(np.min(pnl), 0.0)),
    )

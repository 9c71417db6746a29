"""
Portfolio report: print positions and a valuation summary to the console.
"""

from __future__ import annotations

from degiro_core.account import Account
from degiro_core.portfolio import Portfolio
from valuation.metrics import PortfolioMetrics, compute_metrics


def print_report(portfolio: Portfolio, account: Account | None = None) -> PortfolioMetrics:
    """
    Compute metrics for the portfolio and print a position table plus summary.

    Returns
    -------
    PortfolioMetrics
        The computed metrics (e.g. for programmatic use).
    """
    metrics = compute_metrics(portfolio)
    if account is not None:
        print(f"--- Portfolio: {account.display_name} ({account.int_account}) ---")
    else:
        print("--- Portfolio ---")
    for e in portfolio:
        p = e.position
        print(
            f"{e.product.symbol:<8} {e.product.name[:28]:<28} {p.size:>10,.2f} "
            f"@ {p.price:>10,.2f} {e.product.currency:<3}  "
            f"BE {p.break_even_price:>10,.2f}  PnL {p.unrealized_pnl:>12,.2f}"
        )
    print(f"Positions:       {metrics.positions}")
    print(f"Market value:    {metrics.market_value:,.2f}")
    print(f"Cost basis:      {metrics.cost_basis:,.2f}")
    print(f"Unrealized PnL:  {metrics.unrealized_pnl:,.2f} ({metrics.unrealized_return_pct:.2f}%)")
    print(f"Winners/losers:  {metrics.winners}/{metrics.losers}")
    print("---------------------------")
    return metrics

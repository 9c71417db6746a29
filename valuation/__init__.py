"""
Valuation and reporting on top of degiro-core portfolios.

Aggregate metrics (numpy), a DataFrame view (pandas), and a console report.
"""

from valuation.frame import pnl_by_currency, portfolio_to_dataframe
from valuation.metrics import PortfolioMetrics, compute_metrics
from valuation.portfolio_report import print_report

__all__ = [
    "PortfolioMetrics",
    "compute_metrics",
    "portfolio_to_dataframe",
    "pnl_by_currency",
    "print_report",
]

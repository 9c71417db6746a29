"""
Tabular view of a portfolio as a pandas DataFrame, one row per position.
"""

from __future__ import annotations

import pandas as pd

from degiro_core.portfolio import Portfolio

COLUMNS = (
    "id",
    "symbol",
    "name",
    "isin",
    "currency",
    "size",
    "price",
    "break_even_price",
    "close_price",
    "cost_basis",
    "value",
    "unrealized_pnl",
)


def portfolio_to_dataframe(portfolio: Portfolio) -> pd.DataFrame:
    """
    Flatten a portfolio into a DataFrame in server row order.

    Columns are COLUMNS; an empty portfolio gives an empty frame with the same
    columns.
    """
    rows = [
        {
            "id": e.position.id,
            "symbol": e.product.symbol,
            "name": e.product.name,
            "isin": e.product.isin,
            "currency": e.product.currency,
            "size": e.position.size,
            "price": e.position.price,
            "break_even_price": e.position.break_even_price,
            "close_price": e.product.close_price,
            "cost_basis": e.position.cost_basis,
            "value": e.position.value,
            "unrealized_pnl": e.position.unrealized_pnl,
        }
        for e in portfolio
    ]
    return pd.DataFrame(rows, columns=list(COLUMNS))


def pnl_by_currency(portfolio: Portfolio) -> pd.Series:
    """Unrealized PnL summed per product currency."""
    df = portfolio_to_dataframe(portfolio)
    if df.empty:
        return pd.Series(dtype=float, name="unrealized_pnl")
    return df.groupby("currency", sort=True)["unrealized_pnl"].sum()

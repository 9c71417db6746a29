"""
Show portfolio example: log in (or reuse session.txt), fetch positions, print PnL.

Requires DEGIRO_USER and DEGIRO_PASS in the environment or a .env file.
Optional: DEGIRO_SESSION_PATH, DEGIRO_BASE_URL, DEGIRO_TIMEOUT.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from degiro_core import ConfigurationError, Settings
from degiro_core.api import DegiroClient
from degiro_core.settings import load_env
from valuation import pnl_by_currency, print_report


async def run(settings: Settings) -> None:
    async with DegiroClient(settings) as client:
        account = await client.connect()
        portfolio = await client.fetch_portfolio()
    print_report(portfolio, account)
    by_currency = pnl_by_currency(portfolio)
    if not by_currency.empty:
        print("\nUnrealized PnL by currency:")
        for currency, pnl in by_currency.items():
            print(f"  {currency}: {pnl:,.2f}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    load_env()
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()

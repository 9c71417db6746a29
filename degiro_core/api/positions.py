"""
PositionDecoder: decode the portfolio update payload into Position records.

The server sends each position as a row of unnamed values; meaning is given
by array index only. POSITION_ROW_SCHEMA is the single place that mapping
lives. The whole decode fails on the first malformed row: a bad row means an
incompatible server format that cannot be partially trusted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from degiro_core.account import Account, ServiceConfig
from degiro_core.api.http import HttpClient, json_body
from degiro_core.errors import MalformedResponse, MissingField
from degiro_core.position import Position

logger = logging.getLogger(__name__)

# field name -> index in a row's value array. Other indices are ignored.
POSITION_ROW_SCHEMA: dict[str, int] = {
    "id": 0,
    "positionType": 1,
    "size": 2,
    "price": 3,
    "breakEvenPrice": 9,
}

PRODUCT_POSITION_TYPE = "PRODUCT"

# Query flags for v5/update: ask for the full portfolio section.
PORTFOLIO_FLAGS: dict[str, int] = {"portfolio": 0}


def _row_value(values: Sequence[Any], name: str, record_id: str | None) -> Any:
    index = POSITION_ROW_SCHEMA[name]
    if index >= len(values):
        raise MissingField(name, record_id)
    element = values[index]
    if not isinstance(element, dict) or "value" not in element:
        raise MissingField(name, record_id)
    return element["value"]


def _number(value: Any, name: str, record_id: str | None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MissingField(name, record_id)
    return float(value)


def _row_values(row: Any) -> tuple[str | None, Sequence[Any]]:
    """Return (row id for error messages, value array) or raise MissingField."""
    if not isinstance(row, dict):
        raise MissingField("value", None)
    raw_id = row.get("id")
    record_id = str(raw_id) if raw_id is not None else None
    values = row.get("value")
    if not isinstance(values, list):
        raise MissingField("value", record_id)
    return record_id, values


def decode_position_row(row: Any) -> Position | None:
    """
    Decode one row. Returns None for rows that are not PRODUCT positions
    (e.g. CASH); raises MissingField for malformed PRODUCT rows.
    """
    record_id, values = _row_values(row)
    position_type = _row_value(values, "positionType", record_id)
    if position_type != PRODUCT_POSITION_TYPE:
        return None
    raw_id = _row_value(values, "id", record_id)
    if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)) or raw_id == "":
        raise MissingField("id", record_id)
    position_id = str(raw_id)
    return Position(
        id=position_id,
        size=_number(_row_value(values, "size", position_id), "size", position_id),
        price=_number(_row_value(values, "price", position_id), "price", position_id),
        break_even_price=_number(
            _row_value(values, "breakEvenPrice", position_id), "breakEvenPrice", position_id
        ),
    )


def decode_positions(rows: Sequence[Any]) -> list[Position]:
    """
    Decode PRODUCT rows in order; other position types are skipped.

    Duplicates are kept. Raises MissingField on the first malformed row.
    """
    positions: list[Position] = []
    skipped = 0
    for row in rows:
        position = decode_position_row(row)
        if position is None:
            skipped += 1
            continue
        positions.append(position)
    logger.debug("Decoded %d positions (%d non-product rows skipped)", len(positions), skipped)
    return positions


def portfolio_rows(payload: Any) -> list[Any]:
    """Extract portfolio.value from a v5/update response."""
    portfolio = payload.get("portfolio") if isinstance(payload, dict) else None
    rows = portfolio.get("value") if isinstance(portfolio, dict) else None
    if not isinstance(rows, list):
        raise MalformedResponse("Portfolio update has no 'portfolio.value' list", field="portfolio")
    return rows


class PositionDecoder:
    """Fetch {tradingUrl}v5/update/{intAccount};jsessionid=<token> and decode positions."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def fetch(self, config: ServiceConfig, account: Account) -> list[Position]:
        url = f"{config.trading_url}v5/update/{account.int_account};jsessionid={config.session_id}"
        response = await self._http.request("GET", url, params=PORTFOLIO_FLAGS)
        return decode_positions(portfolio_rows(json_body(response)))

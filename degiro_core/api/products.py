"""
ProductCatalog: resolve product ids to Product metadata in one batched call.

Every requested id must come back; a single missing id fails the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any

from degiro_core.account import Account, ServiceConfig
from degiro_core.api.http import HttpClient, data_object, json_body
from degiro_core.errors import MalformedResponse, UnknownProduct
from degiro_core.product import Product

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = ("name", "isin", "symbol", "currency")


def _parse_date(value: Any) -> date | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.debug("Unparseable closePriceDate %r", value)
        return None


def parse_product(product_id: str, record: Any) -> Product:
    """Build a Product from one entry of the info response's data map."""
    if not isinstance(record, dict):
        raise MalformedResponse(f"Product {product_id!r}: record is not an object", field=product_id)
    for name in _REQUIRED_TEXT:
        if not isinstance(record.get(name), str):
            raise MalformedResponse(f"Product {product_id!r}: missing {name!r}", field=name)
    close_price = record.get("closePrice")
    if isinstance(close_price, bool) or not isinstance(close_price, (int, float)):
        raise MalformedResponse(f"Product {product_id!r}: missing 'closePrice'", field="closePrice")
    return Product(
        id=product_id,
        name=record["name"],
        isin=record["isin"],
        symbol=record["symbol"],
        currency=record["currency"],
        close_price=float(close_price),
        close_price_date=_parse_date(record.get("closePriceDate")),
    )


class ProductCatalog:
    """POST {productSearchUrl}v5/products/info with all ids in the body."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def resolve_batch(
        self,
        config: ServiceConfig,
        account: Account,
        ids: Sequence[str],
    ) -> dict[str, Product]:
        """
        Return id -> Product for every id in ids.

        Raises UnknownProduct for the first id absent from the response.
        Duplicate ids are sent once. An empty ids list makes no request.
        """
        requested = list(dict.fromkeys(str(i) for i in ids))
        if not requested:
            return {}
        url = f"{config.product_search_url}v5/products/info"
        params = {"intAccount": account.int_account, "sessionId": config.session_id}
        response = await self._http.request("POST", url, params=params, json=requested)
        data = data_object(json_body(response), "product info")
        products: dict[str, Product] = {}
        for product_id in requested:
            if product_id not in data:
                raise UnknownProduct(product_id)
            products[product_id] = parse_product(product_id, data[product_id])
        logger.info("Resolved %d products", len(products))
        return products

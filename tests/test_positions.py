"""
Tests for PositionDecoder: positional row schema, PRODUCT filtering, fail-fast decoding.
"""

import pytest

from degiro_core import Account, MalformedResponse, MissingField, Position, ServiceConfig
from degiro_core.api import POSITION_ROW_SCHEMA, HttpClient, PositionDecoder, decode_positions
from degiro_core.api.positions import portfolio_rows

from fakes import BASE_URL, INT_ACCOUNT, PA_URL, PRODUCT_SEARCH_URL, TRADING_URL, field_row


# --- schema ---


def test_schema_indices():
    assert POSITION_ROW_SCHEMA["id"] == 0
    assert POSITION_ROW_SCHEMA["size"] == 2
    assert POSITION_ROW_SCHEMA["price"] == 3
    assert POSITION_ROW_SCHEMA["breakEvenPrice"] == 9


# --- decode_positions ---


def test_decode_single_product_row():
    positions = decode_positions([field_row("111", size=10, price=105.0, break_even=100.0)])
    assert positions == [Position(id="111", size=10.0, price=105.0, break_even_price=100.0)]


def test_decode_skips_non_product_rows_and_keeps_order():
    rows = [
        field_row("3", size=1),
        field_row("EUR", position_type="CASH"),
        field_row("1", size=2),
        field_row("FLATEX_EUR", position_type="CASH"),
        field_row("2", size=3),
    ]
    positions = decode_positions(rows)
    assert [p.id for p in positions] == ["3", "1", "2"]
    assert [p.size for p in positions] == [1.0, 2.0, 3.0]


def test_decode_keeps_duplicates():
    positions = decode_positions([field_row("1"), field_row("1")])
    assert [p.id for p in positions] == ["1", "1"]


def test_decode_numeric_id_is_stringified():
    assert decode_positions([field_row(4567)])[0].id == "4567"


def test_decode_ignores_other_indices():
    row = field_row("1")
    row["value"][4]["value"] = "not a number"
    row["value"][6]["value"] = None
    assert len(decode_positions([row])) == 1


def test_decode_only_cash_rows_is_empty():
    assert decode_positions([field_row("EUR", position_type="CASH")]) == []


def test_decode_truncated_row_raises_missing_field():
    row = field_row("111")
    row["value"] = row["value"][:9]
    with pytest.raises(MissingField) as exc:
        decode_positions([row])
    assert exc.value.field == "breakEvenPrice"
    assert exc.value.record_id == "111"


def test_decode_wrong_type_raises_missing_field():
    with pytest.raises(MissingField) as exc:
        decode_positions([field_row("111", price="105.0")])
    assert exc.value.field == "price"


def test_decode_cell_without_value_key_raises():
    row = field_row("111")
    del row["value"][2]["value"]
    with pytest.raises(MissingField) as exc:
        decode_positions([row])
    assert exc.value.field == "size"


def test_decode_bad_row_fails_whole_batch():
    rows = [field_row("1"), field_row("2", size=None), field_row("3")]
    with pytest.raises(MissingField) as exc:
        decode_positions(rows)
    assert exc.value.record_id == "2"


@pytest.mark.parametrize("position_type", ["PRODUCT", "CASH"])
def test_decode_row_without_position_type_cell(position_type):
    row = field_row("111", position_type=position_type)
    row["value"] = row["value"][:1]
    with pytest.raises(MissingField) as exc:
        decode_positions([row])
    assert exc.value.field == "positionType"
    assert exc.value.record_id == "111"


def test_decode_row_without_value_list():
    with pytest.raises(MissingField):
        decode_positions([{"id": "1", "name": "positionrow"}])


# --- portfolio_rows ---


def test_portfolio_rows_requires_portfolio_value():
    with pytest.raises(MalformedResponse):
        portfolio_rows({"totalPortfolio": {}})


# --- PositionDecoder.fetch ---


@pytest.mark.asyncio
async def test_fetch_calls_update_endpoint(fake, http_client):
    config = ServiceConfig(
        session_id="fresh-token",
        client_id=42,
        urls={"paUrl": PA_URL, "tradingUrl": TRADING_URL, "productSearchUrl": PRODUCT_SEARCH_URL},
    )
    account = Account(int_account=INT_ACCOUNT, username="jdoe", display_name="jdoe")
    positions = await PositionDecoder(HttpClient(BASE_URL, client=http_client)).fetch(config, account)
    assert [p.id for p in positions] == ["111", "222"]
    request = fake.calls[0]
    assert request.url.path == f"/trading/secure/v5/update/{INT_ACCOUNT};jsessionid=fresh-token"
    assert request.url.params["portfolio"] == "0"

import json

import pytest

from binance_agent.core.errors import DecodeError
from binance_agent.services.decoder import decode_depth, decode_trade

from fakes import BAD_TRADE_FRAME, DEPTH_FRAME, TRADE_FRAME, depth_frame


def test_decode_trade():
    trade = decode_trade(TRADE_FRAME)
    assert trade.type == "trade"
    assert trade.event_time == 123456789
    assert trade.symbol == "BNBBTC"
    assert trade.id == 12345
    assert trade.price == 0.001
    assert trade.quantity == 100.0
    assert trade.buyer_order_id == 88
    assert trade.seller_order_id == 50
    assert trade.trade_time == 123456785
    assert trade.is_buyer_maker is True


def test_decode_trade_accepts_bytes():
    assert decode_trade(TRADE_FRAME.encode()).id == 12345


def test_decode_trade_rejects_non_numeric_timestamp():
    with pytest.raises(DecodeError) as exc_info:
        decode_trade(BAD_TRADE_FRAME)
    assert "error unmarshalling trade" in str(exc_info.value)
    assert "T" in exc_info.value.detail


def test_decode_trade_rejects_wrong_event_type():
    with pytest.raises(DecodeError):
        decode_trade(DEPTH_FRAME)


def test_decode_trade_keys_are_case_sensitive():
    raw = json.loads(TRADE_FRAME)
    # "E" alone must not satisfy the event type tag "e"
    del raw["e"]
    with pytest.raises(DecodeError):
        decode_trade(json.dumps(raw))


def test_decode_trade_requires_quoted_price():
    raw = json.loads(TRADE_FRAME)
    raw["p"] = 0.001
    with pytest.raises(DecodeError, match="quoted decimal"):
        decode_trade(json.dumps(raw))


@pytest.mark.parametrize("price", ["abc", "", "1_000", "NaN", "-0.5", "1e999", " 0.001", "0.001\n"])
def test_decode_trade_rejects_bad_price(price):
    raw = json.loads(TRADE_FRAME)
    raw["p"] = price
    with pytest.raises(DecodeError):
        decode_trade(json.dumps(raw))


def test_decode_trade_ignores_unknown_keys():
    raw = json.loads(TRADE_FRAME)
    raw["x"] = "whatever"
    assert decode_trade(json.dumps(raw)).id == 12345


def test_decode_trade_rejects_invalid_json():
    with pytest.raises(DecodeError):
        decode_trade("{not json")


@pytest.mark.parametrize("text", ["0.001", "100", "0.00000001", "64123.45000000", "1e-8", ".5"])
def test_decoded_decimals_match_float_parsing(text):
    raw = json.loads(TRADE_FRAME)
    raw["p"] = text
    raw["q"] = text
    trade = decode_trade(json.dumps(raw))
    assert trade.price == float(text)
    assert trade.quantity == float(text)


def test_decode_depth():
    diff = decode_depth(DEPTH_FRAME)
    assert diff.type == "depthUpdate"
    assert diff.event_time == 123456789
    assert diff.symbol == "BNBBTC"
    assert diff.first_update_id == 157
    assert diff.last_update_id == 160
    assert [(e.price, e.quantity) for e in diff.bids] == [(0.0024, 10.0)]
    assert [(e.price, e.quantity) for e in diff.asks] == [(0.0026, 100.0)]


def test_decode_depth_empty_sides():
    diff = decode_depth(depth_frame([], []))
    assert diff.bids == ()
    assert diff.asks == ()


def test_decode_depth_rejects_entry_with_wrong_arity():
    frame = depth_frame([["0.0024", "10"], ["0.0023"]], [])
    with pytest.raises(DecodeError, match="wrong number of fields in book entry: 1 != 2"):
        decode_depth(frame)


def test_decode_depth_rejects_object_entries():
    frame = depth_frame([{"price": "0.0024", "quantity": "10"}], [])
    with pytest.raises(DecodeError, match="book entry must be"):
        decode_depth(frame)


def test_decode_depth_rejects_non_numeric_quantity():
    with pytest.raises(DecodeError):
        decode_depth(depth_frame([], [["0.0026", "lots"]]))


def test_decode_depth_rejects_trade_frame():
    with pytest.raises(DecodeError) as exc_info:
        decode_depth(TRADE_FRAME)
    assert exc_info.value.kind == "depth update"


def test_decode_trade_rejects_price_with_trailing_newline():
    raw = json.loads(TRADE_FRAME)
    raw["p"] = "0.001\n"
    with pytest.raises(DecodeError) as exc_info:
        decode_trade(json.dumps(raw))
    assert "not a decimal number" in exc_info.value.detail


def test_decode_trade_rejects_full_field_names():
    raw = json.loads(TRADE_FRAME)
    # the wire tag "p" is required; the Python field name does not stand in for it
    del raw["p"]
    raw["price"] = "7"
    with pytest.raises(DecodeError):
        decode_trade(json.dumps(raw))


def test_decode_depth_rejects_full_field_names():
    frame = json.dumps(
        {
            "type": "depthUpdate",
            "event_time": 123456789,
            "last_update_id": 160,
            "bids": [["0.0024", "10"]],
            "asks": [],
        }
    )
    with pytest.raises(DecodeError):
        decode_depth(frame)

from decimal import Decimal

import pytest

from hashhunt.errors import UpstreamPayloadError
from hashhunt.services.address import ZERO_ADDRESS
from hashhunt.services.normalizer import (
    normalize_gas_price,
    normalize_history_events,
    normalize_limit_orders,
    normalize_portfolio_tokens,
    normalize_price_chart,
    normalize_token_info,
    token_value,
)

USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def _tier(max_fee, priority="100000000"):
    return {"maxFeePerGas": max_fee, "maxPriorityFeePerGas": priority}


def test_gas_price_maps_tiers_and_defaults_base_fee():
    payload = {
        "low": _tier("1000000000"),
        "medium": _tier("2000000000"),
        "high": _tier("3000000000"),
        "instant": _tier("4000000000"),
    }

    tiers = normalize_gas_price(payload, chain_id=1, timestamp_ms=1700000000000).to_wire()

    assert tiers["chainId"] == 1
    assert tiers["timestamp"] == 1700000000000
    assert tiers["baseFee"] == 0
    assert tiers["priorityFee"] == 100000000
    prices = tiers["gasPrices"]
    assert [prices[name]["price"] for name in ("slow", "standard", "fast", "instant")] == [
        1000000000,
        2000000000,
        3000000000,
        4000000000,
    ]
    assert prices["slow"]["maxFeePerGas"] == 1000000000


def test_gas_price_never_fails_on_garbage():
    tiers = normalize_gas_price({"low": {"maxFeePerGas": "not-a-number"}, "baseFee": "12"}, 137, 0)

    assert tiers.gas_prices.slow.price == 0
    assert tiers.gas_prices.instant.max_priority_fee_per_gas == 0
    assert tiers.base_fee == 12


def test_token_info_defaults():
    info = normalize_token_info({}, USDC)

    assert info.symbol == "UNKNOWN"
    assert info.name == "Unknown Token"
    assert info.decimals == 18
    assert info.tags == []
    assert info.address == USDC


def test_token_info_keeps_upstream_fields():
    info = normalize_token_info(
        {"symbol": "USDC", "name": "USD Coin", "decimals": 6, "logoURI": "https://logo", "tags": ["tokens"]},
        USDC,
    )

    assert info.to_wire() == {
        "symbol": "USDC",
        "name": "USD Coin",
        "address": USDC,
        "decimals": 6,
        "logoURI": "https://logo",
        "tags": ["tokens"],
    }


def test_price_chart_converts_seconds_to_milliseconds():
    points = normalize_price_chart({"data": [{"time": 1700000000, "value": "1234.5"}]})

    assert [point.to_wire() for point in points] == [{"timestamp": 1700000000000, "price": 1234.5}]


def test_price_chart_skips_malformed_points_and_sorts():
    payload = {
        "data": [
            {"time": 20, "value": 2},
            {"time": "bad", "value": 1},
            {"value": 3},
            {"time": 10, "value": 1},
        ]
    }

    assert [point.timestamp for point in normalize_price_chart(payload)] == [10000, 20000]
    assert normalize_price_chart({}) == []
    assert normalize_price_chart(None) == []


def test_portfolio_token_list_values_and_order():
    payload = {
        "result": [
            {"protocol_name": "erc20", "result": [{"symbol": "SKIP", "name": "Skip", "balance": "1"}]},
            {
                "protocol_name": "native",
                "result": [
                    {"symbol": "USDC", "name": "USD Coin", "address": USDC, "decimals": 6, "balance": "2500000", "price": 1},
                    {
                        "symbol": "ETH",
                        "name": "Ethereum",
                        "address": ZERO_ADDRESS,
                        "decimals": 18,
                        "balance": "1500000000000000000",
                        "price": 2000,
                    },
                    {"symbol": "DUST", "name": "Dust", "balance": "0", "price": 5},
                    {"name": "No Symbol", "balance": "10", "price": 5},
                ],
            },
        ]
    }

    tokens = normalize_portfolio_tokens(payload, chain_id=1)

    assert [token.symbol for token in tokens] == ["ETH", "USDC"]
    assert tokens[0].value == pytest.approx(3000.0)
    assert tokens[1].value == pytest.approx(2.5)
    assert tokens[0].balance == "1500000000000000000"
    assert tokens[0].icon == "🔵"


def test_portfolio_value_only_rows_filter_by_chain():
    payload = {
        "result": [
            {
                "protocol_name": "native",
                "result": [
                    {"chain_id": 1, "value_usd": 1234.5},
                    {"chain_id": 137, "value_usd": 10},
                    {"chain_id": 1, "value_usd": 0},
                ],
            }
        ]
    }

    tokens = normalize_portfolio_tokens(payload, chain_id=1)

    assert len(tokens) == 1
    assert tokens[0].symbol == "ETH"
    assert tokens[0].address == ZERO_ADDRESS
    assert tokens[0].value == 1234.5
    assert tokens[0].balance == "0"


def test_portfolio_without_result_is_no_data():
    assert normalize_portfolio_tokens({}, 1) is None
    assert normalize_portfolio_tokens({"result": []}, 1) == []


def test_history_events_map_type_codes_and_fields():
    payload = {
        "items": [
            {
                "id": "evt-1",
                "type": 1,
                "timeMs": 1700000000123,
                "direction": "out",
                "details": {
                    "txHash": "0xhash",
                    "blockNumber": 123,
                    "fromAddress": "0xfrom",
                    "toAddress": "0xto",
                    "tokenActions": [{"symbol": "USDC", "name": "USD Coin", "address": USDC}],
                },
            },
            {"type": 99, "timeMs": 1700000001000, "address": "0xwallet"},
        ]
    }

    first, second = [event.to_wire() for event in normalize_history_events(payload, 1)]

    assert first["type"] == "swap"
    assert first["timestamp"] == 1700000000
    assert first["from"] == "0xfrom"
    assert first["transactionHash"] == "0xhash"
    assert first["tokenSymbol"] == "USDC"
    assert first["chainId"] == 1
    assert second["type"] == "transfer"
    assert second["id"] == "event_1700000001000"
    assert second["from"] == "0xwallet"
    assert second["tokenSymbol"] == "ETH"


def test_history_without_items_raises():
    with pytest.raises(UpstreamPayloadError):
        normalize_history_events({"data": []}, 1)


def test_limit_orders_accept_list_or_object():
    order = {
        "orderHash": "0xorder",
        "signature": "0xsig",
        "createDateTime": "2024-01-01T00:00:00Z",
        "remainingMakerAmount": "5",
        "data": {"makerAsset": USDC, "takerAsset": "0xweth", "makingAmount": "10", "takingAmount": "20", "maker": "0xm"},
    }
    invalid = {**order, "orderHash": "0xbad", "orderInvalidReason": "expired"}

    from_list = normalize_limit_orders([order])
    from_object = normalize_limit_orders({"orders": [order, invalid]})

    assert from_list[0].id == "0xorder"
    assert from_list[0].status == 1
    assert from_list[0].created_at == 1704067200.0
    assert from_list[0].remaining_taker_amount == "20"
    assert [o.status for o in from_object] == [1, 3]
    assert from_object[1].invalidated is True
    assert normalize_limit_orders({}) == []


def test_token_info_coerces_drifted_fields():
    payload = {
        "symbol": 123,
        "name": {"en": "Weird"},
        "decimals": 10**6,
        "logoURI": ["https://example.com/a.png"],
        "tags": [{"value": "tokens", "provider": "1inch"}, "PEG:USD", 7],
    }

    token = normalize_token_info(payload, USDC)

    assert token.symbol == "123"
    assert token.name == "Unknown Token"
    assert token.decimals == 18
    assert token.logo_uri is None
    assert token.tags == ["PEG:USD"]


@pytest.mark.parametrize("decimals", [-1, 256, "1e400", "abc", True, [6]])
def test_token_info_out_of_range_decimals_fall_back(decimals):
    assert normalize_token_info({"decimals": decimals}, USDC).decimals == 18


def test_portfolio_row_with_drifted_fields_still_counts():
    payload = {
        "result": [
            {
                "protocol_name": "native",
                "result": [
                    {
                        "symbol": "ETH",
                        "name": "Ethereum",
                        "decimals": 10**9,
                        "balance": "1000000000000000000",
                        "price": 2000,
                        "logoURI": 5,
                        "tags": [{"value": "native"}],
                        "change24h": 10**400,
                    },
                    {"symbol": ["X"], "name": "No symbol", "balance": "1"},
                    {"symbol": "BIG", "name": "Huge", "balance": "1e400"},
                ],
            }
        ]
    }

    tokens = normalize_portfolio_tokens(payload, 1)

    assert len(tokens) == 1
    assert tokens[0].tags == []
    assert tokens[0].decimals == 18
    assert tokens[0].value == 2000.0
    assert tokens[0].logo_uri == "5"
    assert tokens[0].change_24h == 0.0


def test_token_value_never_raises():
    assert token_value(Decimal("1e999999"), 0, 1e308) == 0.0
    assert token_value(Decimal("1"), 18, 0) == 0.0


def test_history_events_coerce_drifted_fields():
    payload = {
        "items": [
            {
                "type": ["swap"],
                "timeMs": "soon",
                "direction": 1,
                "details": {
                    "txHash": 12345,
                    "fromAddress": {"hex": "0x1"},
                    "status": None,
                    "tokenActions": [{"symbol": 9, "name": None, "address": {"a": 1}}],
                },
            },
            {"type": True, "timeMs": 2000},
        ]
    }

    first, second = [event.to_wire() for event in normalize_history_events(payload, 1)]

    assert first["type"] == "transfer"
    assert first["timestamp"] == 0
    assert first["transactionHash"] == "12345"
    assert first["from"] == ""
    assert first["status"] == "success"
    assert first["direction"] == "1"
    assert first["tokenSymbol"] == "9"
    assert first["tokenName"] == "Ethereum"
    assert first["tokenAddress"] is None
    assert second["type"] == "transfer"


def test_price_chart_skips_overflowing_points():
    payload = {"data": [{"time": float("inf"), "value": 1}, {"time": 1, "value": 10**400}, {"time": 2, "value": 3}]}

    assert [point.timestamp for point in normalize_price_chart(payload)] == [2000]


def test_limit_orders_coerce_non_string_fields():
    order = {"orderHash": 7, "signature": {"r": "0x"}, "data": {"makingAmount": 10, "permit": None}}

    parsed = normalize_limit_orders([order])[0]

    assert parsed.id == "7"
    assert parsed.signature is None
    assert parsed.maker_amount == "10"
    assert parsed.permit == ""

"""
Pure functions that reshape 1inch payloads into the service's stable types.

Missing or malformed optional fields degrade to documented defaults so that
upstream schema drift does not turn into route failures. Only structurally
required data (e.g. a history payload without ``items``) raises.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from ..errors import UpstreamPayloadError
from ..types import (
    GasPrices,
    GasPriceTiers,
    GasTier,
    LimitOrder,
    PricePoint,
    TokenBalance,
    TokenInfo,
    TransactionEvent,
)
from .address import ZERO_ADDRESS
from .token_style import token_color, token_icon

DEFAULT_DECIMALS = 18
# ERC-20 decimals is a uint8; anything larger is upstream garbage.
MAX_DECIMALS = 255
# Wei amounts are uint256.
_UINT256_LIMIT = 2 ** 256

# our tier name -> 1inch gas-price tier name
_GAS_TIERS = {
    "slow": "low",
    "standard": "medium",
    "fast": "high",
    "instant": "instant",
}

_HISTORY_EVENT_TYPES = {
    0: "transfer",
    1: "swap",
    2: "approve",
    3: "mint",
    4: "burn",
}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(result):
        return default
    return result


def _to_int(value: Any, default: int = 0) -> int:
    """Parse decimal strings the way wei amounts arrive; ``default`` otherwise."""

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if abs(value) < _UINT256_LIMIT else default
    parsed = _to_decimal(value) if isinstance(value, (float, str, Decimal)) else None
    # 2**256 has 78 digits
    if parsed is None or parsed.adjusted() > 77:
        return default
    result = int(parsed)
    return result if abs(result) < _UINT256_LIMIT else default


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def token_value(balance: Decimal, decimals: int, price: float) -> float:
    """Value of ``balance`` base units at ``price`` per whole token."""

    if not price:
        return 0.0
    try:
        value = float(balance / (Decimal(10) ** decimals) * Decimal(str(price)))
    except ArithmeticError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _decimals(value: Any) -> int:
    if value is None or value == "":
        return DEFAULT_DECIMALS
    decimals = _to_int(value, DEFAULT_DECIMALS)
    return decimals if 0 <= decimals <= MAX_DECIMALS else DEFAULT_DECIMALS


def _optional_str(value: Any) -> Optional[str]:
    """``value`` as text when it is a string or a plain number, else ``None``."""

    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return str(value)
        except ValueError:
            # int too long to render
            return None
    return None


def _str_or(value: Any, default: str) -> str:
    return _optional_str(value) or default


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


# ---------------------------------------------------------------------------
# Gas price
# ---------------------------------------------------------------------------


def _gas_tier(raw: Any) -> GasTier:
    tier = _as_dict(raw)
    max_fee = _to_int(tier.get("maxFeePerGas"))
    return GasTier(
        price=max_fee,
        max_fee_per_gas=max_fee,
        max_priority_fee_per_gas=_to_int(tier.get("maxPriorityFeePerGas")),
    )


def normalize_gas_price(payload: Any, chain_id: int, timestamp_ms: int) -> GasPriceTiers:
    data = _as_dict(payload)
    tiers = {ours: _gas_tier(data.get(theirs)) for ours, theirs in _GAS_TIERS.items()}
    return GasPriceTiers(
        chain_id=chain_id,
        timestamp=timestamp_ms,
        gas_prices=GasPrices(**tiers),
        base_fee=_to_int(data.get("baseFee")),
        priority_fee=tiers["slow"].max_priority_fee_per_gas,
    )


# ---------------------------------------------------------------------------
# Token metadata
# ---------------------------------------------------------------------------


def normalize_token_info(payload: Any, address: str) -> TokenInfo:
    data = _as_dict(payload)
    return TokenInfo(
        symbol=_str_or(data.get("symbol"), "UNKNOWN"),
        name=_str_or(data.get("name"), "Unknown Token"),
        address=address,
        decimals=_decimals(data.get("decimals")),
        logo_uri=_optional_str(data.get("logoURI")),
        tags=_str_list(data.get("tags")),
    )


# ---------------------------------------------------------------------------
# Price chart
# ---------------------------------------------------------------------------


def normalize_price_chart(payload: Any) -> List[PricePoint]:
    points: List[PricePoint] = []
    raw_points = _as_dict(payload).get("data")
    if not isinstance(raw_points, list):
        return points

    for entry in raw_points:
        if not isinstance(entry, dict):
            continue
        try:
            seconds = int(entry["time"])
            price = float(entry["value"])
        except (KeyError, TypeError, ValueError, OverflowError):
            continue
        if not math.isfinite(price) or abs(seconds) >= _UINT256_LIMIT:
            continue
        points.append(PricePoint(timestamp=seconds * 1000, price=price))

    points.sort(key=lambda point: point.timestamp)
    return points


# ---------------------------------------------------------------------------
# Portfolio
# ---------------------------------------------------------------------------


def _native_value_token(value_usd: float) -> TokenBalance:
    # Value-only rows carry no balance or price, so the upstream USD value is kept as-is.
    return TokenBalance(
        symbol="ETH",
        name="Ethereum",
        address=ZERO_ADDRESS,
        decimals=DEFAULT_DECIMALS,
        tags=["native"],
        balance="0",
        price=0.0,
        value=value_usd,
        icon=token_icon("ETH", "Ethereum"),
        color=token_color("ETH", "Ethereum"),
    )


def _token_balance(row: Dict[str, Any]) -> Optional[TokenBalance]:
    symbol = _optional_str(row.get("symbol"))
    name = _optional_str(row.get("name"))
    balance = _to_decimal(row.get("balance"))
    if not symbol or not name or balance is None or balance <= 0:
        return None
    if balance.adjusted() > 77:
        return None

    decimals = _decimals(row.get("decimals") or None)
    price = _to_float(row.get("price"))
    change = row.get("change24h")

    return TokenBalance(
        symbol=symbol,
        name=name,
        address=_optional_str(row.get("address")) or ZERO_ADDRESS,
        decimals=decimals,
        logo_uri=_optional_str(row.get("logoURI")),
        tags=_str_list(row.get("tags")),
        balance=str(int(balance)),
        price=price,
        value=token_value(balance, decimals, price),
        change_24h=_to_float(change) if change else None,
        icon=token_icon(symbol, name),
        color=token_color(symbol, name),
    )


def normalize_portfolio_tokens(payload: Any, chain_id: int) -> Optional[List[TokenBalance]]:
    """Extract holdings from a portfolio ``current_value`` payload.

    Returns ``None`` when the payload has no ``result`` at all, which callers
    report as "no data" rather than as an error. Tokens come back sorted by
    value, highest first.
    """

    data = _as_dict(payload)
    if data.get("result") is None:
        return None

    tokens: List[TokenBalance] = []
    protocols = data["result"] if isinstance(data["result"], list) else []

    for protocol in protocols:
        if not isinstance(protocol, dict) or protocol.get("protocol_name") != "native":
            continue
        rows = protocol.get("result")
        if not isinstance(rows, list) or not rows:
            continue

        if isinstance(rows[0], dict) and "value_usd" in rows[0]:
            for row in rows:
                row = _as_dict(row)
                value_usd = _to_float(row.get("value_usd"))
                if row.get("chain_id") == chain_id and value_usd > 0:
                    tokens.append(_native_value_token(value_usd))
            continue

        for row in rows:
            token = _token_balance(_as_dict(row))
            if token is not None:
                tokens.append(token)

    tokens.sort(key=lambda token: token.value, reverse=True)
    return tokens


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return _to_int(value)


def _event_type(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _HISTORY_EVENT_TYPES.get(value, "transfer")
    return "transfer"


def _history_event(event: Dict[str, Any], chain_id: int) -> TransactionEvent:
    details = _as_dict(event.get("details"))
    token_actions = details.get("tokenActions")
    actions = token_actions if isinstance(token_actions, list) else []
    first_action = _as_dict(actions[0]) if actions else {}

    token_symbol = _str_or(first_action.get("symbol"), "ETH")
    token_name = _str_or(first_action.get("name"), "Ethereum")
    time_ms = _to_int(event.get("timeMs"))
    fee = details.get("feeInSmallestNative")

    return TransactionEvent(
        id=_optional_str(event.get("id")) or f"event_{time_ms}",
        type=_event_type(event.get("type")),
        timestamp=time_ms // 1000,
        block_number=_to_int(details.get("blockNumber")),
        transaction_hash=_str_or(details.get("txHash"), ""),
        from_=_optional_str(details.get("fromAddress")) or _str_or(event.get("address"), ""),
        to=_str_or(details.get("toAddress"), ""),
        value=_str_or(details.get("value"), "0"),
        token_address=_optional_str(first_action.get("address")),
        token_symbol=token_symbol,
        token_name=token_name,
        gas_used=details.get("gasUsed"),
        gas_price=details.get("gasPrice"),
        status=_str_or(details.get("status"), "success"),
        chain_id=chain_id,
        icon=token_icon(token_symbol, token_name),
        color=token_color(token_symbol, token_name),
        direction=_str_or(event.get("direction"), "unknown"),
        rating=_str_or(event.get("rating"), "unknown"),
        block_time_sec=_optional_int(details.get("blockTimeSec")),
        nonce=_optional_int(details.get("nonce")),
        order_in_block=_optional_int(details.get("orderInBlock")),
        fee_in_smallest_native=_optional_str(fee),
        token_actions=token_actions if isinstance(token_actions, list) else None,
    )


def normalize_history_events(payload: Any, chain_id: int) -> List[TransactionEvent]:
    items = _as_dict(payload).get("items")
    if not isinstance(items, list):
        raise UpstreamPayloadError("Invalid response format from 1inch History API")
    return [_history_event(_as_dict(item), chain_id) for item in items]


# ---------------------------------------------------------------------------
# Limit orders
# ---------------------------------------------------------------------------


def _iso_to_seconds(value: Any) -> Optional[float]:
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def _limit_order(order: Dict[str, Any]) -> LimitOrder:
    data = _as_dict(order.get("data"))
    created = _iso_to_seconds(order.get("createDateTime"))
    invalid = bool(order.get("orderInvalidReason"))
    maker_asset = _optional_str(data.get("makerAsset"))
    taker_asset = _optional_str(data.get("takerAsset"))
    taking_amount = _optional_str(data.get("takingAmount"))
    return LimitOrder(
        id=_optional_str(order.get("orderHash")),
        maker_asset=maker_asset,
        taker_asset=taker_asset,
        maker_amount=_optional_str(data.get("makingAmount")),
        taker_amount=taking_amount,
        maker=_optional_str(data.get("maker")),
        salt=_optional_str(data.get("salt")),
        signature=_optional_str(order.get("signature")),
        permit=_str_or(data.get("permit"), ""),
        interaction=_str_or(data.get("interaction"), ""),
        status=3 if invalid else 1,
        created_at=created,
        updated_at=created,
        remaining_maker_amount=_optional_str(order.get("remainingMakerAmount")),
        remaining_taker_amount=taking_amount,
        invalidated=invalid,
        maker_asset_data=maker_asset,
        taker_asset_data=taker_asset,
    )


def normalize_limit_orders(payload: Any) -> List[LimitOrder]:
    if isinstance(payload, list):
        raw_orders = payload
    else:
        raw_orders = _as_dict(payload).get("orders") or []
    return [_limit_order(order) for order in raw_orders if isinstance(order, dict)]


__all__ = [
    "DEFAULT_DECIMALS",
    "token_value",
    "normalize_gas_price",
    "normalize_token_info",
    "normalize_price_chart",
    "normalize_portfolio_tokens",
    "normalize_history_events",
    "normalize_limit_orders",
]

"""
Limit order submission and listing.

Order construction and EIP-712 signing happen in the 1inch limit order SDK on
the client. This service only forwards an already signed order through the
``OrderSubmitter`` capability and lists a maker's orders.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from ..providers.oneinch import OneInchClient
from ..types import LimitOrder
from .normalizer import normalize_limit_orders

DEFAULT_STATUSES = "1,2,3"


class OrderSubmitter(Protocol):
    """Opaque order-book capability: ``submit_order(order, signature)``."""

    async def submit_order(
        self,
        order: Dict[str, Any],
        signature: str,
        *,
        chain_id: int = 1,
        order_hash: Optional[str] = None,
    ) -> Any:
        ...


def _maker_traits(order: Dict[str, Any]) -> Any:
    # The SDK serializes MakerTraits either as a string or as {"value": {"value": "..."}}.
    traits = order.get("makerTraits")
    while isinstance(traits, dict) and "value" in traits:
        traits = traits["value"]
    return traits


def build_orderbook_body(
    order: Dict[str, Any],
    signature: str,
    order_hash: Optional[str] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "signature": signature,
        "data": {
            "makerAsset": order.get("makerAsset"),
            "takerAsset": order.get("takerAsset"),
            "maker": order.get("maker"),
            "receiver": order.get("receiver"),
            "makingAmount": order.get("makingAmount"),
            "takingAmount": order.get("takingAmount"),
            "salt": order.get("salt"),
            "extension": order.get("extension") or "0x",
            "makerTraits": _maker_traits(order),
        },
    }
    if order_hash:
        body["orderHash"] = order_hash
    return body


class OneInchOrderbookSubmitter:
    """``OrderSubmitter`` that posts to the 1inch Orderbook API."""

    def __init__(self, client: OneInchClient) -> None:
        self._client = client

    async def submit_order(
        self,
        order: Dict[str, Any],
        signature: str,
        *,
        chain_id: int = 1,
        order_hash: Optional[str] = None,
    ) -> Any:
        body = build_orderbook_body(order, signature, order_hash)
        return await self._client.submit_limit_order(chain_id, body)


class LimitOrderService:
    def __init__(self, client: OneInchClient) -> None:
        self._client = client

    async def list_orders(
        self,
        maker_address: str,
        *,
        chain_id: int = 1,
        page: int = 1,
        limit: int = 100,
        statuses: str = DEFAULT_STATUSES,
        sort_by: Optional[str] = None,
        taker_asset: Optional[str] = None,
        maker_asset: Optional[str] = None,
    ) -> List[LimitOrder]:
        params: Dict[str, Any] = {"page": page, "limit": limit, "statuses": statuses}
        if sort_by:
            params["sortBy"] = sort_by
        if taker_asset:
            params["takerAsset"] = taker_asset
        if maker_asset:
            params["makerAsset"] = maker_asset

        payload = await self._client.get_orders_by_address(chain_id, maker_address, params)
        return normalize_limit_orders(payload)


__all__ = [
    "DEFAULT_STATUSES",
    "OrderSubmitter",
    "OneInchOrderbookSubmitter",
    "LimitOrderService",
    "build_orderbook_body",
]
